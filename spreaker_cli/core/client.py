"""
Core HTTP client for the Spreaker API.

Handles authentication, request/response, envelope unwrapping, pagination,
and error handling.
"""

import http.client
import json
import logging
import mimetypes
import urllib.error
import urllib.parse
import urllib.request
import uuid
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

from spreaker_cli import __version__
from spreaker_cli.core.envelope import decode_into, decode_success, parse_error
from spreaker_cli.core.errors import AuthRequiredError, LocalFileError, PayloadDecodeError, TransportError
from spreaker_cli.core.types import Page

logger = logging.getLogger(__name__)

# Configuration
DEFAULT_BASE_URL = "https://api.spreaker.com"
DEFAULT_API_VERSION = "v2"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = f"spreaker-cli/{__version__}"

T = TypeVar("T")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for one APIClient. Immutable once built."""

    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    bearer_token: str = ""
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    """Hand 3xx responses back to the caller instead of following them."""

    def redirect_request(self, req, fp, code, msg, headers, newurl):
        return None


def encode_query(params: Mapping[str, Any] | None) -> str:
    """URL-encode query parameters, dropping None values."""
    if not params:
        return ""
    filtered: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            filtered[key] = "true" if value else "false"
        else:
            filtered[key] = str(value)
    return urllib.parse.urlencode(filtered)


def _quote_param(value: str) -> str:
    """Escape a Content-Disposition parameter value."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("\r", "%0D").replace("\n", "%0A")


def encode_multipart(
    fields: Mapping[str, str],
    files: Mapping[str, tuple[str, bytes]] | None = None,
) -> tuple[bytes, str]:
    """
    Encode form fields and file parts as multipart/form-data.

    Args:
        fields: Plain form fields
        files: Mapping of field name to (filename, content)

    Returns:
        Tuple of (body, content_type header value)

    """
    boundary = uuid.uuid4().hex
    lines: list[bytes] = []

    for name, (filename, content) in (files or {}).items():
        mime = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        disposition = f'form-data; name="{_quote_param(name)}"; filename="{_quote_param(filename)}"'
        lines.append(f"--{boundary}".encode())
        lines.append(f"Content-Disposition: {disposition}".encode())
        lines.append(f"Content-Type: {mime}".encode())
        lines.append(b"")
        lines.append(content)

    for name, value in fields.items():
        lines.append(f"--{boundary}".encode())
        lines.append(f'Content-Disposition: form-data; name="{_quote_param(name)}"'.encode())
        lines.append(b"")
        lines.append(str(value).encode("utf-8"))

    lines.append(f"--{boundary}--".encode())
    lines.append(b"")
    return b"\r\n".join(lines), f"multipart/form-data; boundary={boundary}"


class APIClient:
    """
    Low-level HTTP client for the Spreaker API.

    Handles:
    - Bearer token authentication
    - HTTP verbs (GET, POST json/form/multipart, PUT, DELETE)
    - Envelope unwrapping and error classification
    - Cursor pagination for list endpoints
    """

    def __init__(self, config: ClientConfig | None = None):
        """
        Initialize the API client.

        Args:
            config: Connection settings (defaults to the public API, unauthenticated)

        """
        self.config = config or ClientConfig()

    @property
    def has_token(self) -> bool:
        return bool(self.config.bearer_token)

    def require_auth(self) -> None:
        """Fail locally when no token is configured."""
        if not self.config.bearer_token:
            raise AuthRequiredError()

    # =========================================================================
    # Transport
    # =========================================================================

    def build_url(self, path: str) -> str:
        """Build full URL from a resource path (absolute URLs pass through)."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.config.base_url.rstrip('/')}/{self.config.api_version}{path}"

    def new_request(
        self,
        method: str,
        url: str,
        body: bytes | None = None,
        content_type: str | None = None,
    ) -> urllib.request.Request:
        """Create a request with the standard headers set."""
        headers = {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        if self.config.bearer_token:
            headers["Authorization"] = f"Bearer {self.config.bearer_token}"
        if content_type:
            headers["Content-Type"] = content_type
        return urllib.request.Request(url, data=body, headers=headers, method=method)

    def execute(self, request: urllib.request.Request) -> tuple[int, bytes]:
        """
        Send a request and return (status_code, body).

        HTTP error statuses are returned, not raised; classifying them is the
        envelope codec's job.

        Raises:
            TransportError: If the exchange could not complete

        """
        timeout = self.config.timeout
        logger.debug("%s %s", request.get_method(), request.full_url)
        try:
            with urllib.request.urlopen(request, timeout=timeout) as response:
                status, body = response.status, response.read()
        except urllib.error.HTTPError as e:
            status, body = e.code, e.read()
        except urllib.error.URLError as e:
            raise TransportError(f"Connection error: {e.reason}", details={"url": request.full_url})
        except TimeoutError:
            raise TransportError(f"Request timed out after {timeout} seconds", details={"url": request.full_url})
        except OSError as e:
            raise TransportError(f"Connection error: {e}", details={"url": request.full_url})
        except http.client.HTTPException as e:
            raise TransportError(f"Invalid HTTP response: {e!r}", details={"url": request.full_url})

        logger.debug("%s %s -> %d (%d bytes)", request.get_method(), request.full_url, status, len(body))
        return status, body

    def _round_trip(
        self,
        method: str,
        path: str,
        body: bytes | None = None,
        content_type: str | None = None,
        parser: Callable[[Any], T] | None = None,
    ) -> Any:
        request = self.new_request(method, self.build_url(path), body, content_type)
        status, raw = self.execute(request)
        if parser is None and status < 400 and not raw.strip():
            return None
        payload = decode_success(raw, status)
        if parser is None:
            return payload
        return decode_into(payload, parser)

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    def get(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
        auth: bool = False,
    ) -> Any:
        """
        Make a GET request.

        Args:
            path: Resource path (e.g., /shows/123)
            params: Query parameters (None values are dropped)
            parser: Optional function to decode the payload
            auth: Fail locally if no token is configured

        """
        if auth:
            self.require_auth()
        query_string = encode_query(params)
        if query_string:
            separator = "&" if "?" in path else "?"
            path = f"{path}{separator}{query_string}"
        return self._round_trip("GET", path, parser=parser)

    def post_json(
        self,
        path: str,
        data: Any = None,
        parser: Callable[[Any], T] | None = None,
    ) -> Any:
        """Make a POST request with a JSON body (or no body)."""
        self.require_auth()
        body = json.dumps(data).encode("utf-8") if data is not None else None
        content_type = "application/json" if body is not None else None
        return self._round_trip("POST", path, body, content_type, parser)

    def post_form(
        self,
        path: str,
        fields: Mapping[str, str],
        parser: Callable[[Any], T] | None = None,
    ) -> Any:
        """Make a POST request with multipart/form-data fields."""
        self.require_auth()
        body, content_type = encode_multipart(fields)
        return self._round_trip("POST", path, body, content_type, parser)

    def post_form_with_file(
        self,
        path: str,
        fields: Mapping[str, str],
        file_field: str,
        file_path: str | Path,
        parser: Callable[[Any], T] | None = None,
    ) -> Any:
        """
        Make a multipart POST request with one attached file.

        The file is read before anything is sent, so a missing or unreadable
        file fails locally with no network call.

        Raises:
            LocalFileError: If the file cannot be read

        """
        self.require_auth()
        path_obj = Path(file_path)
        try:
            content = path_obj.read_bytes()
        except OSError as e:
            raise LocalFileError(str(file_path), e.strerror or str(e))

        body, content_type = encode_multipart(fields, {file_field: (path_obj.name, content)})
        return self._round_trip("POST", path, body, content_type, parser)

    def put(self, path: str, parser: Callable[[Any], T] | None = None) -> Any:
        """Make a PUT request."""
        self.require_auth()
        return self._round_trip("PUT", path, parser=parser)

    def delete(self, path: str, parser: Callable[[Any], T] | None = None) -> Any:
        """Make a DELETE request."""
        self.require_auth()
        return self._round_trip("DELETE", path, parser=parser)

    def resolve_redirect(self, path: str) -> str:
        """
        Return the Location a GET would redirect to, without following it.

        A 200 response means the resource is served directly at its own URL.
        """
        url = self.build_url(path)
        request = self.new_request("GET", url)
        opener = urllib.request.build_opener(_NoRedirect)
        try:
            with opener.open(request, timeout=self.config.timeout) as response:
                status = response.status
        except urllib.error.HTTPError as e:
            if 300 <= e.code < 400:
                location = e.headers.get("Location")
                if location:
                    return location
                raise TransportError("Redirect response without a Location header", details={"url": url})
            raise decode_error(e)
        except urllib.error.URLError as e:
            raise TransportError(f"Connection error: {e.reason}", details={"url": url})
        except OSError as e:
            raise TransportError(f"Connection error: {e}", details={"url": url})
        except http.client.HTTPException as e:
            raise TransportError(f"Invalid HTTP response: {e!r}", details={"url": url})

        if status == 200:
            return url
        raise TransportError(f"Unexpected status code: {status}", details={"url": url})

    def download(self, url: str, destination: str | Path, chunk_size: int = 64 * 1024) -> int:
        """
        Stream a URL to a local file.

        A body shorter than its Content-Length is an error, and a partial file
        is removed.

        Returns:
            Number of bytes written

        """
        request = urllib.request.Request(url, headers={"User-Agent": self.config.user_agent})
        try:
            with urllib.request.urlopen(request, timeout=self.config.timeout) as response:
                written = _copy_to_file(response, destination, chunk_size, url)
        except urllib.error.HTTPError as e:
            raise decode_error(e)
        except urllib.error.URLError as e:
            raise TransportError(f"Connection error: {e.reason}", details={"url": url})
        except TimeoutError:
            raise TransportError(f"Download timed out after {self.config.timeout} seconds", details={"url": url})
        except http.client.HTTPException as e:
            raise TransportError(f"Download interrupted: {e!r}", details={"url": url})
        logger.debug("downloaded %s -> %s (%d bytes)", url, destination, written)
        return written

    # =========================================================================
    # Pagination
    # =========================================================================

    def get_page(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
        auth: bool = False,
    ) -> Page[T]:
        """
        Fetch a single page of a list endpoint.

        Args:
            path: Resource path
            params: Query parameters
            parser: Optional function to decode each item
            auth: Fail locally if no token is configured

        Returns:
            Page with items, next_url and has_more

        Raises:
            PayloadDecodeError: If the page or any item has the wrong shape

        """
        payload = self.get(path, params, auth=auth)
        if not isinstance(payload, dict) or not isinstance(payload.get("items"), list):
            raise PayloadDecodeError(
                "Expected a paginated payload with an 'items' list",
                details={"payload": payload},
            )

        next_url = payload.get("next_url") or ""
        if not isinstance(next_url, str):
            raise PayloadDecodeError("'next_url' is not a string", details={"next_url": next_url})

        items = payload["items"]
        if parser:
            items = [decode_into(item, parser) for item in items]
        return Page(items=items, next_url=next_url)

    def paginate(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
        max_items: int | None = None,
        auth: bool = False,
    ) -> Iterator[T]:
        """
        Iterate through items across pages.

        Each follow-up request goes through the normal path-based API, with the
        continuation parameters extracted from next_url merged into the
        original query.

        Yields:
            Items from all pages (parsed if parser provided)

        """
        query = dict(params or {})
        seen: set[str] = set()
        yielded = 0

        while True:
            query_string = encode_query(query)
            if query_string in seen:
                raise PayloadDecodeError(
                    "next_url does not advance the cursor",
                    details={"path": path, "query": query_string},
                )
            seen.add(query_string)

            page = self.get_page(path, query, parser, auth=auth)
            for item in page.items:
                if max_items is not None and yielded >= max_items:
                    return
                yield item
                yielded += 1

            if not page.has_more:
                break
            # Cursor continuation replaces offset paging
            query.pop("offset", None)
            query.update(page.next_params())

    def paginate_all(
        self,
        path: str,
        params: Mapping[str, Any] | None = None,
        parser: Callable[[Any], T] | None = None,
        max_items: int | None = None,
        auth: bool = False,
    ) -> list[T]:
        """Fetch all items from a paginated endpoint."""
        return list(self.paginate(path, params, parser, max_items, auth))


def _copy_to_file(response, destination: str | Path, chunk_size: int, url: str) -> int:
    """Write a response body to destination, checking it against Content-Length."""
    expected = response.headers.get("Content-Length")
    written = 0
    try:
        with open(destination, "wb") as out:
            while True:
                chunk = response.read(chunk_size)
                if not chunk:
                    break
                out.write(chunk)
                written += len(chunk)
        if expected is not None and expected.isdigit() and written != int(expected):
            raise TransportError(
                f"Download incomplete: received {written} of {expected} bytes",
                details={"url": url},
            )
    except BaseException:
        Path(destination).unlink(missing_ok=True)
        raise
    return written


def decode_error(e: urllib.error.HTTPError) -> Exception:
    """Classify an HTTPError raised outside execute()."""
    try:
        body = e.read()
    except OSError:
        body = b""
    return parse_error(body, e.code)
