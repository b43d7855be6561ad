"""
Envelope codec for Spreaker API responses.

Every response body is wrapped as {"response": <payload>}; failures carry
{"response": {"error": {"code": <int>, "messages": [...]}}}.
Unwrapping the envelope and typing the payload are separate steps; every verb
and the paginator share the first.
"""

import json
from collections.abc import Callable
from typing import Any, TypeVar

from spreaker_cli.core.errors import APIError, MalformedEnvelopeError, PayloadDecodeError

T = TypeVar("T")


def encode_envelope(payload: Any) -> bytes:
    """Wrap a payload the way the API does."""
    return json.dumps({"response": payload}).encode("utf-8")


def parse_error(body: bytes, status_code: int) -> APIError:
    """
    Build an APIError from an error response body.

    Parsing is best-effort: a body that is not JSON, or lacks an error object,
    still yields an APIError with the status code, error_code=0 and no messages.
    """
    error_code = 0
    messages: list[str] = []

    try:
        data = json.loads(body.decode("utf-8")) if body else None
    except (UnicodeDecodeError, json.JSONDecodeError):
        data = None

    if isinstance(data, dict):
        inner = data.get("response")
        error = inner.get("error") if isinstance(inner, dict) else None
        if isinstance(error, dict):
            code = error.get("code")
            if isinstance(code, int) and not isinstance(code, bool):
                error_code = code
            raw_messages = error.get("messages")
            if isinstance(raw_messages, list):
                messages = [str(m) for m in raw_messages]

    return APIError(status_code, error_code=error_code, messages=messages)


def decode_success(body: bytes, status_code: int) -> Any:
    """
    Unwrap a response body and return the inner payload.

    Args:
        body: Raw response body
        status_code: HTTP status code of the response

    Returns:
        The JSON value under the "response" key

    Raises:
        APIError: If status_code >= 400
        MalformedEnvelopeError: If a successful body has no parseable envelope

    """
    if status_code >= 400:
        raise parse_error(body, status_code)

    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise MalformedEnvelopeError(f"Invalid JSON response: {e}", details={"status": status_code})

    if not isinstance(data, dict) or "response" not in data:
        raise MalformedEnvelopeError(
            "Response is missing the 'response' envelope",
            details={"status": status_code},
        )
    return data["response"]


def decode_into(payload: Any, parser: Callable[[Any], T]) -> T:
    """
    Decode an unwrapped payload into a caller-specified shape.

    Args:
        payload: Inner payload returned by decode_success
        parser: Function building the target type (usually Model.from_dict)

    Raises:
        PayloadDecodeError: If the payload does not match the expected shape

    """
    try:
        return parser(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        name = getattr(parser, "__qualname__", repr(parser))
        raise PayloadDecodeError(
            f"Unexpected response shape for {name}: {e!r}",
            details={"payload": payload},
        ) from e
