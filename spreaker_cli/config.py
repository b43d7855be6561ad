"""
Configuration for the CLI.

Settings are merged once at startup, highest precedence first: command-line
flags, environment variables (SPREAKER_*), a .env file in the working
directory, then defaults. The result is immutable and handed to the client.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from spreaker_cli.core.client import DEFAULT_API_VERSION, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from spreaker_cli.core.errors import ValidationError

OUTPUT_FORMATS = ("table", "json", "plain")


@dataclass(frozen=True)
class Config:
    """Effective CLI settings."""

    token: str = ""
    api_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    output_format: str | None = None
    default_show_id: int = 0

    def client_config(self) -> ClientConfig:
        """Connection settings for the API client."""
        return ClientConfig(
            base_url=self.api_url,
            api_version=self.api_version,
            bearer_token=self.token,
            timeout=self.timeout,
        )

    def masked_token(self) -> str:
        """Token with all but the last four characters hidden."""
        if not self.token:
            return ""
        if len(self.token) <= 4:
            return "*" * len(self.token)
        return "*" * (len(self.token) - 4) + self.token[-4:]

    def to_dict(self) -> dict[str, object]:
        """Convert to dict for display (token masked)."""
        return {
            "token": self.masked_token(),
            "api_url": self.api_url,
            "api_version": self.api_version,
            "timeout": self.timeout,
            "output_format": self.output_format,
            "default_show_id": self.default_show_id or None,
        }


def _parse_number(name: str, value: str, kind: type):
    try:
        return kind(value)
    except ValueError:
        raise ValidationError(f"{name} must be a number, got {value!r}")


def load_config(
    token: str | None = None,
    api_url: str | None = None,
    timeout: float | None = None,
    output_format: str | None = None,
    env_file: str | Path | None = None,
) -> Config:
    """
    Build the effective configuration.

    Args:
        token: --token flag value
        api_url: --api-url flag value
        timeout: --timeout flag value in seconds
        output_format: --output flag value
        env_file: .env file to load (defaults to ./.env); existing
            environment variables are not overridden

    Raises:
        ValidationError: If a value is malformed

    """
    load_dotenv(env_file or Path.cwd() / ".env")

    env_timeout = os.environ.get("SPREAKER_TIMEOUT")
    env_show_id = os.environ.get("SPREAKER_DEFAULT_SHOW_ID")

    resolved_output = output_format or os.environ.get("SPREAKER_OUTPUT") or None
    if resolved_output is not None:
        resolved_output = resolved_output.lower()
        if resolved_output not in OUTPUT_FORMATS:
            raise ValidationError(f"output format must be one of: {', '.join(OUTPUT_FORMATS)}")

    resolved_timeout = timeout
    if resolved_timeout is None:
        resolved_timeout = _parse_number("SPREAKER_TIMEOUT", env_timeout, float) if env_timeout else DEFAULT_TIMEOUT
    if resolved_timeout <= 0:
        raise ValidationError("timeout must be positive")

    return Config(
        token=token or os.environ.get("SPREAKER_TOKEN", ""),
        api_url=(api_url or os.environ.get("SPREAKER_API_URL") or DEFAULT_BASE_URL).rstrip("/"),
        api_version=os.environ.get("SPREAKER_API_VERSION") or DEFAULT_API_VERSION,
        timeout=resolved_timeout,
        output_format=resolved_output,
        default_show_id=_parse_number("SPREAKER_DEFAULT_SHOW_ID", env_show_id, int) if env_show_id else 0,
    )
