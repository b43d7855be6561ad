"""
Core layer - Transport, envelope codec, verbs, pagination and types.

This layer provides:
- Low-level HTTP client with auth and error classification
- Typed dataclasses for Spreaker payloads
"""

from spreaker_cli.core.client import APIClient, ClientConfig
from spreaker_cli.core.errors import (
    APIError,
    AuthRequiredError,
    CLIError,
    LocalFileError,
    MalformedEnvelopeError,
    PayloadDecodeError,
    TransportError,
    ValidationError,
)
from spreaker_cli.core.types import (
    UNSET,
    Chapter,
    Cuepoint,
    Episode,
    EpisodeChanges,
    Message,
    Page,
    PaginationParams,
    Show,
    ShowChanges,
    StatisticsParams,
    User,
    UserChanges,
)

__all__ = [
    "UNSET",
    "APIClient",
    "APIError",
    "AuthRequiredError",
    "CLIError",
    "Chapter",
    "ClientConfig",
    "Cuepoint",
    "Episode",
    "EpisodeChanges",
    "LocalFileError",
    "MalformedEnvelopeError",
    "Message",
    "Page",
    "PaginationParams",
    "PayloadDecodeError",
    "Show",
    "ShowChanges",
    "StatisticsParams",
    "TransportError",
    "User",
    "UserChanges",
    "ValidationError",
]
