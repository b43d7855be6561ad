"""
Spreaker CLI - Three-layer architecture for the Spreaker podcast API.

Layers:
- core: Transport, envelope codec, pagination and types
- sdk: High-level SpreakerClient with one method per endpoint
- cli: Opinionated command-line interface
"""

__version__ = "0.1.0"

from spreaker_cli.sdk import SpreakerClient  # noqa: E402

__all__ = ["SpreakerClient"]
