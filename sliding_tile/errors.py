"""
Structured Error Taxonomy: Typed exceptions for the Sliding Tile bridge.

Design principles:
  - Every error carries `retryable` + `error_code` for automated decisions
  - Hierarchy mirrors the bridge layers: Service → Package metadata → Channel
  - HTTP-safe: each class maps to a recommended status code
  - Structured logging friendly: all errors serialize cleanly to JSON
"""

from __future__ import annotations

__all__ = [
    # Base
    "SlidingTileError",
    # Service layer
    "VersionUnavailableError",
    # Package metadata layer
    "PackageNotFoundError",
    "ManifestError",
    # Channel layer
    "ChannelError",
    "ChannelNotFoundError",
]


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Base
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class SlidingTileError(Exception):
    """Root exception for the Sliding Tile bridge.

    Attributes:
        retryable: If True, the caller should consider retrying the operation.
        error_code: Machine-readable code, also used as the channel error code.
        http_status: Suggested HTTP status code for API responses.
    """

    retryable: bool = False
    error_code: str = "SLIDING_TILE_ERROR"
    http_status: int = 500

    def __init__(self, message: str, *, detail: str | None = None):
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict:
        """Serialize for structured logging and API responses."""
        return {
            "error_code": self.error_code,
            "message": str(self),
            "detail": self.detail,
            "retryable": self.retryable,
            "http_status": self.http_status,
        }


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Service Layer: The only error the app-info channel reports
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class VersionUnavailableError(SlidingTileError):
    """The application's own version could not be determined."""

    error_code = "UNAVAILABLE"
    http_status = 503

    def __init__(self, message: str = "Version not available.", **kwargs):
        super().__init__(message, **kwargs)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Package Metadata Layer: Errors from the metadata registries
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class PackageNotFoundError(SlidingTileError):
    """No metadata entry exists for the requested package name."""

    error_code = "PACKAGE_NOT_FOUND"
    http_status = 404

    def __init__(self, message: str, *, package_name: str = "", **kwargs):
        self.package_name = package_name
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["package_name"] = self.package_name
        return d


class ManifestError(SlidingTileError):
    """The metadata manifest exists but cannot be parsed."""

    error_code = "MANIFEST_INVALID"
    http_status = 500

    def __init__(self, message: str, *, path: str = "", **kwargs):
        self.path = path
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["path"] = self.path
        return d


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Channel Layer: Errors from method channel routing
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


class ChannelError(SlidingTileError):
    """Base for all method channel errors."""

    error_code = "CHANNEL_ERROR"

    def __init__(self, message: str, *, channel: str | None = None, **kwargs):
        self.channel = channel
        super().__init__(message, **kwargs)

    def to_dict(self) -> dict:
        d = super().to_dict()
        d["channel"] = self.channel
        return d


class ChannelNotFoundError(ChannelError):
    """No channel is registered under the requested name."""

    error_code = "CHANNEL_NOT_FOUND"
    http_status = 404
