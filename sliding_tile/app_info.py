"""
App-info channel: reports the application's own version to the client layer.

Channel: com.fgtp.sliding_tile/app_info

  getVersion   → success(<version name>)
               → error("UNAVAILABLE", "Version not available.") when the app's
                 own package metadata is missing or carries no version name
  anything else → not implemented

The version is looked up on every call; nothing is cached.
"""

from __future__ import annotations

import structlog

from sliding_tile.channels import ChannelRegistry
from sliding_tile.config import Settings, get_settings
from sliding_tile.errors import PackageNotFoundError, VersionUnavailableError
from sliding_tile.models import (
    ErrorResponse,
    MethodCall,
    MethodResponse,
    NotImplementedResponse,
    SuccessResponse,
    VersionInfo,
)
from sliding_tile.packages import PackageRegistry, build_package_registry
from sliding_tile.version import APP_ID

logger = structlog.get_logger(__name__)

CHANNEL = f"{APP_ID}/app_info"
GET_VERSION = "getVersion"


class AppInfoService:
    """Answers version queries for one package from a package registry."""

    def __init__(self, packages: PackageRegistry, package_name: str):
        self._packages = packages
        self.package_name = package_name

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> AppInfoService:
        settings = settings or get_settings()
        return cls(build_package_registry(settings), settings.package_name)

    def get_version_info(self) -> VersionInfo:
        """Look up the app's own metadata; a registry miss yields no version."""
        try:
            info = self._packages.get_package_info(self.package_name)
        except PackageNotFoundError:
            logger.info("app_version_lookup_missed", package_name=self.package_name)
            return VersionInfo()
        return VersionInfo(version_name=info.version_name)

    def get_version(self) -> str:
        """Return the version name, or raise VersionUnavailableError."""
        version_name = self.get_version_info().version_name
        if version_name is None:
            raise VersionUnavailableError()
        return version_name

    def handle_method_call(self, call: MethodCall) -> MethodResponse:
        if call.method != GET_VERSION:
            return NotImplementedResponse()

        try:
            return SuccessResponse(result=self.get_version())
        except VersionUnavailableError as e:
            return ErrorResponse(code=e.error_code, message=str(e))


def configure_channels(
    registry: ChannelRegistry, service: AppInfoService | None = None
) -> AppInfoService:
    """Register the app-info handler on `registry` and return the service."""
    service = service or AppInfoService.from_settings()
    registry.channel(CHANNEL).set_method_call_handler(service.handle_method_call)
    logger.info(
        "app_info_channel_configured",
        channel=CHANNEL,
        package_name=service.package_name,
    )
    return service
