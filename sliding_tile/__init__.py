"""
Sliding Tile: App-info bridge between the game client and its host.

Exposes the installed application's version over a named method channel
(`com.fgtp.sliding_tile/app_info`, method `getVersion`), reachable over
HTTP or from the command line.
"""

from sliding_tile.app_info import CHANNEL, GET_VERSION, AppInfoService, configure_channels
from sliding_tile.channels import (
    ChannelRegistry,
    MethodChannel,
    get_channel_registry,
    reset_channel_registry,
)
from sliding_tile.models import (
    ErrorResponse,
    MethodCall,
    MethodResponse,
    NotImplementedResponse,
    PackageInfo,
    SuccessResponse,
    VersionInfo,
)
from sliding_tile.packages import (
    InstalledPackageRegistry,
    ManifestPackageRegistry,
    PackageRegistry,
)

__all__ = [
    # App-info service
    "CHANNEL",
    "GET_VERSION",
    "AppInfoService",
    "configure_channels",
    # Channels
    "ChannelRegistry",
    "MethodChannel",
    "get_channel_registry",
    "reset_channel_registry",
    # Models
    "MethodCall",
    "MethodResponse",
    "SuccessResponse",
    "ErrorResponse",
    "NotImplementedResponse",
    "PackageInfo",
    "VersionInfo",
    # Package metadata
    "PackageRegistry",
    "InstalledPackageRegistry",
    "ManifestPackageRegistry",
]
