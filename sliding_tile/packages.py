"""
Package metadata registries: where the app looks up its own version.

A registry answers one question: "what does the host know about package X?"
Two sources are provided:

  - InstalledPackageRegistry: installed distribution metadata
    (importlib.metadata), keyed by distribution name.
  - ManifestPackageRegistry: a pubspec-style YAML manifest:

        name: sliding-tile
        version: 1.4.2+17

    The version name is the part before "+", the build number after it
    becomes the version code.

Lookups are never cached: each call re-reads the underlying source.
"""

from __future__ import annotations

import abc
import importlib.metadata
from pathlib import Path

import structlog
import yaml

from sliding_tile.config import Settings
from sliding_tile.errors import ManifestError, PackageNotFoundError
from sliding_tile.models import PackageInfo

logger = structlog.get_logger(__name__)

__all__ = [
    "PackageRegistry",
    "InstalledPackageRegistry",
    "ManifestPackageRegistry",
    "build_package_registry",
    "split_version",
]


def split_version(raw: str) -> tuple[str, int | None]:
    """Split "1.2.3+45" into ("1.2.3", 45). A non-numeric build suffix is dropped."""
    name, _, build = raw.strip().partition("+")
    code = int(build) if build.isdigit() else None
    return name, code


class PackageRegistry(abc.ABC):
    """Read-only view of host package metadata."""

    source: str = "abstract"

    @abc.abstractmethod
    def get_package_info(self, package_name: str) -> PackageInfo:
        """Return metadata for `package_name`.

        Raises:
            PackageNotFoundError: If the registry has no entry for the name.
        """


class InstalledPackageRegistry(PackageRegistry):
    """Looks packages up in the installed distribution metadata."""

    source = "installed"

    def get_package_info(self, package_name: str) -> PackageInfo:
        try:
            dist = importlib.metadata.distribution(package_name)
        except importlib.metadata.PackageNotFoundError as e:
            raise PackageNotFoundError(
                f"Package '{package_name}' is not installed",
                package_name=package_name,
            ) from e

        return PackageInfo(
            package_name=dist.metadata["Name"] or package_name,
            version_name=dist.version,
        )


class ManifestPackageRegistry(PackageRegistry):
    """Looks the package up in a single YAML manifest file."""

    source = "manifest"

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def get_package_info(self, package_name: str) -> PackageInfo:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                # BaseLoader keeps every scalar a string, so "1.10" stays "1.10".
                data = yaml.load(f, Loader=yaml.BaseLoader)
        except (FileNotFoundError, IsADirectoryError) as e:
            raise PackageNotFoundError(
                f"Manifest not found at {self.path}",
                package_name=package_name,
            ) from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise ManifestError(
                f"Manifest at {self.path} is not valid UTF-8 YAML",
                path=str(self.path),
                detail=str(e),
            ) from e

        if not isinstance(data, dict) or data.get("name") != package_name:
            raise PackageNotFoundError(
                f"Manifest at {self.path} does not describe '{package_name}'",
                package_name=package_name,
            )

        raw_version = data.get("version")
        if not isinstance(raw_version, str):
            return PackageInfo(package_name=package_name)

        version_name, version_code = split_version(raw_version)
        return PackageInfo(
            package_name=package_name,
            version_name=version_name,
            version_code=version_code,
        )


def build_package_registry(settings: Settings) -> PackageRegistry:
    """Pick the metadata source configured in settings."""
    if settings.metadata_source == "manifest":
        registry: PackageRegistry = ManifestPackageRegistry(settings.manifest_path)
    else:
        registry = InstalledPackageRegistry()

    logger.info(
        "package_registry_selected",
        source=registry.source,
        package_name=settings.package_name,
    )
    return registry
