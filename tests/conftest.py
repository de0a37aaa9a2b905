import pytest
import structlog
from opentelemetry import trace

from sliding_tile.channels import reset_channel_registry
from sliding_tile.config import get_settings
from sliding_tile.errors import PackageNotFoundError
from sliding_tile.models import PackageInfo
from sliding_tile.packages import PackageRegistry


@pytest.fixture(autouse=True)
def disable_tracing():
    """Install a bare TracerProvider so spans are recorded but never exported."""
    from opentelemetry.sdk.trace import TracerProvider
    trace.set_tracer_provider(TracerProvider())
    yield


@pytest.fixture(autouse=True)
def _reset_state():
    """Fresh channel registry, settings and logging config for every test."""
    reset_channel_registry()
    get_settings.cache_clear()
    yield
    reset_channel_registry()
    get_settings.cache_clear()
    structlog.reset_defaults()


class FakePackageRegistry(PackageRegistry):
    """In-memory package metadata; counts lookups to prove nothing is cached."""

    source = "fake"

    def __init__(self, packages: dict[str, PackageInfo] | None = None):
        self.packages = dict(packages or {})
        self.lookups = 0

    def get_package_info(self, package_name: str) -> PackageInfo:
        self.lookups += 1
        if package_name not in self.packages:
            raise PackageNotFoundError(
                f"Package '{package_name}' is not installed",
                package_name=package_name,
            )
        return self.packages[package_name]


@pytest.fixture
def fake_packages():
    return FakePackageRegistry(
        {"sliding-tile": PackageInfo(package_name="sliding-tile", version_name="2.3.1")}
    )


@pytest.fixture
def make_packages():
    """Factory for FakePackageRegistry instances."""
    return FakePackageRegistry
