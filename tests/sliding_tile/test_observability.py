"""Tests for sliding_tile.observability: tracing setup and channel metrics."""

import pytest
from opentelemetry import trace
from prometheus_client import REGISTRY

from sliding_tile.channels import MethodChannel
from sliding_tile.models import SuccessResponse


@pytest.fixture(autouse=True)
def _reset_tracer():
    """Reset the global tracer and provider between tests."""
    import sliding_tile.observability as obs

    obs._tracer = None
    trace._TRACER_PROVIDER = None  # type: ignore[attr-defined]
    trace._TRACER_PROVIDER_SET_ONCE._done = False  # type: ignore[attr-defined]
    yield
    obs._tracer = None


def _calls(channel, method, outcome):
    value = REGISTRY.get_sample_value(
        "sliding_tile_channel_calls_total",
        {"channel": channel, "method": method, "outcome": outcome},
    )
    return value or 0.0


def test_default_service_name():
    from sliding_tile.observability import setup_tracing

    tracer = setup_tracing()
    assert tracer is not None

    resource = trace.get_tracer_provider().resource  # type: ignore[attr-defined]
    assert resource.attributes["service.name"] == "sliding-tile"


def test_get_tracer_without_setup():
    from sliding_tile.observability import get_tracer

    assert get_tracer() is get_tracer()


def test_channel_outcomes_are_counted():
    channel = MethodChannel("metrics/test")
    channel.set_method_call_handler(
        lambda call: SuccessResponse(result="ok")
    )
    before = _calls("metrics/test", "ping", "success")

    channel.invoke_method("ping")
    channel.invoke_method("ping")

    assert _calls("metrics/test", "ping", "success") == before + 2


def test_not_implemented_is_counted():
    channel = MethodChannel("metrics/empty")
    before = _calls("metrics/empty", "ping", "not_implemented")

    channel.invoke_method("ping")

    assert _calls("metrics/empty", "ping", "not_implemented") == before + 1
