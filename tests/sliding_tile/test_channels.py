"""Tests for sliding_tile.channels: dispatch guarantees and the registry."""

import pytest

from sliding_tile.channels import (
    ChannelRegistry,
    MethodChannel,
    get_channel_registry,
    reset_channel_registry,
)
from sliding_tile.errors import ChannelNotFoundError, VersionUnavailableError
from sliding_tile.models import (
    ErrorResponse,
    MethodCall,
    NotImplementedResponse,
    SuccessResponse,
)


def _echo(call: MethodCall):
    return SuccessResponse(result={"method": call.method, "arguments": call.arguments})


# ── MethodChannel ────────────────────────────────────────────────────


def test_channel_requires_name():
    with pytest.raises(ValueError):
        MethodChannel("")


def test_no_handler_is_not_implemented():
    channel = MethodChannel("test/channel")
    assert not channel.has_handler
    assert isinstance(channel.invoke_method("anything"), NotImplementedResponse)


def test_handler_receives_call():
    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(_echo)

    response = channel.invoke_method("ping", [1, 2])
    assert response == SuccessResponse(result={"method": "ping", "arguments": [1, 2]})


def test_clearing_handler():
    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(_echo)
    channel.set_method_call_handler(None)

    assert isinstance(channel.invoke_method("ping"), NotImplementedResponse)


def test_replacing_handler():
    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(_echo)
    channel.set_method_call_handler(lambda call: SuccessResponse(result="second"))

    assert channel.invoke_method("ping").result == "second"


def test_domain_error_becomes_error_response():
    def handler(call):
        raise VersionUnavailableError()

    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(handler)

    response = channel.invoke_method("getVersion")
    assert response == ErrorResponse(code="UNAVAILABLE", message="Version not available.")


def test_unexpected_error_never_escapes():
    def handler(call):
        raise RuntimeError("boom")

    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(handler)

    response = channel.invoke_method("explode")
    assert isinstance(response, ErrorResponse)
    assert response.code == "error"
    assert response.message == "boom"
    assert response.details == "RuntimeError"


# ── ChannelRegistry ──────────────────────────────────────────────────


def test_channel_created_once():
    registry = ChannelRegistry()
    first = registry.channel("a/b")
    second = registry.channel("a/b")

    assert first is second
    assert len(registry) == 1
    assert "a/b" in registry
    assert registry.names == ["a/b"]


def test_get_unknown_channel_raises():
    registry = ChannelRegistry()
    registry.channel("known")

    with pytest.raises(ChannelNotFoundError) as exc_info:
        registry.get("unknown")

    err = exc_info.value
    assert err.channel == "unknown"
    assert err.http_status == 404
    assert "known" in err.detail


def test_registry_invoke_routes_by_name():
    registry = ChannelRegistry()
    registry.channel("one").set_method_call_handler(lambda c: SuccessResponse(result=1))
    registry.channel("two").set_method_call_handler(lambda c: SuccessResponse(result=2))

    assert registry.invoke("one", MethodCall(method="x")).result == 1
    assert registry.invoke("two", MethodCall(method="x")).result == 2


def test_singleton_and_reset():
    registry = get_channel_registry()
    assert get_channel_registry() is registry

    reset_channel_registry()
    assert get_channel_registry() is not registry


def test_empty_method_reaches_handler():
    channel = MethodChannel("test/channel")
    channel.set_method_call_handler(_echo)

    response = channel.invoke_method("")
    assert response == SuccessResponse(result={"method": "", "arguments": None})


def test_empty_method_without_handler_is_not_implemented():
    channel = MethodChannel("test/channel")
    assert isinstance(channel.invoke_method(""), NotImplementedResponse)
