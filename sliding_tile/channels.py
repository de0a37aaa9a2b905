"""
Method Channels: Named request/response links to the client layer.

A channel has a process-wide unique name and at most one handler. A handler
receives a MethodCall and returns a MethodResponse; the channel guarantees
that the caller always gets one of the three response variants back:

  - no handler registered        → NotImplementedResponse
  - handler raises SlidingTileError → ErrorResponse(error_code, message)
  - handler raises anything else → ErrorResponse("error", str(exc), type name)

Note: The registry uses a process-global singleton pattern. Channels are
registered at startup and only read afterwards.

Usage:
    from sliding_tile.channels import get_channel_registry

    registry = get_channel_registry()
    registry.channel("com.fgtp.sliding_tile/app_info").set_method_call_handler(handler)

    response = registry.invoke("com.fgtp.sliding_tile/app_info", MethodCall(method="getVersion"))
"""

from __future__ import annotations

from typing import Any, Callable

import structlog

from sliding_tile.errors import ChannelNotFoundError, SlidingTileError
from sliding_tile.models import (
    ErrorResponse,
    MethodCall,
    MethodResponse,
    NotImplementedResponse,
)
from sliding_tile.observability import record_channel_outcome, trace_channel_call

logger = structlog.get_logger(__name__)

MethodCallHandler = Callable[[MethodCall], MethodResponse]


class MethodChannel:
    """A named channel dispatching method calls to a single handler."""

    def __init__(self, name: str):
        if not name:
            raise ValueError("Channel name must be a non-empty string")
        self.name = name
        self._handler: MethodCallHandler | None = None

    @property
    def has_handler(self) -> bool:
        return self._handler is not None

    def set_method_call_handler(self, handler: MethodCallHandler | None) -> None:
        """Install `handler`, replacing any existing one. None clears it."""
        if handler is not None and self._handler is not None:
            logger.warning("channel_handler_replaced", channel=self.name)
        self._handler = handler

    def invoke_method(self, method: str, arguments: Any = None) -> MethodResponse:
        return self.invoke(MethodCall(method=method, arguments=arguments))

    def invoke(self, call: MethodCall) -> MethodResponse:
        """Dispatch `call` to the handler and always return a response."""
        with trace_channel_call(self.name, call.method) as span:
            response = self._dispatch(call)
            span.set_attribute("channel.outcome", response.status)

        record_channel_outcome(self.name, call.method, response.status)
        logger.debug(
            "channel_call_handled",
            channel=self.name,
            method=call.method,
            outcome=response.status,
        )
        return response

    def _dispatch(self, call: MethodCall) -> MethodResponse:
        if self._handler is None:
            return NotImplementedResponse()

        try:
            return self._handler(call)
        except SlidingTileError as e:
            logger.warning(
                "channel_handler_error",
                channel=self.name,
                method=call.method,
                error_code=e.error_code,
            )
            return ErrorResponse(code=e.error_code, message=str(e))
        except Exception as e:
            logger.error(
                "channel_handler_failed",
                channel=self.name,
                method=call.method,
                error=str(e),
                exc_info=True,
            )
            return ErrorResponse(
                code="error", message=str(e), details=type(e).__name__
            )


class ChannelRegistry:
    """Registry of method channels keyed by their unique name."""

    def __init__(self):
        self._channels: dict[str, MethodChannel] = {}

    def channel(self, name: str) -> MethodChannel:
        """Return the channel called `name`, creating it on first use."""
        existing = self._channels.get(name)
        if existing is not None:
            return existing
        created = MethodChannel(name)
        self._channels[name] = created
        logger.info("channel_registered", channel=name)
        return created

    def get(self, name: str) -> MethodChannel:
        """Get a channel by name. Raises ChannelNotFoundError if not found."""
        if name not in self._channels:
            raise ChannelNotFoundError(
                f"Channel '{name}' not found",
                channel=name,
                detail=f"Available: {self.names}",
            )
        return self._channels[name]

    def invoke(self, name: str, call: MethodCall) -> MethodResponse:
        return self.get(name).invoke(call)

    @property
    def names(self) -> list[str]:
        """List of registered channel names."""
        return list(self._channels.keys())

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, name: str) -> bool:
        return name in self._channels


# ── Singleton ────────────────────────────────────────────────────────

_registry: ChannelRegistry | None = None


def get_channel_registry() -> ChannelRegistry:
    """Singleton accessor for the ChannelRegistry."""
    global _registry
    if _registry is None:
        _registry = ChannelRegistry()
    return _registry


def reset_channel_registry() -> None:
    """Drop the process-wide registry (tests)."""
    global _registry
    _registry = None
