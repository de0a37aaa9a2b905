"""
Bridge observability: OpenTelemetry tracing + Prometheus channel metrics.

Provides:
- A tracer tagged with the bridge's service name and version
- One span per channel method invocation
- Counters and histograms per channel / method / outcome
- Prometheus scraping utilities
"""

import time
import structlog
from contextlib import contextmanager
from typing import Generator

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

logger = structlog.get_logger(__name__)

# ── OpenTelemetry Setup ──────────────────────────────────────────────

_tracer: trace.Tracer | None = None


def setup_tracing(
    service_name: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Initialize OpenTelemetry tracing.

    Args:
        service_name: Name of the service (appears in traces).
                      Defaults to the distribution name.
        console_export: If True, spans are printed by a ConsoleSpanExporter
                        (local debugging). Otherwise spans are recorded but
                        not exported.
    """
    global _tracer

    from sliding_tile.version import DISTRIBUTION_NAME, VERSION

    service_name = service_name or DISTRIBUTION_NAME

    resource = Resource.create(
        {"service.name": service_name, "service.version": VERSION}
    )
    provider = TracerProvider(resource=resource)
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = trace.get_tracer(__name__)
    logger.info(
        "otel_tracing_initialized",
        service=service_name,
        console_export=console_export,
    )
    return _tracer


def get_tracer() -> trace.Tracer:
    """Return the configured tracer, or one from the global provider."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer(__name__)
    return _tracer


# ── Channel Metrics ──────────────────────────────────────────────────

CHANNEL_CALLS = Counter(
    "channel_calls_total",
    "Total method calls per channel",
    ["channel", "method", "outcome"],
    namespace="sliding_tile",
)

CHANNEL_LATENCY = Histogram(
    "channel_latency_seconds",
    "Per-channel method call latency",
    ["channel"],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
    namespace="sliding_tile",
)


@contextmanager
def trace_channel_call(channel: str, method: str) -> Generator:
    """
    Context manager that wraps a channel method call in a span and
    records its latency.

    Usage:
        with trace_channel_call("com.fgtp.sliding_tile/app_info", "getVersion") as span:
            response = handler(call)
            span.set_attribute("channel.outcome", response.status)
    """
    tracer = get_tracer()
    with tracer.start_as_current_span(
        f"channel.{method}",
        attributes={"channel.name": channel, "channel.method": method},
    ) as span:
        start = time.monotonic()
        try:
            yield span
        except Exception as e:
            span.record_exception(e)
            raise
        finally:
            elapsed = time.monotonic() - start
            CHANNEL_LATENCY.labels(channel=channel).observe(elapsed)
            span.set_attribute("channel.latency_ms", round(elapsed * 1000, 3))


def record_channel_outcome(channel: str, method: str, outcome: str) -> None:
    """Increment the call counter for a finished channel invocation."""
    CHANNEL_CALLS.labels(channel=channel, method=method, outcome=outcome).inc()


# ── Prometheus Scraping ──────────────────────────────────────────────


def get_metrics() -> bytes:
    """Generate Prometheus metrics for scraping."""
    return generate_latest()


def get_metrics_content_type() -> str:
    """Content type for Prometheus metrics response."""
    return CONTENT_TYPE_LATEST
