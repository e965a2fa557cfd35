"""
Tracer Factory and NoOp Implementations

Spans expose only what store operations need: attributes, and a single
record_error() that both records the exception and fails the span.
get_tracer() returns either a wrapped OTel tracer or a NoOpTracer for
graceful degradation.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator, Protocol


# ---------------------------------------------------------------------------
# PROTOCOLS
# ---------------------------------------------------------------------------


class SpanProtocol(Protocol):
    """Protocol for span operations."""

    def set_attribute(self, key: str, value: Any) -> None:
        """Set a span attribute."""
        ...

    def record_error(self, exception: Exception) -> None:
        """Record an exception and mark the span as failed."""
        ...


class TracerProtocol(Protocol):
    """Protocol for tracer operations."""

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[SpanProtocol]:
        """Start a new span as context manager."""
        ...


# ---------------------------------------------------------------------------
# NOOP IMPLEMENTATIONS (for graceful degradation)
# ---------------------------------------------------------------------------


class NoOpSpan:
    """No-op span that does nothing."""

    def set_attribute(self, key: str, value: Any) -> None:
        pass

    def record_error(self, exception: Exception) -> None:
        pass


class NoOpTracer:
    """No-op tracer that creates no-op spans."""

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[NoOpSpan]:
        yield NoOpSpan()


# ---------------------------------------------------------------------------
# REAL OTEL TRACER (wrapped for our protocol)
# ---------------------------------------------------------------------------


class OTelSpan:
    """Wrapper around OTel span to match our protocol."""

    def __init__(self, span: Any):
        self._span = span

    def set_attribute(self, key: str, value: Any) -> None:
        self._span.set_attribute(key, value)

    def record_error(self, exception: Exception) -> None:
        from opentelemetry.trace import Status, StatusCode

        self._span.record_exception(exception)
        self._span.set_status(
            Status(StatusCode.ERROR, f"{type(exception).__name__}: {exception}")
        )


class OTelTracer:
    """
    Wrapper around OTel tracer to match our protocol.

    The SDK's automatic exception recording is off: failures reach the
    span only through OTelSpan.record_error, once.
    """

    def __init__(self, tracer: Any):
        self._tracer = tracer

    @contextmanager
    def start_span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[OTelSpan]:
        with self._tracer.start_as_current_span(
            name,
            attributes=attributes,
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            yield OTelSpan(span)


# ---------------------------------------------------------------------------
# FACTORY
# ---------------------------------------------------------------------------

_tracer: TracerProtocol | None = None


def get_tracer() -> TracerProtocol:
    """
    Get the global tracer instance.

    Returns OTelTracer if tracing is enabled and an SDK TracerProvider is
    installed, otherwise returns NoOpTracer for zero overhead.
    """
    global _tracer
    if _tracer is not None:
        return _tracer

    from kvectordb.observability.config import get_config

    config = get_config()

    if not config.enabled:
        _tracer = NoOpTracer()
        return _tracer

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.trace import TracerProvider

        provider = trace.get_tracer_provider()
        if not isinstance(provider, TracerProvider):
            # init_tracing() has not run yet
            _tracer = NoOpTracer()
            return _tracer

        _tracer = OTelTracer(trace.get_tracer(config.service_name))
        return _tracer

    except ImportError:
        _tracer = NoOpTracer()
        return _tracer


def reset_tracer() -> None:
    """Reset tracer (useful for testing)."""
    global _tracer
    _tracer = None
