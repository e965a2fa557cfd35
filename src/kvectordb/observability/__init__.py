"""
Observability Module - OpenTelemetry Integration

Provides tracing for store operations with graceful degradation when
tracing is disabled or OpenTelemetry is not installed.

USAGE:
------
# At application startup:
from kvectordb.observability import init_tracing

init_tracing()  # Installs an SDK TracerProvider if KVECTORDB_TRACING_ENABLED=true

# In code that needs tracing:
from kvectordb.observability import get_tracer

tracer = get_tracer()
with tracer.start_span("my_operation", attributes={"key": "value"}) as span:
    # ... do work ...
    span.set_attribute("result", "success")
"""

from __future__ import annotations

import logging

from kvectordb.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from kvectordb.observability.tracer import (
    TracerProtocol,
    SpanProtocol,
    NoOpTracer,
    NoOpSpan,
    get_tracer,
    reset_tracer,
)
from kvectordb.observability.attributes import (
    SPAN_INSERT,
    SPAN_SEARCH,
    VECTORDB_EMBEDDING_DIM,
    VECTORDB_DOCUMENT_ID,
    VECTORDB_STORE_SIZE,
    VECTORDB_QUERY_LENGTH,
    VECTORDB_SEARCH_LIMIT,
    VECTORDB_CANDIDATE_COUNT,
    VECTORDB_RESULT_COUNT,
    VECTORDB_TOP_SCORE,
    insert_attributes,
    search_attributes,
)

logger = logging.getLogger(__name__)

_tracing_initialized = False


def init_tracing(config: TracingConfig | None = None) -> bool:
    """
    Initialize OpenTelemetry tracing.

    This should be called once at application startup.

    Args:
        config: Optional config (uses env vars if not provided)

    Returns:
        True if tracing was initialized, False if disabled or failed
    """
    global _tracing_initialized
    if _tracing_initialized:
        return True

    config = config or get_config()

    if not config.enabled:
        logger.debug("Tracing disabled")
        return False

    try:
        from opentelemetry import trace
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import (
            ConsoleSpanExporter,
            SimpleSpanProcessor,
        )

        provider = TracerProvider(
            resource=Resource.create({"service.name": config.service_name})
        )
        if config.console_export:
            provider.add_span_processor(SimpleSpanProcessor(ConsoleSpanExporter()))
        trace.set_tracer_provider(provider)

        reset_tracer()
        _tracing_initialized = True
        logger.info(f"Tracing initialized for service: {config.service_name}")
        return True

    except ImportError as e:
        logger.warning(f"OpenTelemetry SDK not installed, tracing disabled: {e}")
        return False
    except Exception as e:
        logger.error(f"Failed to initialize tracing: {e}")
        return False


def shutdown_tracing() -> None:
    """Flush and shut down the tracer provider."""
    global _tracing_initialized

    if not _tracing_initialized:
        return

    try:
        from opentelemetry import trace
        provider = trace.get_tracer_provider()
        if hasattr(provider, "shutdown"):
            provider.shutdown()
    except Exception as e:
        logger.warning(f"Error shutting down tracing: {e}")

    reset_tracer()
    reset_config()
    _tracing_initialized = False


__all__ = [
    # Initialization
    "init_tracing",
    "shutdown_tracing",
    # Config
    "TracingConfig",
    "get_config",
    "reset_config",
    # Tracer
    "TracerProtocol",
    "SpanProtocol",
    "NoOpTracer",
    "NoOpSpan",
    "get_tracer",
    "reset_tracer",
    # Attributes
    "SPAN_INSERT",
    "SPAN_SEARCH",
    "VECTORDB_EMBEDDING_DIM",
    "VECTORDB_DOCUMENT_ID",
    "VECTORDB_STORE_SIZE",
    "VECTORDB_QUERY_LENGTH",
    "VECTORDB_SEARCH_LIMIT",
    "VECTORDB_CANDIDATE_COUNT",
    "VECTORDB_RESULT_COUNT",
    "VECTORDB_TOP_SCORE",
    # Helpers
    "insert_attributes",
    "search_attributes",
]
