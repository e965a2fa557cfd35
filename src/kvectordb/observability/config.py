"""
Tracing Configuration

Loads observability settings from environment variables.
Supports graceful degradation when OpenTelemetry is not installed.
"""

import os
from dataclasses import dataclass

_TRUTHY = ("true", "1", "yes")


@dataclass
class TracingConfig:
    """Configuration for OpenTelemetry tracing.

    Environment Variables:
        KVECTORDB_TRACING_ENABLED: Enable tracing (default: false)
        KVECTORDB_SERVICE_NAME: Service/tracer name (default: kvectordb)
        KVECTORDB_TRACING_CONSOLE: Print finished spans to stdout (default: false)
    """

    enabled: bool = False
    service_name: str = "kvectordb"
    console_export: bool = False

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Load config from environment variables."""
        return cls(
            enabled=os.environ.get("KVECTORDB_TRACING_ENABLED", "false").lower() in _TRUTHY,
            service_name=os.environ.get("KVECTORDB_SERVICE_NAME", "kvectordb"),
            console_export=os.environ.get("KVECTORDB_TRACING_CONSOLE", "false").lower() in _TRUTHY,
        )


# Global config singleton
_config: TracingConfig | None = None


def get_config() -> TracingConfig:
    """Get the global tracing config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = TracingConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
