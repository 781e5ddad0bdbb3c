"""Orbitrace client: report exceptions and messages to an Orbitrace endpoint."""

__version__ = "0.1.0"

from orbitrace.client import TelemetryClient
from orbitrace.config import ClientConfig, validate_config
from orbitrace.exceptions import ConfigError, DispatchError, OrbitraceError
from orbitrace.log import set_log_level
from orbitrace.models import Event, EventKind
from orbitrace.registry import ClientRegistry
from orbitrace.transport import HttpTransport, Transport, TransportResponse

# Applied at import so notices stay quiet unless requested
set_log_level()

__all__ = [
    "TelemetryClient",
    "ClientConfig",
    "validate_config",
    "ClientRegistry",
    "ConfigError",
    "DispatchError",
    "OrbitraceError",
    "Event",
    "EventKind",
    "HttpTransport",
    "Transport",
    "TransportResponse",
    "set_log_level",
]
