"""Client configuration and validation."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from orbitrace.exceptions import ConfigError

DEFAULT_ENVIRONMENT = "production"
DEFAULT_VERSION = "1.0.0"
DEFAULT_SERVICE = "not-specified"

# Wire spelling first, python spelling second
REQUIRED_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("apiKey", "api_key"),
    ("orgId", "org_id"),
    ("projectId", "project_id"),
    ("endpoint", "endpoint"),
)

OPTIONAL_FIELDS: Dict[str, Any] = {
    "environment": DEFAULT_ENVIRONMENT,
    "version": DEFAULT_VERSION,
    "service": DEFAULT_SERVICE,
    "disabled": False,
}


class ClientConfig(BaseModel):
    """Immutable configuration owned by a single telemetry client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    api_key: str = Field(alias="apiKey")
    org_id: str = Field(alias="orgId")
    project_id: str = Field(alias="projectId")
    endpoint: str
    environment: str = DEFAULT_ENVIRONMENT
    version: str = DEFAULT_VERSION
    service: str = DEFAULT_SERVICE
    disabled: bool = False

    @classmethod
    def from_env(cls, prefix: str = "ORBITRACE_") -> ClientConfig:
        """Load and validate config from environment variables.

        Args:
            prefix: Prefix shared by all variables (default: ORBITRACE_)

        Returns:
            ClientConfig: The validated configuration

        Raises:
            ConfigError: If any required variable is unset or empty
        """
        raw: Dict[str, Any] = {
            "apiKey": os.environ.get(f"{prefix}API_KEY"),
            "orgId": os.environ.get(f"{prefix}ORG_ID"),
            "projectId": os.environ.get(f"{prefix}PROJECT_ID"),
            "endpoint": os.environ.get(f"{prefix}ENDPOINT"),
            "environment": os.environ.get(f"{prefix}ENVIRONMENT"),
            "version": os.environ.get(f"{prefix}VERSION"),
            "service": os.environ.get(f"{prefix}SERVICE"),
            "disabled": os.environ.get(f"{prefix}DISABLED", "").lower()
            in ("1", "true", "yes", "on"),
        }
        return validate_config(raw)


def read_field(raw: Any, *names: str) -> Any:
    """Read the first present field among ``names`` from a mapping or object."""
    for name in names:
        if isinstance(raw, Mapping):
            if name in raw:
                return raw[name]
        elif hasattr(raw, name):
            return getattr(raw, name)
    return None


def validate_config(raw: Any) -> ClientConfig:
    """Validate a raw configuration and apply defaults.

    A required field counts as missing when it is absent or falsy
    (None, "", 0, False). Every missing field is reported at once.

    Args:
        raw: A mapping, an object with matching attributes, or a ClientConfig

    Returns:
        ClientConfig: A fully populated, frozen configuration

    Raises:
        ConfigError: If a required field is missing or a field has the wrong type
    """
    if raw is None:
        raw = {}

    values: Dict[str, Any] = {}
    missing: List[str] = []
    for wire_name, field_name in REQUIRED_FIELDS:
        value = read_field(raw, wire_name, field_name)
        if not value:
            missing.append(wire_name)
        values[field_name] = value

    if missing:
        raise ConfigError(missing)
    if isinstance(raw, ClientConfig):
        return raw

    for field_name, default in OPTIONAL_FIELDS.items():
        value = read_field(raw, field_name)
        values[field_name] = default if value is None else value

    try:
        return ClientConfig(**values)
    except ValidationError as e:
        wire_names = {field_name: wire_name for wire_name, field_name in REQUIRED_FIELDS}
        invalid = [
            wire_names.get(str(error["loc"][0]), str(error["loc"][0]))
            for error in e.errors()
            if error["loc"]
        ]
        raise ConfigError(
            [], message=f"Invalid configuration fields: {', '.join(invalid)}"
        ) from e


def service_name_of(raw: Any) -> str:
    """Return the service name a raw config would register under."""
    if raw is None:
        return DEFAULT_SERVICE
    service: Optional[str] = read_field(raw, "service")
    return DEFAULT_SERVICE if service is None else service
