"""Telemetry client that captures exceptions and messages and sends them to Orbitrace."""

from __future__ import annotations

import json
import logging
import traceback
from typing import Any, Dict, Optional, Tuple

from orbitrace.config import ClientConfig, validate_config
from orbitrace.exceptions import DispatchError
from orbitrace.models import Event, EventKind
from orbitrace.transport import HttpTransport, Transport

logger = logging.getLogger("orbitrace")

API_KEY_HEADER = "x-orbitrace-api-key"
ORG_ID_HEADER = "x-orbitrace-org-id"
PROJECT_ID_HEADER = "x-orbitrace-project-id"


def describe_error(error: Any) -> Tuple[str, Optional[str]]:
    """Extract the message and stack from an error.

    Objects exposing ``message``/``stack`` attributes are used as-is. Python
    exceptions fall back to ``str(error)`` and their formatted traceback.
    """
    message = getattr(error, "message", None)
    if not isinstance(message, str):
        message = str(error)

    stack = getattr(error, "stack", None)
    if stack is None and isinstance(error, BaseException):
        stack = "".join(traceback.format_exception(type(error), error, error.__traceback__))
    return message, stack


class TelemetryClient:
    """Sends one event per capture call to the configured endpoint.

    Delivery failures are logged and raised as DispatchError. A disabled
    client makes no network call and returns None.
    """

    def __init__(self, config: Any, transport: Optional[Transport] = None):
        """Initialize the client.

        Args:
            config: Raw configuration (mapping, object or ClientConfig)
            transport: Transport used for delivery (default: HttpTransport)

        Raises:
            ConfigError: If a required configuration field is missing
        """
        self._config = validate_config(config)
        self.transport = transport or HttpTransport()

        if self._config.disabled:
            logger.info(f"Orbitrace client for {self._config.service} is disabled")
        else:
            logger.debug(
                f"Orbitrace client initialized for {self._config.service} "
                f"({self._config.environment}) -> {self._config.endpoint}"
            )

    @classmethod
    def create(cls, config: Any, transport: Optional[Transport] = None) -> TelemetryClient:
        """Create a client from a raw configuration."""
        return cls(config, transport=transport)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return f"TelemetryClient(service={self._config.service!r}, endpoint={self._config.endpoint!r})"

    async def capture_exception(
        self, error: Any, metadata: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Capture an exception.

        Args:
            error: Exception, or any object with ``message`` and optional ``stack``
            metadata: Extra metadata attached to the event

        Returns:
            The parsed endpoint response, or None if the client is disabled

        Raises:
            DispatchError: If the event could not be delivered
        """
        if self._config.disabled:
            logger.info("Orbitrace: Logging is disabled")
            return None

        message, stack = describe_error(error)
        event = Event(
            kind=EventKind.CAPTURE_EXCEPTION,
            message=message,
            stack=stack,
            metadata=self._merge_metadata(metadata),
        )
        return await self._send(event)

    async def capture_message(
        self, message: str, metadata: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Capture a plain message.

        Args:
            message: Message text, sent verbatim
            metadata: Extra metadata attached to the event

        Returns:
            The parsed endpoint response, or None if the client is disabled

        Raises:
            DispatchError: If the event could not be delivered
        """
        if self._config.disabled:
            logger.info("Orbitrace: Logging is disabled")
            return None

        event = Event(
            kind=EventKind.CAPTURE_MESSAGE,
            message=message,
            metadata=self._merge_metadata(metadata),
        )
        return await self._send(event)

    def _merge_metadata(self, metadata: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        # Derived keys go last and override caller keys
        return {
            **(metadata or {}),
            "env": self._config.environment,
            "version": self._config.version,
            "service": self._config.service,
        }

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            API_KEY_HEADER: self._config.api_key,
            ORG_ID_HEADER: self._config.org_id,
            PROJECT_ID_HEADER: self._config.project_id,
        }

    async def _send(self, event: Event) -> Any:
        """Deliver an event with a single attempt and return the parsed response."""
        content = json.dumps(event.to_body(), separators=(",", ":"), ensure_ascii=False)

        try:
            response = await self.transport.send(self._config.endpoint, content, self._headers())
        except Exception as e:
            logger.error(f"Orbitrace: Error sending data to API: {e}")
            raise DispatchError(f"Failed to send {event.kind.value} event: {e}") from e

        if not response.ok:
            logger.error(
                f"Orbitrace: Error sending data to API: HTTP error! status: {response.status_code}"
            )
            raise DispatchError(
                f"HTTP error! status: {response.status_code}",
                status_code=response.status_code,
                response_text=response.text,
            )

        try:
            return json.loads(response.text)
        except json.JSONDecodeError as e:
            logger.error(f"Orbitrace: Error sending data to API: invalid JSON response: {e}")
            raise DispatchError(
                f"Invalid JSON response: {e}",
                status_code=response.status_code,
                response_text=response.text,
            ) from e
