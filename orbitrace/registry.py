"""Registry sharing one telemetry client per service name."""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, List, Optional

from orbitrace.client import TelemetryClient
from orbitrace.config import service_name_of
from orbitrace.transport import Transport

logger = logging.getLogger("orbitrace.registry")


class ClientRegistry:
    """Maps service names to shared TelemetryClient instances.

    Entries are created on first request and never removed. Later requests
    for a known service return the existing client and ignore their config.
    """

    def __init__(self, transport: Optional[Transport] = None):
        """
        Args:
            transport: Transport handed to every client the registry creates
        """
        self.transport = transport
        self._clients: Dict[str, TelemetryClient] = {}
        self._lock = threading.Lock()

    def get_or_create(self, service_name: Optional[str], raw_config: Any) -> TelemetryClient:
        """Get the client for a service, creating it on first use.

        Args:
            service_name: Registry key, or None to use the config's service
            raw_config: Configuration used only when no client exists yet

        Returns:
            TelemetryClient: The shared client for the service

        Raises:
            ConfigError: If a new client is needed and the config is invalid
        """
        if service_name is None:
            service_name = service_name_of(raw_config)

        with self._lock:
            client = self._clients.get(service_name)
            if client is not None:
                logger.debug(f"Reusing Orbitrace client for service: {service_name}")
                return client

            client = TelemetryClient(raw_config, transport=self.transport)
            self._clients[service_name] = client
            logger.debug(f"Registered Orbitrace client for service: {service_name}")
            return client

    def get(self, service_name: str) -> Optional[TelemetryClient]:
        """Return the client for a service, or None if none was created."""
        return self._clients.get(service_name)

    def services(self) -> List[str]:
        """Return the registered service names in creation order."""
        return list(self._clients)

    def __contains__(self, service_name: object) -> bool:
        """Check whether a client exists for a service."""
        return service_name in self._clients

    def __len__(self) -> int:
        """Return the number of registered clients."""
        return len(self._clients)
