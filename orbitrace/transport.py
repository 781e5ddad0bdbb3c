"""HTTP transport used to deliver events to the collection endpoint."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

import httpx

logger = logging.getLogger("orbitrace.transport")


@dataclass(frozen=True)
class TransportResponse:
    """Status and raw body of an endpoint response."""

    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class Transport(Protocol):
    """Anything that can POST a JSON body and return the response.

    Implementations raise on transport-level failures (DNS, connection,
    timeout) and return a response for every HTTP status.
    """

    async def send(self, url: str, content: str, headers: Dict[str, str]) -> TransportResponse:
        ...


class HttpTransport:
    """Transport backed by httpx, one short-lived AsyncClient per request."""

    def __init__(
        self,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            timeout: Request timeout, or None for the httpx default
            transport: Optional low-level httpx transport (e.g. httpx.MockTransport)
        """
        self.timeout = timeout
        self.transport = transport

    async def send(self, url: str, content: str, headers: Dict[str, str]) -> TransportResponse:
        kwargs = {"transport": self.transport}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        async with httpx.AsyncClient(**kwargs) as client:
            logger.debug(f"Sending request to {url}")
            response = await client.post(url, content=content, headers=headers)
            logger.debug(f"Received status {response.status_code} from {url}")
            return TransportResponse(status_code=response.status_code, text=response.text)
