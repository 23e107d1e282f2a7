"""
Base class for upstream service clients.

All source clients share one httpx.AsyncClient per run and convert transport
failures into SourceUnavailableError at this boundary.
"""

import logging
from abc import ABC
from typing import Any

import httpx

from pw_effects.config import Settings
from pw_effects.errors import SourceUnavailableError

logger = logging.getLogger(__name__)


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create the shared async HTTP client for one pipeline run."""
    return httpx.AsyncClient(
        timeout=settings.request_timeout,
        follow_redirects=True,
        headers={"User-Agent": settings.user_agent},
    )


class BaseClient(ABC):
    """Base class for JSON API clients."""

    source_key: str

    def __init__(self, client: httpx.AsyncClient):
        self._client = client

    async def fetch_json(self, url: str, params: dict[str, Any] | None = None) -> Any:
        """
        GET a URL and decode its JSON body.

        Args:
            url: Endpoint to request
            params: Optional query string parameters

        Returns:
            Decoded JSON document

        Raises:
            SourceUnavailableError: on transport errors, non-2xx status or invalid JSON
        """
        logger.debug("%s GET %s %s", self.source_key, url, params or "")
        try:
            response = await self._client.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise SourceUnavailableError(f"{self.source_key}: request to {url} failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise SourceUnavailableError(f"{self.source_key}: {url} returned invalid JSON") from e
