"""
TripSit catalog client.

The getAllDrugs endpoint answers with {"err": ..., "data": [{key: entry, ...}]};
the catalog is the mapping in the first element of "data".
"""

import logging
from collections.abc import Mapping

import httpx
from pydantic import ValidationError

from pw_effects.errors import InvalidCatalogError
from pw_effects.schemas import CatalogEntry
from pw_effects.sources.base import BaseClient

logger = logging.getLogger(__name__)


class TripSitClient(BaseClient):
    """Fetch the TripSit substance catalog."""

    source_key = "tripsit"

    def __init__(self, client: httpx.AsyncClient, catalog_url: str):
        super().__init__(client)
        self.catalog_url = catalog_url

    async def fetch_catalog(self) -> list[CatalogEntry]:
        """
        Download and validate the full drug catalog.

        Returns:
            Catalog entries in the order the service lists them

        Raises:
            SourceUnavailableError: if the service cannot be reached
            InvalidCatalogError: if the payload is not a non-empty catalog
        """
        logger.info("Getting all TripSit drugs...")
        body = await self.fetch_json(self.catalog_url)

        data = body.get("data") if isinstance(body, Mapping) else None
        if not isinstance(data, list):
            raise InvalidCatalogError("TripSit allDrugs list should be an array")
        if not data:
            raise InvalidCatalogError("TripSit allDrugs list should not be empty")

        drugs = data[0]
        if not isinstance(drugs, Mapping) or not drugs:
            raise InvalidCatalogError("TripSit allDrugs should contain a non-empty drug mapping")

        try:
            entries = [CatalogEntry.model_validate(entry) for entry in drugs.values()]
        except ValidationError as e:
            raise InvalidCatalogError(f"TripSit catalog entry is malformed: {e}") from e

        logger.info("Fetched %d catalog entries", len(entries))
        return entries
