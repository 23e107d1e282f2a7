"""
Effect crawl orchestration.

Coordinates the flow:
1. Fetch the catalog (TripSit)
2. Flatten it to candidate names
3. Resolve names to wiki articles in bounded waves
4. Query effect relationships for every matched name
5. Serialize the effect map and hand it to the persistence callable

Usage:
    from pw_effects.pipeline import run_pipeline
    path = asyncio.run(run_pipeline(settings))
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path

import httpx

from pw_effects.config import Settings
from pw_effects.pipeline.effects import EffectExtractor, QueryEffects
from pw_effects.pipeline.names import DEFAULT_NAME_LIMIT, extract_names
from pw_effects.pipeline.resolver import DEFAULT_BATCH_SIZE, BatchResolver, Lookup
from pw_effects.progress import NullProgress, ProgressReporter
from pw_effects.schemas import CatalogEntry, EffectMap
from pw_effects.sources import PsychonautWikiClient, TripSitClient, build_http_client

logger = logging.getLogger(__name__)

FetchCatalog = Callable[[], Awaitable[Sequence[CatalogEntry]]]
Persist = Callable[[Path, bytes], None]


def write_output(path: Path, data: bytes) -> None:
    """Overwrite `path` with `data`, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)


def serialize_effects(effect_map: EffectMap) -> bytes:
    """Encode an effect map as a compact UTF-8 JSON document."""
    return json.dumps(effect_map, ensure_ascii=False).encode("utf-8")


class EffectPipeline:
    """
    One crawl run: catalog → names → matched names → effect map → file.

    Every collaborator is injected, so an instance is only ever bound to the
    run it was built for.
    """

    def __init__(
        self,
        fetch_catalog: FetchCatalog,
        search_article: Lookup,
        query_relationships: QueryEffects,
        output_path: Path,
        *,
        name_limit: int = DEFAULT_NAME_LIMIT,
        batch_size: int = DEFAULT_BATCH_SIZE,
        extract_concurrency: int | None = None,
        persist: Persist = write_output,
        progress: ProgressReporter | None = None,
    ):
        self.fetch_catalog = fetch_catalog
        self.search_article = search_article
        self.query_relationships = query_relationships
        self.output_path = Path(output_path)
        self.name_limit = name_limit
        self.persist = persist
        self.progress = progress or NullProgress()

        self.resolver = BatchResolver(batch_size=batch_size)
        self.extractor = EffectExtractor(max_concurrency=extract_concurrency)

        # Stage outputs for the current run
        self.candidate_names: list[str] = []
        self.matched_names: list[str] = []
        self.effect_map: EffectMap = {}

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        client: httpx.AsyncClient,
        progress: ProgressReporter | None = None,
    ) -> EffectPipeline:
        """Wire the TripSit and PsychonautWiki clients from settings."""
        tripsit = TripSitClient(client, settings.catalog_url)
        wiki = PsychonautWikiClient(client, settings.wiki_api_url)
        return cls(
            fetch_catalog=tripsit.fetch_catalog,
            search_article=wiki.search_article,
            query_relationships=wiki.query_relationships,
            output_path=settings.output_path,
            name_limit=settings.name_limit,
            batch_size=settings.batch_size,
            extract_concurrency=settings.extract_concurrency,
            progress=progress,
        )

    async def run(self) -> Path:
        """
        Execute every stage and persist the result.

        Returns:
            The path the effect map was written to

        Raises:
            CrawlerError: from any stage; nothing is written in that case
        """
        catalog = await self.fetch_catalog()

        self.candidate_names = extract_names(catalog, limit=self.name_limit)
        logger.info("Collected %d candidate names", len(self.candidate_names))

        self.matched_names = await self.resolver.resolve(
            self.candidate_names,
            self.search_article,
            on_progress=self.progress.track(
                "Resolving to PsychonautWiki articles", total=len(self.candidate_names)
            ),
        )

        self.effect_map = await self.extractor.extract(
            self.matched_names,
            self.query_relationships,
            on_progress=self.progress.track("Extracting effects", total=len(self.matched_names)),
        )

        self.persist(self.output_path, serialize_effects(self.effect_map))
        logger.info("Wrote %d substances to %s", len(self.effect_map), self.output_path)
        return self.output_path


async def run_pipeline(settings: Settings, progress: ProgressReporter | None = None) -> Path:
    """Run one crawl with a fresh HTTP client and pipeline instance."""
    async with build_http_client(settings) as client:
        pipeline = EffectPipeline.from_settings(settings, client, progress=progress)
        return await pipeline.run()
