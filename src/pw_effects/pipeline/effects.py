"""
Effect relationship extraction.

Fans out one relationship query per matched name and folds the responses into
an EffectMap. Names without results are left out of the map entirely.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from pw_effects.errors import ExtractionError
from pw_effects.progress import Tick, guarded
from pw_effects.schemas import EffectEntry, EffectMap, EffectQueryResult

logger = logging.getLogger(__name__)

QueryEffects = Callable[[str], Awaitable[EffectQueryResult]]


def build_effect_entry(name: str, results: Mapping[str, Any]) -> EffectEntry:
    """Map each effect name in an ask result set to its article URL."""
    entry: EffectEntry = {}
    for effect_name, item in results.items():
        url = item.get("fullurl") if isinstance(item, Mapping) else None
        if not isinstance(url, str):
            logger.warning("Skipping effect %r of %r: no fullurl", effect_name, name)
            continue
        entry[effect_name] = url
    return entry


class EffectExtractor:
    """Query effect relationships for every matched name concurrently."""

    def __init__(self, max_concurrency: int | None = None):
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self.max_concurrency = max_concurrency

    async def extract(
        self,
        names: Sequence[str],
        query_effects: QueryEffects,
        on_progress: Tick | None = None,
    ) -> EffectMap:
        """
        Build the effect map for matched names.

        Args:
            names: Matched substance names
            query_effects: Async query returning (name, ask "query" object)
            on_progress: Called once per completed query

        Returns:
            Mapping of name -> {effect name: URL}, for names with results only

        Raises:
            ExtractionError: if any query fails
        """
        if not names:
            logger.info("No matched names, skipping effect extraction")
            return {}

        tick = guarded(on_progress)
        semaphore = asyncio.Semaphore(self.max_concurrency) if self.max_concurrency else None

        async def run_one(name: str) -> EffectQueryResult:
            try:
                if semaphore is None:
                    return EffectQueryResult(*await query_effects(name))
                async with semaphore:
                    return EffectQueryResult(*await query_effects(name))
            finally:
                tick()

        outcomes = await asyncio.gather(*(run_one(name) for name in names), return_exceptions=True)

        pairs: list[EffectQueryResult] = []
        for name, outcome in zip(names, outcomes):
            if isinstance(outcome, BaseException):
                raise ExtractionError(name, f"Effect query failed for {name!r}: {outcome}") from outcome
            pairs.append(outcome)

        effect_map: EffectMap = {}
        for drug_name, query in pairs:
            results = query.get("results") if isinstance(query, Mapping) else None
            # SMW answers an empty result set with [] rather than {}
            if not results or not isinstance(results, Mapping):
                continue
            entry = build_effect_entry(drug_name, results)
            if entry:
                effect_map[drug_name] = entry

        logger.info("Extracted effects for %d of %d names", len(effect_map), len(names))
        return effect_map
