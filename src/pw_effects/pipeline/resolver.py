"""
Batch name resolution.

Resolves candidate names to wiki articles in sequential waves. Each wave
issues at most `batch_size` lookups at once and must fully settle before the
next one starts, which caps the load placed on the search endpoint.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence

from pw_effects.errors import EmptyInputError, ResolutionError
from pw_effects.progress import Tick, guarded
from pw_effects.schemas import MatchResult

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Awaitable[MatchResult]]

DEFAULT_BATCH_SIZE = 5


def chunked(items: Sequence[str], size: int) -> list[list[str]]:
    """Split items into consecutive groups of `size` (the last may be shorter)."""
    return [list(items[i : i + size]) for i in range(0, len(items), size)]


class BatchResolver:
    """Resolve names against a search capability in bounded concurrent waves."""

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE):
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")
        self.batch_size = batch_size

    async def resolve(
        self,
        names: Sequence[str],
        lookup: Lookup,
        on_progress: Tick | None = None,
    ) -> list[str]:
        """
        Keep the names that the search service matches.

        Args:
            names: Candidate names in discovery order
            lookup: Async search returning (echoed term, matches)
            on_progress: Called once per completed lookup

        Returns:
            Echoed terms of matched names, in wave order

        Raises:
            EmptyInputError: if `names` is empty
            ResolutionError: if any lookup fails
        """
        if not names:
            raise EmptyInputError("No candidate names to resolve")

        tick = guarded(on_progress)
        waves = chunked(names, self.batch_size)
        matched: list[str] = []

        for index, wave in enumerate(waves, start=1):
            logger.debug("Resolution wave %d/%d: %s", index, len(waves), wave)
            results = await self._run_wave(wave, lookup, tick)
            for term, matches in results:
                if len(matches) > 0:
                    matched.append(term)

        logger.info("Resolved %d of %d names to articles", len(matched), len(names))
        return matched

    async def _run_wave(self, wave: list[str], lookup: Lookup, tick: Tick) -> list[MatchResult]:
        """Run one wave and wait for every lookup in it to settle."""

        async def run_one(name: str) -> MatchResult:
            try:
                return MatchResult(*await lookup(name))
            finally:
                tick()

        outcomes = await asyncio.gather(*(run_one(name) for name in wave), return_exceptions=True)

        results: list[MatchResult] = []
        for name, outcome in zip(wave, outcomes):
            if isinstance(outcome, BaseException):
                raise ResolutionError(name, f"Lookup failed for {name!r}: {outcome}") from outcome
            results.append(outcome)
        return results
