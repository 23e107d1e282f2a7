"""
Progress reporting for pipeline stages.

A reporter hands out one tick callable per stage. Ticks are cosmetic: the
pipeline never depends on them succeeding.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeRemainingColumn,
)

logger = logging.getLogger(__name__)

Tick = Callable[[], None]


class ProgressReporter(Protocol):
    """Creates a tick callable for a stage with a known amount of work."""

    def track(self, label: str, total: int) -> Tick: ...


class NullProgress:
    """Reporter that discards every tick."""

    def track(self, label: str, total: int) -> Tick:
        return lambda: None

    def __enter__(self) -> NullProgress:
        return self

    def __exit__(self, *exc_info) -> None:
        return None


class RichProgress:
    """
    Reporter backed by a rich Progress display.

    Usage:
        with RichProgress() as progress:
            tick = progress.track("Resolving", total=150)
            tick()
    """

    def __init__(self, console: Console | None = None):
        self._progress = Progress(
            TextColumn("[cyan]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TaskProgressColumn(),
            TimeRemainingColumn(),
            console=console,
        )

    def track(self, label: str, total: int) -> Tick:
        task = self._progress.add_task(label, total=total)

        def tick() -> None:
            self._progress.advance(task)

        return tick

    def __enter__(self) -> RichProgress:
        self._progress.start()
        return self

    def __exit__(self, *exc_info) -> None:
        self._progress.stop()


def guarded(tick: Tick | None) -> Tick:
    """Wrap a tick so a failing progress display never interrupts a stage."""
    if tick is None:
        return lambda: None

    def safe_tick() -> None:
        try:
            tick()
        except Exception:
            logger.debug("Progress tick failed", exc_info=True)

    return safe_tick
