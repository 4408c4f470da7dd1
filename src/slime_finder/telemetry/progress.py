"""Contract for search progress sinks."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn, TimeElapsedColumn, TimeRemainingColumn


class SearchProgress(Protocol):
    """Receives batch completions from the search; only the parent process calls it."""

    def start(self, total: int) -> None:
        """Announce how many candidates will be evaluated."""

    def advance(self, count: int) -> None:
        """Record ``count`` more evaluated candidates."""

    def finish(self) -> None:
        """Release any display resources."""


class NullProgress:
    def start(self, total: int) -> None:
        pass

    def advance(self, count: int) -> None:
        pass

    def finish(self) -> None:
        pass


class RichSearchProgress:
    """Progress bar on the console while candidates are counted."""

    def __init__(self, console: Console | None = None, description: str = "Counting slime chunks") -> None:
        self._description = description
        self._progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            TimeRemainingColumn(),
            console=console,
            transient=True,
        )
        self._task_id = None

    def start(self, total: int) -> None:
        self._progress.start()
        self._task_id = self._progress.add_task(self._description, total=total)

    def advance(self, count: int) -> None:
        if self._task_id is not None:
            self._progress.advance(self._task_id, count)

    def finish(self) -> None:
        self._progress.stop()
        self._task_id = None
