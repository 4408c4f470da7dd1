"""Despawn-sphere search over a spiral of candidate chunks."""

from __future__ import annotations

import logging
import os
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ProcessPoolExecutor
from itertools import repeat

from .chunks import is_slime_chunk
from .models import CandidateResult, ChunkPos, SearchReport
from .offsets import DESPAWN_RADIUS, despawn_offsets
from .spiral import generate_spiral
from .telemetry.progress import NullProgress, SearchProgress


def count_slime_chunks(seed: int, center: ChunkPos, offsets: Iterable[ChunkPos]) -> int:
    """Count offsets that land on a slime chunk when translated by ``center``."""
    cx, cz = center
    return sum(1 for ox, oz in offsets if is_slime_chunk(seed, cx + ox, cz + oz))


def slime_chunks_around(seed: int, center: ChunkPos, offsets: Iterable[ChunkPos]) -> list[ChunkPos]:
    cx, cz = center
    hits = [ChunkPos(cx + ox, cz + oz) for ox, oz in offsets if is_slime_chunk(seed, cx + ox, cz + oz)]
    return sorted(hits)


def rank_candidates(results: Iterable[CandidateResult]) -> list[CandidateResult]:
    """Order by count, highest first. Equal counts keep their input order."""
    return sorted(results, key=lambda result: result.count, reverse=True)


def _count_batch(seed: int, centers: Sequence[ChunkPos], offsets: Sequence[ChunkPos]) -> list[int]:
    # Module level so ProcessPoolExecutor can pickle it. Neighbouring centres
    # share most of their sphere, so each chunk is classified once per batch.
    classified: dict[tuple[int, int], bool] = {}
    counts: list[int] = []
    for cx, cz in centers:
        count = 0
        for ox, oz in offsets:
            key = (cx + ox, cz + oz)
            hit = classified.get(key)
            if hit is None:
                hit = classified[key] = is_slime_chunk(seed, key[0], key[1])
            if hit:
                count += 1
        counts.append(count)
    return counts


class SlimeChunkSearch:
    """Scores candidate chunks for one world seed, optionally across worker processes."""

    def __init__(
        self,
        seed: int,
        *,
        radius: int = DESPAWN_RADIUS,
        workers: int | None = None,
        batch_size: int = 2048,
        logger: logging.Logger | None = None,
    ) -> None:
        if workers is not None and workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        if batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {batch_size}")

        self.seed = seed
        self.radius = radius
        self.workers = workers or os.cpu_count() or 1
        self.batch_size = batch_size
        self.offsets = despawn_offsets(radius)
        self._ordered_offsets = tuple(sorted(self.offsets))
        self._logger = logger or logging.getLogger("slime_finder.search")

    def evaluate(
        self,
        centers: Iterable[ChunkPos],
        progress: SearchProgress | None = None,
    ) -> list[CandidateResult]:
        """Score every centre. Results come back in the same order as ``centers``."""
        progress = progress or NullProgress()
        centers = list(centers)
        batches = [centers[i : i + self.batch_size] for i in range(0, len(centers), self.batch_size)]
        counts: list[int] = []

        self._logger.info(
            "evaluate_started",
            extra={"centers": len(centers), "batches": len(batches), "workers": self.workers},
        )
        progress.start(len(centers))
        try:
            if self.workers == 1 or len(batches) <= 1:
                for batch in batches:
                    counts.extend(_count_batch(self.seed, batch, self._ordered_offsets))
                    progress.advance(len(batch))
            else:
                with ProcessPoolExecutor(max_workers=self.workers) as executor:
                    batch_counts = executor.map(
                        _count_batch,
                        repeat(self.seed),
                        batches,
                        repeat(self._ordered_offsets),
                    )
                    for batch, result in zip(batches, batch_counts):
                        counts.extend(result)
                        progress.advance(len(batch))
        finally:
            progress.finish()

        return [CandidateResult(center=center, count=count) for center, count in zip(centers, counts)]

    def run(self, search_range: int, progress: SearchProgress | None = None) -> SearchReport:
        """Scan the square of half-width ``search_range`` around the origin."""
        if search_range < 1:
            raise ValueError(f"search_range must be at least 1, got {search_range}")

        started = time.perf_counter()
        spiral = generate_spiral(search_range, search_range)
        setup_seconds = time.perf_counter() - started
        self._logger.info(
            "search_started",
            extra={"seed": self.seed, "search_range": search_range, "candidates": len(spiral)},
        )

        started = time.perf_counter()
        ranked = rank_candidates(self.evaluate(spiral, progress=progress))
        count_seconds = time.perf_counter() - started

        best = ranked[0]
        slime_chunks = slime_chunks_around(self.seed, best.center, self.offsets)
        self._logger.info(
            "search_finished",
            extra={"best_x": best.center.x, "best_z": best.center.z, "count": best.count, "seconds": count_seconds},
        )
        return SearchReport(
            seed=self.seed,
            search_range=search_range,
            radius=self.radius,
            offset_count=len(self.offsets),
            ranked=ranked,
            best=best,
            slime_chunks=slime_chunks,
            setup_seconds=setup_seconds,
            count_seconds=count_seconds,
            details={"workers": self.workers, "batch_size": self.batch_size},
        )
