from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, NamedTuple


class ChunkPos(NamedTuple):
    x: int
    z: int


@dataclass(slots=True, frozen=True)
class CandidateResult:
    """Number of slime chunks within the despawn sphere around ``center``."""

    center: ChunkPos
    count: int


@dataclass(slots=True)
class SearchReport:
    seed: int
    search_range: int
    radius: int
    offset_count: int
    ranked: list[CandidateResult]
    best: CandidateResult
    slime_chunks: list[ChunkPos]
    setup_seconds: float = 0.0
    count_seconds: float = 0.0
    details: dict[str, Any] = field(default_factory=dict)

    def top(self, limit: int = 10) -> list[CandidateResult]:
        return self.ranked[:limit]

    def to_dict(self, limit: int = 10) -> dict[str, Any]:
        return {
            "seed": self.seed,
            "search_range": self.search_range,
            "radius": self.radius,
            "offset_count": self.offset_count,
            "candidates_evaluated": len(self.ranked),
            "top": [{"x": r.center.x, "z": r.center.z, "count": r.count} for r in self.top(limit)],
            "best": {"x": self.best.center.x, "z": self.best.center.z, "count": self.best.count},
            "slime_chunks": [[pos.x, pos.z] for pos in self.slime_chunks],
            "setup_seconds": self.setup_seconds,
            "count_seconds": self.count_seconds,
            **self.details,
        }
