"""Chunk offsets covered by the mob despawn sphere."""

from __future__ import annotations

from .models import ChunkPos

DESPAWN_RADIUS = 7

# The player can stand anywhere inside a chunk, so the sphere is measured from
# each corner that touches the centre chunk's origin.
REFERENCE_CENTERS = (ChunkPos(0, 0), ChunkPos(0, -1), ChunkPos(-1, 0), ChunkPos(-1, -1))


def despawn_offsets(radius: int = DESPAWN_RADIUS) -> frozenset[ChunkPos]:
    if radius < 1:
        raise ValueError(f"radius must be at least 1, got {radius}")

    limit = radius * radius
    offsets: set[ChunkPos] = set()
    for cx, cz in REFERENCE_CENTERS:
        for dx in range(cx - radius, cx + radius + 1):
            for dz in range(cz - radius, cz + radius + 1):
                if (dx - cx) ** 2 + (dz - cz) ** 2 < limit:
                    offsets.add(ChunkPos(dx, dz))
    return frozenset(offsets)
