"""Slime chunk classification."""

from __future__ import annotations

from .arith import to_int32, to_int64
from .javarandom import JavaRandom
from .models import ChunkPos

CHUNK_SIZE = 16

SLIME_CHUNK_NUMBER_A = 0x4C1906
SLIME_CHUNK_NUMBER_B = 0x5AC0DB
SLIME_CHUNK_NUMBER_C = 0x4307A7
SLIME_CHUNK_NUMBER_D = 0x5F24F
SLIME_CHUNK_NUMBER_E = 0x3AD8025F


def slime_chunk_seed(world_seed: int, x: int, z: int) -> int:
    """Derive the per-chunk generator seed exactly as the game does (with int/long overflow)."""
    x = to_int32(x)
    z = to_int32(z)
    seed = to_int64(
        world_seed
        + to_int32(x * x * SLIME_CHUNK_NUMBER_A)
        + to_int32(x * SLIME_CHUNK_NUMBER_B)
        + to_int64(to_int32(z * z) * SLIME_CHUNK_NUMBER_C)
        + to_int32(z * SLIME_CHUNK_NUMBER_D)
    )
    return seed ^ SLIME_CHUNK_NUMBER_E


def is_slime_chunk(world_seed: int, x: int, z: int) -> bool:
    return JavaRandom(slime_chunk_seed(world_seed, x, z)).next_int(10) == 0


def chunk_to_block(pos: ChunkPos) -> tuple[int, int]:
    """Block coordinates of the north-west corner of ``pos``."""
    return pos.x * CHUNK_SIZE, pos.z * CHUNK_SIZE
