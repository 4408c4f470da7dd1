"""Locate the chunk with the most slime chunks inside its despawn sphere."""

from .chunks import is_slime_chunk
from .javarandom import JavaRandom
from .models import CandidateResult, ChunkPos, SearchReport
from .offsets import DESPAWN_RADIUS, despawn_offsets
from .search import SlimeChunkSearch, count_slime_chunks, rank_candidates, slime_chunks_around
from .seeds import java_string_hash, resolve_seed
from .spiral import generate_spiral

__all__ = [
    "CandidateResult",
    "ChunkPos",
    "DESPAWN_RADIUS",
    "JavaRandom",
    "SearchReport",
    "SlimeChunkSearch",
    "count_slime_chunks",
    "despawn_offsets",
    "generate_spiral",
    "is_slime_chunk",
    "java_string_hash",
    "rank_candidates",
    "resolve_seed",
    "slime_chunks_around",
]
