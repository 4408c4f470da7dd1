from __future__ import annotations

import pytest

from slime_finder.offsets import DESPAWN_RADIUS, REFERENCE_CENTERS, despawn_offsets


def _brute_force(radius: int) -> set[tuple[int, int]]:
    found = set()
    for dx in range(-radius - 2, radius + 2):
        for dz in range(-radius - 2, radius + 2):
            for cx, cz in REFERENCE_CENTERS:
                if (dx - cx) ** 2 + (dz - cz) ** 2 < radius * radius:
                    found.add((dx, dz))
    return found


@pytest.mark.parametrize("radius", [1, 2, 3, 7, 8])
def test_offsets_match_brute_force(radius: int) -> None:
    assert set(despawn_offsets(radius)) == _brute_force(radius)


def test_radius_one_is_the_four_reference_centres() -> None:
    assert set(despawn_offsets(1)) == {(0, 0), (0, -1), (-1, 0), (-1, -1)}


def test_offsets_are_symmetric_around_the_chunk_corner() -> None:
    offsets = set(despawn_offsets(DESPAWN_RADIUS))

    # reference centres map onto each other under p -> (-1, -1) - p ...
    assert {(-1 - x, -1 - z) for x, z in REFERENCE_CENTERS} == set(REFERENCE_CENTERS)
    assert {(-1 - x, -1 - z) for x, z in offsets} == offsets
    # ... but not under plain negation
    assert {(-x, -z) for x, z in REFERENCE_CENTERS} != set(REFERENCE_CENTERS)
    assert {(-x, -z) for x, z in offsets} != offsets
    assert (-7, 0) in offsets
    assert (7, 0) not in offsets


def test_offsets_have_no_duplicates_and_include_origin() -> None:
    offsets = despawn_offsets()

    assert isinstance(offsets, frozenset)
    assert (0, 0) in offsets
    assert len(offsets) == len(_brute_force(DESPAWN_RADIUS))


def test_radius_must_be_positive() -> None:
    with pytest.raises(ValueError, match="radius"):
        despawn_offsets(0)
