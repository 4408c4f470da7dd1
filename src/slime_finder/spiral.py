"""Outward square spiral over candidate chunk centres."""

from __future__ import annotations

from .models import ChunkPos


def generate_spiral(x_max: int, z_max: int) -> list[ChunkPos]:
    """Return every chunk in ``(-x_max/2, x_max/2] x (-z_max/2, z_max/2]`` once, origin first.

    Halves use truncating division, so odd widths lose one column on the
    negative side.
    """
    if x_max < 0 or z_max < 0:
        raise ValueError(f"spiral widths must be non-negative, got ({x_max}, {z_max})")

    half_x = x_max // 2
    half_z = z_max // 2
    x, z = 0, 0
    dx, dz = 0, -1
    points: list[ChunkPos] = []

    for _ in range(max(x_max, z_max) ** 2):
        if -half_x < x <= half_x and -half_z < z <= half_z:
            points.append(ChunkPos(x, z))

        if x == z or (x < 0 and x == -z) or (x > 0 and x == 1 - z):
            dx, dz = -dz, dx

        x += dx
        z += dz

    return points
