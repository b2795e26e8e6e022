"""Nearest-cell ranking for pointer snapping."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gridpack.core.models import GridDimensions, PixelPosition, Position


@dataclass(frozen=True, slots=True)
class SnapPoint:
    """Cell origin considered as a drop target."""

    position: Position
    pixel_position: PixelPosition
    distance: float


def rank_snap_points(grid: GridDimensions, pixel: PixelPosition) -> list[SnapPoint]:
    """Rank every cell origin by Euclidean distance to ``pixel``, nearest first.

    Ties keep row-major order. The full ranking is returned; callers decide
    how many candidates to try.
    """
    rows, columns = np.indices((grid.rows, grid.columns))
    rows = rows.ravel()
    columns = columns.ravel()
    origin_x = columns * grid.box_size
    origin_y = rows * grid.box_size
    distances = np.hypot(origin_x - pixel.x, origin_y - pixel.y)
    order = np.argsort(distances, kind="stable")
    return [
        SnapPoint(
            position=Position(int(columns[index]), int(rows[index])),
            pixel_position=PixelPosition(float(origin_x[index]), float(origin_y[index])),
            distance=float(distances[index]),
        )
        for index in order
    ]
