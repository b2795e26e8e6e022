"""Occupancy grid construction and collision checks."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from gridpack.core.errors import OverlapError
from gridpack.core.geometry import cells_of
from gridpack.core.models import GridDimensions, Layout, LayoutItem, Position
from gridpack.core.results import OccupancyBuild, OccupancyBuilt, OccupancyFailed


@dataclass(frozen=True, slots=True)
class OccupancyGrid:
    """Numpy-backed ``rows x columns`` occupancy matrix."""

    cells: np.ndarray

    @classmethod
    def empty(cls, rows: int, columns: int) -> OccupancyGrid:
        return cls(cells=np.zeros((rows, columns), dtype=np.bool_))

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, cell: Position) -> bool:
        """Return whether the cell lies inside the matrix."""
        return 0 <= cell.y < self.rows and 0 <= cell.x < self.columns

    def is_occupied(self, cell: Position) -> bool:
        """Return whether an in-bounds cell is covered by some item."""
        return bool(self.cells[cell.y, cell.x])

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))


def build_occupancy(
    grid: GridDimensions,
    layout: Layout,
    *,
    allow_overlap: bool = False,
) -> OccupancyBuild:
    """Mark every in-bounds cell covered by the layout."""
    occupancy = OccupancyGrid.empty(grid.rows, grid.columns)
    for index, item in enumerate(layout):
        for cell in cells_of(item):
            if not occupancy.in_bounds(cell):
                continue
            if occupancy.cells[cell.y, cell.x] and not allow_overlap:
                return OccupancyFailed(OverlapError(cell, index))
            occupancy.cells[cell.y, cell.x] = True
    return OccupancyBuilt(occupancy)


def layout_to_occupancy(
    grid: GridDimensions,
    layout: Layout,
    *,
    allow_overlap: bool = False,
) -> OccupancyGrid:
    """Build occupancy, raising ``OverlapError`` for an inconsistent layout."""
    return build_occupancy(grid, layout, allow_overlap=allow_overlap).unwrap()


def would_overlap(occupancy: OccupancyGrid, item: LayoutItem) -> bool:
    """Return whether any in-bounds cell of the item is already occupied."""
    for cell in cells_of(item):
        # Bounds belong to placement checks, not collision.
        if not occupancy.in_bounds(cell):
            continue
        if occupancy.is_occupied(cell):
            return True
    return False
