"""Free-slot search and placement validation."""

from __future__ import annotations

import logging

from gridpack.core.models import GridDimensions, Layout, LayoutItem, LayoutItemSize, Position
from gridpack.core.occupancy import OccupancyGrid, layout_to_occupancy, would_overlap
from gridpack.core.results import Found, NotFound, SlotSearch

logger = logging.getLogger(__name__)


def _out_of_bounds(grid: GridDimensions, size: LayoutItemSize, position: Position) -> bool:
    return position.x + size.width > grid.columns or position.y + size.height > grid.rows


def fits(
    grid: GridDimensions,
    occupancy: OccupancyGrid,
    size: LayoutItemSize,
    position: Position,
) -> bool:
    """Return whether an item fits at a position of a prebuilt occupancy grid."""
    if position.x < 0 or position.y < 0 or _out_of_bounds(grid, size, position):
        return False
    candidate = LayoutItem(position.x, position.y, size.width, size.height)
    return not would_overlap(occupancy, candidate)


def can_place_item(
    grid: GridDimensions,
    layout: Layout,
    size: LayoutItemSize,
    position: Position,
) -> bool:
    """Return whether an item fits at a position without overflow or overlap."""
    return fits(grid, layout_to_occupancy(grid, layout), size, position)


def find_slot(grid: GridDimensions, layout: Layout, size: LayoutItemSize) -> SlotSearch:
    """Find the first row-major origin where an item of ``size`` fits."""
    occupancy = layout_to_occupancy(grid, layout)

    for row in range(occupancy.rows):
        for column in range(occupancy.columns):
            origin = Position(column, row)
            if occupancy.is_occupied(origin):
                continue
            if _out_of_bounds(grid, size, origin):
                continue
            candidate = LayoutItem(column, row, size.width, size.height)
            if would_overlap(occupancy, candidate):
                continue
            logger.debug(
                "slot_found width=%d height=%d x=%d y=%d",
                size.width,
                size.height,
                column,
                row,
            )
            return Found(origin)

    logger.debug(
        "slot_not_found width=%d height=%d columns=%d rows=%d",
        size.width,
        size.height,
        grid.columns,
        grid.rows,
    )
    return NotFound()
