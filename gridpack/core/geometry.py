"""Cell coverage and pixel/cell conversion helpers."""

from __future__ import annotations

import math

from gridpack.core.models import GridDimensions, LayoutItem, PixelPosition, Position


def cells_of(item: LayoutItem) -> list[Position]:
    """Compute the cells covered by an item's rectangle."""
    result: list[Position] = []
    for i in range(item.x, item.x + item.width):
        for j in range(item.y, item.y + item.height):
            result.append(Position(i, j))
    return result


def to_pixel(grid: GridDimensions, position: Position) -> PixelPosition:
    """Return the pixel origin of a cell."""
    return PixelPosition(position.x * grid.box_size, position.y * grid.box_size)


def to_cell(grid: GridDimensions, pixel: PixelPosition) -> Position | None:
    """Convert a pixel point to the cell containing it."""
    x = math.floor(pixel.x / grid.box_size)
    y = math.floor(pixel.y / grid.box_size)
    if not (0 <= x < grid.columns and 0 <= y < grid.rows):
        return None
    return Position(x, y)
