"""Pointer drop resolution over snap candidates."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridpack.core.models import (
    GridDimensions,
    Layout,
    LayoutItem,
    LayoutItemSize,
    PixelPosition,
    Position,
)
from gridpack.core.occupancy import layout_to_occupancy
from gridpack.core.placement import fits
from gridpack.core.snap import rank_snap_points
from gridpack.runtime.config import get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DropResolution:
    """Outcome of resolving a pointer release to a drop target."""

    handled: bool
    position: Position | None = None
    pixel_position: PixelPosition | None = None
    status: str | None = None


def resolve_drop(
    grid: GridDimensions,
    layout: Layout,
    size: LayoutItemSize,
    pixel: PixelPosition,
    *,
    max_candidates: int | None = None,
) -> DropResolution:
    """Pick the nearest snap point where an item of ``size`` can be placed.

    ``max_candidates`` of ``None`` uses the configured limit; ``0`` tries every cell.
    """
    if max_candidates is None:
        max_candidates = get_config().snap_candidate_limit
    occupancy = layout_to_occupancy(grid, layout)
    candidates = rank_snap_points(grid, pixel)
    if max_candidates > 0:
        candidates = candidates[:max_candidates]
    for tried, candidate in enumerate(candidates, start=1):
        if fits(grid, occupancy, size, candidate.position):
            logger.debug(
                "drop_resolved x=%d y=%d tried=%d",
                candidate.position.x,
                candidate.position.y,
                tried,
            )
            return DropResolution(
                handled=True,
                position=candidate.position,
                pixel_position=candidate.pixel_position,
                status=f"Placed at ({candidate.position.x}, {candidate.position.y}).",
            )
    return DropResolution(handled=False, status="Invalid drop position.")


def move_item[T](
    grid: GridDimensions,
    layout: Layout[T],
    index: int,
    pixel: PixelPosition,
    *,
    max_candidates: int | None = None,
) -> tuple[list[LayoutItem[T]], DropResolution]:
    """Drop an existing item near ``pixel``; the layout is unchanged on failure."""
    index = range(len(layout))[index]
    item = layout[index]
    others = [candidate for i, candidate in enumerate(layout) if i != index]
    resolution = resolve_drop(grid, others, item.size, pixel, max_candidates=max_candidates)
    if not resolution.handled or resolution.position is None:
        return list(layout), resolution
    updated = list(layout)
    updated[index] = item.moved_to(resolution.position)
    return updated, resolution
