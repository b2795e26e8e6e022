"""Grid-packing engine: occupancy, placement, snapping and overflow repair."""

from gridpack.core.errors import OverlapError
from gridpack.core.geometry import cells_of, to_cell, to_pixel
from gridpack.core.models import (
    GridDimensions,
    Layout,
    LayoutItem,
    LayoutItemSize,
    OverflowPolicy,
    PixelPosition,
    Position,
    dimensions_for_layout,
)
from gridpack.core.occupancy import OccupancyGrid, build_occupancy, layout_to_occupancy, would_overlap
from gridpack.core.placement import can_place_item, find_slot, fits
from gridpack.core.repair import RepairOutcome, overflows, repair_overflow, repair_overflow_report
from gridpack.core.results import (
    Found,
    NotFound,
    OccupancyBuild,
    OccupancyBuilt,
    OccupancyFailed,
    SlotSearch,
)
from gridpack.core.snap import SnapPoint, rank_snap_points

__all__ = [
    "Found",
    "GridDimensions",
    "Layout",
    "LayoutItem",
    "LayoutItemSize",
    "NotFound",
    "OccupancyBuild",
    "OccupancyBuilt",
    "OccupancyFailed",
    "OccupancyGrid",
    "OverflowPolicy",
    "OverlapError",
    "PixelPosition",
    "Position",
    "RepairOutcome",
    "SlotSearch",
    "SnapPoint",
    "build_occupancy",
    "can_place_item",
    "cells_of",
    "dimensions_for_layout",
    "find_slot",
    "fits",
    "layout_to_occupancy",
    "overflows",
    "rank_snap_points",
    "repair_overflow",
    "repair_overflow_report",
    "to_cell",
    "to_pixel",
    "would_overlap",
]
