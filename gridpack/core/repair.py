"""Relocation of items that overflow the grid extent."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridpack.core.models import GridDimensions, Layout, LayoutItem, OverflowPolicy
from gridpack.core.placement import find_slot
from gridpack.core.results import Found
from gridpack.runtime.config import get_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RepairOutcome:
    """Repaired layout plus the items each branch touched."""

    layout: list[LayoutItem]
    relocated: list[LayoutItem]
    dropped: list[LayoutItem]
    kept: list[LayoutItem]

    @property
    def changed(self) -> bool:
        return bool(self.relocated or self.dropped or self.kept)


def overflows(grid: GridDimensions, item: LayoutItem) -> bool:
    """Return whether the item extends beyond the grid extent."""
    return item.x + item.width > grid.columns or item.y + item.height > grid.rows


def repair_overflow_report(
    grid: GridDimensions,
    layout: Layout,
    *,
    policy: OverflowPolicy | None = None,
) -> RepairOutcome:
    """Relocate overflowing items in layout order and report what moved.

    Each overflowing item is taken out of a working copy and placed with
    ``find_slot`` against that copy, so earlier repairs constrain later ones.
    Relocated items are appended at the end of the sequence.
    """
    if policy is None:
        policy = get_config().overflow_policy

    working = list(layout)
    relocated: list[LayoutItem] = []
    dropped: list[LayoutItem] = []
    kept: list[LayoutItem] = []

    for item in layout:
        if not overflows(grid, item):
            continue
        index = next(i for i, candidate in enumerate(working) if candidate is item)
        del working[index]
        result = find_slot(grid, working, item.size)
        if isinstance(result, Found):
            moved = item.moved_to(result.position)
            working.append(moved)
            relocated.append(moved)
        elif policy is OverflowPolicy.KEEP:
            working.append(item)
            kept.append(item)
        else:
            dropped.append(item)

    if relocated or dropped or kept:
        logger.debug(
            "overflow_repaired relocated=%d dropped=%d kept=%d policy=%s",
            len(relocated),
            len(dropped),
            len(kept),
            policy.value,
        )
    return RepairOutcome(layout=working, relocated=relocated, dropped=dropped, kept=kept)


def repair_overflow[T](
    grid: GridDimensions,
    layout: Layout[T],
    *,
    policy: OverflowPolicy | None = None,
) -> list[LayoutItem[T]]:
    """Return a new layout with overflowing items relocated or handled per ``policy``."""
    return repair_overflow_report(grid, layout, policy=policy).layout
