"""Core grid and layout value types."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import StrEnum


class OverflowPolicy(StrEnum):
    """What overflow repair does with an item that has no free slot."""

    DROP = "DROP"
    KEEP = "KEEP"


@dataclass(frozen=True, slots=True)
class GridDimensions:
    """Effective and minimum grid extent in cells, plus cell size in pixels."""

    box_size: float
    columns: int
    rows: int
    min_columns: int = 0
    min_rows: int = 0

    def __post_init__(self) -> None:
        if self.box_size <= 0:
            raise ValueError(f"box_size must be positive, got {self.box_size!r}.")
        if min(self.columns, self.rows, self.min_columns, self.min_rows) < 0:
            raise ValueError("Grid extents must be non-negative.")
        if self.columns < self.min_columns or self.rows < self.min_rows:
            raise ValueError(
                f"Grid extent {self.columns}x{self.rows} is smaller than "
                f"minimum {self.min_columns}x{self.min_rows}."
            )


@dataclass(frozen=True, slots=True)
class Position:
    """Grid cell coordinate."""

    x: int
    y: int


@dataclass(frozen=True, slots=True)
class PixelPosition:
    """Pixel-space coordinate."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class LayoutItemSize:
    """Item extent in cells."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class LayoutItem[T]:
    """Placed item with caller-owned payload."""

    x: int
    y: int
    width: int
    height: int
    payload: T | None = None

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    @property
    def size(self) -> LayoutItemSize:
        return LayoutItemSize(self.width, self.height)

    def moved_to(self, position: Position) -> LayoutItem[T]:
        """Return a copy of the item at another origin."""
        return replace(self, x=position.x, y=position.y)


type Layout[T] = Sequence[LayoutItem[T]]


def dimensions_for_layout(
    box_size: float,
    min_columns: int,
    min_rows: int,
    layout: Layout,
) -> GridDimensions:
    """Grow the minimum extent until it contains every placed item."""
    columns = max([min_columns, *(item.x + item.width for item in layout)])
    rows = max([min_rows, *(item.y + item.height for item in layout)])
    return GridDimensions(
        box_size=box_size,
        columns=columns,
        rows=rows,
        min_columns=min_columns,
        min_rows=min_rows,
    )
