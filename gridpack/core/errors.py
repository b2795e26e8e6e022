"""Grid engine error types."""

from __future__ import annotations

from gridpack.core.models import Position


class OverlapError(ValueError):
    """Two layout items claim the same cell."""

    def __init__(self, cell: Position, item_index: int) -> None:
        super().__init__(
            f"Layout items overlap at ({cell.x}, {cell.y}); item {item_index} claims an occupied cell."
        )
        self.cell = cell
        self.item_index = item_index
