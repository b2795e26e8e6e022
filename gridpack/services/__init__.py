"""Pointer-interaction helpers built on the grid core."""

from gridpack.services.drop import DropResolution, move_item, resolve_drop

__all__ = ["DropResolution", "move_item", "resolve_drop"]
