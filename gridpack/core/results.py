"""Tagged result values for occupancy builds and slot searches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridpack.core.errors import OverlapError
from gridpack.core.models import Position

if TYPE_CHECKING:
    from gridpack.core.occupancy import OccupancyGrid


@dataclass(frozen=True, slots=True)
class Found:
    """Slot search hit."""

    position: Position

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class NotFound:
    """Slot search miss; a normal outcome, not an error."""

    def __bool__(self) -> bool:
        return False


type SlotSearch = Found | NotFound


@dataclass(frozen=True, slots=True)
class OccupancyBuilt:
    """Occupancy build that produced a valid grid."""

    grid: OccupancyGrid

    def unwrap(self) -> OccupancyGrid:
        return self.grid


@dataclass(frozen=True, slots=True)
class OccupancyFailed:
    """Occupancy build rejected because layout items overlap."""

    error: OverlapError

    def unwrap(self) -> OccupancyGrid:
        raise self.error


type OccupancyBuild = OccupancyBuilt | OccupancyFailed
