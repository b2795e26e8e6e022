from __future__ import annotations

import pytest

from gridpack.core.models import GridDimensions, LayoutItem
from gridpack.runtime.config import _CONFIG, load_config


def make_grid(columns: int = 3, rows: int = 3, box_size: float = 10.0) -> GridDimensions:
    return GridDimensions(box_size=box_size, columns=columns, rows=rows, min_columns=columns, min_rows=rows)


@pytest.fixture(autouse=True)
def isolated_config():
    token = _CONFIG.set(load_config(env={}))
    try:
        yield
    finally:
        _CONFIG.reset(token)


@pytest.fixture
def grid_3x3() -> GridDimensions:
    return make_grid(3, 3)


@pytest.fixture
def corner_block() -> list[LayoutItem[str]]:
    return [LayoutItem(0, 0, 2, 2, payload="block")]
