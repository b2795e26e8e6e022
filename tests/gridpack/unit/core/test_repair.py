from gridpack.core.models import LayoutItem, OverflowPolicy
from gridpack.core.repair import overflows, repair_overflow, repair_overflow_report
from gridpack.runtime.config import load_config, set_config
from tests.gridpack.conftest import make_grid


def test_repair_without_overflow_returns_equal_layout(grid_3x3) -> None:
    layout = [LayoutItem(0, 0, 2, 2, payload="a"), LayoutItem(2, 0, 1, 3, payload="b")]
    repaired = repair_overflow(grid_3x3, layout)
    assert repaired == layout
    assert repaired is not layout


def test_repair_drops_item_with_no_free_slot() -> None:
    grid = make_grid(2, 2)
    layout = [LayoutItem(0, 0, 2, 2, payload="a"), LayoutItem(1, 1, 2, 2, payload="b")]
    outcome = repair_overflow_report(grid, layout)
    assert outcome.layout == [layout[0]]
    assert outcome.dropped == [layout[1]]
    assert outcome.relocated == []
    assert outcome.changed


def test_repair_keep_policy_retains_unplaceable_item() -> None:
    grid = make_grid(2, 2)
    layout = [LayoutItem(0, 0, 2, 2, payload="a"), LayoutItem(1, 1, 2, 2, payload="b")]
    repaired = repair_overflow(grid, layout, policy=OverflowPolicy.KEEP)
    assert repaired == layout


def test_repair_relocates_to_first_free_slot_and_appends() -> None:
    grid = make_grid(3, 3)
    layout = [
        LayoutItem(2, 1, 2, 1, payload="wide"),
        LayoutItem(0, 0, 1, 1, payload="small"),
    ]
    repaired = repair_overflow(grid, layout)
    assert repaired == [
        LayoutItem(0, 0, 1, 1, payload="small"),
        LayoutItem(1, 0, 2, 1, payload="wide"),
    ]
    assert layout[0] == LayoutItem(2, 1, 2, 1, payload="wide")


def test_repair_is_sequential_across_items() -> None:
    grid = make_grid(2, 2)
    layout = [
        LayoutItem(0, 0, 2, 1, payload="top"),
        LayoutItem(1, 1, 2, 1, payload="first"),
        LayoutItem(0, 2, 1, 1, payload="second"),
    ]
    outcome = repair_overflow_report(grid, layout)
    assert outcome.relocated == [LayoutItem(0, 1, 2, 1, payload="first")]
    assert outcome.dropped == [LayoutItem(0, 2, 1, 1, payload="second")]
    assert outcome.layout == [layout[0], LayoutItem(0, 1, 2, 1, payload="first")]


def test_repair_uses_configured_policy() -> None:
    set_config(load_config(env={"GRIDPACK_OVERFLOW_POLICY": "keep"}))
    oversized = LayoutItem(0, 0, 2, 2)
    outcome = repair_overflow_report(make_grid(1, 1), [oversized])
    assert outcome.kept == [oversized]
    assert outcome.layout == [oversized]


def test_overflows_checks_both_axes() -> None:
    grid = make_grid(3, 2)
    assert not overflows(grid, LayoutItem(1, 0, 2, 2))
    assert overflows(grid, LayoutItem(2, 0, 2, 1))
    assert overflows(grid, LayoutItem(0, 1, 1, 2))


def test_repair_keep_policy_moves_kept_item_to_end() -> None:
    layout = [LayoutItem(1, 1, 2, 2, payload="big"), LayoutItem(0, 0, 1, 1, payload="small")]
    repaired = repair_overflow(make_grid(2, 2), layout, policy=OverflowPolicy.KEEP)
    assert repaired == [layout[1], layout[0]]
