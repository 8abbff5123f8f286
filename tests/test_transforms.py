from __future__ import annotations

from datetime import UTC, datetime

from fantasy_map.mapping.transforms import from_epoch_ms, lookup, lookup_each, to_int

POSITIONS = {0: "QB", 2: "RB"}


def test_lookup_uses_injected_table() -> None:
    parse = lookup(POSITIONS)
    assert parse(2, {}, {}, {}) == "RB"
    assert parse(99, {}, {}, {}) is None
    assert parse(None, {}, {}, {}) is None

    assert lookup({2: "Running Back"})(2, {}, {}, {}) == "Running Back"


def test_lookup_each_maps_lists_only() -> None:
    parse = lookup_each(POSITIONS)
    assert parse([0, 2, 7], {}, {}, {}) == ["QB", "RB", None]
    assert parse(None, {}, {}, {}) is None


def test_to_int() -> None:
    assert to_int("17") == 17
    assert to_int("") is None
    assert to_int("n/a") is None
    assert to_int(None) is None


def test_from_epoch_ms() -> None:
    assert from_epoch_ms(1693526400000) == datetime(2023, 9, 1, tzinfo=UTC)
    assert from_epoch_ms(0) is None
    assert from_epoch_ms("1693526400000") is None
    assert from_epoch_ms(True) is None
