"""Tests for FixingTable construction and lookup."""

import math
from datetime import date

import pytest

from timeshift.errors import ConstructionError, PricingError, RestatementError
from timeshift.fixings import FixingTable

ANCHOR = date(2024, 1, 15)


def test_from_mapping_keeps_supplied_order() -> None:
    """series() returns fixings in the order they were supplied."""
    table = FixingTable.from_mapping(
        ANCHOR,
        {"EUR": [(date(2024, 1, 13), 1.1), (date(2024, 1, 11), 1.0)], "GBP": [(date(2024, 1, 12), 1.3)]},
    )
    assert table.ids() == ["EUR", "GBP"]
    assert table.series("EUR") == ((date(2024, 1, 13), 1.1), (date(2024, 1, 11), 1.0))
    assert table.series("JPY") == ()
    assert len(table) == 3


def test_fixing_on_anchor_is_malformed() -> None:
    """A fixing on or after fixings_known_until cannot be known yet."""
    with pytest.raises(ConstructionError, match="not before"):
        FixingTable.from_mapping(ANCHOR, {"EUR": [(ANCHOR, 1.1)]})


def test_non_finite_value_rejected() -> None:
    """NaN fixings are a construction error."""
    with pytest.raises(ConstructionError, match="not finite"):
        FixingTable.from_mapping(ANCHOR, {"EUR": [(date(2024, 1, 12), math.nan)]})


def test_empty_id_rejected() -> None:
    """Every fixing series needs an id."""
    with pytest.raises(ConstructionError, match="id"):
        FixingTable.from_mapping(ANCHOR, {"": [(date(2024, 1, 12), 1.0)]})


def test_get_optional() -> None:
    """Known fixing => value; future date => None; missing past fixing => RestatementError."""
    table = FixingTable.from_mapping(ANCHOR, {"EUR": [(date(2024, 1, 12), 1.1)]})
    assert table.get_optional("EUR", date(2024, 1, 12)) == 1.1
    assert table.get_optional("EUR", ANCHOR) is None
    assert table.get_optional("GBP", date(2024, 2, 1)) is None
    with pytest.raises(RestatementError, match="not supplied"):
        table.get_optional("EUR", date(2024, 1, 13))


def test_get_future_fixing_raises() -> None:
    """get() insists on a known value."""
    table = FixingTable.from_mapping(ANCHOR, {"EUR": [(date(2024, 1, 12), 1.1)]})
    with pytest.raises(RestatementError, match="future"):
        table.get("EUR", ANCHOR)


def test_errors_are_value_errors() -> None:
    """Library errors stay catchable as ValueError."""
    assert issubclass(ConstructionError, PricingError)
    with pytest.raises(ValueError):
        FixingTable.from_mapping(ANCHOR, {"EUR": [(ANCHOR, 1.1)]})
