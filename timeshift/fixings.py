"""
Fixing table: market observations that are already known.

A table is anchored at `fixings_known_until`: every fixing strictly before that
date is (or must be) in the table, every fixing on or after it is still in the
future. Instruments read it during restatement.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from datetime import date

from timeshift.errors import ConstructionError, RestatementError


class FixingTable:
    """Immutable id -> {date: value} lookup. Build with `FixingTable.from_mapping`."""

    def __init__(self, fixings_known_until: date, fixings: dict[str, dict[date, float]]) -> None:
        self._known_until = fixings_known_until
        self._fixings = fixings

    @classmethod
    def from_mapping(
        cls,
        fixings_known_until: date,
        mapping: Mapping[str, Iterable[tuple[date, float]]],
    ) -> FixingTable:
        """
        Build a table from id -> sequence of (date, value).

        Raises ConstructionError on an empty id, a duplicate date for one id, a date
        on or after `fixings_known_until`, or a non-finite value.
        """
        fixings: dict[str, dict[date, float]] = {}
        for underlying_id, series in mapping.items():
            if not underlying_id:
                raise ConstructionError("fixing id must not be empty")
            by_date: dict[date, float] = {}
            for d, value in series:
                if d >= fixings_known_until:
                    raise ConstructionError(
                        f"fixing for {underlying_id} on {d} is not before "
                        f"fixings_known_until {fixings_known_until}"
                    )
                if d in by_date:
                    raise ConstructionError(f"duplicate fixing for {underlying_id} on {d}")
                if not math.isfinite(value):
                    raise ConstructionError(f"fixing for {underlying_id} on {d} is not finite: {value}")
                by_date[d] = float(value)
            fixings[underlying_id] = by_date
        return cls(fixings_known_until, fixings)

    @property
    def fixings_known_until(self) -> date:
        return self._known_until

    def ids(self) -> list[str]:
        return list(self._fixings)

    def series(self, underlying_id: str) -> tuple[tuple[date, float], ...]:
        """Fixings for one id, in the order they were supplied."""
        return tuple(self._fixings.get(underlying_id, {}).items())

    def get_optional(self, underlying_id: str, d: date) -> float | None:
        """
        Fixing value, or None if `d` is not yet known (on or after fixings_known_until).
        Raises RestatementError if `d` should be known but was not supplied.
        """
        if d >= self._known_until:
            return None
        try:
            return self._fixings[underlying_id][d]
        except KeyError:
            raise RestatementError(f"fixing for {underlying_id} on {d} not supplied") from None

    def get(self, underlying_id: str, d: date) -> float:
        value = self.get_optional(underlying_id, d)
        if value is None:
            raise RestatementError(
                f"fixing for {underlying_id} on {d} is in the future "
                f"(known until {self._known_until})"
            )
        return value

    def __len__(self) -> int:
        return sum(len(series) for series in self._fixings.values())

    def __repr__(self) -> str:
        return f"FixingTable(known_until={self._known_until}, fixings={self._fixings!r})"
