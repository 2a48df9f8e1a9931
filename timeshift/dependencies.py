"""Dependency model: which underlyings and fixing dates a portfolio is sensitive to."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date

from timeshift.errors import DependencyError
from timeshift.products.underlying import Underlying


class DependencyCollector:
    """
    Filled in by pricers (see BasePricer.dependencies), then read by the time bump.

    Underlyings are keyed by id in the order they were first seen. Fixing dates
    are kept per id, de-duplicated, in discovery order.
    """

    def __init__(self) -> None:
        self._underlyings: dict[str, Underlying] = {}
        self._fixings: dict[str, dict[date, None]] = {}

    def spot(self, underlying: Underlying) -> None:
        """Record a dependency on the spot level of `underlying`."""
        known = self._underlyings.get(underlying.id)
        if known is None:
            self._underlyings[underlying.id] = underlying
        elif known != underlying:
            raise DependencyError(
                f"conflicting definitions for underlying {underlying.id!r}: {known} vs {underlying}"
            )

    def fixing(self, underlying_id: str, d: date) -> None:
        """Record a dependency on the fixing of `underlying_id` on date `d`.

        The underlying must already be registered through `spot`.
        """
        if underlying_id not in self._underlyings:
            raise DependencyError(f"fixing on {d} for unregistered underlying {underlying_id!r}")
        self._fixings.setdefault(underlying_id, {})[d] = None

    def instruments_iter(self) -> Iterator[tuple[str, Underlying]]:
        return iter(self._underlyings.items())

    def fixings(self, underlying_id: str) -> list[date]:
        return list(self._fixings.get(underlying_id, ()))

    def has_instrument(self, underlying_id: str) -> bool:
        return underlying_id in self._underlyings
