"""Base pricer abstract class for instrument pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from timeshift.interfaces import Instrument
from timeshift.market import Market

if TYPE_CHECKING:
    from timeshift.fixings import FixingTable
    from timeshift.dependencies import DependencyCollector


class BasePricer(ABC):
    """Abstract base class for instrument pricers.

    Subclasses implement can_price(), npv() and dependencies() for specific
    instrument types. Instruments that observe fixings also override fix().
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the instrument type."""
        ...

    @abstractmethod
    def npv(self, instrument: Instrument, market: Market) -> float:
        """Compute present value."""
        ...

    @abstractmethod
    def dependencies(self, instrument: Instrument, collector: DependencyCollector) -> None:
        """Record spot and fixing dependencies of the instrument."""
        ...

    def fix(
        self, instrument: Instrument, fixing_table: FixingTable
    ) -> list[tuple[float, Instrument]] | None:
        """
        Restate the instrument given newly known fixings.

        Returns replacement (weight, instrument) legs, or None if the instrument
        is unaffected. Instruments without fixings are never affected.
        """
        return None
