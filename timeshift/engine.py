"""
Pricing engine: computes NPV, dependencies and restatements for instruments.

Design intent:
- Instruments/products are **data only** (no market access, no pricing methods).
- This engine uses a **registry of pricers** for dispatch, enabling:
  - Adding new instruments without modifying engine code
  - Swapping pricing models per instrument type
  - Keeping fixing-driven restatement next to the pricing of the same product
"""

from __future__ import annotations

from timeshift.dependencies import DependencyCollector
from timeshift.errors import DependencyError
from timeshift.fixings import FixingTable
from timeshift.interfaces import Instrument, Portfolio
from timeshift.market import Market
from timeshift.pricers import BasePricer


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are registered at initialization and dispatched based on
    can_price() checks. First matching pricer wins.
    """

    def __init__(self) -> None:
        self._pricers: list[BasePricer] = []

    def register(self, pricer: BasePricer) -> None:
        """Register a pricer for dispatch.

        Order matters: first matching pricer wins.
        """
        self._pricers.append(pricer)

    def _find_pricer(self, instrument: Instrument) -> BasePricer | None:
        for pricer in self._pricers:
            if pricer.can_price(instrument):
                return pricer
        return None

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Dispatch to appropriate pricer."""
        pricer = self._find_pricer(instrument)
        if pricer is None:
            raise ValueError(
                f"No pricer registered for {type(instrument).__name__}. "
                "Register a pricer with engine.register(pricer)."
            )
        return pricer.npv(instrument, market)

    def dependencies(self, portfolio: Portfolio) -> DependencyCollector:
        """Collect the spot and fixing dependencies of every instrument in the portfolio."""
        collector = DependencyCollector()
        for _, instrument in portfolio:
            pricer = self._find_pricer(instrument)
            if pricer is None:
                raise DependencyError(
                    f"No pricer registered for {type(instrument).__name__}; "
                    "cannot collect its dependencies."
                )
            pricer.dependencies(instrument, collector)
        return collector

    def fix_all(self, portfolio: Portfolio, fixing_table: FixingTable) -> Portfolio:
        """
        Restate every instrument against the fixing table.

        Returns a new portfolio; the input is left untouched. Replacement legs are
        scaled by the weight of the instrument they replace.
        """
        restated: Portfolio = []
        for weight, instrument in portfolio:
            pricer = self._find_pricer(instrument)
            replacement = pricer.fix(instrument, fixing_table) if pricer is not None else None
            if replacement is None:
                restated.append((weight, instrument))
            else:
                restated.extend((weight * leg_weight, leg) for leg_weight, leg in replacement)
        return restated


def create_default_engine() -> PricingEngine:
    """Factory for default engine with all built-in pricers registered."""
    from timeshift.pricers import ForwardStartPricer, FXPricer

    engine = PricingEngine()
    engine.register(FXPricer())
    engine.register(ForwardStartPricer())
    return engine
