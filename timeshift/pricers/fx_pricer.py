"""Pricer for FX forwards (carry-parity valuation)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeshift.dates import year_fraction
from timeshift.interfaces import Instrument
from timeshift.market import Market
from timeshift.pricers.base import BasePricer
from timeshift.products.fx import FXForward

if TYPE_CHECKING:
    from timeshift.dependencies import DependencyCollector


class FXPricer(BasePricer):
    """Pricer for FX forwards (covered interest rate parity)."""

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, FXForward)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """
        PV = notional_base * DF_quote(T) * (F(T) - strike), F(T) = spot * DF_base(T) / DF_quote(T).
        A forward that matured before the spot date has settled and is worth nothing.
        """
        assert isinstance(instrument, FXForward)
        fwd = instrument
        if fwd.maturity < market.spot_date:
            return 0.0
        t = year_fraction(market.spot_date, fwd.maturity)
        fwd_rate = market.forward_curve(fwd.underlying, fwd.maturity).forward(fwd.maturity)
        df_quote = market.curve(fwd.underlying.quote_curve).df(t)
        return fwd.notional_base * df_quote * (fwd_rate - fwd.strike)

    def dependencies(self, instrument: Instrument, collector: DependencyCollector) -> None:
        assert isinstance(instrument, FXForward)
        collector.spot(instrument.underlying)
