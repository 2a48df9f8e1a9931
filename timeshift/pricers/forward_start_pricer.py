"""Pricer for forward-starting FX forwards."""

from __future__ import annotations

from typing import TYPE_CHECKING

from timeshift.dates import year_fraction
from timeshift.errors import ResolutionError
from timeshift.interfaces import Instrument
from timeshift.market import Market
from timeshift.pricers.base import BasePricer
from timeshift.products.forward_start import ForwardStartFXForward
from timeshift.products.fx import FXForward

if TYPE_CHECKING:
    from timeshift.dependencies import DependencyCollector
    from timeshift.fixings import FixingTable


class ForwardStartPricer(BasePricer):
    """Pricer for forward-starting FX forwards (strike set as a ratio of a future fixing)."""

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, ForwardStartFXForward)

    def npv(self, instrument: Instrument, market: Market) -> float:
        """
        Before the strike is set the strike is a forward too:
        PV = notional_base * DF_quote(T) * (F(T) - strike_ratio * F(T_strike)).

        A strike date before the spot date means the trade should already have
        been restated with its fixing; pricing it anyway would silently use a
        stale strike, so it fails.
        """
        assert isinstance(instrument, ForwardStartFXForward)
        fwd = instrument
        if fwd.strike_date < market.spot_date:
            raise ResolutionError(
                f"strike fixing for {fwd.underlying.id} on {fwd.strike_date} is before spot date "
                f"{market.spot_date}; restate the trade first"
            )
        curve = market.forward_curve(fwd.underlying, fwd.maturity)
        t = year_fraction(market.spot_date, fwd.maturity)
        df_quote = market.curve(fwd.underlying.quote_curve).df(t)
        strike = fwd.strike_ratio * curve.forward(fwd.strike_date)
        return fwd.notional_base * df_quote * (curve.forward(fwd.maturity) - strike)

    def dependencies(self, instrument: Instrument, collector: DependencyCollector) -> None:
        assert isinstance(instrument, ForwardStartFXForward)
        collector.spot(instrument.underlying)
        collector.fixing(instrument.underlying.id, instrument.strike_date)

    def fix(
        self, instrument: Instrument, fixing_table: FixingTable
    ) -> list[tuple[float, Instrument]] | None:
        """Once the strike fixing is known, the trade becomes a plain FXForward."""
        assert isinstance(instrument, ForwardStartFXForward)
        fwd = instrument
        level = fixing_table.get_optional(fwd.underlying.id, fwd.strike_date)
        if level is None:
            return None
        fixed = FXForward(
            underlying=fwd.underlying,
            maturity=fwd.maturity,
            notional_base=fwd.notional_base,
            strike=fwd.strike_ratio * level,
        )
        return [(1.0, fixed)]
