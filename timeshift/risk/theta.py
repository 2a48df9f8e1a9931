"""Theta risk measure (roll the spot date forward, reprice)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from timeshift.bumps import SpotDynamics
from timeshift.errors import BumpApplicationError
from timeshift.interfaces import Instrument, Portfolio
from timeshift.market import Market
from timeshift.risk.base import BaseRiskMeasure
from timeshift.risk.model import PricingModel
from timeshift.risk.timebump import TimeBump


def roll_forward(portfolio: Portfolio, market: Market, bump: TimeBump) -> PricingModel:
    """
    Apply `bump` to `portfolio` and return a model valued at the new spot date.

    If the bump restates the portfolio, the model is rebuilt on the restated
    instruments and the bump applied again; the second pass has no fixings left
    in the window, so it goes in place.
    """
    model = PricingModel(portfolio, market)
    if bump.apply(portfolio, model):
        model = PricingModel(portfolio, market)
        if bump.apply(portfolio, model):
            raise BumpApplicationError(
                "restated portfolio still depends on fixings inside the shift window"
            )
    return model


@dataclass
class Theta(BaseRiskMeasure):
    """Theta: PV after rolling the spot date to `spot_date` minus PV today."""

    spot_date: date
    spot_dynamics: SpotDynamics | None = None

    @property
    def name(self) -> str:
        return f"Theta_{self.spot_date.isoformat()}"

    def compute(self, instrument: Instrument, market: Market) -> float:
        portfolio: Portfolio = [(1.0, instrument)]
        pv_base = PricingModel(portfolio, market).value()
        rolled = roll_forward(portfolio, market, TimeBump(self.spot_date, self.spot_dynamics))
        return rolled.value() - pv_base
