"""
Risk: the time bump, the bumpable pricing model and the Theta measure built on them.

New code should use the Theta class; the `theta` function is a shortcut.
"""

from __future__ import annotations

from datetime import date

from timeshift.bumps import SpotDynamics
from timeshift.market import Market
from timeshift.pricing import Trade
from timeshift.risk.base import BaseRiskMeasure
from timeshift.risk.model import PricingModel, Saveable
from timeshift.risk.theta import Theta, roll_forward
from timeshift.risk.timebump import TimeBump, build_fixing_table, scan_fixings


def theta(
    trade: Trade,
    market: Market,
    spot_date: date,
    spot_dynamics: SpotDynamics | None = None,
) -> float:
    """PV(rolled to spot_date) - PV(today). spot_dynamics defaults to the configured one."""
    return Theta(spot_date=spot_date, spot_dynamics=spot_dynamics).compute(trade, market)


__all__ = [
    "BaseRiskMeasure",
    "PricingModel",
    "Saveable",
    "Theta",
    "TimeBump",
    "build_fixing_table",
    "roll_forward",
    "scan_fixings",
    "theta",
]
