"""
Bump descriptors for moving the spot date.

A bump is a value object: it says *what* to change, never *how*. The valuation
model (see `timeshift.risk.model.PricingModel`) interprets it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class SpotDynamics(Enum):
    """How a fixing that has not happened yet is valued when the spot date moves past it.

    - STICKY_FORWARD: the forward for the fixing date, as seen from today's market.
    - STICKY_SPOT: today's spot level.
    """

    STICKY_FORWARD = "sticky_forward"
    STICKY_SPOT = "sticky_spot"

    @classmethod
    def parse(cls, text: str) -> SpotDynamics:
        """Parse 'sticky_forward' / 'sticky-spot' etc. Raises ValueError if unknown."""
        key = text.strip().lower().replace("-", "_")
        try:
            return cls(key)
        except ValueError:
            options = ", ".join(member.value for member in cls)
            raise ValueError(
                f"unknown spot dynamics {text!r}; expected one of: {options}"
            ) from None


@dataclass(frozen=True)
class BumpSpotDate:
    """Move the spot date forward to `spot_date`, using `spot_dynamics` for the market."""

    spot_date: date
    spot_dynamics: SpotDynamics


@dataclass(frozen=True)
class Bump:
    """Generic bump handed to a bumpable model.

    Only spot-date bumps exist; build one with `Bump.new_spot_date`.
    """

    spot_date_bump: BumpSpotDate | None = None

    @classmethod
    def new_spot_date(cls, bump: BumpSpotDate) -> Bump:
        return cls(spot_date_bump=bump)
