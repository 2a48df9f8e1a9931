"""
Discount and forward curve primitives.

Conventions kept deliberately simple:
- Times are **year fractions** measured from the market spot date (ACT/365).
- Discount curves hold **continuously compounded zero rates**, interpolated
  linearly between pillars and extrapolated flat.
- Forwards follow carry parity: F(t) = spot * DF_base(t) / DF_quote(t), where the
  base curve is the foreign rate (FX) or dividend yield (equity).
"""

from __future__ import annotations

import math
from bisect import bisect_left
from dataclasses import dataclass
from datetime import date

from timeshift.dates import year_fraction
from timeshift.errors import ResolutionError
from timeshift.interfaces import Curve


@dataclass
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    `pillars` are strictly increasing year fractions from the spot date and
    `zero_rates_cc[i]` is the rate at `pillars[i]`. Implements Curve structurally.
    Pillars are relative to the spot date, so rolling the spot date leaves the
    curve sticky in time-to-maturity.
    """

    name: str
    pillars: list[float]
    zero_rates_cc: list[float]

    def __post_init__(self) -> None:
        if len(self.pillars) != len(self.zero_rates_cc):
            raise ValueError("pillars and zero_rates_cc must have the same length")
        if any(b <= a for a, b in zip(self.pillars, self.pillars[1:])):
            raise ValueError("pillars must be strictly increasing")

    def zero_rate_cc(self, t: float) -> float:
        """Zero rate at year fraction t >= 0, flat outside the pillar range."""
        if t < 0:
            raise ValueError("t must be >= 0")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        i = bisect_left(self.pillars, t)
        if i == 0:
            return self.zero_rates_cc[0]
        if i == len(self.pillars):
            return self.zero_rates_cc[-1]
        t0, t1 = self.pillars[i - 1], self.pillars[i]
        r0, r1 = self.zero_rates_cc[i - 1], self.zero_rates_cc[i]
        return r0 + (r1 - r0) * (t - t0) / (t1 - t0)

    def df(self, t: float) -> float:
        """DF(t) = exp(-r(t) * t)."""
        return math.exp(-self.zero_rate_cc(t) * t)


@dataclass(frozen=True)
class ForwardCurve:
    """
    Forward levels of one underlying between `spot_date` and `high_water_mark`.

    Asking for a forward outside that range raises ResolutionError rather than
    extrapolating: callers state up front how far out they need forwards.
    """

    underlying_id: str
    spot: float
    base: Curve
    quote: Curve
    spot_date: date
    high_water_mark: date

    def forward(self, d: date) -> float:
        if d < self.spot_date:
            raise ResolutionError(
                f"forward for {self.underlying_id} on {d} is before spot date {self.spot_date}"
            )
        if d > self.high_water_mark:
            raise ResolutionError(
                f"forward for {self.underlying_id} on {d} is beyond high water mark "
                f"{self.high_water_mark}"
            )
        t = year_fraction(self.spot_date, d)
        return self.spot * self.base.df(t) / self.quote.df(t)
