"""
Market snapshot container.

`Market` is a *simple* in-memory snapshot of the inputs needed for pricing and
for the time bump:
- the spot date everything is measured from,
- discount curves, keyed by a name (e.g. "USD"),
- spot levels, keyed by underlying id (e.g. "EURUSD").

It satisfies the PricingContext protocol, so the time bump can read spot levels
and forward curves from it directly.
"""

from __future__ import annotations

from datetime import date

from timeshift.bumps import SpotDynamics
from timeshift.curves import ForwardCurve
from timeshift.errors import BumpApplicationError, ResolutionError
from timeshift.interfaces import Curve
from timeshift.products.underlying import Underlying


class Market:
    """
    Market snapshot: spot date, discount curves (by name) and spot levels (id -> level).
    Immutable-style: with_spot_date returns a new Market instance.
    """

    def __init__(
        self,
        spot_date: date,
        curves: dict[str, Curve] | None = None,
        spots: dict[str, float] | None = None,
    ) -> None:
        self.spot_date = spot_date
        # Copies: callers can keep mutating their own dicts without touching the snapshot.
        self.curves: dict[str, Curve] = dict(curves) if curves else {}
        self.spots: dict[str, float] = dict(spots) if spots else {}

    def curve(self, name: str) -> Curve:
        """Return curve by name. Raises ResolutionError if not found."""
        try:
            return self.curves[name]
        except KeyError:
            raise ResolutionError(f"no curve named {name!r}") from None

    def spot(self, underlying_id: str) -> float:
        """Return spot level for an underlying id. Raises ResolutionError if not found."""
        try:
            return self.spots[underlying_id]
        except KeyError:
            raise ResolutionError(f"no spot level for {underlying_id!r}") from None

    def forward_curve(self, underlying: Underlying, high_water_mark: date) -> ForwardCurve:
        """Forward curve for `underlying`, valid from the spot date up to `high_water_mark`."""
        return ForwardCurve(
            underlying_id=underlying.id,
            spot=self.spot(underlying.id),
            base=self.curve(underlying.base_curve),
            quote=self.curve(underlying.quote_curve),
            spot_date=self.spot_date,
            high_water_mark=high_water_mark,
        )

    def with_spot_date(
        self,
        spot_date: date,
        spot_dynamics: SpotDynamics,
        underlyings: list[Underlying] | None = None,
    ) -> Market:
        """
        Return a new Market rolled forward to `spot_date`.

        Sticky spot keeps every spot level. Sticky forward moves the spot of each
        of `underlyings` to today's forward for the new date; underlyings not
        listed keep their level (their carry curves are unknown here).
        """
        if spot_date < self.spot_date:
            raise BumpApplicationError(
                f"cannot roll market back from {self.spot_date} to {spot_date}"
            )
        spots = dict(self.spots)
        if spot_dynamics is SpotDynamics.STICKY_FORWARD:
            for underlying in underlyings or []:
                spots[underlying.id] = self.forward_curve(underlying, spot_date).forward(spot_date)
        return Market(spot_date, curves=self.curves, spots=spots)
