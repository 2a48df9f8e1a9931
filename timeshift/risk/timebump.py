"""
Time bump: move the spot date forward, fixing whatever becomes due on the way.

Rolling the spot date from `old` to `new` means every fixing dated in
[old, new) turns from a future observation into a known value. Those values are
synthesized from today's market according to the chosen SpotDynamics and handed
to the instruments for restatement. A restated portfolio can change shape (a
forward-start becomes a plain forward), so the model over it must be rebuilt.
Only when no fixing falls in the window is the bump applied to the model in place.
"""

from __future__ import annotations

import logging
from datetime import date

from timeshift.bumps import Bump, BumpSpotDate, SpotDynamics
from timeshift.config import load_settings
from timeshift.dependencies import DependencyCollector
from timeshift.errors import BumpApplicationError
from timeshift.fixings import FixingTable
from timeshift.interfaces import Bumpable, Forward, Portfolio, PricingContext, Restater

logger = logging.getLogger(__name__)

FixingMap = dict[str, list[tuple[date, float]]]


def scan_fixings(
    old_spot_date: date,
    new_spot_date: date,
    spot_dynamics: SpotDynamics,
    dependencies: DependencyCollector,
    context: PricingContext,
) -> FixingMap:
    """
    Value every fixing dated in [old_spot_date, new_spot_date).

    Fixings before the old spot date have already been applied to the instruments;
    fixings on or after the new spot date are still in the future. Returns an empty
    dict when nothing falls in the window. Resolution errors propagate.
    """
    fixing_map: FixingMap = {}
    # one forward curve per underlying per scan
    curves: dict[str, Forward] = {}
    for underlying_id, underlying in dependencies.instruments_iter():
        for d in dependencies.fixings(underlying_id):
            if not old_spot_date <= d < new_spot_date:
                continue
            if spot_dynamics is SpotDynamics.STICKY_FORWARD:
                curve = curves.get(underlying_id)
                if curve is None:
                    curve = context.forward_curve(underlying, new_spot_date)
                    curves[underlying_id] = curve
                value = curve.forward(d)
            else:
                value = context.spot(underlying_id)
            fixing_map.setdefault(underlying_id, []).append((d, value))
    return fixing_map


def build_fixing_table(new_spot_date: date, fixing_map: FixingMap) -> FixingTable:
    """Fixing table anchored at the new spot date. Raises ConstructionError."""
    return FixingTable.from_mapping(new_spot_date, fixing_map)


class TimeBump:
    """
    Bump of the spot date. `apply` returns True when the instrument list was
    restated and the caller must rebuild its model, False when the model was
    bumped in place.
    """

    def __init__(
        self,
        spot_date: date,
        spot_dynamics: SpotDynamics | None = None,
        restate: Restater | None = None,
    ) -> None:
        if spot_dynamics is None:
            spot_dynamics = load_settings().spot_dynamics
        if restate is None:
            from timeshift.pricing import fix_all

            restate = fix_all
        self.spot_date_bump = BumpSpotDate(spot_date, spot_dynamics)
        self._restate = restate

    def apply(self, instruments: Portfolio, bumpable: Bumpable) -> bool:
        context = bumpable.context()
        modified = self.update_instruments(instruments, context, bumpable.dependencies())
        if modified:
            logger.info(
                "spot date bump to %s restated the portfolio; model must be rebuilt",
                self.spot_date_bump.spot_date,
            )
            return True

        # nothing is restored from this saveable
        with bumpable.new_saveable() as saveable:
            bumpable.bump(Bump.new_spot_date(self.spot_date_bump), saveable)
        logger.info("spot date bumped in place to %s", self.spot_date_bump.spot_date)
        return False

    def update_instruments(
        self,
        instruments: Portfolio,
        context: PricingContext,
        dependencies: DependencyCollector,
    ) -> bool:
        """
        Restate `instruments` with every fixing between the old and new spot dates.
        Returns True if there were any, in which case the list has been replaced.
        """
        old_spot_date = context.spot_date
        new_spot_date = self.spot_date_bump.spot_date
        if new_spot_date < old_spot_date:
            raise BumpApplicationError(
                f"cannot move spot date backwards from {old_spot_date} to {new_spot_date}"
            )

        fixing_map = scan_fixings(
            old_spot_date,
            new_spot_date,
            self.spot_date_bump.spot_dynamics,
            dependencies,
            context,
        )
        logger.debug(
            "fixings in [%s, %s): %d across %d underlyings",
            old_spot_date,
            new_spot_date,
            sum(len(series) for series in fixing_map.values()),
            len(fixing_map),
        )
        if not fixing_map:
            return False

        fixing_table = build_fixing_table(new_spot_date, fixing_map)
        replacement = self._restate(instruments, fixing_table)
        instruments[:] = replacement
        return True
