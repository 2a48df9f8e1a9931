"""
Bumpable valuation model over a Market snapshot.

`PricingModel` is the concrete Bumpable used by the time bump and by Theta.
Bumps are applied inside a `Saveable` scope: the scope holds the model's bump
lock while open and records what the bump replaced so it can be restored.
"""

from __future__ import annotations

import logging
import threading

from timeshift.bumps import Bump
from timeshift.dependencies import DependencyCollector
from timeshift.engine import PricingEngine, create_default_engine
from timeshift.errors import BumpApplicationError
from timeshift.interfaces import Portfolio
from timeshift.market import Market

logger = logging.getLogger(__name__)


class Saveable:
    """Scope for one or more bumps on a PricingModel. Use as a context manager."""

    def __init__(self, model: PricingModel) -> None:
        self._model = model
        self._active = False
        self.saved_market: Market | None = None

    @property
    def active(self) -> bool:
        return self._active

    def __enter__(self) -> Saveable:
        if not self._model._bump_lock.acquire(blocking=False):
            raise BumpApplicationError("model is already inside a bump scope")
        self._active = True
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._active = False
        self._model._bump_lock.release()

    def belongs_to(self, model: PricingModel) -> bool:
        return self._model is model


class PricingModel:
    """
    Prices a fixed snapshot of a portfolio against a market that can be rolled forward.

    The portfolio is copied on construction: if the instrument list changes (e.g.
    after restatement) a new model has to be built.
    """

    def __init__(
        self,
        portfolio: Portfolio,
        market: Market,
        engine: PricingEngine | None = None,
    ) -> None:
        self._portfolio: Portfolio = list(portfolio)
        self._market = market
        self._engine = engine if engine is not None else create_default_engine()
        self._dependencies: DependencyCollector | None = None
        self._bump_lock = threading.Lock()

    @property
    def portfolio(self) -> Portfolio:
        return list(self._portfolio)

    def dependencies(self) -> DependencyCollector:
        """Dependencies of the portfolio snapshot, built on first use."""
        if self._dependencies is None:
            self._dependencies = self._engine.dependencies(self._portfolio)
        return self._dependencies

    def context(self) -> Market:
        return self._market

    def new_saveable(self) -> Saveable:
        return Saveable(self)

    def bump(self, bump: Bump, saveable: Saveable) -> None:
        """Apply `bump` to the market. `saveable` must be an entered scope of this model."""
        if not saveable.belongs_to(self) or not saveable.active:
            raise BumpApplicationError("bump must be applied inside an open scope of this model")
        spot_date_bump = bump.spot_date_bump
        if spot_date_bump is None:
            raise BumpApplicationError(f"unsupported bump: {bump!r}")
        underlyings = [u for _, u in self.dependencies().instruments_iter()]
        rolled = self._market.with_spot_date(
            spot_date_bump.spot_date, spot_date_bump.spot_dynamics, underlyings
        )
        if saveable.saved_market is None:
            saveable.saved_market = self._market
        logger.debug(
            "rolled market %s -> %s (%s)",
            self._market.spot_date,
            rolled.spot_date,
            spot_date_bump.spot_dynamics.value,
        )
        self._market = rolled

    def restore(self, saveable: Saveable) -> None:
        """Undo every bump recorded in `saveable`."""
        if not saveable.belongs_to(self):
            raise BumpApplicationError("saveable belongs to a different model")
        if saveable.saved_market is not None:
            logger.debug("restoring market to %s", saveable.saved_market.spot_date)
            self._market = saveable.saved_market
            saveable.saved_market = None

    def value(self) -> float:
        """Weighted PV of the portfolio snapshot against the current market."""
        return sum(weight * self._engine.npv(trade, self._market) for weight, trade in self._portfolio)
