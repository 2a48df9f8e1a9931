"""
Protocol-based interfaces for all extension points in the library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
The time bump only talks to its collaborators (market context, valuation model,
restatement function) through these protocols, so tests and alternative models
can plug in without touching the bump itself.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from timeshift.bumps import Bump
    from timeshift.fixings import FixingTable
    from timeshift.market import Market
    from timeshift.products.underlying import Underlying
    from timeshift.dependencies import DependencyCollector


@runtime_checkable
class Curve(Protocol):
    """Protocol for discount curve implementations.

    Any class implementing df() can be used as a curve.
    """

    name: str

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction)."""
        ...


@runtime_checkable
class Instrument(Protocol):
    """Marker protocol for all priceable instruments.

    Instruments are data-only and immutable; pricing and restatement logic
    live in Pricer implementations.
    """

    pass


class Forward(Protocol):
    """Forward levels of one underlying, valid between the spot date and a high water mark."""

    def forward(self, d: date) -> float:
        ...


class PricingContext(Protocol):
    """Read-only market view used while scanning fixings."""

    spot_date: date

    def spot(self, underlying_id: str) -> float:
        """Current spot level. Raises ResolutionError if unknown."""
        ...

    def forward_curve(self, underlying: Underlying, high_water_mark: date) -> Forward:
        """Forward curve valid up to `high_water_mark`. Raises ResolutionError."""
        ...


class Pricer(Protocol):
    """Protocol for instrument pricing implementations.

    Each pricer handles one or more instrument types and can be registered
    with the PricingEngine for dispatch.
    """

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument type."""
        ...

    def npv(self, instrument: Instrument, market: Market) -> float:
        """Compute present value in the appropriate currency."""
        ...

    def dependencies(self, instrument: Instrument, collector: DependencyCollector) -> None:
        """Record the underlyings and fixing dates the instrument depends on."""
        ...

    def fix(
        self, instrument: Instrument, fixing_table: FixingTable
    ) -> list[tuple[float, Instrument]] | None:
        """Restate the instrument given known fixings; None means unchanged."""
        ...


class Saveable(Protocol):
    """Scoped area a bumpable model writes undo information into."""

    def __enter__(self) -> Saveable:
        ...

    def __exit__(self, *exc_info: object) -> None:
        ...


class Bumpable(Protocol):
    """A valuation model that can be bumped in place."""

    def dependencies(self) -> DependencyCollector:
        """Current dependency model. Raises DependencyError if it cannot be built."""
        ...

    def context(self) -> PricingContext:
        ...

    def new_saveable(self) -> Saveable:
        ...

    def bump(self, bump: Bump, saveable: Saveable) -> None:
        """Apply the bump inside an entered saveable. Raises BumpApplicationError."""
        ...


Portfolio = list[tuple[float, Instrument]]

# restate(portfolio, fixing_table) -> replacement portfolio
Restater = Callable[[Portfolio, "FixingTable"], Portfolio]
