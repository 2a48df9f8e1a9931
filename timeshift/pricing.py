"""
Pricing entrypoint.

Most users of the library should only need `price(trade, market)`, plus
`fix_all` as the default restatement function for the time bump.
Everything delegates to a default `PricingEngine` instance.
"""

from typing import TypeAlias

from timeshift.dependencies import DependencyCollector
from timeshift.engine import create_default_engine
from timeshift.fixings import FixingTable
from timeshift.interfaces import Portfolio
from timeshift.market import Market
from timeshift.products.forward_start import ForwardStartFXForward
from timeshift.products.fx import FXForward


Trade: TypeAlias = FXForward | ForwardStartFXForward

_default_engine = create_default_engine()


def price(trade: Trade, market: Market) -> float:
    """Return present value of trade (via default registry-based engine)."""
    return _default_engine.npv(trade, market)


def portfolio_value(portfolio: Portfolio, market: Market) -> float:
    """Weighted sum of present values."""
    return sum(weight * _default_engine.npv(trade, market) for weight, trade in portfolio)


def collect_dependencies(portfolio: Portfolio) -> DependencyCollector:
    return _default_engine.dependencies(portfolio)


def fix_all(portfolio: Portfolio, fixing_table: FixingTable) -> Portfolio:
    """Restate a portfolio against newly known fixings (default engine)."""
    return _default_engine.fix_all(portfolio, fixing_table)
