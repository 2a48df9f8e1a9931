"""Pricing library with a spot-date (time) bump that materializes fixings on the way."""

from timeshift.bumps import Bump, BumpSpotDate, SpotDynamics
from timeshift.config import Settings, load_settings
from timeshift.curves import ForwardCurve, ZeroRateCurve
from timeshift.dependencies import DependencyCollector
from timeshift.engine import PricingEngine, create_default_engine
from timeshift.errors import (
    BumpApplicationError,
    ConstructionError,
    DependencyError,
    PricingError,
    ResolutionError,
    RestatementError,
)
from timeshift.fixings import FixingTable
from timeshift.interfaces import Bumpable, Curve, Instrument, Pricer, PricingContext
from timeshift.market import Market
from timeshift.pricers import BasePricer
from timeshift.pricing import Trade, collect_dependencies, fix_all, portfolio_value, price
from timeshift.products import ForwardStartFXForward, FXForward, Underlying
from timeshift.risk import PricingModel, Theta, TimeBump, scan_fixings, theta

__all__ = [
    "Bump",
    "BumpSpotDate",
    "SpotDynamics",
    "Settings",
    "load_settings",
    "Curve",
    "Instrument",
    "Pricer",
    "PricingContext",
    "Bumpable",
    "ZeroRateCurve",
    "ForwardCurve",
    "DependencyCollector",
    "PricingEngine",
    "create_default_engine",
    "PricingError",
    "ResolutionError",
    "DependencyError",
    "ConstructionError",
    "RestatementError",
    "BumpApplicationError",
    "FixingTable",
    "Market",
    "BasePricer",
    "price",
    "portfolio_value",
    "collect_dependencies",
    "fix_all",
    "Trade",
    "Underlying",
    "FXForward",
    "ForwardStartFXForward",
    "PricingModel",
    "TimeBump",
    "Theta",
    "scan_fixings",
    "theta",
]
