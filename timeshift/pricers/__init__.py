"""Pricer implementations for the registry-based pricing engine."""

from timeshift.pricers.base import BasePricer
from timeshift.pricers.forward_start_pricer import ForwardStartPricer
from timeshift.pricers.fx_pricer import FXPricer

__all__ = [
    "BasePricer",
    "ForwardStartPricer",
    "FXPricer",
]
