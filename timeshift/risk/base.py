"""Base class for risk measure implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from timeshift.interfaces import Instrument
from timeshift.market import Market


class BaseRiskMeasure(ABC):
    """Base class for bump-and-reprice risk measures such as Theta."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name, including what is bumped."""
        ...

    @abstractmethod
    def compute(self, instrument: Instrument, market: Market) -> float:
        """PV(bumped) - PV(base) for a single instrument."""
        ...
