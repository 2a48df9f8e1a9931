"""
Error taxonomy for pricing and the time-shift bump.

Every error derives from `PricingError`, which is itself a `ValueError`: the rest
of the library reports invalid inputs with `ValueError`, so callers that already
catch it keep working. The subclasses name the stage that failed.
"""


class PricingError(ValueError):
    """Base class for all library errors."""


class ResolutionError(PricingError):
    """A spot level, curve or forward could not be resolved from the market."""


class DependencyError(PricingError):
    """The dependency model is missing or inconsistent."""


class ConstructionError(PricingError):
    """A fixing table could not be built from the collected fixings."""


class RestatementError(PricingError):
    """An instrument could not be restated against a fixing table."""


class BumpApplicationError(PricingError):
    """The valuation model rejected a bump."""
