"""Forward-starting FX forward (instrument data only; pricing via PricingEngine)."""

from dataclasses import dataclass
from datetime import date

from timeshift.products.underlying import Underlying


@dataclass(frozen=True)
class ForwardStartFXForward:
    """
    FX forward whose strike is set on `strike_date` as `strike_ratio * S(strike_date)`.

    Depends on one fixing of the underlying. Once that fixing is known the trade
    is an ordinary FXForward with a fixed strike, and is restated as one.
    """

    underlying: Underlying
    strike_date: date
    maturity: date
    notional_base: float
    strike_ratio: float = 1.0

    def __post_init__(self) -> None:
        if self.strike_date > self.maturity:
            raise ValueError(
                f"strike_date {self.strike_date} must not be after maturity {self.maturity}"
            )
