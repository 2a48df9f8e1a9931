"""FX forward product (instrument data only; pricing via PricingEngine)."""

from dataclasses import dataclass
from datetime import date

from timeshift.products.underlying import Underlying


@dataclass(frozen=True)
class FXForward:
    """
    FX forward: buy `notional_base` units of the underlying at `strike` on `maturity`.
    PV in quote currency = notional_base * DF_quote(T) * (F(T) - strike), with the
    forward from carry parity (computed by PricingEngine).
    """

    underlying: Underlying
    maturity: date
    notional_base: float
    strike: float
