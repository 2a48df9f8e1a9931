"""Underlying definition shared by every product that observes a spot level."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Underlying:
    """
    Something with a spot level, identified by `id` (e.g. 'EURUSD', 'EUR').

    Forwards use carry parity: `base_curve` is the foreign rate curve for an FX
    pair (or the dividend yield curve for an equity), `quote_curve` the curve
    of the currency the spot is quoted in.
    """

    id: str
    base_curve: str
    quote_curve: str
