"""Tests for FXForward and ForwardStartFXForward pricing and restatement."""

import math
from datetime import date

import pytest

from timeshift.curves import ZeroRateCurve
from timeshift.dependencies import DependencyCollector
from timeshift.errors import ResolutionError
from timeshift.fixings import FixingTable
from timeshift.market import Market
from timeshift.pricers import ForwardStartPricer, FXPricer
from timeshift.pricing import price
from timeshift.products import ForwardStartFXForward, FXForward, Underlying

SPOT_DATE = date(2023, 1, 1)
ONE_YEAR = date(2024, 1, 1)  # 365 days after SPOT_DATE
EURUSD = Underlying(id="EURUSD", base_curve="EUR", quote_curve="USD")


def _market(eur_rate: float = 0.03, usd_rate: float = 0.05, spot: float = 1.08) -> Market:
    eur = ZeroRateCurve(name="EUR", pillars=[1.0], zero_rates_cc=[eur_rate])
    usd = ZeroRateCurve(name="USD", pillars=[1.0], zero_rates_cc=[usd_rate])
    return Market(SPOT_DATE, curves={"EUR": eur, "USD": usd}, spots={"EURUSD": spot})


def test_fx_forward_pv_formula_cip() -> None:
    """PV = notional_base * DF_quote * (F - strike) with F = spot * DF_base/DF_quote."""
    market = _market()
    fwd = FXForward(underlying=EURUSD, maturity=ONE_YEAR, notional_base=1_000_000, strike=1.08)
    df_eur = math.exp(-0.03)
    df_usd = math.exp(-0.05)
    fwd_rate = 1.08 * df_eur / df_usd
    expected = 1_000_000 * df_usd * (fwd_rate - 1.08)
    assert abs(price(fwd, market) - expected) < 1e-6
    assert price(fwd, market) > 0  # EUR rates lower => F > spot


def test_fx_forward_at_the_money_zero_pv() -> None:
    """Equal rates and strike == spot => F == strike => PV = 0."""
    market = _market(eur_rate=0.05, usd_rate=0.05)
    fwd = FXForward(underlying=EURUSD, maturity=ONE_YEAR, notional_base=5_000_000, strike=1.08)
    assert abs(price(fwd, market)) < 1e-6


def test_fx_forward_matured_is_worthless() -> None:
    """A forward that matured before the spot date has settled."""
    fwd = FXForward(underlying=EURUSD, maturity=date(2022, 12, 31), notional_base=1.0, strike=1.0)
    assert price(fwd, _market()) == 0.0


def test_fx_forward_missing_spot_raises() -> None:
    """No spot level for the underlying => ResolutionError."""
    market = Market(SPOT_DATE, curves=_market().curves)
    fwd = FXForward(underlying=EURUSD, maturity=ONE_YEAR, notional_base=1.0, strike=1.0)
    with pytest.raises(ResolutionError, match="EURUSD"):
        price(fwd, market)


def test_forward_start_strike_is_forward_ratio() -> None:
    """Before the strike date: PV = N * DF_quote(T) * (F(T) - ratio * F(T_strike))."""
    market = _market()
    strike_date = date(2023, 7, 2)  # 182 days
    fs = ForwardStartFXForward(
        underlying=EURUSD,
        strike_date=strike_date,
        maturity=ONE_YEAR,
        notional_base=1_000_000,
        strike_ratio=1.0,
    )
    curve = market.forward_curve(EURUSD, ONE_YEAR)
    expected = 1_000_000 * math.exp(-0.05) * (curve.forward(ONE_YEAR) - curve.forward(strike_date))
    assert abs(price(fs, market) - expected) < 1e-6


def test_forward_start_past_strike_date_raises() -> None:
    """An unrestated forward-start whose strike date has passed cannot be priced."""
    fs = ForwardStartFXForward(
        underlying=EURUSD, strike_date=date(2022, 12, 1), maturity=ONE_YEAR, notional_base=1.0
    )
    with pytest.raises(ResolutionError, match="restate"):
        price(fs, _market())


def test_forward_start_strike_after_maturity_rejected() -> None:
    """The strike has to be set on or before the delivery date."""
    with pytest.raises(ValueError, match="must not be after maturity"):
        ForwardStartFXForward(
            underlying=EURUSD, strike_date=date(2024, 2, 1), maturity=ONE_YEAR, notional_base=1.0
        )
    on_maturity = ForwardStartFXForward(
        underlying=EURUSD, strike_date=ONE_YEAR, maturity=ONE_YEAR, notional_base=1.0
    )
    assert on_maturity.strike_date == on_maturity.maturity


def test_forward_start_dependencies() -> None:
    """A forward-start depends on its underlying spot and on its strike fixing."""
    fs = ForwardStartFXForward(
        underlying=EURUSD, strike_date=date(2023, 3, 1), maturity=ONE_YEAR, notional_base=1.0
    )
    collector = DependencyCollector()
    ForwardStartPricer().dependencies(fs, collector)
    FXPricer().dependencies(
        FXForward(underlying=EURUSD, maturity=ONE_YEAR, notional_base=1.0, strike=1.0), collector
    )
    assert list(collector.instruments_iter()) == [("EURUSD", EURUSD)]
    assert collector.fixings("EURUSD") == [date(2023, 3, 1)]


def test_forward_start_fix_becomes_fx_forward() -> None:
    """Once the strike fixing is known the trade is restated as a plain forward."""
    fs = ForwardStartFXForward(
        underlying=EURUSD,
        strike_date=date(2023, 3, 1),
        maturity=ONE_YEAR,
        notional_base=2_000_000,
        strike_ratio=1.02,
    )
    table = FixingTable.from_mapping(date(2023, 3, 5), {"EURUSD": [(date(2023, 3, 1), 1.10)]})
    assert ForwardStartPricer().fix(fs, table) == [
        (1.0, FXForward(underlying=EURUSD, maturity=ONE_YEAR, notional_base=2_000_000, strike=1.02 * 1.10))
    ]


def test_forward_start_fix_not_yet_known() -> None:
    """A strike date on or after the table anchor leaves the trade unchanged."""
    fs = ForwardStartFXForward(
        underlying=EURUSD, strike_date=date(2023, 3, 5), maturity=ONE_YEAR, notional_base=1.0
    )
    table = FixingTable.from_mapping(date(2023, 3, 5), {"EURUSD": [(date(2023, 3, 1), 1.10)]})
    assert ForwardStartPricer().fix(fs, table) is None
    assert FXPricer().fix(FXForward(EURUSD, ONE_YEAR, 1.0, 1.0), table) is None
