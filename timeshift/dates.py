"""Date helpers. Curves work in year fractions measured from the market spot date."""

from datetime import date

DAYS_IN_YEAR = 365.0


def year_fraction(start: date, end: date) -> float:
    """ACT/365 fixed year fraction from start to end (negative if end is earlier)."""
    return (end - start).days / DAYS_IN_YEAR
