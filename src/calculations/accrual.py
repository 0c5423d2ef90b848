"""Single-round interest accrual for each bond rate mechanism."""

from __future__ import annotations

from src.models.bond import BondModel, FixedRate, InflationLinked, ReferenceRateLinked


def _split_years(months: float) -> tuple[int, float]:
    """Return whole years and the trailing fraction of a year."""
    years = float(months) / 12.0
    full_years = int(years)
    return full_years, years - full_years


def accrue_reference_linked(
    capital: float,
    rate: ReferenceRateLinked,
    months: float,
    reference_rate: float,
) -> float:
    """Simple monthly accrual at (reference rate + margin), never compounded."""
    monthly_rate = (float(reference_rate) + rate.margin) / 12.0 / 100.0
    return float(capital) * monthly_rate * float(months)


def accrue_inflation_linked(
    capital: float,
    rate: InflationLinked,
    months: float,
    inflation_rate: float,
) -> float:
    """Year-bucketed accrual: year one at the issue rate, later years at inflation + margin.

    Compounding bonds add each year's interest to the running balance; simple
    bonds always accrue on the original capital.
    """
    capital = float(capital)
    full_years, fraction = _split_years(months)
    first_year_rate = rate.interest_rate / 100.0

    if full_years < 1:
        return capital * first_year_rate * fraction

    indexed_rate = (float(inflation_rate) + rate.margin) / 100.0
    balance = capital * (1.0 + first_year_rate)
    interest = capital * first_year_rate

    for _ in range(1, full_years):
        base = balance if rate.compound else capital
        year_interest = base * indexed_rate
        balance += year_interest
        interest += year_interest

    if fraction > 0:
        base = balance if rate.compound else capital
        interest += base * indexed_rate * fraction
    return interest


def accrue_fixed(capital: float, rate: FixedRate, months: float) -> float:
    """Fixed coupon; compounding bonds capitalize once per whole year."""
    capital = float(capital)
    annual_rate = rate.interest_rate / 100.0
    if not rate.compound:
        return capital * annual_rate * float(months) / 12.0

    full_years, fraction = _split_years(months)
    balance = capital
    for _ in range(full_years):
        balance *= 1.0 + annual_rate
    # Partial year accrues on the compounded balance without compounding itself.
    if fraction > 0:
        balance += balance * annual_rate * fraction
    return balance - capital


def accrue(
    capital: float,
    bond: BondModel,
    months: float,
    reference_rate: float,
    inflation_rate: float,
) -> float:
    """Gross interest earned on ``capital`` over ``months`` of holding ``bond``.

    Callers keep ``months`` within the bond's maturity. Non-positive
    durations accrue nothing.
    """
    if months <= 0:
        return 0.0
    rate = bond.rate
    if isinstance(rate, ReferenceRateLinked):
        return accrue_reference_linked(capital, rate, months, reference_rate)
    if isinstance(rate, InflationLinked):
        return accrue_inflation_linked(capital, rate, months, inflation_rate)
    return accrue_fixed(capital, rate, months)
