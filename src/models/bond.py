"""Bond instrument domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Union

BOND_NOMINAL_VALUE = 100.0
INTEREST_PAYMENT_OPTIONS = ('monthly', 'yearly', 'at_end')


@dataclass(frozen=True)
class FixedRate:
    """Coupon fixed at issuance; compounding capitalizes interest once a year."""

    interest_rate: float
    compound: bool = False

    rate_type = 'fixed'


@dataclass(frozen=True)
class ReferenceRateLinked:
    """Floating coupon tracking the central-bank reference rate plus margin.

    ``interest_rate`` is the current coupon, kept for display; accrual uses
    the scenario reference rate.
    """

    interest_rate: float
    margin: float = 0.0

    rate_type = 'reference'


@dataclass(frozen=True)
class InflationLinked:
    """First-year coupon fixed at ``interest_rate``, later years inflation + margin."""

    interest_rate: float
    margin: float = 0.0
    compound: bool = False

    rate_type = 'inflation'


RateMechanics = Union[FixedRate, ReferenceRateLinked, InflationLinked]


@dataclass(frozen=True)
class BondModel:
    """Immutable definition of one retail treasury bond series.

    ``display`` carries presentation strings (labels, URLs, descriptions)
    and is excluded from equality and hashing.
    """

    name: str
    series: str
    display_name: str
    maturity_months: int
    rate: RateMechanics
    penalty: float = 0.0
    lose_interest_on_early_withdrawal: bool = False
    early_withdrawal_possible: bool = True
    interest_payment: str = 'at_end'
    purchase_price: float = BOND_NOMINAL_VALUE
    exchange_price: float | None = BOND_NOMINAL_VALUE
    display: Mapping[str, str] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        if int(self.maturity_months) < 1:
            raise ValueError(f'Bond {self.name} must have maturity_months >= 1.')
        if self.interest_payment not in INTEREST_PAYMENT_OPTIONS:
            raise ValueError(
                f'Bond {self.name} has unknown interest_payment `{self.interest_payment}`.'
            )

    @property
    def rate_type(self) -> str:
        return self.rate.rate_type

    @property
    def variable_rate(self) -> bool:
        return not isinstance(self.rate, FixedRate)

    @property
    def interest_rate(self) -> float:
        return float(self.rate.interest_rate)

    @property
    def margin(self) -> float:
        return float(getattr(self.rate, 'margin', 0.0))

    @property
    def compound(self) -> bool:
        return bool(getattr(self.rate, 'compound', False))

    def penalty_for(self, capital: float) -> float:
        """Early-redemption charge: ``penalty`` per 100 nominal held."""
        if self.penalty <= 0:
            return 0.0
        return float(capital) / BOND_NOMINAL_VALUE * float(self.penalty)
