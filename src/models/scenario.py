"""Scenario inputs and simulation result value types."""

from __future__ import annotations

from dataclasses import dataclass

from src.models.bond import BondModel

TAX_RATE = 0.19
DEFAULT_INFLATION_RATE = 4.5
DEFAULT_REFERENCE_RATE = 5.75


@dataclass(frozen=True)
class ScenarioInput:
    """User-chosen simulation parameters. Rates are in percent."""

    investment: float
    horizon_months: int
    inflation_rate: float = DEFAULT_INFLATION_RATE
    reference_rate: float = DEFAULT_REFERENCE_RATE
    auto_reinvest: bool = False
    tax_rate: float = TAX_RATE

    def __post_init__(self) -> None:
        if not float(self.investment) > 0.0:
            raise ValueError(f'Investment must be positive, got {self.investment}.')
        if float(self.horizon_months) != int(self.horizon_months):
            raise ValueError(f'horizon_months must be a whole number of months, got {self.horizon_months}.')
        object.__setattr__(self, 'horizon_months', int(self.horizon_months))


@dataclass(frozen=True)
class PurchaseRound:
    """One holding period, months relative to simulation start."""

    start_month: int
    end_month: int
    completed: bool
    capital_start: float | None = None
    capital_end: float | None = None

    @property
    def months(self) -> int:
        return self.end_month - self.start_month


@dataclass(frozen=True)
class CalculationResult:
    total_value: float
    profit: float
    effective_rate: float
    purchase_rounds: tuple[PurchaseRound, ...] = ()

    @classmethod
    def unchanged(cls, investment: float, rounds: tuple[PurchaseRound, ...] = ()) -> 'CalculationResult':
        """Result where the holder gets exactly the investment back."""
        return cls(total_value=float(investment), profit=0.0, effective_rate=0.0, purchase_rounds=rounds)


@dataclass(frozen=True)
class BondResult:
    """Ranked row pairing a bond with its result for the display layer."""

    bond: BondModel
    result: CalculationResult

    @property
    def profit(self) -> float:
        return self.result.profit
