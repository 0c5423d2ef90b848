"""Horizon simulation: single holding period or chained reinvestment rounds."""

from __future__ import annotations

from src.calculations.accrual import accrue
from src.models.bond import BondModel
from src.models.scenario import CalculationResult, PurchaseRound, ScenarioInput
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)


def annualized_rate(profit: float, investment: float, horizon_months: int) -> float:
    """Simple-interest annualized return in percent."""
    if horizon_months <= 0:
        return 0.0
    return float(profit) / float(investment) * 100.0 * (12.0 / float(horizon_months))


def net_of_tax(gross_interest: float, tax_rate: float) -> float:
    return float(gross_interest) * (1.0 - float(tax_rate))


def _simulate_terminal(bond: BondModel, scenario: ScenarioInput) -> CalculationResult:
    investment = float(scenario.investment)
    effective_months = min(int(scenario.horizon_months), int(bond.maturity_months))
    early = effective_months < bond.maturity_months

    if early and bond.lose_interest_on_early_withdrawal:
        LOGGER.debug('%s redeemed after %s months forfeits all interest.', bond.name, effective_months)
        return CalculationResult.unchanged(
            investment,
            (PurchaseRound(start_month=0, end_month=effective_months, completed=False),),
        )

    gross = accrue(
        investment,
        bond,
        effective_months,
        reference_rate=scenario.reference_rate,
        inflation_rate=scenario.inflation_rate,
    )
    net = net_of_tax(gross, scenario.tax_rate)
    penalty = bond.penalty_for(investment) if early else 0.0

    total_value = investment + net - penalty
    profit = total_value - investment
    LOGGER.debug(
        '%s terminal: months=%s gross=%.2f net=%.2f penalty=%.2f',
        bond.name,
        effective_months,
        gross,
        net,
        penalty,
    )
    return CalculationResult(
        total_value=total_value,
        profit=profit,
        effective_rate=annualized_rate(profit, investment, scenario.horizon_months),
        purchase_rounds=(
            PurchaseRound(start_month=0, end_month=effective_months, completed=not early),
        ),
    )


def _simulate_reinvest(bond: BondModel, scenario: ScenarioInput) -> CalculationResult:
    investment = float(scenario.investment)
    capital = investment
    months_remaining = int(scenario.horizon_months)
    current_month = 0
    rounds: list[PurchaseRound] = []

    while months_remaining > 0:
        round_months = min(months_remaining, int(bond.maturity_months))
        partial = round_months < bond.maturity_months

        gross = accrue(
            capital,
            bond,
            round_months,
            reference_rate=scenario.reference_rate,
            inflation_rate=scenario.inflation_rate,
        )
        net = net_of_tax(gross, scenario.tax_rate)
        penalty = 0.0
        if partial:
            if bond.lose_interest_on_early_withdrawal:
                net = 0.0
            penalty = bond.penalty_for(capital)

        capital_end = capital + net - penalty
        rounds.append(
            PurchaseRound(
                start_month=current_month,
                end_month=current_month + round_months,
                completed=not partial,
                capital_start=capital,
                capital_end=capital_end,
            )
        )
        LOGGER.debug(
            '%s round %s: months %s-%s capital %.2f -> %.2f',
            bond.name,
            len(rounds),
            current_month,
            current_month + round_months,
            capital,
            capital_end,
        )

        capital = capital_end
        months_remaining -= round_months
        current_month += round_months

    profit = capital - investment
    return CalculationResult(
        total_value=capital,
        profit=profit,
        effective_rate=annualized_rate(profit, investment, scenario.horizon_months),
        purchase_rounds=tuple(rounds),
    )


def simulate(bond: BondModel, scenario: ScenarioInput) -> CalculationResult:
    """Simulate holding ``bond`` for the scenario horizon.

    Without reinvestment the bond is held once, up to its maturity, and
    redeemed. With reinvestment, net proceeds roll into a new purchase at
    each maturity until the horizon is used up; every partial round pays the
    early-redemption penalty or forfeits interest per the bond's terms.
    """
    if scenario.horizon_months <= 0:
        return CalculationResult.unchanged(scenario.investment)
    if scenario.auto_reinvest:
        return _simulate_reinvest(bond, scenario)
    return _simulate_terminal(bond, scenario)
