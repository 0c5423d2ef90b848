import pytest

from src.calculations.accrual import accrue
from src.calculations.horizon import simulate
from src.data.catalog import REFERENCE_CATALOG
from src.models.bond import BondModel, FixedRate, InflationLinked, ReferenceRateLinked
from src.models.scenario import CalculationResult, ScenarioInput

CATALOG = {bond.name: bond for bond in REFERENCE_CATALOG}


def _scenario(horizon_months: int, **kwargs) -> ScenarioInput:
    return ScenarioInput(investment=100000, horizon_months=horizon_months, **kwargs)


def test_fixed_simple_full_maturity() -> None:
    result = simulate(CATALOG['OTS'], _scenario(3))
    assert round(result.total_value, 6) == round(100556.875, 6)
    assert round(result.profit, 6) == round(556.875, 6)
    assert round(result.effective_rate, 6) == round(2.2275, 6)
    assert len(result.purchase_rounds) == 1
    rnd = result.purchase_rounds[0]
    assert (rnd.start_month, rnd.end_month, rnd.completed) == (0, 3, True)
    assert rnd.capital_start is None


def test_reference_rate_early_redemption_pays_penalty() -> None:
    result = simulate(CATALOG['ROR'], _scenario(6, reference_rate=5.75))
    assert round(result.total_value, 6) == round(101828.75, 6)
    assert round(result.profit, 6) == round(1828.75, 6)
    assert round(result.effective_rate, 6) == round(3.6575, 6)
    assert result.purchase_rounds[0].completed is False


def test_inflation_linked_simple_without_penalty() -> None:
    bond = BondModel(
        name='IDX',
        series='IDX0001',
        display_name='Indexed',
        maturity_months=48,
        rate=InflationLinked(interest_rate=5.5, margin=1.5, compound=False),
        penalty=0.0,
    )
    result = simulate(bond, _scenario(18, inflation_rate=4.5))
    assert round(result.total_value, 6) == round(106885.0, 6)


def test_inflation_linked_catalog_bond_charges_penalty_when_early() -> None:
    result = simulate(CATALOG['COI'], _scenario(18, inflation_rate=4.5))
    assert round(result.total_value, 6) == round(106885.0 - 2000.0, 6)


def test_zero_and_negative_horizon_return_investment() -> None:
    for bond in REFERENCE_CATALOG:
        for reinvest in (False, True):
            for horizon in (0, -5):
                result = simulate(bond, _scenario(horizon, auto_reinvest=reinvest))
                assert result == CalculationResult(
                    total_value=100000.0, profit=0.0, effective_rate=0.0, purchase_rounds=()
                )


def test_forfeiture_before_maturity_yields_zero_profit() -> None:
    for inflation, reference in [(0.0, 0.0), (4.5, 5.75), (25.0, 30.0)]:
        result = simulate(CATALOG['OTS'], _scenario(2, inflation_rate=inflation, reference_rate=reference))
        assert result.profit == 0.0
        assert result.total_value == 100000.0
        assert result.effective_rate == 0.0
        assert len(result.purchase_rounds) == 1
        assert result.purchase_rounds[0].end_month == 2
        assert result.purchase_rounds[0].completed is False


def test_terminal_mode_caps_holding_at_maturity() -> None:
    result = simulate(CATALOG['OTS'], _scenario(12))
    assert round(result.profit, 6) == round(556.875, 6)
    # Annualized over the full horizon, not the holding period.
    assert round(result.effective_rate, 6) == round(0.556875, 6)
    assert result.purchase_rounds[0].end_month == 3
    assert result.purchase_rounds[0].completed is True


def test_reinvestment_compounds_across_rounds() -> None:
    result = simulate(CATALOG['OTS'], _scenario(12, auto_reinvest=True))
    factor = 1 + 0.0275 * 0.25 * 0.81
    assert result.total_value == pytest.approx(100000 * factor ** 4)
    assert len(result.purchase_rounds) == 4
    assert all(r.completed for r in result.purchase_rounds)
    assert result.purchase_rounds[0].capital_start == 100000.0
    assert result.purchase_rounds[-1].capital_end == result.total_value


def test_reinvestment_partial_final_round_forfeits_interest() -> None:
    result = simulate(CATALOG['OTS'], _scenario(7, auto_reinvest=True))
    months = [r.months for r in result.purchase_rounds]
    assert months == [3, 3, 1]
    last = result.purchase_rounds[-1]
    assert last.completed is False
    assert last.capital_end == last.capital_start
    assert result.total_value == pytest.approx(100000 * (1 + 0.0275 * 0.25 * 0.81) ** 2)


def test_reinvestment_partial_round_penalty_on_round_capital() -> None:
    result = simulate(CATALOG['ROR'], _scenario(18, auto_reinvest=True, reference_rate=5.75))
    first, second = result.purchase_rounds
    assert first.completed is True
    assert first.capital_end == pytest.approx(104657.5)
    gross = 104657.5 * 0.0575 / 2
    penalty = 104657.5 / 100 * 0.5
    assert second.completed is False
    assert second.capital_end == pytest.approx(104657.5 + gross * 0.81 - penalty)
    assert result.profit == pytest.approx(second.capital_end - 100000)
    assert result.effective_rate == pytest.approx(result.profit / 100000 * 100 * 12 / 18)


def test_reinvestment_rounds_cover_horizon_contiguously() -> None:
    for bond in REFERENCE_CATALOG:
        for horizon in (1, 5, 13, 37, 100, 144):
            rounds = simulate(bond, _scenario(horizon, auto_reinvest=True)).purchase_rounds
            assert sum(r.end_month - r.start_month for r in rounds) == horizon
            assert rounds[0].start_month == 0
            for prev, nxt in zip(rounds, rounds[1:]):
                assert prev.end_month == nxt.start_month
                assert prev.capital_end == nxt.capital_start


def test_reinvestment_capital_non_decreasing_without_penalty() -> None:
    bonds = [
        BondModel(name='F', series='F1', display_name='F', maturity_months=5, rate=FixedRate(3.0, compound=True)),
        BondModel(name='R', series='R1', display_name='R', maturity_months=12, rate=ReferenceRateLinked(4.75, 0.5)),
        BondModel(
            name='I', series='I1', display_name='I', maturity_months=24, rate=InflationLinked(5.0, 1.0, compound=True)
        ),
    ]
    for bond in bonds:
        rounds = simulate(bond, _scenario(100, auto_reinvest=True)).purchase_rounds
        for rnd in rounds:
            assert rnd.capital_end >= rnd.capital_start


def test_reinvestment_uses_inflation_accrual() -> None:
    terminal = simulate(CATALOG['COI'], _scenario(48))
    reinvested = simulate(CATALOG['COI'], _scenario(48, auto_reinvest=True))
    assert reinvested.total_value == pytest.approx(terminal.total_value)


def test_net_interest_is_gross_after_tax_for_every_mechanism() -> None:
    scenario = _scenario(144)
    for bond in REFERENCE_CATALOG:
        at_maturity = ScenarioInput(investment=100000, horizon_months=bond.maturity_months)
        gross = accrue(100000, bond, bond.maturity_months, scenario.reference_rate, scenario.inflation_rate)
        result = simulate(bond, at_maturity)
        assert result.profit == pytest.approx(gross * (1 - 0.19))


def test_custom_tax_rate() -> None:
    result = simulate(CATALOG['OTS'], _scenario(3, tax_rate=0.0))
    assert round(result.profit, 6) == 687.5
