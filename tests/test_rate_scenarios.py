import pandas as pd
import pytest

from src.calculations.rate_scenarios import (
    MAX_HORIZON_MONTHS,
    build_rate_shocks,
    horizon_profile,
    normalize_shocks_df,
    shocked_scenario,
    simulate_rate_shocks,
)
from src.data.catalog import REFERENCE_CATALOG
from src.models.scenario import ScenarioInput


def test_build_rate_shocks_has_expected_ids() -> None:
    out = build_rate_shocks(magnitudes=(100,))
    assert out['scenario_id'].tolist() == [
        'base',
        'infl_up_100',
        'infl_dn_100',
        'ref_up_100',
        'ref_dn_100',
        'both_up_100',
        'both_dn_100',
    ]
    both_dn = out[out['scenario_id'] == 'both_dn_100'].iloc[0]
    assert both_dn['inflation_shift_bps'] == -100.0
    assert both_dn['reference_shift_bps'] == -100.0
    assert len(build_rate_shocks()) == 19


def test_shocked_scenario_shifts_rates_in_percent() -> None:
    base = ScenarioInput(investment=100000, horizon_months=12)
    out = shocked_scenario(base, inflation_shift_bps=100, reference_shift_bps=-50)
    assert out.inflation_rate == pytest.approx(5.5)
    assert out.reference_rate == pytest.approx(5.25)
    assert out.horizon_months == 12


def test_normalize_shocks_derives_shifts_and_rejects_unknown_ids() -> None:
    out = normalize_shocks_df(pd.DataFrame({'scenario_id': ['REF_UP_25', 'base']}))
    assert out['reference_shift_bps'].tolist() == [25.0, 0.0]
    assert out['inflation_shift_bps'].tolist() == [0.0, 0.0]
    assert out['scenario_label'].tolist() == ['ref_up_25', 'base']

    with pytest.raises(ValueError, match='Invalid scenario_id'):
        normalize_shocks_df(pd.DataFrame({'scenario_id': ['inst_up_50']}))


def test_simulate_rate_shocks_profit_delta() -> None:
    shocks = pd.DataFrame({'scenario_id': ['base', 'ref_up_100', 'infl_up_100']})
    out = simulate_rate_shocks(REFERENCE_CATALOG, ScenarioInput(investment=100000, horizon_months=24), shocks)
    assert len(out) == 3 * len(REFERENCE_CATALOG)

    base_rows = out[out['scenario_id'] == 'base']
    assert (base_rows['profit_delta'] == 0.0).all()

    def delta(sid: str, name: str) -> float:
        row = out[(out['scenario_id'] == sid) & (out['name'] == name)].iloc[0]
        return float(row['profit_delta'])

    # 100 bps on 100000 over two years, after 19% tax.
    assert delta('ref_up_100', 'DOR') == pytest.approx(2 * 810.0)
    # Inflation only moves the second year of an indexed bond.
    assert delta('infl_up_100', 'COI') == pytest.approx(810.0)
    assert delta('ref_up_100', 'OTS') == 0.0
    assert delta('infl_up_100', 'TOS') == 0.0


def test_horizon_profile_defaults_to_full_slider_range() -> None:
    out = horizon_profile(REFERENCE_CATALOG, ScenarioInput(investment=100000, horizon_months=12))
    assert out.index.tolist() == list(range(1, MAX_HORIZON_MONTHS + 1))
    assert out.columns.tolist() == [bond.name for bond in REFERENCE_CATALOG]
    assert out.loc[2, 'OTS'] == 0.0
    assert out.loc[3, 'OTS'] == pytest.approx(556.875)


def test_horizon_profile_respects_exclusions() -> None:
    out = horizon_profile(
        REFERENCE_CATALOG,
        ScenarioInput(investment=100000, horizon_months=12),
        horizons=[6, 12],
        exclude=('ROS', 'ROD'),
    )
    assert out.index.tolist() == [6, 12]
    assert 'ROS' not in out.columns
    assert 'EDO' in out.columns
