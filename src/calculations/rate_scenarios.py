"""Macro rate-shock scenarios and horizon sweeps across the bond catalog."""

from __future__ import annotations

from dataclasses import replace
import re
from typing import Iterable, Sequence

import pandas as pd

from src.calculations.ranking import rank_bonds
from src.models.bond import BondModel
from src.models.scenario import ScenarioInput

BASE_SCENARIO_ID = 'base'
MAX_HORIZON_MONTHS = 144

_SHOCK_RE = re.compile(r'^(infl|ref|both)_(up|dn)_(\d+)$')
_TARGET_LABELS = {'infl': 'Inflation', 'ref': 'Reference rate', 'both': 'Inflation + reference'}

SHOCK_COLUMNS = ['scenario_id', 'scenario_label', 'inflation_shift_bps', 'reference_shift_bps']


def _parse_shock_id(scenario_id: str) -> tuple[float, float]:
    """Return (inflation_shift_bps, reference_shift_bps) encoded in a shock id."""
    sid = str(scenario_id).strip().lower()
    if sid == BASE_SCENARIO_ID:
        return 0.0, 0.0
    m = _SHOCK_RE.match(sid)
    if not m:
        raise ValueError(f'Invalid scenario_id `{scenario_id}`.')
    target = m.group(1)
    sign = 1.0 if m.group(2) == 'up' else -1.0
    shift = sign * float(m.group(3))
    inflation = shift if target in ('infl', 'both') else 0.0
    reference = shift if target in ('ref', 'both') else 0.0
    return inflation, reference


def build_rate_shocks(magnitudes: Iterable[int] = (50, 100, 200)) -> pd.DataFrame:
    """Return the canonical shock set: base plus up/down moves per macro rate."""
    rows: list[dict[str, object]] = [
        {
            'scenario_id': BASE_SCENARIO_ID,
            'scenario_label': 'Base',
            'inflation_shift_bps': 0.0,
            'reference_shift_bps': 0.0,
        }
    ]
    for target in ('infl', 'ref', 'both'):
        for direction in ('up', 'dn'):
            for magnitude in magnitudes:
                sid = f'{target}_{direction}_{int(magnitude)}'
                inflation, reference = _parse_shock_id(sid)
                stxt = '+' if direction == 'up' else '-'
                rows.append(
                    {
                        'scenario_id': sid,
                        'scenario_label': f'{_TARGET_LABELS[target]} {stxt}{int(magnitude)} bps',
                        'inflation_shift_bps': inflation,
                        'reference_shift_bps': reference,
                    }
                )
    return pd.DataFrame(rows, columns=SHOCK_COLUMNS)


def normalize_shocks_df(shocks: pd.DataFrame) -> pd.DataFrame:
    """Fill missing labels and shifts from scenario ids; reject unknown ids."""
    if 'scenario_id' not in shocks.columns:
        raise ValueError('Shocks dataframe requires a scenario_id column.')
    out = shocks.copy()
    out['scenario_id'] = out['scenario_id'].astype(str).str.strip().str.lower()
    parsed = out['scenario_id'].apply(_parse_shock_id)
    for idx, col in enumerate(['inflation_shift_bps', 'reference_shift_bps']):
        derived = parsed.apply(lambda pair, i=idx: pair[i])
        if col in out.columns:
            out[col] = pd.to_numeric(out[col], errors='coerce').fillna(derived)
        else:
            out[col] = derived
        out[col] = out[col].astype(float)
    if 'scenario_label' not in out.columns:
        out['scenario_label'] = out['scenario_id']
    out['scenario_label'] = out['scenario_label'].fillna(out['scenario_id']).astype(str)
    out = out.drop_duplicates(subset=['scenario_id'], keep='first')
    return out[SHOCK_COLUMNS].reset_index(drop=True)


def shocked_scenario(
    scenario: ScenarioInput,
    inflation_shift_bps: float = 0.0,
    reference_shift_bps: float = 0.0,
) -> ScenarioInput:
    """Shift macro rates (percent) by basis points."""
    return replace(
        scenario,
        inflation_rate=float(scenario.inflation_rate) + float(inflation_shift_bps) / 100.0,
        reference_rate=float(scenario.reference_rate) + float(reference_shift_bps) / 100.0,
    )


def simulate_rate_shocks(
    bonds: Sequence[BondModel],
    scenario: ScenarioInput,
    shocks: pd.DataFrame | None = None,
    exclude: Iterable[str] = (),
) -> pd.DataFrame:
    """Evaluate every bond under each shock; profit_delta is against the unshocked scenario."""
    shocks_df = normalize_shocks_df(build_rate_shocks() if shocks is None else shocks)
    exclude = tuple(exclude)
    base_profit = {row.bond.name: row.profit for row in rank_bonds(bonds, scenario, exclude)}

    records: list[dict[str, object]] = []
    for shock in shocks_df.itertuples(index=False):
        shocked = shocked_scenario(scenario, shock.inflation_shift_bps, shock.reference_shift_bps)
        for position, row in enumerate(rank_bonds(bonds, shocked, exclude), start=1):
            records.append(
                {
                    'scenario_id': shock.scenario_id,
                    'scenario_label': shock.scenario_label,
                    'inflation_rate': shocked.inflation_rate,
                    'reference_rate': shocked.reference_rate,
                    'name': row.bond.name,
                    'rank': position,
                    'total_value': row.result.total_value,
                    'profit': row.profit,
                    'effective_rate': row.result.effective_rate,
                    'profit_delta': row.profit - base_profit[row.bond.name],
                }
            )
    return pd.DataFrame(records)


def horizon_profile(
    bonds: Sequence[BondModel],
    scenario: ScenarioInput,
    horizons: Iterable[int] | None = None,
    exclude: Iterable[str] = (),
) -> pd.DataFrame:
    """Profit per bond (columns) for each holding horizon in months (index)."""
    months = list(range(1, MAX_HORIZON_MONTHS + 1)) if horizons is None else [int(h) for h in horizons]
    exclude = tuple(exclude)
    records: list[dict[str, object]] = []
    for horizon in months:
        at_horizon = replace(scenario, horizon_months=horizon)
        for row in rank_bonds(bonds, at_horizon, exclude):
            records.append({'horizon_months': horizon, 'name': row.bond.name, 'profit': row.profit})
    if not records:
        return pd.DataFrame(index=pd.Index([], name='horizon_months', dtype=int))
    out = pd.DataFrame(records).pivot(index='horizon_months', columns='name', values='profit')
    bond_order = [b.name for b in bonds if b.name in out.columns]
    out = out[bond_order]
    out.columns.name = None
    return out
