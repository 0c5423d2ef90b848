"""Catalog-wide evaluation, ranking and tabular output."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterable, Sequence

import pandas as pd

from src.calculations.horizon import simulate
from src.models.bond import BondModel
from src.models.scenario import BondResult, CalculationResult, ScenarioInput

FAMILY_BOND_NAMES = ('ROS', 'ROD')

RESULT_COLUMNS = [
    'rank',
    'name',
    'series',
    'display_name',
    'rate_type',
    'maturity_months',
    'interest_rate',
    'margin',
    'compound',
    'penalty',
    'total_value',
    'profit',
    'effective_rate',
    'round_count',
    'completed_rounds',
]

ROUND_COLUMNS = [
    'name',
    'round',
    'start_month',
    'end_month',
    'months',
    'completed',
    'capital_start',
    'capital_end',
]


def filter_catalog(bonds: Iterable[BondModel], exclude: Iterable[str] = ()) -> list[BondModel]:
    """Drop bonds whose name is in ``exclude``, keeping catalog order."""
    excluded = {str(name) for name in exclude}
    return [bond for bond in bonds if bond.name not in excluded]


@lru_cache(maxsize=256)
def _rank_cached(
    bonds: tuple[BondModel, ...],
    scenario: ScenarioInput,
    exclude: frozenset[str],
) -> tuple[tuple[int, CalculationResult], ...]:
    """Ranked (catalog index, result) pairs; bonds are re-attached by the caller."""
    rows = [(idx, simulate(bond, scenario)) for idx, bond in enumerate(bonds) if bond.name not in exclude]
    # sorted() is stable, so equal profits keep catalog order.
    return tuple(sorted(rows, key=lambda row: row[1].profit, reverse=True))


def rank_bonds(
    bonds: Sequence[BondModel],
    scenario: ScenarioInput,
    exclude: Iterable[str] = (),
) -> list[BondResult]:
    """Simulate every bond for one scenario and order by profit, best first.

    Rows carry the caller's own bond objects, so display fields always come
    from the catalog passed in.
    """
    catalog = tuple(bonds)
    ranked = _rank_cached(catalog, scenario, frozenset(str(name) for name in exclude))
    return [BondResult(bond=catalog[idx], result=result) for idx, result in ranked]


def clear_ranking_cache() -> None:
    _rank_cached.cache_clear()


def results_frame(ranked: Sequence[BondResult]) -> pd.DataFrame:
    """One row per bond with raw numeric results for the display layer."""
    records: list[dict[str, object]] = []
    for position, row in enumerate(ranked, start=1):
        bond = row.bond
        result = row.result
        records.append(
            {
                'rank': position,
                'name': bond.name,
                'series': bond.series,
                'display_name': bond.display_name,
                'rate_type': bond.rate_type,
                'maturity_months': int(bond.maturity_months),
                'interest_rate': bond.interest_rate,
                'margin': bond.margin,
                'compound': bond.compound,
                'penalty': float(bond.penalty),
                'total_value': float(result.total_value),
                'profit': float(result.profit),
                'effective_rate': float(result.effective_rate),
                'round_count': len(result.purchase_rounds),
                'completed_rounds': sum(1 for r in result.purchase_rounds if r.completed),
            }
        )
    return pd.DataFrame(records, columns=RESULT_COLUMNS)


def rounds_frame(ranked: Sequence[BondResult]) -> pd.DataFrame:
    """Long-format table of every purchase round per bond."""
    records: list[dict[str, object]] = []
    for row in ranked:
        for idx, rnd in enumerate(row.result.purchase_rounds, start=1):
            records.append(
                {
                    'name': row.bond.name,
                    'round': idx,
                    'start_month': rnd.start_month,
                    'end_month': rnd.end_month,
                    'months': rnd.months,
                    'completed': rnd.completed,
                    'capital_start': rnd.capital_start,
                    'capital_end': rnd.capital_end,
                }
            )
    out = pd.DataFrame(records, columns=ROUND_COLUMNS)
    out['capital_start'] = pd.to_numeric(out['capital_start'])
    out['capital_end'] = pd.to_numeric(out['capital_end'])
    return out
