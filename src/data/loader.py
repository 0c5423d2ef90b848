"""Bond catalog loader and schema normalization."""

from __future__ import annotations

import json
from pathlib import Path
import re
from typing import Any, Mapping

import pandas as pd

from src.data.validator import validate_catalog
from src.models.bond import BondModel, FixedRate, InflationLinked, RateMechanics, ReferenceRateLinked
from src.utils.logging import get_logger

LOGGER = get_logger(__name__)

CATALOG_SHEET = 'Bond_Catalog'

CATALOG_COLUMN_MAP = {
    'based_on_nbp': 'based_on_reference_rate',
    'based_on_reference': 'based_on_reference_rate',
    'lose_interest': 'lose_interest_on_early_withdrawal',
    'maturity': 'maturity_months',
}

BOOL_COLUMNS = {
    'compound': False,
    'based_on_reference_rate': False,
    'based_on_inflation': False,
    'lose_interest_on_early_withdrawal': False,
    'early_withdrawal_possible': True,
    'variable_rate': False,
}

NUMERIC_DEFAULTS = {
    'margin': 0.0,
    'penalty': 0.0,
    'purchase_price': 100.0,
}

ENGINE_COLUMNS = {
    'name',
    'series',
    'display_name',
    'maturity_months',
    'interest_rate',
    'margin',
    'penalty',
    'interest_payment',
    'purchase_price',
    'exchange_price',
    *BOOL_COLUMNS,
}

_CAMEL_RE = re.compile(r'(?<=[a-z0-9])([A-Z])')
_TRUE_STRINGS = {'true', 't', 'yes', 'y', '1'}
_FALSE_STRINGS = {'false', 'f', 'no', 'n', '0'}


def _snake(name: Any) -> str:
    text = _CAMEL_RE.sub(r'_\1', str(name).strip())
    return re.sub(r'[\s\-]+', '_', text).lower()


def _is_missing(value: Any) -> bool:
    return value is None or (not isinstance(value, str) and bool(pd.isna(value)))


def _to_bool(value: Any, default: bool) -> bool:
    if _is_missing(value):
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if not text:
            return default
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ValueError(f'Cannot interpret `{value}` as a boolean flag.')
    return bool(value)


def _to_numeric_column(values: pd.Series, default: float | None = None) -> pd.Series:
    """Convert to numbers; a column holding non-numeric text is returned unchanged
    so the validator reports it."""
    numeric = pd.to_numeric(values, errors='coerce')
    unparsed = numeric.isna() & ~values.apply(_is_missing)
    if unparsed.any():
        return values
    return numeric if default is None else numeric.fillna(default)


def _normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    out.columns = [_snake(c) for c in out.columns]
    return out.rename(columns=CATALOG_COLUMN_MAP)


def normalize_catalog_frame(raw: pd.DataFrame) -> pd.DataFrame:
    """Normalize column names, types and defaults of a raw catalog table."""
    df = _normalize_columns(raw)

    for col, default in BOOL_COLUMNS.items():
        if col not in df.columns:
            df[col] = default
        df[col] = df[col].apply(lambda v, d=default: _to_bool(v, d)).astype(bool)

    for col, default in NUMERIC_DEFAULTS.items():
        if col not in df.columns:
            df[col] = default
        df[col] = _to_numeric_column(df[col], default)

    for col in ['maturity_months', 'interest_rate']:
        if col in df.columns:
            df[col] = _to_numeric_column(df[col])

    # Secondary-market price is "-" for series that are not listed.
    if 'exchange_price' not in df.columns:
        df['exchange_price'] = None
    df['exchange_price'] = pd.to_numeric(df['exchange_price'], errors='coerce')

    if 'interest_payment' not in df.columns:
        df['interest_payment'] = 'at_end'
    df['interest_payment'] = df['interest_payment'].fillna('at_end').astype(str).str.strip().str.lower()

    if 'name' in df.columns:
        df['name'] = df['name'].astype('string').str.strip()
        if 'display_name' not in df.columns:
            df['display_name'] = df['name']
        df['display_name'] = df['display_name'].fillna(df['name']).astype(str)
    return df


def _rate_from_record(record: Mapping[str, Any]) -> RateMechanics:
    interest_rate = float(record['interest_rate'])
    margin = float(record.get('margin', 0.0) or 0.0)
    compound = bool(record.get('compound', False))
    if record.get('based_on_reference_rate') and record.get('based_on_inflation'):
        raise ValueError(f"Bond {record.get('name')} cannot be linked to both reference rate and inflation.")
    if record.get('based_on_reference_rate'):
        return ReferenceRateLinked(interest_rate=interest_rate, margin=margin)
    if record.get('based_on_inflation'):
        return InflationLinked(interest_rate=interest_rate, margin=margin, compound=compound)
    return FixedRate(interest_rate=interest_rate, compound=compound)


def bond_from_record(record: Mapping[str, Any]) -> BondModel:
    """Build one BondModel from a normalized catalog record.

    Columns outside the engine schema are kept as display strings.
    """
    exchange_price = record.get('exchange_price')
    if _is_missing(exchange_price):
        exchange_price = None
    display = {
        str(key): str(value)
        for key, value in record.items()
        if key not in ENGINE_COLUMNS and not _is_missing(value)
    }
    return BondModel(
        name=str(record['name']),
        series=str(record['series']),
        display_name=str(record.get('display_name') or record['name']),
        maturity_months=int(record['maturity_months']),
        rate=_rate_from_record(record),
        penalty=float(record.get('penalty', 0.0)),
        lose_interest_on_early_withdrawal=bool(record.get('lose_interest_on_early_withdrawal', False)),
        early_withdrawal_possible=bool(record.get('early_withdrawal_possible', True)),
        interest_payment=str(record.get('interest_payment', 'at_end')),
        purchase_price=float(record.get('purchase_price', 100.0)),
        exchange_price=None if exchange_price is None else float(exchange_price),
        display=display,
    )


def catalog_from_frame(raw: pd.DataFrame) -> tuple[BondModel, ...]:
    """Normalize, validate and convert a catalog table into bond models."""
    df = normalize_catalog_frame(raw)
    warnings = validate_catalog(df)
    for warning in warnings:
        LOGGER.warning(warning)
    bonds = tuple(bond_from_record(record) for record in df.to_dict(orient='records'))
    LOGGER.info('Loaded %s bonds from catalog.', len(bonds))
    return bonds


def _read_raw_catalog(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == '.json':
        with path.open('r', encoding='utf-8') as f:
            payload = json.load(f)
        if isinstance(payload, dict):
            payload = payload.get('bonds', [])
        if not isinstance(payload, list):
            raise ValueError('JSON catalog must be a list of bond records or {"bonds": [...]}.')
        return pd.DataFrame(payload)
    if suffix in {'.xlsx', '.xlsm', '.xls'}:
        return pd.read_excel(path, sheet_name=CATALOG_SHEET)
    raise ValueError(f'Unsupported catalog file type `{suffix}`.')


def load_bond_catalog(path: str | Path) -> tuple[BondModel, ...]:
    """Load a bond catalog from a JSON or Excel file."""
    return catalog_from_frame(_read_raw_catalog(Path(path)))
