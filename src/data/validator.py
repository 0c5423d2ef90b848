"""Catalog validation for normalized bond records."""

from __future__ import annotations

import pandas as pd

from src.models.bond import INTEREST_PAYMENT_OPTIONS

CATALOG_REQUIRED_COLUMNS = [
    'name',
    'series',
    'maturity_months',
    'interest_rate',
]

NUMERIC_COLUMNS = ['maturity_months', 'interest_rate', 'margin', 'penalty']


def _missing_columns(df: pd.DataFrame, required: list[str]) -> list[str]:
    cols = set(df.columns)
    return [col for col in required if col not in cols]


def validate_catalog(df: pd.DataFrame) -> list[str]:
    """Validate a normalized catalog frame and return non-fatal warnings.

    Authoring defects (missing columns, duplicate names, a bond linked to
    both the reference rate and inflation, maturity under one month) raise
    ``ValueError``.
    """
    missing = _missing_columns(df, CATALOG_REQUIRED_COLUMNS)
    if missing:
        raise ValueError(f'Missing required catalog columns: {missing}')

    if df[CATALOG_REQUIRED_COLUMNS].isna().any().any():
        raise ValueError('Catalog contains nulls in required columns.')

    for col in NUMERIC_COLUMNS:
        if col in df.columns and not pd.api.types.is_numeric_dtype(df[col]):
            raise ValueError(f'Column {col} must be numeric dtype.')

    if df['name'].duplicated().any():
        dupes = sorted(df.loc[df['name'].duplicated(), 'name'].astype(str).unique().tolist())
        raise ValueError(f'Duplicate bond names found: {dupes}')

    if {'based_on_reference_rate', 'based_on_inflation'}.issubset(df.columns):
        both = df['based_on_reference_rate'].astype(bool) & df['based_on_inflation'].astype(bool)
        if both.any():
            names = df.loc[both, 'name'].astype(str).tolist()
            raise ValueError(f'Bonds cannot be linked to both reference rate and inflation: {names}')

    if (df['maturity_months'] < 1).any():
        raise ValueError('All bonds must have maturity_months >= 1.')
    if (df['maturity_months'] != df['maturity_months'].round()).any():
        raise ValueError('maturity_months must be a whole number of months.')

    if 'interest_payment' in df.columns:
        unknown = ~df['interest_payment'].isin(INTEREST_PAYMENT_OPTIONS)
        if unknown.any():
            values = sorted(df.loc[unknown, 'interest_payment'].astype(str).unique().tolist())
            raise ValueError(f'Unknown interest_payment values: {values}')

    warnings: list[str] = []

    if 'penalty' in df.columns:
        negative_penalty = int((df['penalty'] < 0).sum())
        if negative_penalty:
            warnings.append(f'{negative_penalty} bonds have a negative penalty; it will be ignored.')

    high_rate = int((df['interest_rate'].abs() > 100.0).sum())
    if high_rate:
        warnings.append(f'{high_rate} bonds have interest_rate magnitude > 100%.')

    if {'lose_interest_on_early_withdrawal', 'penalty'}.issubset(df.columns):
        both_rules = df['lose_interest_on_early_withdrawal'].astype(bool) & (df['penalty'] > 0)
        if both_rules.any():
            warnings.append(
                f'{int(both_rules.sum())} bonds both forfeit interest and charge a penalty on early withdrawal.'
            )

    if {'based_on_reference_rate', 'compound'}.issubset(df.columns):
        ignored = df['based_on_reference_rate'].astype(bool) & df['compound'].astype(bool)
        if ignored.any():
            warnings.append(
                f'{int(ignored.sum())} reference-rate bonds set compound; reference-rate accrual is always simple.'
            )

    return warnings
