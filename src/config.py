"""Scenario defaults and environment overrides."""

from __future__ import annotations

from dataclasses import dataclass
import os

from src.calculations.ranking import FAMILY_BOND_NAMES
from src.models.scenario import DEFAULT_INFLATION_RATE, DEFAULT_REFERENCE_RATE, ScenarioInput

ENV_PREFIX = 'BONDS_'


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {'1', 'true', 'yes', 'on'}


@dataclass
class ScenarioDefaults:
    """Default simulation inputs, matching the calculator's initial state."""

    investment: float = 100000.0
    horizon_months: int = 12
    inflation_rate: float = DEFAULT_INFLATION_RATE
    reference_rate: float = DEFAULT_REFERENCE_RATE
    auto_reinvest: bool = False
    exclude_family_bonds: bool = False
    log_level: str = 'INFO'

    @classmethod
    def from_env(cls) -> 'ScenarioDefaults':
        """Create defaults from BONDS_* environment variables."""
        base = cls()
        return cls(
            investment=float(os.getenv(f'{ENV_PREFIX}INVESTMENT', base.investment)),
            horizon_months=int(os.getenv(f'{ENV_PREFIX}HORIZON_MONTHS', base.horizon_months)),
            inflation_rate=float(os.getenv(f'{ENV_PREFIX}INFLATION_RATE', base.inflation_rate)),
            reference_rate=float(os.getenv(f'{ENV_PREFIX}REFERENCE_RATE', base.reference_rate)),
            auto_reinvest=_env_bool(f'{ENV_PREFIX}AUTO_REINVEST', base.auto_reinvest),
            exclude_family_bonds=_env_bool(f'{ENV_PREFIX}EXCLUDE_FAMILY', base.exclude_family_bonds),
            log_level=os.getenv(f'{ENV_PREFIX}LOG_LEVEL', base.log_level),
        )

    def to_scenario(self) -> ScenarioInput:
        return ScenarioInput(
            investment=self.investment,
            horizon_months=self.horizon_months,
            inflation_rate=self.inflation_rate,
            reference_rate=self.reference_rate,
            auto_reinvest=self.auto_reinvest,
        )

    def excluded_names(self) -> tuple[str, ...]:
        return FAMILY_BOND_NAMES if self.exclude_family_bonds else ()
