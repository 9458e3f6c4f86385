"""
Runtime configuration for chart discovery.

Settings are plain values passed to the providers. They can be given
explicitly or read from AIP_CHARTS_* environment variables.
"""

import os
from dataclasses import dataclass
from typing import Optional

from .utils.airac_date_calculator import get_current_airac_date, parse_airac_date

DEFAULT_TIMEOUT = 30
DEFAULT_MAX_WORKERS = 4
DEFAULT_USER_AGENT = "aip-charts/0.1 (chart discovery)"

ENV_PREFIX = "AIP_CHARTS_"


def _env_flag(value: Optional[str]) -> bool:
    return (value or '').strip().lower() in ('1', 'true', 'yes', 'on')


@dataclass
class ChartSettings:
    """
    Settings shared by the chart providers.

    Attributes:
        airac_date: AIRAC effective date (YYYY-MM-DD) of the French eAIP cycle
        uk_airac_date: AIRAC effective date of the UK eAIP cycle
        timeout: HTTP timeout in seconds
        user_agent: User-Agent header sent to the sources
        enable_atlas_vac: Query the French VAC atlas for LF aerodromes
        max_workers: Maximum number of providers queried in parallel
    """
    airac_date: Optional[str] = None
    uk_airac_date: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    enable_atlas_vac: bool = False
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        if self.airac_date is None:
            self.airac_date = get_current_airac_date()
        if self.uk_airac_date is None:
            self.uk_airac_date = self.airac_date
        parse_airac_date(self.airac_date)
        parse_airac_date(self.uk_airac_date)
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def from_env(cls, environ=None) -> 'ChartSettings':
        """Build settings from AIP_CHARTS_* environment variables."""
        env = os.environ if environ is None else environ

        def get(name: str) -> Optional[str]:
            value = env.get(ENV_PREFIX + name)
            return value if value else None

        return cls(
            airac_date=get("AIRAC_DATE"),
            uk_airac_date=get("UK_AIRAC_DATE"),
            timeout=float(get("TIMEOUT") or DEFAULT_TIMEOUT),
            user_agent=get("USER_AGENT") or DEFAULT_USER_AGENT,
            enable_atlas_vac=_env_flag(get("ENABLE_ATLAS_VAC")),
            max_workers=int(get("MAX_WORKERS") or DEFAULT_MAX_WORKERS),
        )
