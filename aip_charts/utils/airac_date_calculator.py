"""
AIRAC cycle date utilities.

eAIP publications are addressed by the effective date of their AIRAC cycle.
Cycles last 28 days and always start on a Thursday, so every cycle date can
be derived from a single known one.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

DateLike = Union[str, date, datetime]


class AIRACDateCalculator:
    """
    Compute AIRAC effective dates from a known reference cycle.

    Example:
        calc = AIRACDateCalculator()
        calc.get_current_airac_date('2026-02-01')  # '2026-01-22'
    """

    AIRAC_CYCLE_DAYS = 28

    # Monday=0, ..., Thursday=3
    THURSDAY_WEEKDAY = 3

    def __init__(self, reference_airac_date: str = '2025-10-02'):
        """
        Args:
            reference_airac_date: Known AIRAC date in YYYY-MM-DD format

        Raises:
            ValueError: If the reference date is malformed or not a Thursday
        """
        self.reference_date = parse_airac_date(reference_airac_date)
        if self.reference_date.weekday() != self.THURSDAY_WEEKDAY:
            raise ValueError(
                f"Reference AIRAC date must be a Thursday, but "
                f"{self.reference_date.isoformat()} is a {self.reference_date.strftime('%A')}"
            )

    def _coerce(self, value: Optional[DateLike]) -> date:
        if value is None:
            return date.today()
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        return parse_airac_date(value)

    def _cycle_index(self, day: date) -> int:
        """Index of the cycle containing day, relative to the reference cycle."""
        return (day - self.reference_date).days // self.AIRAC_CYCLE_DAYS

    def _cycle_start(self, index: int) -> date:
        return self.reference_date + timedelta(days=index * self.AIRAC_CYCLE_DAYS)

    def is_airac_date(self, value: DateLike) -> bool:
        """True if value is the first day of an AIRAC cycle."""
        day = self._coerce(value)
        return (day - self.reference_date).days % self.AIRAC_CYCLE_DAYS == 0

    def get_current_airac_date(self, from_date: Optional[DateLike] = None) -> str:
        """
        Effective date of the cycle in force on from_date (defaults to today).

        An AIRAC date is its own current cycle.
        """
        day = self._coerce(from_date)
        return self._cycle_start(self._cycle_index(day)).isoformat()

    def next_airac_date(self, from_date: Optional[DateLike] = None) -> str:
        """First AIRAC date strictly after from_date."""
        day = self._coerce(from_date)
        return self._cycle_start(self._cycle_index(day) + 1).isoformat()

    def previous_airac_date(self, from_date: Optional[DateLike] = None) -> str:
        """Last AIRAC date strictly before from_date."""
        day = self._coerce(from_date)
        index = self._cycle_index(day)
        if self.is_airac_date(day):
            index -= 1
        return self._cycle_start(index).isoformat()

    def get_airac_dates_range(self, start_date: Optional[DateLike] = None, count: int = 1) -> List[str]:
        """
        Consecutive AIRAC dates, starting with the first one on or after start_date.
        """
        day = self._coerce(start_date)
        index = self._cycle_index(day)
        if not self.is_airac_date(day):
            index += 1
        return [self._cycle_start(index + i).isoformat() for i in range(count)]


def parse_airac_date(value: str) -> date:
    """
    Parse a YYYY-MM-DD date.

    Raises:
        ValueError: If the date is not in the expected format
    """
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except (TypeError, ValueError):
        raise ValueError(f"Invalid AIRAC date format: {value}. Expected YYYY-MM-DD")


def get_current_airac_date(from_date: Optional[DateLike] = None,
                           reference_date: str = '2025-10-02') -> str:
    """Current effective AIRAC date using the default reference cycle."""
    return AIRACDateCalculator(reference_date).get_current_airac_date(from_date)
