"""Calendar date normalization and month arithmetic."""
import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import List

from .errors import InvalidDateError


def to_date(value) -> date:
    """
    Normalize ``value`` to a ``datetime.date``.

    Accepts ``date``, ``datetime`` (time of day is dropped) and ISO
    ``YYYY-MM-DD`` strings. Anything else raises InvalidDateError.
    """
    if isinstance(value, datetime):
        try:
            return date(value.year, value.month, value.day)
        except (TypeError, ValueError):
            raise InvalidDateError(value) from None
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            raise InvalidDateError(value) from None
    raise InvalidDateError(value)


def is_valid_date(value) -> bool:
    """True if ``value`` can be normalized by :func:`to_date`."""
    try:
        to_date(value)
    except InvalidDateError:
        return False
    return True


def days_between(day: date, base: date) -> int:
    """Whole days from ``base`` to ``day`` (negative when ``day`` is earlier)."""
    return (day - base).days


@dataclass(frozen=True, order=True)
class YearMonth:
    """A calendar month, e.g. ``YearMonth(2025, 7)``."""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12 or not date.min.year <= self.year <= date.max.year:
            raise InvalidDateError(f"{self.year}-{self.month}")

    @classmethod
    def of(cls, value) -> "YearMonth":
        """Month containing a date (or a YearMonth, returned unchanged)."""
        if isinstance(value, YearMonth):
            return value
        day = to_date(value)
        return cls(day.year, day.month)

    @classmethod
    def parse(cls, text: str) -> "YearMonth":
        """Parse ``YYYY-MM``; a full ISO date is accepted too."""
        text = str(text).strip()
        parts = text.split("-")
        if len(parts) == 2:
            try:
                return cls(int(parts[0]), int(parts[1]))
            except ValueError:
                raise InvalidDateError(text) from None
        return cls.of(text)

    @classmethod
    def coerce(cls, value) -> "YearMonth":
        """YearMonth from a YearMonth, a date or a ``YYYY-MM`` string."""
        if isinstance(value, str):
            return cls.parse(value)
        return cls.of(value)

    def shifted(self, delta: int) -> "YearMonth":
        """Month ``delta`` months away (negative goes back)."""
        index = self.year * 12 + (self.month - 1) + int(delta)
        return YearMonth(index // 12, index % 12 + 1)

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        return date(self.year, self.month, self.days_in_month)

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def dates(self) -> List[date]:
        """Every day of the month, ascending."""
        first = self.first_day
        return [first + timedelta(days=i) for i in range(self.days_in_month)]

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
