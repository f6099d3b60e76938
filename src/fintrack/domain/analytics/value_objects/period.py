"""Calendar-month period value object."""

from __future__ import annotations

import re
from calendar import month_abbr, month_name
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from fintrack.domain.ledger.exceptions import InvalidMonthError
from fintrack.domain.shared.time import to_utc

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{2})(?:-(\d{2}))?$")


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


@dataclass(frozen=True)
class Period:
    """A closed calendar-month interval ``[start, end]`` in UTC.

    ``end`` is the last representable instant of the month, so a timestamp
    belongs to the period iff ``start <= ts <= end``.
    """

    year: int
    month: int

    @classmethod
    def containing(cls, reference: date | datetime) -> Period:
        if isinstance(reference, datetime):
            reference = to_utc(reference)
        return cls(reference.year, reference.month)

    @classmethod
    def parse(cls, value: str, field: str = "month") -> Period:
        """Parse ``YYYY-MM`` or ``YYYY-MM-DD`` into the containing month."""
        match = _MONTH_PATTERN.match(value.strip())
        if not match:
            raise InvalidMonthError(value, field)
        year, month, day = match.groups()
        try:
            date(int(year), int(month), int(day) if day else 1)
        except ValueError as e:
            raise InvalidMonthError(value, field) from e
        return cls(int(year), int(month))

    @property
    def start(self) -> datetime:
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc)

    @property
    def end(self) -> datetime:
        return self.shift(1).start - timedelta(microseconds=1)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def key(self) -> str:
        """Sortable identifier, e.g. ``2024-06``."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        """Long label, e.g. ``June 2024``."""
        return f"{month_name[self.month]} {self.year}"

    @property
    def short_label(self) -> str:
        """Chart-axis label, e.g. ``Jun 2024``."""
        return f"{month_abbr[self.month]} {self.year}"

    def shift(self, months: int) -> Period:
        return Period(*_shift_month(self.year, self.month, months))

    def previous(self) -> Period:
        return self.shift(-1)

    def contains(self, moment: datetime) -> bool:
        return self.start <= to_utc(moment) <= self.end

    def __str__(self) -> str:
        return self.key


def trailing_periods(reference: Period, months: int) -> list[Period]:
    """Return ``months`` consecutive periods ending at ``reference``, oldest first."""
    return [reference.shift(-offset) for offset in range(months - 1, -1, -1)]
