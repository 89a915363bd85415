"""Period reporting: income, expense and net totals per calendar period.

Week numbers are *aligned* weeks: week 1 is January 1-7, week 2 is
January 8-14 and so on, regardless of weekday. This is not ISO-8601 week
numbering. Week 53 holds the last one or two days of the year.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import Iterable, NamedTuple, Optional, Sequence, Union

from tallybook.domain.entities import Record
from tallybook.domain.errors import ValidationError

ZERO = Decimal("0")
MAX_WEEK = 53


class PeriodTotals(NamedTuple):
    """Income, expense and net sums for a period.

    ``expenses`` is a positive number: the sum of the absolute values of all
    negative amounts.
    """

    income: Decimal
    expenses: Decimal
    net: Decimal


EMPTY_TOTALS = PeriodTotals(ZERO, ZERO, ZERO)


def aligned_week_of_year(day: date) -> int:
    """Return the 1-based 7-day block of the year that ``day`` falls in."""
    return (day.timetuple().tm_yday - 1) // 7 + 1


@dataclass(frozen=True)
class Year:
    year: int

    def contains(self, day: date) -> bool:
        return day.year == self.year

    def bounds(self) -> tuple[date, date]:
        return date(self.year, 1, 1), date(self.year, 12, 31)

    @property
    def key(self) -> str:
        return f"{self.year:04d}"


@dataclass(frozen=True)
class Month:
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValidationError(f"Month must be between 1 and 12, got {self.month}")

    def contains(self, day: date) -> bool:
        return day.year == self.year and day.month == self.month

    def bounds(self) -> tuple[date, date]:
        start = date(self.year, self.month, 1)
        if self.month == 12:
            next_month = date(self.year + 1, 1, 1)
        else:
            next_month = date(self.year, self.month + 1, 1)
        return start, next_month - timedelta(days=1)

    @property
    def key(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"


@dataclass(frozen=True)
class Week:
    """Aligned week ``week`` of ``year`` (see module docstring)."""

    year: int
    week: int

    def __post_init__(self):
        if not 1 <= self.week <= MAX_WEEK:
            raise ValidationError(f"Week must be between 1 and {MAX_WEEK}, got {self.week}")

    def contains(self, day: date) -> bool:
        return day.year == self.year and aligned_week_of_year(day) == self.week

    def bounds(self) -> tuple[date, date]:
        start = date(self.year, 1, 1) + timedelta(days=7 * (self.week - 1))
        end = min(start + timedelta(days=6), date(self.year, 12, 31))
        return start, end

    @property
    def key(self) -> str:
        return f"{self.year:04d}-W{self.week:02d}"


@dataclass(frozen=True)
class Day:
    day: date

    def contains(self, day: date) -> bool:
        return day == self.day

    def bounds(self) -> tuple[date, date]:
        return self.day, self.day

    @property
    def key(self) -> str:
        return self.day.isoformat()


Period = Union[Year, Month, Week, Day]

PERIOD_KINDS = ("year", "month", "week", "day")


def period_of(day: date, kind: str) -> Period:
    """Return the period of the given kind that contains ``day``."""
    if kind == "year":
        return Year(day.year)
    if kind == "month":
        return Month(day.year, day.month)
    if kind == "week":
        return Week(day.year, aligned_week_of_year(day))
    if kind == "day":
        return Day(day)
    raise ValidationError(f"Unknown period kind: '{kind}'. Supported kinds: {', '.join(PERIOD_KINDS)}")


def totals(records: Iterable[Record]) -> PeriodTotals:
    """Sum income and expenses over ``records``. Zero amounts count for neither."""
    income = ZERO
    expenses = ZERO
    for record in records:
        if record.amount > 0:
            income += record.amount
        elif record.amount < 0:
            expenses += -record.amount
    return PeriodTotals(income, expenses, income - expenses)


def in_period(records: Iterable[Record], period: Period) -> list[Record]:
    """Return the records dated within ``period``; undated records are dropped."""
    return [r for r in records if r.date is not None and period.contains(r.date)]


def period_totals(records: Iterable[Record], period: Period) -> PeriodTotals:
    """Totals for the records dated within ``period``."""
    return totals(in_period(records, period))


def balance(records: Iterable[Record]) -> Decimal:
    """Sum of all amounts."""
    return sum((r.amount for r in records), ZERO)


def group_totals_by_period(records: Iterable[Record], kind: str) -> dict[str, PeriodTotals]:
    """Group records by period key ("2024", "2024-03", "2024-W09", "2024-03-01").

    Returns:
        Totals per period key, sorted by key
    """
    grouped: dict[str, list[Record]] = {}
    for record in records:
        if record.date is None:
            continue
        key = period_of(record.date, kind).key
        grouped.setdefault(key, []).append(record)
    return {key: totals(grouped[key]) for key in sorted(grouped)}


class ReportService:
    """Service producing period reports from a repository's records.

    The repository must already be scoped to a single owner when it is
    relational, see :meth:`SQLAlchemyTransactionRepository.for_owner`.
    """

    def __init__(self, repository):
        """Initialize report service.

        Args:
            repository: TransactionRepository to read records from
        """
        self.repository = repository

    def _records(self, period: Optional[Period] = None) -> Sequence[Record]:
        if period is None:
            return self.repository.find_all()
        start, end = period.bounds()
        return self.repository.find_by_date_range(start, end)

    def summarize(self, period: Period) -> PeriodTotals:
        """Totals for one period."""
        return period_totals(self._records(period), period)

    def yearly(self, year: int) -> PeriodTotals:
        return self.summarize(Year(year))

    def monthly(self, year: int, month: int) -> PeriodTotals:
        return self.summarize(Month(year, month))

    def weekly(self, year: int, week: int) -> PeriodTotals:
        return self.summarize(Week(year, week))

    def daily(self, day: date) -> PeriodTotals:
        return self.summarize(Day(day))

    def balance(self) -> Decimal:
        """Net of every record."""
        return balance(self._records())

    def breakdown(self, kind: str) -> dict[str, PeriodTotals]:
        """Totals for every period of ``kind`` that has records."""
        if kind not in PERIOD_KINDS:
            raise ValidationError(f"Unknown period kind: '{kind}'. Supported kinds: {', '.join(PERIOD_KINDS)}")
        return group_totals_by_period(self._records(), kind)
