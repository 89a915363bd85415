"""Ledger domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from tallybook.database.base import TransactionRepository
from tallybook.domain.entities import Record, to_decimal
from tallybook.domain.errors import ValidationError, future_date, no_current_owner
from tallybook.domain.report import (
    EMPTY_TOTALS,
    ZERO,
    Day,
    Month,
    Period,
    PeriodTotals,
    ReportService,
    Week,
    Year,
)
from tallybook.domain.session import OwnerSession

logger = logging.getLogger(__name__)


class LedgerService:
    """Service for recording transactions and reporting on them.

    Works with either backend. When the repository requires an owner, every
    call is scoped to the session's current owner; without one, reads return
    nothing and writes do nothing.
    """

    def __init__(self, repository: TransactionRepository, session: Optional[OwnerSession] = None):
        """Initialize ledger service.

        Args:
            repository: Repository instance
            session: Current-owner session, required for relational repositories
        """
        self.repository = repository
        self.session = session

    def _scoped(self, operation: str) -> Optional[TransactionRepository]:
        """Return the repository to use for the current owner, if any."""
        if not self.repository.requires_owner:
            return self.repository
        if self.session is None or not self.session.is_authenticated:
            logger.warning(no_current_owner(operation))
            return None
        return self.repository.for_owner(self.session.current_owner_id)

    def add_record(self, day: date, amount, description: Optional[str] = None) -> Optional[Record]:
        """Record a user-entered transaction.

        Args:
            day: Transaction date, must not be in the future
            amount: Signed amount (positive income, negative expense)
            description: Optional description, defaults to "Income"/"Expense"

        Returns:
            The stored record, or None if there is no current owner or the
            store rejected the write

        Raises:
            ValidationError: If the date is missing or in the future, or the
                amount is not a finite number
        """
        if day is None:
            raise ValidationError("Date is required")
        if day > date.today():
            raise ValidationError(future_date(day))
        record = Record(date=day, amount=to_decimal(amount), description=description or "")

        repository = self._scoped("add transaction")
        if repository is None:
            return None
        return repository.save(record)

    def remove_record(self, identity: int) -> bool:
        """Delete a record by position (file backend) or ID (relational backend)."""
        repository = self._scoped("delete transaction")
        if repository is None:
            return False
        return repository.delete(identity)

    def list_records(self) -> list[Record]:
        repository = self._scoped("list transactions")
        if repository is None:
            return []
        return repository.find_all()

    def records_between(self, start_date: date, end_date: date) -> list[Record]:
        """Records dated within [start_date, end_date]."""
        repository = self._scoped("list transactions")
        if repository is None:
            return []
        return repository.find_by_date_range(start_date, end_date)

    def count(self) -> int:
        repository = self._scoped("count transactions")
        if repository is None:
            return 0
        return repository.count()

    def replace_all(self, records: Iterable[Record]) -> bool:
        """Replace every record of the current owner (or of the file)."""
        repository = self._scoped("replace transactions")
        if repository is None:
            return False
        result = repository.save_all(list(records))
        return result is not False

    # Reports
    def report(self, period: Period) -> PeriodTotals:
        repository = self._scoped("build report")
        if repository is None:
            return EMPTY_TOTALS
        return ReportService(repository).summarize(period)

    def yearly_totals(self, year: int) -> PeriodTotals:
        return self.report(Year(year))

    def monthly_totals(self, year: int, month: int) -> PeriodTotals:
        return self.report(Month(year, month))

    def weekly_totals(self, year: int, week: int) -> PeriodTotals:
        return self.report(Week(year, week))

    def daily_totals(self, day: date) -> PeriodTotals:
        return self.report(Day(day))

    def balance(self) -> Decimal:
        repository = self._scoped("build report")
        if repository is None:
            return ZERO
        return ReportService(repository).balance()

    def breakdown(self, kind: str) -> dict[str, PeriodTotals]:
        """Totals per year, month, week or day for the current owner."""
        repository = self._scoped("build report")
        if repository is None:
            return {}
        return ReportService(repository).breakdown(kind)
