"""Domain layer for tallybook application.

Services that depend on the database layer (``ledger``, ``owner``) are not
imported here, so ``tallybook.database`` can import the entities without a
circular import.
"""

from tallybook.domain.entities import Owner, Record
from tallybook.domain.report import Day, Month, PeriodTotals, ReportService, Week, Year
from tallybook.domain.session import OwnerSession

__all__ = [
    "Owner",
    "Record",
    "Day",
    "Month",
    "PeriodTotals",
    "ReportService",
    "Week",
    "Year",
    "OwnerSession",
]
