"""Abstract repository interface."""

from abc import ABC, abstractmethod
from datetime import date
from typing import Iterable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from tallybook.domain.entities import Record


class TransactionRepository(ABC):
    """Common contract for storing and querying records.

    Identity semantics differ per backend: the flat-file repository
    identifies records by their position in ``find_all()``, the relational
    repository by the surrogate key in ``Record.id``. Callers must not mix
    the two; ``requires_owner`` tells them which one applies.
    """

    requires_owner: bool = False

    @abstractmethod
    def save(self, record: Record) -> Record:
        """Store a record. Returns the stored record (with id if assigned)."""
        pass

    @abstractmethod
    def delete(self, identity: int) -> bool:
        """Delete a record by identity. Returns True if something was removed."""
        pass

    @abstractmethod
    def find_all(self) -> list[Record]:
        """Return all records in storage order."""
        pass

    @abstractmethod
    def find_by_date_range(self, start_date: date, end_date: date) -> list[Record]:
        """Return records with start_date <= date <= end_date."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored records."""
        pass

    @abstractmethod
    def save_all(self, records: Iterable[Record]) -> Optional[bool]:
        """Replace every stored record with ``records``.

        Implementations may return False when nothing was stored.
        """
        pass
