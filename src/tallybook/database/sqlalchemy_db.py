"""Generic SQLAlchemy repository implementation.

Transactions in the relational store always belong to an owner. The
owner-scoped methods (``*_for_owner``) are the real API; the owner-agnostic
methods inherited from :class:`TransactionRepository` either refuse loudly
(writes) or return nothing (reads) so that no row is ever written, and no row
is ever read, without an owner.
"""

import logging
from datetime import date
from typing import Iterable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tallybook.database.base import TransactionRepository
from tallybook.database.models import AMOUNT_SCALE, Owner, Transaction, fits_amount_column
from tallybook.database.mappers import owner_to_domain, record_to_orm, transaction_to_domain
from tallybook.domain.entities import Owner as DomainOwner, Record
from tallybook.domain.errors import (
    ConflictError,
    UnsupportedOperationError,
    duplicate_owner_name,
    no_current_owner,
    owner_required,
)

logger = logging.getLogger(__name__)


class SQLAlchemyTransactionRepository(TransactionRepository):
    """Owner-scoped relational store backed by SQLAlchemy."""

    requires_owner = True

    def __init__(self, session_factory: sessionmaker[Session]):
        """Initialize the repository.

        Args:
            session_factory: Session factory bound to the target database, see
                :func:`tallybook.database.models.create_session_factory`
        """
        self.session_factory = session_factory
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def disconnect(self) -> None:
        """Close the current session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def _has_owner(self, owner_id: Optional[int], operation: str) -> bool:
        if owner_id is None:
            logger.warning(no_current_owner(operation))
            return False
        return True

    def _fits(self, records: list[Record]) -> bool:
        for record in records:
            if not fits_amount_column(record.amount):
                logger.error(
                    "Amount %s has more than %d decimal places, not saving", record.amount, AMOUNT_SCALE
                )
                return False
        return True

    # Owner operations
    def create_owner(self, name: str, password_hash: Optional[str] = None) -> int:
        """Create an owner. Returns owner ID.

        Raises:
            ConflictError: If an owner with the same name exists
        """
        session = self._get_session()
        owner = Owner(name=name, password_hash=password_hash)
        session.add(owner)
        try:
            session.commit()
        except IntegrityError as e:
            session.rollback()
            raise ConflictError(duplicate_owner_name(name)) from e
        return owner.id

    def get_owner(self, owner_id: int) -> Optional[DomainOwner]:
        """Get owner by ID."""
        session = self._get_session()
        owner = session.query(Owner).filter(Owner.id == owner_id).first()
        if owner is None:
            return None
        return owner_to_domain(owner)

    def get_owner_by_name(self, name: str) -> Optional[DomainOwner]:
        """Get owner by name."""
        session = self._get_session()
        owner = session.query(Owner).filter(Owner.name == name).first()
        if owner is None:
            return None
        return owner_to_domain(owner)

    # Owner-scoped transaction operations
    def save_for_owner(self, record: Record, owner_id: Optional[int]) -> Optional[Record]:
        """Insert a record for an owner.

        Returns:
            The stored record carrying its new ID, or None if nothing was
            written (no owner, unknown owner, unstorable amount or database failure)
        """
        if not self._has_owner(owner_id, "save transaction"):
            return None
        if not self._fits([record]):
            return None

        session = self._get_session()
        row = record_to_orm(record, owner_id)
        session.add(row)
        try:
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not save transaction for owner %s: %s", owner_id, e)
            return None
        return transaction_to_domain(row)

    def delete_for_owner(self, record_id: int, owner_id: Optional[int]) -> bool:
        """Delete one of the owner's records by ID. Other owners' rows are untouched."""
        if not self._has_owner(owner_id, "delete transaction"):
            return False

        session = self._get_session()
        try:
            deleted = (
                session.query(Transaction)
                .filter(Transaction.id == record_id, Transaction.owner_id == owner_id)
                .delete(synchronize_session=False)
            )
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not delete transaction %s: %s", record_id, e)
            return False
        return deleted > 0

    def find_all_for_owner(self, owner_id: Optional[int]) -> list[Record]:
        """List the owner's records in insertion order."""
        if not self._has_owner(owner_id, "list transactions"):
            return []

        session = self._get_session()
        try:
            rows = (
                session.query(Transaction)
                .filter(Transaction.owner_id == owner_id)
                .order_by(Transaction.created_at, Transaction.id)
                .all()
            )
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not read transactions for owner %s: %s", owner_id, e)
            return []
        return [transaction_to_domain(row) for row in rows]

    def find_by_date_range_for_owner(
        self, start_date: date, end_date: date, owner_id: Optional[int]
    ) -> list[Record]:
        """List the owner's records dated within [start_date, end_date], by date."""
        if not self._has_owner(owner_id, "list transactions"):
            return []

        session = self._get_session()
        try:
            rows = (
                session.query(Transaction)
                .filter(
                    Transaction.owner_id == owner_id,
                    Transaction.date >= start_date,
                    Transaction.date <= end_date,
                )
                .order_by(Transaction.date, Transaction.id)
                .all()
            )
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not read transactions for owner %s: %s", owner_id, e)
            return []
        return [transaction_to_domain(row) for row in rows]

    def count_for_owner(self, owner_id: Optional[int]) -> int:
        """Count the owner's records."""
        if not self._has_owner(owner_id, "count transactions"):
            return 0

        session = self._get_session()
        try:
            return session.query(Transaction).filter(Transaction.owner_id == owner_id).count()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not count transactions for owner %s: %s", owner_id, e)
            return 0

    def save_all_for_owner(self, records: Iterable[Record], owner_id: Optional[int]) -> bool:
        """Replace all of the owner's records in a single transaction.

        Returns:
            True if the replacement was committed, False if it was rolled back
        """
        if not self._has_owner(owner_id, "replace transactions"):
            return False
        records = list(records)
        if not self._fits(records):
            return False

        session = self._get_session()
        try:
            session.query(Transaction).filter(Transaction.owner_id == owner_id).delete(
                synchronize_session=False
            )
            session.add_all([record_to_orm(record, owner_id) for record in records])
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error("Could not replace transactions for owner %s: %s", owner_id, e)
            return False
        return True

    def for_owner(self, owner_id: int) -> "OwnerTransactionRepository":
        """Return a repository view bound to one owner."""
        return OwnerTransactionRepository(self, owner_id)

    # Owner-agnostic entry points
    def save(self, record: Record) -> Record:
        raise UnsupportedOperationError(owner_required("save", "save_for_owner"))

    def delete(self, identity: int) -> bool:
        raise UnsupportedOperationError(owner_required("delete", "delete_for_owner"))

    def save_all(self, records: Iterable[Record]) -> None:
        logger.debug("save_all() without an owner is ignored, use save_all_for_owner()")

    def find_all(self) -> list[Record]:
        return []

    def find_by_date_range(self, start_date: date, end_date: date) -> list[Record]:
        return []

    def count(self) -> int:
        return 0


class OwnerTransactionRepository(TransactionRepository):
    """View of the relational store restricted to a single owner.

    Identity is the record's surrogate key (``Record.id``).
    """

    requires_owner = True

    def __init__(self, store: SQLAlchemyTransactionRepository, owner_id: int):
        self.store = store
        self.owner_id = owner_id

    def save(self, record: Record) -> Optional[Record]:
        return self.store.save_for_owner(record, self.owner_id)

    def delete(self, identity: int) -> bool:
        return self.store.delete_for_owner(identity, self.owner_id)

    def find_all(self) -> list[Record]:
        return self.store.find_all_for_owner(self.owner_id)

    def find_by_date_range(self, start_date: date, end_date: date) -> list[Record]:
        return self.store.find_by_date_range_for_owner(start_date, end_date, self.owner_id)

    def count(self) -> int:
        return self.store.count_for_owner(self.owner_id)

    def save_all(self, records: Iterable[Record]) -> bool:
        return self.store.save_all_for_owner(records, self.owner_id)
