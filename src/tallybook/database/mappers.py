"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the rest of the code only ever
sees frozen domain entities.
"""

from tallybook.domain import entities as domain
from tallybook.database.models import (
    Owner as ORMOwner,
    Transaction as ORMTransaction,
    transaction_type,
)


def owner_to_domain(orm_owner: ORMOwner) -> domain.Owner:
    """Convert SQLAlchemy Owner model to domain Owner entity."""
    return domain.Owner(
        id=orm_owner.id,
        name=orm_owner.name,
        password_hash=orm_owner.password_hash,
        created_at=orm_owner.created_at,
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Record:
    """Convert SQLAlchemy Transaction model to domain Record entity."""
    return domain.Record(
        id=orm_transaction.id,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        description=orm_transaction.description,
    )


def record_to_orm(record: domain.Record, owner_id: int) -> ORMTransaction:
    """Build an unsaved SQLAlchemy Transaction for an owner's record."""
    return ORMTransaction(
        owner_id=owner_id,
        type=transaction_type(record.amount),
        amount=record.amount,
        description=record.description,
        date=record.date,
    )
