"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from tallybook.database.models import (
    Owner as ORMOwner,
    Transaction as ORMTransaction,
    transaction_type,
)
from tallybook.database.mappers import owner_to_domain, record_to_orm, transaction_to_domain
from tallybook.domain.entities import Owner, Record


class TestOwnerMapper:
    """Tests for Owner mapper."""

    def test_owner_to_domain(self):
        orm_owner = ORMOwner(id=1, name="alice", password_hash="h", created_at=datetime.now(UTC))
        owner = owner_to_domain(orm_owner)

        assert isinstance(owner, Owner)
        assert owner.id == 1
        assert owner.name == "alice"
        assert owner.password_hash == "h"
        assert owner.created_at == orm_owner.created_at


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        orm_txn = ORMTransaction(
            id=7,
            owner_id=1,
            type="EXPENSE",
            amount=Decimal("-50.00"),
            description="Groceries",
            created_at=datetime.now(UTC),
            date=date(2024, 1, 15),
        )
        record = transaction_to_domain(orm_txn)

        assert isinstance(record, Record)
        assert record.id == 7
        assert record.date == date(2024, 1, 15)
        assert record.amount == Decimal("-50.00")
        assert record.description == "Groceries"

    def test_record_to_orm(self):
        record = Record(date=date(2024, 3, 1), amount=Decimal("1000"), description="Salary")
        orm_txn = record_to_orm(record, owner_id=3)

        assert orm_txn.id is None
        assert orm_txn.owner_id == 3
        assert orm_txn.type == "INCOME"
        assert orm_txn.amount == Decimal("1000")
        assert orm_txn.description == "Salary"
        assert orm_txn.date == date(2024, 3, 1)

    def test_transaction_type(self):
        assert transaction_type(Decimal("1")) == "INCOME"
        assert transaction_type(Decimal("0")) == "INCOME"
        assert transaction_type(Decimal("-0.01")) == "EXPENSE"
