"""Tests for domain entities."""

import pytest
from datetime import datetime, date, UTC
from decimal import Decimal

from tallybook.domain.entities import Owner, Record, to_decimal
from tallybook.domain.errors import ValidationError


class TestRecord:
    """Tests for Record entity."""

    def test_create_record(self):
        record = Record(date=date(2024, 3, 1), amount=Decimal("1000.00"), description="Salary")
        assert record.date == date(2024, 3, 1)
        assert record.amount == Decimal("1000.00")
        assert record.description == "Salary"
        assert record.id is None
        assert record.is_income
        assert not record.is_expense

    def test_record_immutability(self):
        record = Record(date=date(2024, 3, 1), amount=Decimal("1"), description="x")
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            record.amount = Decimal("2")

    def test_date_is_required(self):
        with pytest.raises(ValidationError):
            Record(date=None, amount=Decimal("1"), description="x")

    def test_float_amount_converted_via_text(self):
        record = Record(date=date(2024, 3, 1), amount=0.1)
        assert record.amount == Decimal("0.1")

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), "abc", True])
    def test_non_finite_or_invalid_amount_rejected(self, amount):
        with pytest.raises(ValidationError):
            Record(date=date(2024, 3, 1), amount=amount)

    def test_description_is_trimmed(self):
        record = Record(date=date(2024, 3, 1), amount=Decimal("-5"), description="  Coffee  ")
        assert record.description == "Coffee"

    @pytest.mark.parametrize("text", ["line one\nline two", "line one\r\nline two", "line one\rline two"])
    def test_line_breaks_in_description_become_spaces(self, text):
        record = Record(date=date(2024, 3, 1), amount=Decimal("5"), description=text)
        assert record.description == "line one line two"

    @pytest.mark.parametrize(
        "amount, expected",
        [(Decimal("10"), "Income"), (Decimal("-10"), "Expense"), (Decimal("0"), "Expense")],
    )
    def test_empty_description_defaults_from_sign(self, amount, expected):
        assert Record(date=date(2024, 3, 1), amount=amount, description="").description == expected
        assert Record(date=date(2024, 3, 1), amount=amount, description=None).description == expected

    def test_zero_amount_is_neither_income_nor_expense(self):
        record = Record(date=date(2024, 3, 1), amount=Decimal("0"))
        assert not record.is_income
        assert not record.is_expense

    def test_equality_ignores_id(self):
        a = Record(date=date(2024, 3, 1), amount=Decimal("5"), description="x")
        b = a.with_id(42)
        assert b.id == 42
        assert a == b

    def test_to_decimal_keeps_decimal(self):
        value = Decimal("12.345")
        assert to_decimal(value) is value


class TestOwner:
    """Tests for Owner entity."""

    def test_create_owner(self):
        owner = Owner(id=1, name="alice", password_hash="h", created_at=datetime.now(UTC))
        assert owner.id == 1
        assert owner.name == "alice"
        assert isinstance(owner.created_at, datetime)

    def test_owner_immutability(self):
        owner = Owner(id=1, name="alice", password_hash=None, created_at=datetime.now(UTC))
        with pytest.raises(Exception):
            owner.name = "bob"
