"""Domain model entities for tallybook.

These are pure data classes representing business concepts, independent of
how they are persisted. The same ``Record`` flows through the flat-file store
and the relational store; only the relational store assigns an ``id``.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal, InvalidOperation
from typing import Optional

from tallybook.domain.errors import ValidationError

DEFAULT_INCOME_DESCRIPTION = "Income"
DEFAULT_EXPENSE_DESCRIPTION = "Expense"

_LINE_BREAKS = re.compile(r"[\r\n]+")


def default_description(amount: Decimal) -> str:
    """Return the description used when none was given for an amount."""
    return DEFAULT_INCOME_DESCRIPTION if amount > 0 else DEFAULT_EXPENSE_DESCRIPTION


def to_decimal(value) -> Decimal:
    """Convert an int/float/str amount to a finite Decimal."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value))
        except (InvalidOperation, ValueError) as e:
            raise ValidationError(f"Invalid amount: {value!r}") from e
    if not amount.is_finite():
        raise ValidationError(f"Amount must be finite, got {value!r}")
    return amount


@dataclass(frozen=True)
class Record:
    """A single dated income/expense entry.

    Positive amounts are income, negative amounts are expenses and zero is
    neutral. ``id`` is only present for records loaded from the relational
    store; flat-file records are identified by their position.
    """

    date: date
    amount: Decimal
    description: str = ""
    id: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if self.date is None:
            raise ValidationError("Record date must not be None")
        amount = to_decimal(self.amount)
        # Stored one record per line, so line breaks become spaces
        description = _LINE_BREAKS.sub(" ", self.description or "").strip()
        if not description:
            description = default_description(amount)
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "description", description)

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    def with_id(self, record_id: Optional[int]) -> "Record":
        """Return a copy of this record carrying a durable identity."""
        return Record(
            date=self.date,
            amount=self.amount,
            description=self.description,
            id=record_id,
        )


@dataclass(frozen=True)
class Owner:
    """Owner domain entity scoping a set of relational records."""

    id: int
    name: str
    password_hash: Optional[str]
    created_at: datetime
