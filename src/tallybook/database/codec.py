"""Line codecs converting records to and from one line of text."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from tallybook.domain.entities import Record
from tallybook.domain.errors import FormatError, ValidationError, malformed_line

T = TypeVar("T")

DELIMITER = ";"


class LineCodec(ABC, Generic[T]):
    """Bidirectional converter between an item and one line of text."""

    @abstractmethod
    def to_line(self, item: T) -> str:
        """Encode an item as a single line (without newline)."""
        pass

    @abstractmethod
    def from_line(self, line: str) -> T:
        """Decode a line. Raises FormatError when the line is malformed."""
        pass


class RecordLineCodec(LineCodec[Record]):
    """Codec for the ``date;amount;description`` record format.

    The description is written last and unescaped, so it may itself contain
    the delimiter. Date and amount must not.
    """

    def __init__(self, delimiter: str = DELIMITER):
        self.delimiter = delimiter

    def to_line(self, item: Record) -> str:
        line = self.delimiter.join(
            [item.date.isoformat(), str(item.amount), item.description]
        )
        if "\n" in line or "\r" in line:
            raise FormatError(malformed_line(line, "line break inside a field"))
        return line

    def from_line(self, line: str) -> Record:
        parts = line.split(self.delimiter, 2)
        if len(parts) != 3:
            raise FormatError(malformed_line(line, f"expected 3 fields, got {len(parts)}"))

        date_text, amount_text, description = parts
        try:
            record_date = date.fromisoformat(date_text.strip())
        except ValueError as e:
            raise FormatError(malformed_line(line, f"bad date: {e}")) from e

        try:
            amount = Decimal(amount_text.strip())
        except InvalidOperation as e:
            raise FormatError(malformed_line(line, "bad amount")) from e

        try:
            return Record(date=record_date, amount=amount, description=description)
        except ValidationError as e:
            raise FormatError(malformed_line(line, str(e))) from e
