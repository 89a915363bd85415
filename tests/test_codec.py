"""Tests for the record line codec."""

import pytest
from datetime import date
from decimal import Decimal

from tallybook.database.codec import RecordLineCodec
from tallybook.domain.entities import Record
from tallybook.domain.errors import FormatError


@pytest.fixture
def codec():
    return RecordLineCodec()


def test_to_line_joins_fields(codec):
    record = Record(date=date(2024, 3, 1), amount=Decimal("1000.0"), description="Salary")
    assert codec.to_line(record) == "2024-03-01;1000.0;Salary"


def test_from_line(codec):
    record = codec.from_line("2024-03-15;-200.0;Groceries")
    assert record == Record(date=date(2024, 3, 15), amount=Decimal("-200.0"), description="Groceries")


def test_description_may_contain_delimiter(codec):
    record = Record(date=date(2024, 3, 1), amount=Decimal("-3.50"), description="Coffee; large; oat milk")
    line = codec.to_line(record)
    assert codec.from_line(line) == record
    assert codec.from_line(line).description == "Coffee; large; oat milk"


@pytest.mark.parametrize(
    "record",
    [
        Record(date=date(2024, 2, 29), amount=Decimal("0"), description="Neutral"),
        Record(date=date(1999, 12, 31), amount=Decimal("-0.01"), description="Fee"),
        Record(date=date(2024, 1, 1), amount=Decimal("123456.789"), description="Bonus"),
    ],
)
def test_round_trip(codec, record):
    assert codec.from_line(codec.to_line(record)) == record


@pytest.mark.parametrize(
    "line",
    [
        "2024-03-01;1000.0",
        "no delimiters here",
        "not-a-date;10;x",
        "2024-03-01;ten;x",
        "2024-13-01;10;x",
        "2024-03-01;NaN;x",
    ],
)
def test_malformed_lines_raise_format_error(codec, line):
    with pytest.raises(FormatError):
        codec.from_line(line)


def test_empty_description_is_normalized(codec):
    record = codec.from_line("2024-03-01;-10;")
    assert record.description == "Expense"


def test_custom_delimiter():
    codec = RecordLineCodec(delimiter="|")
    record = Record(date=date(2024, 3, 1), amount=Decimal("5"), description="a;b")
    assert codec.to_line(record) == "2024-03-01|5|a;b"
    assert codec.from_line("2024-03-01|5|a;b") == record


def test_multiline_description_round_trips_as_one_line(codec):
    record = Record(date=date(2024, 3, 1), amount=Decimal("5"), description="line one\nline two")
    line = codec.to_line(record)
    assert line == "2024-03-01;5;line one line two"
    assert codec.from_line(line) == record


def test_to_line_refuses_line_breaks(codec):
    record = object.__new__(Record)
    object.__setattr__(record, "date", date(2024, 3, 1))
    object.__setattr__(record, "amount", Decimal("5"))
    object.__setattr__(record, "description", "line one\nline two")
    object.__setattr__(record, "id", None)

    with pytest.raises(FormatError):
        codec.to_line(record)
