"""Tests for date and amount parsing."""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from tallybook.utils.date_parser import parse_date, get_date_range
from tallybook.utils.amount_parser import parse_amount

# A Wednesday
TODAY = date(2024, 3, 13)


def test_parse_absolute_date():
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_today_and_yesterday():
    assert parse_date("today") == date.today()
    assert parse_date("Yesterday") == date.today() - timedelta(days=1)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("this month", date(2024, 3, 1)),
        ("last month", date(2024, 2, 1)),
        ("this year", date(2024, 1, 1)),
        ("last year", date(2023, 1, 1)),
        ("this week", date(2024, 3, 11)),
        ("last week", date(2024, 3, 4)),
    ],
)
def test_parse_relative_periods(text, expected):
    assert parse_date(text, today=TODAY) == expected


def test_parse_invalid_date():
    with pytest.raises(ValueError):
        parse_date("not-a-date")


@pytest.mark.parametrize(
    "period, expected",
    [
        ("this-month", (date(2024, 3, 1), TODAY)),
        ("this-year", (date(2024, 1, 1), TODAY)),
        ("this-week", (date(2024, 3, 11), TODAY)),
        ("last-month", (date(2024, 2, 1), date(2024, 2, 29))),
        ("last-year", (date(2023, 1, 1), date(2023, 12, 31))),
        ("last-week", (date(2024, 3, 4), date(2024, 3, 10))),
    ],
)
def test_get_date_range(period, expected):
    assert get_date_range(period, today=TODAY) == expected


def test_get_date_range_last_month_in_january():
    assert get_date_range("last-month", today=date(2024, 1, 20)) == (date(2023, 12, 1), date(2023, 12, 31))


def test_get_date_range_unknown():
    with pytest.raises(ValueError, match="Unknown period"):
        get_date_range("next-decade")


@pytest.mark.parametrize(
    "text, expected",
    [
        ("123.45", Decimal("123.45")),
        ("-123.45", Decimal("-123.45")),
        ("+10", Decimal("10")),
        ("1,234.56", Decimal("1234.56")),
        ("(50.00)", Decimal("-50.00")),
        (" 7 ", Decimal("7")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc", "NaN", "Infinity", "$5"])
def test_parse_amount_invalid(text):
    with pytest.raises(ValueError):
        parse_amount(text)
