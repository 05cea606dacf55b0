from datetime import datetime, timedelta, timezone

import pytest

from pyinifile.ini.consts import DEFAULT_DATETIME_FORMAT
from pyinifile.ini.datefmt import (
    format_datetime,
    parse_datetime,
    to_arrow_format
)


def test_default_format():
    value = datetime(2024, 3, 5, 7, 8, 9, 123456)
    assert to_arrow_format(DEFAULT_DATETIME_FORMAT) == \
        ('YYYY-MM-DD HH:mm:ss.SSS', False)
    assert format_datetime(value, DEFAULT_DATETIME_FORMAT) == \
        '2024-03-05 07:08:09.123'
    got = parse_datetime('2024-03-05 07:08:09.123', DEFAULT_DATETIME_FORMAT)
    assert got == datetime(2024, 3, 5, 7, 8, 9, 123000)
    assert got.tzinfo is None


@pytest.mark.parametrize('text', [
    '2024/03/05 07:08:09.123',
    '2024-03-05 07:08:09.1234',
    '2024-03-05 07:08:09',
    '2024-02-30 00:00:00.000',
    ' 2024-03-05 07:08:09.123',
    '2024-03-05 07:08:09.123 tail',
    '',
    None,
])
def test_exact_parse_misses(text):
    assert parse_datetime(text, DEFAULT_DATETIME_FORMAT) is None


def test_twelve_hour_clock():
    pattern = 'h:mm tt'
    assert format_datetime(datetime(2024, 1, 1, 0, 5), pattern) == '12:05 AM'
    assert format_datetime(datetime(2024, 1, 1, 13, 5), pattern) == '1:05 PM'
    assert parse_datetime('1:05 PM', pattern) == datetime(1, 1, 1, 13, 5)
    assert parse_datetime('12:05 AM', pattern) == datetime(1, 1, 1, 0, 5)
    assert parse_datetime('1:05 pm', pattern) is None
    assert parse_datetime('13:05 PM', pattern) is None


def test_literals_and_escapes():
    value = datetime(2024, 7, 1, 9)
    assert format_datetime(value, "yyyy'T'HH") == '2024T09'
    assert format_datetime(value, 'HH\\h') == '09h'
    assert parse_datetime('2024T09', "yyyy'T'HH") == datetime(2024, 1, 1, 9)
    # literals are case-sensitive.
    assert parse_datetime('2024t09', "yyyy'T'HH") is None


def test_two_digit_years():
    assert parse_datetime('24', 'yy') == datetime(2024, 1, 1)
    assert parse_datetime('99', 'yy') == datetime(1999, 1, 1)
    assert format_datetime(datetime(2005, 1, 1), 'yy') == '05'


def test_fraction_widths():
    value = datetime(2024, 1, 1, microsecond=987654)
    assert format_datetime(value, 'f') == '9'
    assert format_datetime(value, 'ffffff') == '987654'
    assert parse_datetime('2024 987654', 'yyyy ffffff') == value


@pytest.mark.parametrize('pattern', [
    'y', 'yyy', 'fffffff', 'ss.FFF', 'yyyy-MM-ddK', 'HH:mm zz', 'tt t', 'g',
])
def test_unknown_tokens_raise(pattern):
    with pytest.raises(ValueError):
        format_datetime(datetime(2024, 1, 2), pattern)
    with pytest.raises(ValueError):
        parse_datetime('2024', pattern)


def test_offset_round_trip():
    pattern = 'yyyy-MM-ddTHH:mm:sszzz'
    value = datetime(2024, 1, 2, 3, 4, 5,
                     tzinfo=timezone(timedelta(hours=8)))
    text = format_datetime(value, pattern)
    assert text == '2024-01-02T03:04:05+08:00'
    got = parse_datetime(text, pattern)
    assert got == value
    assert got.utcoffset() == timedelta(hours=8)


def test_aware_without_offset_rejected():
    value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        format_datetime(value, DEFAULT_DATETIME_FORMAT)


def test_month_names():
    value = datetime(2024, 3, 5)
    assert format_datetime(value, 'dd MMM yyyy') == '05 Mar 2024'
    assert format_datetime(value, 'MMMM') == 'March'
    assert parse_datetime('05 Mar 2024', 'dd MMM yyyy') == value
    assert parse_datetime('05 mar 2024', 'dd MMM yyyy') is None
    assert parse_datetime('March 5, 2024', 'MMMM d, yyyy') == value
