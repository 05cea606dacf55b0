# -*- encoding: utf-8 -*-
# @File   : datefmt.py
# @Time   : 2024/11/03 14:27:05
# @Author : Kariko Lin

"""Date-time patterns in the `yyyy-MM-dd HH:mm:ss.fff` manner.

Patterns are translated once into `arrow` format strings:

    ---------|-------|-----------------------------
    token    | arrow | meaning
    ---------|-------|-----------------------------
    yyyy     | YYYY  | year, 4 digits
    yy       | YY    | year of century (`00-68` -> 20xx on parse)
    MMMM     | MMMM  | full month name
    MMM      | MMM   | abbreviated month name
    MM, M    | MM, M | month number
    dddd     | dddd  | full weekday name
    ddd      | ddd   | abbreviated weekday name
    dd, d    | DD, D | day of month
    HH, H    | HH, H | hour, 24-hour clock
    hh, h    | hh, h | hour, 12-hour clock
    mm, m    | mm, m | minute
    ss, s    | ss, s | second
    f...     | S...  | 1 to 6 fraction digits, truncated
    tt       | A     | `AM`/`PM`
    zzz      | ZZ    | UTC offset, `+08:00`
    'x', "x" |       | literal text
    \\x      |       | literal char

Any other run of `yMdhHmsfFtzKg` raises `ValueError`,
other chars are copied verbatim.
"""

from datetime import datetime
from functools import lru_cache

import arrow
from arrow.parser import ParserError

_SPECIFIERS = 'yMdhHmsfFtzKg'
_TOKENS = {
    'yyyy': 'YYYY', 'yy': 'YY',
    'MMMM': 'MMMM', 'MMM': 'MMM', 'MM': 'MM', 'M': 'M',
    'dddd': 'dddd', 'ddd': 'ddd', 'dd': 'DD', 'd': 'D',
    'HH': 'HH', 'H': 'H', 'hh': 'hh', 'h': 'h',
    'mm': 'mm', 'm': 'm', 'ss': 'ss', 's': 's',
    'tt': 'A', 'zzz': 'ZZ',
} | {'f' * i: 'S' * i for i in range(1, 7)}
_OFFSET = 'ZZ'


def _literal(text: str) -> str:
    # arrow reads letters as tokens unless bracketed.
    if not any(i.isalpha() for i in text):
        return text
    if '[' in text or ']' in text:
        raise ValueError(f'brackets in a literal are unsupported: {text!r}')
    return f'[{text}]'


@lru_cache(maxsize=32)
def to_arrow_format(pattern: str) -> tuple[str, bool]:
    """Translate `pattern`, telling also whether it carries an offset."""
    ret: list[str] = []
    literal = ''
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c in _SPECIFIERS:
            j = i
            while j < len(pattern) and pattern[j] == c:
                j += 1
            if (token := _TOKENS.get(pattern[i:j])) is None:
                raise ValueError(
                    f'unsupported date-time token {pattern[i:j]!r} '
                    f'in {pattern!r}')
            ret.append(_literal(literal))
            ret.append(token)
            literal = ''
            i = j
            continue
        if c in '\'"':
            end = pattern.find(c, i + 1)
            if end == -1:
                end = len(pattern)
            literal += pattern[i + 1:end]
            i = end + 1
            continue
        if c == '\\' and i + 1 < len(pattern):
            literal += pattern[i + 1]
            i += 2
            continue
        literal += c
        i += 1
    ret.append(_literal(literal))
    return ''.join(ret), _OFFSET in ret


def format_datetime(value: datetime, pattern: str) -> str:
    """Aware values need a `zzz` in `pattern`, or the offset is lost
    and `ValueError` is raised instead. Naive ones are taken as UTC
    by `zzz`."""
    fmt, has_offset = to_arrow_format(pattern)
    if value.utcoffset() is not None and not has_offset:
        raise ValueError(
            f'{value!r} is timezone aware, but {pattern!r} has no offset.')
    return arrow.get(value).format(fmt)


def parse_datetime(text: str | None, pattern: str) -> datetime | None:
    """Exact parse of `text` against `pattern`, `None` on any mismatch.

    Fields absent from the pattern default as arrow does,
    that is `0001-01-01 00:00:00`. The result is aware
    only when `pattern` has an offset.
    """
    if text is None:
        return None
    fmt, has_offset = to_arrow_format(pattern)
    try:
        got = arrow.get(text, fmt)
    except (ParserError, ValueError):  # the latter like Feb 30.
        return None
    # arrow searches rather than matches, and is lenient on case
    # and fraction width.
    if got.format(fmt) != text:
        return None
    return got.datetime if has_offset else got.naive
