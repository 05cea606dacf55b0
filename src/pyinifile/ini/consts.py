# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 21:52:37
# @Author : Kariko Lin

from locale import strxfrm
from typing import Callable, Hashable

DEFAULT_SECTION_NAME = 'General'
DEFAULT_COMMENT_CHAR = ';'
DEFAULT_DATETIME_FORMAT = 'yyyy-MM-dd HH:mm:ss.fff'

# a comparer maps a name to the key it is looked up by.
# two names are "equal" when their keys are.
KeyComparer = Callable[[str], Hashable]


def ordinal(name: str) -> str:
    """Case-sensitive, char by char."""
    return name


def ignore_case(name: str) -> str:
    return name.casefold()


def locale_ignore_case(name: str) -> str:
    """Case-insensitive, collated under the *current* `LC_COLLATE`.
    The default comparer.

    Keep in mind that the locale is read on every lookup,
    switching it while documents are alive scrambles their indexes."""
    return strxfrm(name.casefold())


DEFAULT_COMPARER: KeyComparer = locale_ignore_case
