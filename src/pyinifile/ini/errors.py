# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 22:05:41
# @Author : Kariko Lin

from typing import TypeVar

T = TypeVar('T')


class IniArgumentError(TypeError):
    """A mandatory argument (section, setting, stream ...) was `None`."""
    pass


class InvalidBoolWords(ValueError):
    """Boolean word list lacks either a `True` or a `False` word."""
    pass


def require(value: T | None, argname: str) -> T:
    if value is None:
        raise IniArgumentError(f'`{argname}` must not be None.')
    return value
