# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:38:50
# @Author : Kariko Lin

from .ini import (
    BoolOptions, BoolWord,
    IniDocument, IniSection, IniSetting, IniComments,
    IniFileHandler,
    IniArgumentError, InvalidBoolWords,
    ignore_case, locale_ignore_case, ordinal
)

__all__ = [
    'BoolOptions', 'BoolWord',
    'IniDocument', 'IniSection', 'IniSetting', 'IniComments',
    'IniFileHandler',
    'IniArgumentError', 'InvalidBoolWords',
    'ignore_case', 'locale_ignore_case', 'ordinal'
]

__version__ = '0.1.0'
