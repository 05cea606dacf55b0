# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 21:44:03
# @Author : Kariko Lin

from .boolwords import BoolOptions, BoolWord
from .consts import (
    DEFAULT_COMMENT_CHAR,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_SECTION_NAME,
    ignore_case,
    locale_ignore_case,
    ordinal
)
from .errors import IniArgumentError, InvalidBoolWords
from .file import IniFileHandler
from .model import IniComments, IniDocument, IniSection, IniSetting
from .parser import IniLineParser, areadstream, readstream
from .serializer import awritestream, iter_lines, writestream
