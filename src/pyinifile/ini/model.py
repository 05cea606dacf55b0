# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/03 16:02:48
# @Author : Kariko Lin

"""
In-memory INI document: comments, sections and settings.

Names are looked up by a *comparer* (see `consts`), but always stored
and written back the way they were first spelled.
"""

from collections.abc import MutableMapping, MutableSequence
from dataclasses import dataclass
from datetime import datetime
from typing import (
    Hashable, Iterable, Iterator, KeysView, Mapping, overload)

from .boolwords import BoolOptions, try_parse_int
from .consts import (
    DEFAULT_COMMENT_CHAR,
    DEFAULT_COMPARER,
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_SECTION_NAME,
    KeyComparer
)
from .datefmt import format_datetime, parse_datetime
from .errors import require
from .parser import AsyncLineReader, LineReader, areadstream, readstream
from .serializer import (
    AsyncLineWriter, LineWriter, awritestream, writestream)

SettingValue = str | bool | int | float | datetime | None


@dataclass
class IniSetting:
    name: str
    value: str = ''

    def __str__(self) -> str:
        return f'{self.name or ""}={self.value or ""}'


class IniSection(MutableMapping[str, str]):
    """INI 小节，维护有序的`name: value`键值对。

    值总是`str`（哪怕是空串），赋`None`会存为空串。
    同名（按 comparer 判定）的键只保留一个，重复赋值只会覆盖值，
    不会改变它的位置和原有拼写。
    """
    def __init__(
        self, name: str, /,
        pairs: Mapping[str, str | None] | None = None,
        comparer: KeyComparer | None = None
    ) -> None:
        self._name = name
        self._cmp = comparer or DEFAULT_COMPARER
        self.__data: dict[Hashable, IniSetting] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        if (item := self.get_item(key)) is None:
            raise KeyError(key)
        return item.value

    def __setitem__(self, key: str, value: str | None) -> None:
        k = self._cmp(require(key, 'key'))
        if (item := self.__data.get(k)) is None:
            self.__data[k] = IniSetting(key, value or '')
        else:
            item.value = value or ''

    def __delitem__(self, key: str) -> None:
        try:
            del self.__data[self._cmp(require(key, 'key'))]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._cmp(key) in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__data.values())

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def get_item(self, key: str) -> IniSetting | None:
        return self.__data.get(self._cmp(require(key, 'key')))

    def settings(self) -> list[IniSetting]:
        """Snapshot of the settings, in order."""
        return list(self.__data.values())


class IniComments(MutableSequence[str]):
    """Comment lines, without the leading marker.
    `None` is stored as an empty comment."""
    def __init__(self, lines: Iterable[str | None] = ()) -> None:
        self.__raw: list[str] = [i or '' for i in lines]

    @overload
    def __getitem__(self, index: int) -> str: ...
    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        return self.__raw[index]

    def __setitem__(self, index, value) -> None:
        if isinstance(index, slice):
            self.__raw[index] = [i or '' for i in value]
        else:
            self.__raw[index] = value or ''

    def __delitem__(self, index: int | slice) -> None:
        del self.__raw[index]

    def __len__(self) -> int:
        return len(self.__raw)

    def insert(self, index: int, value: str | None) -> None:
        self.__raw.insert(index, value or '')

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IniComments):
            return self.__raw == other.__raw
        return self.__raw == other

    def __repr__(self) -> str:
        return repr(self.__raw)


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示，形如：

        ```ini
        ; comments are kept, but always written at the top.
        key = val  ; no section yet, so goes to [General].

        [section]
        key233 = val666
        [Section]  ; same as above when ignoring case.
        key114 =  val514  ; value is NOT stripped.
        ```

    `comparer` decides whether `Section` and `section` are the same
    (by default they are), the same applies to setting names.
    `bool_options` decides how boolean settings are read and written.
    """
    DEFAULT_SECTION_NAME = DEFAULT_SECTION_NAME

    def __init__(
        self,
        comparer: KeyComparer | None = None,
        bool_options: BoolOptions | None = None
    ) -> None:
        self._cmp = comparer or DEFAULT_COMPARER
        self.__bool_opts = bool_options or BoolOptions()
        self.__sections: dict[Hashable, IniSection] = {}
        self.__comments = IniComments()
        self.__comment_char = DEFAULT_COMMENT_CHAR
        self.datetime_format = DEFAULT_DATETIME_FORMAT

    @property
    def comparer(self) -> KeyComparer:
        return self._cmp

    @property
    def bool_options(self) -> BoolOptions:
        return self.__bool_opts

    @property
    def comments(self) -> IniComments:
        return self.__comments

    @property
    def comment_char(self) -> str:
        return self.__comment_char

    @comment_char.setter
    def comment_char(self, value: str) -> None:
        if not isinstance(value, str) or len(value) != 1:
            raise ValueError(
                f'comment marker should be a single char, got {value!r}.')
        self.__comment_char = value

    # mapping protocol, section-wise.
    def __getitem__(self, key: str) -> IniSection:
        try:
            return self.__sections[self._cmp(require(key, 'section'))]
        except KeyError:
            raise KeyError(key) from None

    def __setitem__(
        self, key: str, value: IniSection | Mapping[str, str | None]
    ) -> None:
        # shouldn't keep ptr to external section in key setting operation.
        self.__sections[self._cmp(require(key, 'section'))] = IniSection(
            key, dict(value.items()), comparer=self._cmp)

    def __delitem__(self, key: str) -> None:
        try:
            del self.__sections[self._cmp(require(key, 'section'))]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._cmp(key) in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__sections.values())

    def __repr__(self) -> str:
        return '<IniDocument %d sections, %d comments>' % (
            len(self.__sections), len(self.__comments))

    def setdefault(  # type: ignore[override]
        self, key: str,
        default: IniSection | Mapping[str, str | None] | None = None
    ) -> IniSection:
        """Get section `key`, appending it (filled by `default`)
        if it doesn't exist yet."""
        k = self._cmp(require(key, 'section'))
        if k not in self.__sections:
            self.__sections[k] = IniSection(
                key, dict(default.items()) if default else None,
                comparer=self._cmp)
        return self.__sections[k]

    def clear(self) -> None:
        """Wipe sections and comments. Options are kept."""
        self.__sections.clear()
        self.__comments.clear()

    def update(  # type: ignore[override]
        self, another: 'IniDocument | Mapping[str, Mapping[str, str]]'
    ) -> None:
        """To merge `another` into self, setting by setting.

        Unlike `dict.update()`, sections existing on both sides are
        merged rather than replaced. Comments of `another` are appended.
        """
        if isinstance(another, IniDocument):
            self.__comments.extend(another.comments)
        for decl, data in another.items():
            self.setdefault(decl).update(data)

    def rename_section(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        oldkey = self._cmp(require(old, 'old'))
        newkey = self._cmp(require(new, 'new'))
        if oldkey not in self.__sections:
            return False
        if newkey != oldkey and newkey in self.__sections:
            return False

        target = self.__sections[oldkey]
        target._name = new
        self.__sections = {
            (newkey if k == oldkey else k): v
            for k, v in self.__sections.items()
        }
        return True

    # reading values
    def get_string(
        self, section: str, name: str, default: str | None = None
    ) -> str | None:
        require(name, 'name')
        sect = self.__sections.get(self._cmp(require(section, 'section')))
        if sect is None or (item := sect.get_item(name)) is None:
            return default
        return item.value

    def get_int(self, section: str, name: str, default: int) -> int:
        value = try_parse_int(self.get_string(section, name))
        return default if value is None else value

    def get_float(self, section: str, name: str, default: float) -> float:
        value = _try_parse_float(self.get_string(section, name))
        return default if value is None else value

    def get_bool(self, section: str, name: str, default: bool) -> bool:
        value = self.__bool_opts.try_parse(self.get_string(section, name))
        return default if value is None else value

    def get_datetime(
        self, section: str, name: str, default: datetime
    ) -> datetime:
        value = parse_datetime(
            self.get_string(section, name), self.datetime_format)
        return default if value is None else value

    @overload
    def get_setting(
        self, section: str, name: str, default: None = None
    ) -> str | None: ...
    @overload
    def get_setting(self, section: str, name: str, default: str) -> str: ...
    @overload
    def get_setting(self, section: str, name: str, default: bool) -> bool: ...
    @overload
    def get_setting(self, section: str, name: str, default: int) -> int: ...
    @overload
    def get_setting(
        self, section: str, name: str, default: float) -> float: ...
    @overload
    def get_setting(
        self, section: str, name: str, default: datetime) -> datetime: ...

    def get_setting(
        self, section: str, name: str, default: SettingValue = None
    ) -> SettingValue:
        """Read a setting, typed after `default`.

        Any miss (no such section, no such setting, or a value that
        doesn't parse as `type(default)`) returns `default` itself.
        """
        match default:
            case bool():
                return self.get_bool(section, name, default)
            case int():
                return self.get_int(section, name, default)
            case float():
                return self.get_float(section, name, default)
            case datetime():
                return self.get_datetime(section, name, default)
            case _:
                return self.get_string(section, name, default)

    def get_sections(self) -> KeysView[str]:
        return self.keys()

    def get_section_settings(self, section: str) -> list[IniSetting]:
        sect = self.__sections.get(self._cmp(require(section, 'section')))
        return [] if sect is None else sect.settings()

    # writing values
    def set_setting(
        self, section: str, name: str, value: SettingValue
    ) -> None:
        require(section, 'section')
        require(name, 'name')
        match value:
            case None:
                text = ''
            case str():
                text = value
            case bool():
                text = self.__bool_opts.to_string(value)
            case int():
                text = str(value)
            case float():
                text = repr(value)
            case datetime():
                text = format_datetime(value, self.datetime_format)
            case _:
                raise TypeError(
                    f'unsupported setting type: {type(value).__name__}')
        self.setdefault(section)[name] = text

    def delete_section(self, section: str) -> bool:
        return self.__sections.pop(
            self._cmp(require(section, 'section')), None) is not None

    def delete_setting(self, section: str, name: str) -> bool:
        require(name, 'name')
        sect = self.__sections.get(self._cmp(require(section, 'section')))
        if sect is None or name not in sect:
            return False
        del sect[name]
        return True

    # stream I/O
    def load(self, buf: LineReader) -> None:
        readstream(buf, self)

    async def load_async(self, reader: AsyncLineReader) -> None:
        await areadstream(reader, self)

    def save(self, buf: LineWriter) -> None:
        writestream(self, buf)

    async def save_async(self, writer: AsyncLineWriter) -> None:
        await awritestream(self, writer)


def _try_parse_float(text: str | None) -> float | None:
    # `float()` would take "1_000" or non-ASCII digits as well,
    # neither is a decimal text.
    if text is None or '_' in text or not text.isascii():
        return None
    try:
        return float(text)
    except ValueError:
        return None
