# -*- encoding: utf-8 -*-
# @File   : boolwords.py
# @Time   : 2024/11/02 22:11:26
# @Author : Kariko Lin

"""String <-> bool translation for boolean-typed settings.

Independent of any document, so one `BoolOptions` may be shared
by several `IniDocument`s (though they'll see each other's changes).
"""

from dataclasses import dataclass
from re import compile as regex
from typing import Iterable

from .consts import DEFAULT_COMPARER, KeyComparer
from .errors import InvalidBoolWords, require

# like `int.TryParse()` of decimal text, no `_` separators.
_DECIMAL_INT = regex(r'\s*[+-]?[0-9]+\s*')


def try_parse_int(text: str | None) -> int | None:
    if text is None or not _DECIMAL_INT.fullmatch(text):
        return None
    return int(text)


@dataclass(kw_only=True)
class BoolWord:
    word: str
    value: bool


class BoolOptions:
    """Words read as (and written for) boolean settings.

    Defaults to `true/false`, `yes/no`, `on/off` and `1/0`,
    compared case-insensitively unless another `comparer` is given.
    """
    DEFAULT_WORDS: tuple[tuple[str, bool], ...] = (
        ('true', True), ('false', False),
        ('yes', True), ('no', False),
        ('on', True), ('off', False),
        ('1', True), ('0', False),
    )

    def __init__(self, comparer: KeyComparer | None = None) -> None:
        self._cmp = comparer or DEFAULT_COMPARER
        self.non_zero_numbers_are_true = True
        self.__true, self.__false = 'true', 'false'
        self.__lookup = self.__build(
            BoolWord(word=w, value=v) for w, v in self.DEFAULT_WORDS)

    def __build(self, words: Iterable[BoolWord]) -> dict[object, BoolWord]:
        # later duplicates win, as a dict does.
        return {self._cmp(i.word): i for i in words}

    @property
    def comparer(self) -> KeyComparer:
        return self._cmp

    @property
    def true_word(self) -> str:
        return self.__true

    @property
    def false_word(self) -> str:
        return self.__false

    @property
    def words(self) -> list[BoolWord]:
        return list(self.__lookup.values())

    def set_bool_words(
        self, words: Iterable[BoolWord | tuple[str, bool]]
    ) -> None:
        """Replace *all* boolean words.

        The first `True` word and the first `False` word in `words`
        become the ones written by `to_string()`.

        Raises `InvalidBoolWords` (and keeps the old table) if
        either polarity is missing.
        """
        entries = [
            i if isinstance(i, BoolWord) else BoolWord(word=i[0], value=i[1])
            for i in require(words, 'words')
        ]
        true_word = next((i.word for i in entries if i.value), None)
        if true_word is None:
            raise InvalidBoolWords(
                "Boolean word list contains no entry for 'true' values.")
        false_word = next((i.word for i in entries if not i.value), None)
        if false_word is None:
            raise InvalidBoolWords(
                "Boolean word list contains no entry for 'false' values.")

        self.__lookup = self.__build(entries)
        self.__true, self.__false = true_word, false_word

    def to_string(self, value: bool) -> str:
        return self.__true if value else self.__false

    def try_parse(self, text: str | None) -> bool | None:
        """`None` when `text` isn't a boolean word,
        the caller decides what a miss means."""
        if text is None:
            return None
        if (hit := self.__lookup.get(self._cmp(text))) is not None:
            return hit.value
        if self.non_zero_numbers_are_true:
            if (num := try_parse_int(text)) is not None:
                return num != 0
        return None

    def __repr__(self) -> str:
        return '<BoolOptions %s/%s, %d words>' % (
            self.__true, self.__false, len(self.__lookup))
