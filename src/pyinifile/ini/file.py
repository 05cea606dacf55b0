# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2024/11/04 13:08:19
# @Author : Kariko Lin

"""Path based loading and saving.

The document itself only deals with text streams,
here is the place for opening files and guessing their encodings.
"""

import asyncio
import logging
from functools import partial
from io import StringIO
from os import PathLike
from typing import IO
from warnings import warn

import chardet

from ..abstract import FileHandler
from .boolwords import BoolOptions
from .consts import KeyComparer
from .model import IniDocument
from .parser import areadstream, readstream
from .serializer import awritestream, writestream

logger = logging.getLogger(__name__)


class _ExecutorFile:
    """Awaitable `readline()`/`write()` over a blocking file,
    each call handed to the loop's default executor."""
    def __init__(self, fp: IO[str]) -> None:
        self._fp = fp

    async def readline(self) -> str:
        return await _blocking(self._fp.readline)

    async def write(self, s: str) -> int:
        return await _blocking(self._fp.write, s)


async def _blocking(func, *args):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


class IniFileHandler(FileHandler[IniDocument]):
    # below this, a chardet guess is not trusted.
    MIN_CONFIDENCE = 0.8

    def __init__(
        self,
        filename: str | PathLike[str],
        encoding: str | None = None, *,
        comparer: KeyComparer | None = None,
        bool_options: BoolOptions | None = None
    ) -> None:
        """`comparer` and `bool_options` only apply to documents
        created by `read()` itself."""
        super().__init__(filename)
        self._codec = encoding
        self._cmp = comparer
        self._bool_opts = bool_options

    @property
    def encoding(self) -> str | None:
        return self._codec

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        encoding = codec.get('encoding')
        if encoding is None or codec['confidence'] < self.MIN_CONFIDENCE:
            warn(
                f'Unable to tell the encoding of "{self._fn}" '
                f'(guessed {encoding}), decoding as utf-8.')
            encoding = 'utf-8'
        logger.info('decoding "%s" as %s.', self._fn, encoding)
        # universal newlines, same as a text mode `open()`.
        return StringIO(raw.decode(encoding), newline=None)

    def read(self, instance: IniDocument | None = None) -> IniDocument:
        """Read the file into `instance` (or a new document),
        replacing what it had.

        With `encoding=None` utf-8 (BOM or not) is tried first,
        and chardet takes over on `UnicodeDecodeError`.
        """
        if instance is None:
            instance = IniDocument(self._cmp, self._bool_opts)
        try:
            codec = self._codec or 'utf-8-sig'
            with open(self._fn, 'r', encoding=codec) as fp:
                return readstream(fp, instance)
        except UnicodeDecodeError:
            if self._codec is not None:
                raise
            logger.info('"%s" is not utf-8.', self._fn)
            return readstream(self._decode_file(), instance)

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec or 'utf-8') as fp:
            writestream(instance, fp)

    async def aread(
        self, instance: IniDocument | None = None
    ) -> IniDocument:
        """`read()`, with file calls run off the event loop."""
        if instance is None:
            instance = IniDocument(self._cmp, self._bool_opts)
        codec = self._codec or 'utf-8-sig'
        fp = await _blocking(partial(open, self._fn, 'r', encoding=codec))
        try:
            with fp:
                return await areadstream(_ExecutorFile(fp), instance)
        except UnicodeDecodeError:
            if self._codec is not None:
                raise
            logger.info('"%s" is not utf-8.', self._fn)
            buf = await _blocking(self._decode_file)
            return await areadstream(_ExecutorFile(buf), instance)

    async def awrite(self, instance: IniDocument) -> None:
        codec = self._codec or 'utf-8'
        fp = await _blocking(partial(open, self._fn, 'w', encoding=codec))
        with fp:
            await awritestream(instance, _ExecutorFile(fp))

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f" ({self._codec})"
