# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/03 19:45:10
# @Author : Kariko Lin

"""Line-by-line INI reading.

Each line is one of:

    ```ini
      ; comment, stored without the marker (and NOT stripped)
      [ section ]  anything after `]` is dropped
      name = value  <- value is kept as ` value  `
      lonely_name   <- value is empty
    ```

Blank lines, `[]` and `= value` (no name) are skipped silently.

Reading is done by `IniLineParser.feed()`, which only carries the
current section between lines. `readstream()` and `areadstream()`
are just blocking / awaiting drivers over it.
"""

import logging
from typing import TYPE_CHECKING, Awaitable, Protocol

from .consts import DEFAULT_SECTION_NAME
from .errors import require

if TYPE_CHECKING:
    from .model import IniDocument, IniSection

logger = logging.getLogger(__name__)


class LineReader(Protocol):
    def readline(self) -> str: ...


class AsyncLineReader(Protocol):
    def readline(self) -> Awaitable[str]: ...


def _chomp(line: str) -> str:
    """Drop *one* line terminator, like `str.splitlines()` would."""
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


class IniLineParser:
    def __init__(self, doc: 'IniDocument') -> None:
        self._doc = doc
        self._section: 'IniSection | None' = None
        self._lineno = 0

    @property
    def section(self) -> 'IniSection | None':
        return self._section

    def feed(self, line: str) -> None:
        self._lineno += 1
        line = _chomp(line)
        start = len(line) - len(line.lstrip())
        if start == len(line):
            return

        if line[start] == self._doc.comment_char:
            self._doc.comments.append(line[start + 1:])
        elif line[start] == '[':
            self.__feed_header(line, start + 1)
        else:
            self.__feed_setting(line, start)

    def __feed_header(self, line: str, start: int) -> None:
        end = line.find(']', start)
        if end == -1:
            end = len(line)
        if not (name := line[start:end].strip()):
            logger.debug('line %d: empty section header ignored.',
                         self._lineno)
            return
        # reopen if declared before, so split sections get merged.
        self._section = self._doc.setdefault(name)

    def __feed_setting(self, line: str, start: int) -> None:
        pos = line.find('=', start)
        if pos == -1:
            name, value = line.strip(), ''
        else:
            name, value = line[start:pos].strip(), line[pos + 1:]
        if not name:
            logger.debug('line %d: setting without name ignored.',
                         self._lineno)
            return

        if self._section is None:
            self._section = self._doc.setdefault(DEFAULT_SECTION_NAME)
        if name in self._section:
            logger.debug('line %d: [%s] %s overridden.',
                         self._lineno, self._section.name, name)
        self._section[name] = value


def readstream(buf: LineReader, doc: 'IniDocument') -> 'IniDocument':
    """读取解码好的字符串流，*覆盖* `doc`原有的小节和注释。

    如没有特殊需求，直接调用`doc.load()`便是。
    """
    require(buf, 'buf')
    require(doc, 'doc').clear()
    parser = IniLineParser(doc)
    while i := buf.readline():
        parser.feed(i)
    return doc


async def areadstream(
    reader: AsyncLineReader, doc: 'IniDocument'
) -> 'IniDocument':
    """Same as `readstream()`, but awaits every `reader.readline()`."""
    require(reader, 'reader')
    require(doc, 'doc').clear()
    parser = IniLineParser(doc)
    while i := await reader.readline():
        parser.feed(i)
    return doc
