# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2024/11/04 00:31:52
# @Author : Kariko Lin

from typing import TYPE_CHECKING, Any, Awaitable, Iterator, Protocol

from .errors import require

if TYPE_CHECKING:
    from .model import IniDocument


class LineWriter(Protocol):
    def write(self, s: str, /) -> Any: ...


class AsyncLineWriter(Protocol):
    def write(self, s: str, /) -> Awaitable[Any]: ...


def iter_lines(doc: 'IniDocument') -> Iterator[str]:
    """Yield the document as lines, without terminators.

    Comments come first, no matter where they were read from.
    Sections without any setting are skipped.
    """
    first = True
    if doc.comments:
        for i in doc.comments:
            yield f'{doc.comment_char}{i}'
        first = False

    for sect in doc.values():
        if not len(sect):
            continue
        # blank line only *between* blocks.
        if first:
            first = False
        else:
            yield ''
        yield f'[{sect.name}]'
        for i in sect.settings():
            yield str(i)


def writestream(doc: 'IniDocument', buf: LineWriter) -> None:
    """Dump to a text stream. `'\\n'` is translated by the stream,
    so line endings are up to how `buf` was opened."""
    require(buf, 'buf')
    for i in iter_lines(require(doc, 'doc')):
        buf.write(f'{i}\n')


async def awritestream(doc: 'IniDocument', writer: AsyncLineWriter) -> None:
    require(writer, 'writer')
    for i in iter_lines(require(doc, 'doc')):
        await writer.write(f'{i}\n')
