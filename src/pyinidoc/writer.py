# -*- encoding: utf-8 -*-
# @File   : writer.py
# @Time   : 2024/11/04 22:18:36
# @Author : Kariko Lin

"""Writing an `IniDocument` back to text.

Items render with their own paddings, so an unedited document comes out
exactly as it was read (given the text ended with a line break).
"""

import inspect
import logging
from io import BufferedIOBase, RawIOBase
from os import PathLike
from typing import IO, Any, Iterator

from .errors import InvalidArgument
from .model import IniDocument

NEWLINE = '\n'


def iter_lines(doc: IniDocument) -> Iterator[str]:
    """Yield every output line, without line breaks."""
    for section in doc:
        for item in section.minor_items:
            yield str(item)
        yield str(section)
        for prop in section:
            for item in prop.minor_items:
                yield str(item)
            yield from prop.render_lines()
    for item in doc.trailing_items:
        yield str(item)


def dumps(doc: IniDocument) -> str:
    return ''.join(i + NEWLINE for i in iter_lines(doc))


def _check_writable(stream: IO[Any]) -> None:
    writable = getattr(stream, 'writable', None)
    if getattr(stream, 'closed', False) or (
            writable is not None and not writable()):
        raise InvalidArgument(f'Stream {stream!r} is not writable.')


def dump(
    doc: IniDocument,
    target: str | PathLike[str] | IO[Any],
    encoding: str = 'utf-8'
) -> None:
    """Write to a file path, a binary stream or a text stream.

    `encoding` applies to paths and binary streams. Streams are flushed
    but left open.
    """
    if target is None:
        raise InvalidArgument('INI target cannot be None.')
    if isinstance(target, (str, PathLike)):
        # newline='' keeps `\n` as is on every platform.
        with open(target, 'w', encoding=encoding, newline='') as fp:
            fp.write(dumps(doc))
        logging.debug(f'Saved {len(doc)} sections to {target}.')
        return

    _check_writable(target)
    if isinstance(target, (RawIOBase, BufferedIOBase)):
        target.write(dumps(doc).encode(encoding))
    else:
        for line in iter_lines(doc):
            target.write(line + NEWLINE)
    flush = getattr(target, 'flush', None)
    if flush is not None:
        flush()


async def dump_async(doc: IniDocument, writer: Any) -> None:
    """Write through an asynchronous text writer.

    `writer.write()` may be a coroutine function (like `aiofiles`
    handles) or a plain method; `flush()` is awaited when it exists.
    """
    if writer is None:
        raise InvalidArgument('INI writer cannot be None.')
    # `aiofiles` handles answer `writable()` with a coroutine.
    writable = getattr(writer, 'writable', None)
    ok = not getattr(writer, 'closed', False)
    if ok and writable is not None:
        ok = writable()
        if inspect.isawaitable(ok):
            ok = await ok
    if not ok:
        raise InvalidArgument(f'Writer {writer!r} is not writable.')
    for line in iter_lines(doc):
        ret = writer.write(line + NEWLINE)
        if inspect.isawaitable(ret):
            await ret
    flush = getattr(writer, 'flush', None)
    if flush is not None:
        ret = flush()
        if inspect.isawaitable(ret):
            await ret
