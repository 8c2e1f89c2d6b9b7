# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/11/04 01:04:45
# @Author : Kariko Lin

"""Reading INI text into an `IniDocument`.

Loading happens in two separate passes:

1. `parse_lines()` classifies every physical line into a `Section`,
`Property`, `Comment` or `BlankLine`, and folds heredoc values
(`key = <<EOT` ... `EOT`) into their property on the way.
2. `build_document()` walks those records and attaches comments and
blank lines to the section or property below them.

Nothing is returned unless both passes succeed.
"""

import logging
from io import BufferedIOBase, RawIOBase, TextIOBase
from os import PathLike
from os.path import exists
from typing import IO, Any, Iterable

import chardet

from .abstract import FileHandler
from .config import IniConfig, LoadSettings
from .consts import (
    COMMENT_PATTERN,
    MULTILINE_START_PATTERN,
    NEWLINE_PATTERN,
    PROPERTY_PATTERN,
    SECTION_PATTERN,
    CommentChar,
)
from .errors import (
    InvalidArgument,
    PropertyWithoutSection,
    UnrecognizedLine,
    UnterminatedValue,
)
from .items import BlankLine, Comment, MinorItem
from .model import IniDocument, Property, Section
from .padding import PaddingValue
from .writer import dump

LineRecord = Section | Property | Comment | BlankLine

# below this chardet confidence the configured encoding wins.
DETECT_CONFIDENCE = 0.8


def classify_line(
    line: str,
    config: IniConfig | None = None,
    lineno: int | None = None
) -> LineRecord:
    """Turn one line (without its line break) into an INI item.

    Every whitespace run around the tokens is kept as padding, so that
    the item renders back to exactly `line`.
    """
    config = config or IniConfig()
    pad = PaddingValue.of

    if not line.strip():
        blank = BlankLine(config)
        blank.padding.left = pad(line)
        return blank

    if (m := COMMENT_PATTERN.match(line)) is not None:
        left, char, inside, text, right = m.groups()
        if char == CommentChar.SEMICOLON or config.hash_for_comments.allow:
            comment = Comment(text, char, config)
            comment.padding.left = pad(left)
            comment.padding.inside = pad(inside)
            comment.padding.right = pad(right)
            return comment

    if (m := SECTION_PATTERN.match(line)) is not None and m.group(3):
        left, in_left, name, in_right, right = m.groups()
        section = Section(name, config=config)
        section.padding.left = pad(left)
        section.padding.inside_left = pad(in_left)
        section.padding.inside_right = pad(in_right)
        section.padding.right = pad(right)
        section.lineno = lineno
        return section

    if (m := PROPERTY_PATTERN.match(line)) is not None and m.group(2).strip():
        left, name, in_left, in_right, value, right = m.groups()
        prop = Property(name, value, config=config)
        prop.padding.left = pad(left)
        prop.padding.inside_left = pad(in_left)
        prop.padding.inside_right = pad(in_right)
        prop.padding.right = pad(right)
        prop.lineno = lineno
        return prop

    raise UnrecognizedLine(line, lineno)


def parse_lines(
    lines: Iterable[str], config: IniConfig | None = None
) -> list[LineRecord]:
    """Classify all lines, resolving multi-line values.

    While a heredoc is open, lines are taken verbatim until one whose
    trimmed content equals the marker (case-sensitive). Running out of
    input first is an error.
    """
    config = config or IniConfig()
    records: list[LineRecord] = []
    ml_prop: Property | None = None
    ml_lines: list[str] = []

    for lineno, line in enumerate(lines, 1):
        line = line.rstrip('\r\n')
        if ml_prop is not None:
            if line.strip() == ml_prop.multiline_eot:
                ml_prop.value = '\n'.join(ml_lines)
                ml_prop.blank_line_body = ml_lines == ['']
                eot_pad = ml_prop.eot_padding
                eot_pad.left = line[:len(line) - len(line.lstrip())]
                eot_pad.right = line[len(line.rstrip()):]
                ml_prop = None
            else:
                ml_lines.append(line)
            continue

        item = classify_line(line, config, lineno)
        if isinstance(item, Property):
            m = MULTILINE_START_PATTERN.match(str(item.value))
            if m is not None:
                ml_prop, ml_lines = item, []
                item.multiline_eot = m.group(1)
                item.force_multiline = True
        records.append(item)

    if ml_prop is not None:
        raise UnterminatedValue(ml_prop.name, ml_prop.multiline_eot)
    return records


def build_document(
    records: Iterable[LineRecord],
    settings: LoadSettings | None = None,
    config: IniConfig | None = None
) -> IniDocument:
    """Assemble classified lines into a document.

    Comments and blank lines wait in a buffer until the next section or
    property claims them; whatever is left at the end becomes the
    document's trailing items.
    """
    settings = settings or LoadSettings()
    ret = IniDocument(settings, config)
    this_sect: Section | None = None
    pending: list[MinorItem] = []

    for item in records:
        match item:
            case BlankLine():
                if not settings.ignore_blank_lines:
                    pending.append(item)
            case Comment():
                if not settings.ignore_comments:
                    pending.append(item)
            case Section():
                this_sect = item
                this_sect.minor_items.extend(pending)
                pending.clear()
                ret.add(this_sect)
            case Property():
                if this_sect is None:
                    raise PropertyWithoutSection(item.name, item.lineno)
                item.minor_items.extend(pending)
                pending.clear()
                this_sect.add(item)

    ret.trailing_items.extend(pending)
    return ret


def loads(
    content: str,
    settings: LoadSettings | None = None,
    config: IniConfig | None = None
) -> IniDocument:
    """Parse INI text held in a string."""
    if content is None:
        raise InvalidArgument('INI content cannot be None.')
    return build_document(
        parse_lines(split_lines(content), config), settings, config)


def split_lines(content: str) -> list[str]:
    """Split on `\\r\\n`, `\\r` or `\\n` only; a final line break
    does not open another (empty) line."""
    lines = NEWLINE_PATTERN.split(content)
    if lines[-1] == '':
        lines.pop()
    return lines


def decode_bytes(raw: bytes, settings: LoadSettings | None = None) -> str:
    """Decode an INI file's bytes.

    Without `detect_encoding` this is a strict decode with
    `settings.encoding` (or UTF-8, BOM skipped). With it, `chardet`
    guesses first, and the configured encoding is the fallback.
    """
    settings = settings or LoadSettings()
    fallback = settings.encoding or 'utf-8-sig'
    codec = fallback
    if settings.detect_encoding:
        guess = chardet.detect(raw)
        if guess['encoding'] and guess['confidence'] >= DETECT_CONFIDENCE:
            codec = guess['encoding']
        else:
            logging.debug(
                f'Encoding guess {guess} is not reliable, using {fallback}.')

    try:
        return raw.decode(codec)
    except UnicodeDecodeError:
        if codec == fallback:
            raise
        logging.warning(
            f'Failed to decode INI content as {codec}, retry with {fallback}.')
        return raw.decode(fallback)


def _check_readable(stream: IO[Any]) -> None:
    readable = getattr(stream, 'readable', None)
    if getattr(stream, 'closed', False) or (
            readable is not None and not readable()):
        raise InvalidArgument(f'Stream {stream!r} is not readable.')


def load(
    source: str | PathLike[str] | IO[Any],
    settings: LoadSettings | None = None,
    config: IniConfig | None = None
) -> IniDocument:
    """Read a document from a file path, binary stream or text stream.

    Streams are left open; files opened here are always closed again.
    """
    if source is None:
        raise InvalidArgument('INI source cannot be None.')
    if isinstance(source, (str, PathLike)):
        return IniParser(source, settings, config).read()

    _check_readable(source)
    if isinstance(source, (RawIOBase, BufferedIOBase)):
        return loads(decode_bytes(source.read(), settings), settings, config)
    if isinstance(source, TextIOBase) or hasattr(source, 'read'):
        data = source.read()
        if isinstance(data, bytes):
            data = decode_bytes(data, settings)
        return loads(data, settings, config)
    raise InvalidArgument(
        f'Cannot read INI content from {type(source).__name__}.')


class IniParser(FileHandler[IniDocument]):
    """An INI file on disk.

        ```python
        handler = IniParser('settings.ini')
        doc = handler.read()
        doc['Game']['Speed'] = 4
        handler.write(doc)
        ```
    """

    def __init__(
        self, filename: str | PathLike[str],
        settings: LoadSettings | None = None,
        config: IniConfig | None = None
    ) -> None:
        super().__init__(filename)
        self._settings = settings or LoadSettings()
        self._config = config

    @staticmethod
    def readstream(
        buf: Iterable[str],
        settings: LoadSettings | None = None,
        config: IniConfig | None = None
    ) -> IniDocument:
        """Read already decoded lines, e.g. a text file object."""
        return build_document(parse_lines(buf, config), settings, config)

    def read(self) -> IniDocument:
        if not exists(self._fn):
            raise FileNotFoundError(
                2, f'INI file "{self._fn}" does not exist', self._fn)
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        ret = loads(decode_bytes(raw, self._settings),
                    self._settings, self._config)
        logging.debug(f'Loaded {len(ret)} sections from {self._fn}.')
        return ret

    def write(
        self, instance: IniDocument, encoding: str | None = None
    ) -> None:
        dump(instance, self._fn,
             encoding or self._settings.encoding or 'utf-8')

    def __str__(self) -> str:
        return ('INI file: ' + super().__str__()
                + f' ({self._settings.encoding})')


__all__ = [
    'classify_line', 'parse_lines', 'build_document',
    'loads', 'load', 'decode_bytes', 'split_lines', 'IniParser'
]
