# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/11/02 20:40:12
# @Author : Kariko Lin

"""Exceptions raised while building, reading or writing INI documents.

A missing input file is reported with the builtin `FileNotFoundError`.
"""


class IniError(Exception):
    """Base of every error raised by this package."""
    pass


class InvalidArgument(IniError, ValueError):
    """An unusable stream, reader or writer was handed to an entry point."""
    pass


class InvalidName(InvalidArgument):
    """A section or property name is `None`, empty or all whitespace."""

    def __init__(self, name: object) -> None:
        super().__init__(
            f'Invalid name {name!r}: names cannot be empty or whitespace.')
        self.name = name


class FormatError(IniError, ValueError):
    """Malformed INI content. The whole load fails, no partial document."""
    pass


class DuplicateSection(InvalidArgument, FormatError):
    """Raised both when adding a section and when a file repeats one."""

    def __init__(self, name: str) -> None:
        super().__init__(f'Section [{name}] already exists in the document.')
        self.name = name


class UnrecognizedLine(FormatError):
    def __init__(self, line: str, lineno: int | None = None) -> None:
        where = '' if lineno is None else f' (line {lineno})'
        super().__init__(f'Unrecognized line{where}: {line!r}')
        self.line = line
        self.lineno = lineno


class PropertyWithoutSection(FormatError):
    def __init__(self, name: str, lineno: int | None = None) -> None:
        where = '' if lineno is None else f' (line {lineno})'
        super().__init__(
            f'Property "{name}"{where} is not declared under any section.')
        self.name = name
        self.lineno = lineno


class UnterminatedValue(FormatError):
    """End of input reached while a multi-line value was still open."""

    def __init__(self, name: str, eot: str) -> None:
        super().__init__(
            f'Multi-line value of property "{name}" '
            f'is never closed by "{eot}".')
        self.name = name
        self.eot = eot
