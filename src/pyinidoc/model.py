# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/11/03 16:57:10
# @Author : Kariko Lin

"""
Editable INI structure: document -> sections -> properties,
each carrying the comments and blank lines written above it.

Readers and writers of this model live in `parser` and `writer`.
"""

from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from os import PathLike
from typing import IO, Any, Callable, Iterator, overload
from warnings import warn

from .config import FormatOptions, IniConfig, LoadSettings
from .consts import DEFAULT_EOT, MULTILINE_START_PATTERN, NEWLINE_PATTERN
from .errors import DuplicateSection, InvalidArgument
from .items import MajorItem, MinorItem
from .padding import EotPadding, PropertyPadding, SectionPadding
from .value import PropertyValue


class Property(MajorItem):
    """`name = value`, or a heredoc when the value spans several lines:

        ```ini
        Description = <<EOT
        first line
        second line
        EOT
        ```
    """

    def __init__(
        self, name: str, value: Any = None, *items: str | None,
        config: IniConfig | None = None
    ) -> None:
        super().__init__(name, *items, config=config)
        self.padding = PropertyPadding(self._config)
        self.multiline_eot = DEFAULT_EOT
        self.eot_padding = EotPadding(self._config)
        # kept by the parser, so one-line heredocs survive a round trip.
        self.force_multiline = False
        self.value = value

    @property
    def value(self) -> PropertyValue:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = PropertyValue.of(value, self._config)
        # a heredoc body of one empty line, which also reads as `''`.
        self.blank_line_body = False

    @property
    def eot(self) -> str:
        """End-of-text marker actually written, never blank."""
        if not self.multiline_eot or not self.multiline_eot.strip():
            return DEFAULT_EOT
        return self.multiline_eot.strip()

    @property
    def is_multiline(self) -> bool:
        text = str(self._value)
        return (self.force_multiline
                or NEWLINE_PATTERN.search(text) is not None
                or MULTILINE_START_PATTERN.match(text) is not None)

    def render_lines(self) -> list[str]:
        p = self.padding
        head = f'{p.left}{self.name}{p.inside_left}={p.inside_right}'
        text = str(self._value)
        if not self.is_multiline:
            return [f'{head}{text}{p.right}']

        eot = self.eot
        if text or self.blank_line_body:
            lines = NEWLINE_PATTERN.split(text)
        else:
            lines = []
        if any(i.strip() == eot for i in lines):
            warn(f'Value of property "{self.name}" contains a line equal '
                 f'to its end-of-text marker "{eot}", '
                 'it would be cut there when read again.')
        ep = self.eot_padding
        return [f'{head}<<{eot}{p.right}', *lines,
                f'{ep.left}{eot}{ep.right}']

    def __str__(self) -> str:
        return '\n'.join(self.render_lines())

    def __repr__(self) -> str:
        return f'Property({self.name!r}, {str(self._value)!r})'


class Section(MajorItem):
    """An INI section, an ordered list of `Property`.

    Names are not required to be unique, but every lookup by name
    resolves to the first property with that (case-sensitive) name:

        ```python
        sect['Level'] = 9          # set first `Level`, or append one
        sect['Level'].as_int()     # 9
        sect['Missing']            # PropertyValue.EMPTY
        sect[0]                    # first Property object
        ```
    """

    def __init__(
        self, name: str, *items: str | None,
        config: IniConfig | None = None
    ) -> None:
        super().__init__(name, *items, config=config)
        self.padding = SectionPadding(self._config)
        self._properties: list[Property] = []
        self._index: dict[str, Property] | None = None

    def _lookup(self) -> dict[str, Property]:
        if self._index is None:
            self._index = {}
            for i in self._properties:
                self._index.setdefault(i.name, i)
        return self._index

    def _invalidate(self) -> None:
        self._index = None

    def find(self, name: str) -> Property | None:
        """The first property called `name`, or `None`."""
        return self._lookup().get(name)

    @property
    def properties(self) -> tuple[Property, ...]:
        return tuple(self._properties)

    def names(self) -> list[str]:
        return [i.name for i in self._properties]

    @overload
    def __getitem__(self, key: int) -> Property: ...
    @overload
    def __getitem__(self, key: str) -> PropertyValue: ...

    def __getitem__(self, key: int | str) -> Property | PropertyValue:
        if isinstance(key, str):
            prop = self.find(key)
            return PropertyValue.EMPTY if prop is None else prop.value
        return self._properties[key]

    def __setitem__(self, key: int | str, value: Any) -> None:
        if isinstance(key, str):
            prop = self.find(key)
            if prop is None:
                self.add(Property(key, value, config=self._config))
            else:
                prop.value = value
            return
        if not isinstance(value, Property):
            raise InvalidArgument(
                f'Only Property objects can be placed by index, '
                f'not {type(value).__name__}.')
        if self._properties[key] is value:
            return
        if value in self:
            warn(f'Property "{value.name}" is already in [{self.name}], '
                 'not adding it twice.')
            return
        self._properties[key] = value
        self._invalidate()

    def __delitem__(self, key: int | str) -> None:
        if isinstance(key, str):
            prop = self.find(key)
            if prop is None:
                raise KeyError(key)
            self._properties.remove(prop)
        else:
            del self._properties[key]
        self._invalidate()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Property):
            return any(i is key for i in self._properties)
        return isinstance(key, str) and key in self._lookup()

    def __iter__(self) -> Iterator[Property]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def add(self, prop: Property) -> Property:
        if prop in self:
            warn(f'Property "{prop.name}" is already in [{self.name}], '
                 'not adding it twice.')
            return prop
        self._properties.append(prop)
        self._invalidate()
        return prop

    def insert(self, index: int, prop: Property) -> None:
        if prop in self:
            warn(f'Property "{prop.name}" is already in [{self.name}], '
                 'not adding it twice.')
            return
        self._properties.insert(index, prop)
        self._invalidate()

    def remove(self, prop: Property | str) -> None:
        if isinstance(prop, str):
            del self[prop]
            return
        for idx, i in enumerate(self._properties):
            if i is prop:
                del self[idx]
                return
        raise ValueError(f'{prop!r} is not in [{self.name}].')

    def pop(self, index: int = -1) -> Property:
        prop = self._properties.pop(index)
        self._invalidate()
        return prop

    def index(self, name: str) -> int:
        for idx, i in enumerate(self._properties):
            if i.name == name:
                return idx
        raise ValueError(f'No property "{name}" in [{self.name}].')

    def clear(self) -> None:
        self._properties.clear()
        self._invalidate()

    def rename_property(self, old: str, new: str) -> bool:
        """Rename the first property called `old`.

        Returns `False` if `old` is missing, just like `IniDocument.rename`.
        """
        prop = self.find(old)
        if prop is None:
            return False
        prop._rename(new)
        self._invalidate()
        return True

    def get(
        self, name: str,
        converter: Callable[[str], Any] | type = str,
        default: Any = None
    ) -> Any:
        """Read a property through a converter, or `default` if missing.

        `bool`, `list`, `datetime`, `date` and `Enum` subclasses are
        routed to the matching `PropertyValue.as_*` reader, any other
        converter is called with the raw text.
        """
        prop = self.find(name)
        if prop is None:
            return default
        value = prop.value
        if converter is bool:
            return value.as_bool()
        elif converter is list:
            return value.as_list()
        elif converter is datetime:
            return value.as_datetime()
        elif converter is date:
            return value.as_date()
        elif isinstance(converter, type) and issubclass(converter, Enum):
            return value.as_enum(converter)
        return converter(str(value))

    def getbool(self, name: str, default: bool | None = None) -> bool | None:
        return self.get(name, bool, default)

    def getlist(self, name: str) -> list[str]:
        return self.get(name, list, [])

    def __str__(self) -> str:
        p = self.padding
        return (f'{p.left}[{p.inside_left}{self.name}'
                f'{p.inside_right}]{p.right}')

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self.name, len(self._properties))


class IniDocument:
    """An INI file in memory: ordered sections plus trailing items.

    Comments and blank lines after the last property belong to no
    section; they are kept in `trailing_items`. Section names are unique,
    compared case-insensitively unless `settings.case_sensitive`.
    """

    def __init__(
        self,
        settings: LoadSettings | None = None,
        config: IniConfig | None = None
    ) -> None:
        self.settings = settings or LoadSettings()
        self.config = config or IniConfig()
        self._sections: list[Section] = []
        self._index: dict[str, Section] | None = None
        # `settings.case_sensitive` the index was built with.
        self._index_case: bool | None = None
        self.trailing_items: list[MinorItem] = []

    # --- entry points ---

    @classmethod
    def loads(
        cls, content: str,
        settings: LoadSettings | None = None,
        config: IniConfig | None = None
    ) -> 'IniDocument':
        from .parser import loads
        return loads(content, settings, config)

    @classmethod
    def load(
        cls, source: str | PathLike[str] | IO[Any],
        settings: LoadSettings | None = None,
        config: IniConfig | None = None
    ) -> 'IniDocument':
        """Read from a file path, a binary stream or a text stream."""
        from .parser import load
        return load(source, settings, config)

    def save(
        self, target: str | PathLike[str] | IO[Any],
        encoding: str = 'utf-8'
    ) -> None:
        from .writer import dump
        dump(self, target, encoding)

    async def save_async(self, writer: Any) -> None:
        from .writer import dump_async
        await dump_async(self, writer)

    def dumps(self) -> str:
        from .writer import dumps
        return dumps(self)

    def format(self, options: FormatOptions | None = None) -> None:
        from .formatter import format_document
        format_document(self, options)

    def __str__(self) -> str:
        return self.dumps()

    def __repr__(self) -> str:
        return f'<IniDocument - {len(self._sections)} sections>'

    # --- sections ---

    def _key(self, name: str) -> str:
        return name if self.settings.case_sensitive else name.casefold()

    def _lookup(self) -> dict[str, Section]:
        case_sensitive = self.settings.case_sensitive
        if self._index is None or self._index_case != case_sensitive:
            self._index = {}
            self._index_case = case_sensitive
            for i in self._sections:
                self._index.setdefault(self._key(i.name), i)
        return self._index

    def _invalidate(self) -> None:
        self._index = None

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    def names(self) -> list[str]:
        return [i.name for i in self._sections]

    @overload
    def __getitem__(self, key: int) -> Section: ...
    @overload
    def __getitem__(self, key: str) -> Section | None: ...

    def __getitem__(self, key: int | str) -> Section | None:
        if isinstance(key, str):
            return self._lookup().get(self._key(key))
        return self._sections[key]

    def __setitem__(
        self, key: str, value: Section | Mapping[str, Any]
    ) -> None:
        """Replace (in place) or append a section.

        A mapping is turned into a new section of its key-value pairs.
        """
        if isinstance(value, Section):
            if self._key(value.name) != self._key(key):
                raise InvalidArgument(
                    f'Section [{value.name}] cannot be stored as "{key}".')
            section = value
        else:
            section = Section(key, config=self.config)
            for k, v in value.items():
                section[k] = v
        old = self[key]
        if old is None:
            self.add(section)
            return
        self._sections[self._sections.index(old)] = section
        self._invalidate()

    def __delitem__(self, key: int | str) -> None:
        if isinstance(key, str):
            section = self[key]
            if section is None:
                raise KeyError(key)
            self._sections.remove(section)
        else:
            del self._sections[key]
        self._invalidate()

    def __contains__(self, key: object) -> bool:
        if isinstance(key, Section):
            return any(i is key for i in self._sections)
        return isinstance(key, str) and self._key(key) in self._lookup()

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def add(self, section: Section) -> Section:
        self.insert(len(self._sections), section)
        return section

    def insert(self, index: int, section: Section) -> None:
        if self._key(section.name) in self._lookup():
            raise DuplicateSection(section.name)
        self._sections.insert(index, section)
        self._invalidate()

    def remove(self, section: Section | str) -> None:
        if isinstance(section, str):
            del self[section]
            return
        for idx, i in enumerate(self._sections):
            if i is section:
                del self[idx]
                return
        raise ValueError(f'{section!r} is not in the document.')

    def pop(self, index: int = -1) -> Section:
        section = self._sections.pop(index)
        self._invalidate()
        return section

    def index(self, name: str) -> int:
        key = self._key(name)
        for idx, i in enumerate(self._sections):
            if self._key(i.name) == key:
                return idx
        raise ValueError(f'No section [{name}] in the document.')

    def setdefault(self, name: str) -> Section:
        """Get section `name`, appending an empty one if it is missing."""
        section = self[name]
        if section is None:
            section = self.add(Section(name, config=self.config))
        return section

    def rename(self, old: str, new: str) -> bool:
        """Rename a section.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        section = self[old]
        if section is None:
            return False
        other = self[new]
        if other is not None and other is not section:
            return False
        section._rename(new)
        self._invalidate()
        return True

    def clear(self) -> None:
        self._sections.clear()
        self.trailing_items.clear()
        self._invalidate()
