# -*- encoding: utf-8 -*-
# @File   : value.py
# @Time   : 2024/11/03 14:12:51
# @Author : Kariko Lin

"""Property values, stored as text and converted on demand."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from .config import IniConfig
from .consts import FALSE_WORDS, TRUE_WORDS

E = TypeVar('E', bound=Enum)


class PropertyValue:
    """Text of a property value, with typed readers and writers.

    All values *are* text in an INI file; conversions use the `types`
    part of the `IniConfig` the value was created with. `EMPTY` stands
    for a missing value: it renders as `''` but only equals itself.
    """
    EMPTY: 'PropertyValue'

    __slots__ = ('_text', '_config')

    def __init__(self, text: str = '', config: IniConfig | None = None):
        self._text = text
        self._config = config or IniConfig()

    @classmethod
    def of(cls, obj: Any, config: IniConfig | None = None) -> 'PropertyValue':
        """Wrap a Python value, converting it to its INI text."""
        config = config or IniConfig()
        types = config.types
        if obj is None:
            return cls.EMPTY
        if isinstance(obj, PropertyValue):
            return obj
        # bool before int, since bool IS int.
        if isinstance(obj, bool):
            text = types.true_string if obj else types.false_string
        elif isinstance(obj, Enum):
            text = obj.name
        elif isinstance(obj, (datetime, date)):
            text = obj.strftime(types.date_format)
        else:
            text = str(obj)
        return cls(text, config)

    @property
    def is_empty(self) -> bool:
        return self is PropertyValue.EMPTY

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        if self.is_empty:
            return 'PropertyValue.EMPTY'
        return f'PropertyValue({self._text!r})'

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PropertyValue):
            if self.is_empty or other.is_empty:
                return self is other
            return self._text == other._text
        if isinstance(other, str):
            return not self.is_empty and self._text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __bool__(self) -> bool:
        return bool(self._text)

    def __len__(self) -> int:
        return len(self._text)

    def __int__(self) -> int:
        return self.as_int()

    def __float__(self) -> float:
        return self.as_float()

    def as_str(self) -> str:
        return self._text

    def as_int(self) -> int:
        return int(self._text.strip())

    def as_float(self) -> float:
        return float(self._text.strip())

    def as_decimal(self) -> Decimal:
        try:
            return Decimal(self._text.strip())
        except InvalidOperation:
            raise ValueError(
                f'Cannot convert {self._text!r} to Decimal.') from None

    def as_bool(self) -> bool:
        """Configured true/false strings first, then well-known words."""
        text = self._text.strip().lower()
        types = self._config.types
        if text == types.true_string.strip().lower():
            return True
        if text == types.false_string.strip().lower():
            return False
        if text in TRUE_WORDS:
            return True
        if text in FALSE_WORDS:
            return False
        raise ValueError(f'Cannot convert {self._text!r} to bool.')

    def as_datetime(self, date_format: str | None = None) -> datetime:
        return datetime.strptime(
            self._text.strip(), date_format or self._config.types.date_format)

    def as_date(self, date_format: str | None = None) -> date:
        return self.as_datetime(date_format).date()

    def as_enum(self, enum_type: type[E]) -> E:
        """Look up a member by name, ignoring case."""
        text = self._text.strip()
        if text in enum_type.__members__:
            return enum_type[text]
        for name, member in enum_type.__members__.items():
            if name.lower() == text.lower():
                return member
        raise ValueError(f'{self._text!r} is not a {enum_type.__name__}.')

    def as_list(self, sep: str = ',') -> list[str]:
        if not self._text.strip():
            return []
        return [i.strip() for i in self._text.split(sep)]


PropertyValue.EMPTY = PropertyValue()
