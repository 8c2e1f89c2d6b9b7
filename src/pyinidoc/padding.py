# -*- encoding: utf-8 -*-
# @File   : padding.py
# @Time   : 2024/11/02 21:40:19
# @Author : Kariko Lin

"""Whitespace kept around sections, properties and comments."""

from typing import Any, NamedTuple

from .config import IniConfig, PadAmount


class PaddingValue(NamedTuple):
    """Either `amount` spaces, or the literal whitespace in `text`."""
    amount: int = 0
    text: str | None = None

    @classmethod
    def of(cls, pad: 'PadAmount | PaddingValue | None') -> 'PaddingValue':
        if pad is None:
            return cls()
        if isinstance(pad, PaddingValue):
            return pad
        if isinstance(pad, int):
            if pad < 0:
                raise ValueError(f'Padding cannot be negative: {pad}')
            return cls(amount=pad)
        # spaces only collapse to a count, tabs etc. are kept verbatim.
        if pad.strip(' ') == '':
            return cls(amount=len(pad))
        return cls(amount=len(pad), text=pad)

    def __str__(self) -> str:
        return ' ' * self.amount if self.text is None else self.text

    def __eq__(self, other: object) -> bool:
        # plain ints compare against space counts.
        if isinstance(other, int) and not isinstance(other, bool):
            return self.text is None and self.amount == other
        return isinstance(other, tuple) and tuple.__eq__(self, other)

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return self.amount if self.text is None else hash(self.text)


class Padding:
    """Base of all padding holders.

    Every name in `_fields` is coerced into a `PaddingValue` on assignment.
    """
    _fields: tuple[str, ...] = ('left',)

    def __init__(self, config: IniConfig | None = None) -> None:
        object.__setattr__(self, '_config', config or IniConfig())
        self.reset()

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._fields:
            value = PaddingValue.of(value)
        super().__setattr__(name, value)

    def _defaults(self) -> dict[str, PadAmount]:
        return {'left': 0}

    def reset(self) -> None:
        """Re-apply the configured defaults."""
        for k, v in self._defaults().items():
            setattr(self, k, v)

    def __repr__(self) -> str:
        return '%s(%s)' % (
            type(self).__name__,
            ', '.join(f'{i}={str(getattr(self, i))!r}' for i in self._fields))


class SectionPadding(Padding):
    left: PaddingValue
    inside_left: PaddingValue
    inside_right: PaddingValue
    right: PaddingValue
    _fields = ('left', 'inside_left', 'inside_right', 'right')

    def _defaults(self) -> dict[str, PadAmount]:
        cfg = self._config.padding.section
        return dict(
            left=cfg.left, inside_left=cfg.inside_left,
            inside_right=cfg.inside_right, right=cfg.right)


class PropertyPadding(Padding):
    left: PaddingValue
    inside_left: PaddingValue  # between name and `=`
    inside_right: PaddingValue  # between `=` and value
    right: PaddingValue
    _fields = ('left', 'inside_left', 'inside_right', 'right')

    def _defaults(self) -> dict[str, PadAmount]:
        cfg = self._config.padding.property
        return dict(
            left=cfg.left, inside_left=cfg.inside_left,
            inside_right=cfg.inside_right, right=cfg.right)


class CommentPadding(Padding):
    left: PaddingValue
    inside: PaddingValue  # between marker and text
    right: PaddingValue
    _fields = ('left', 'inside', 'right')

    def _defaults(self) -> dict[str, PadAmount]:
        cfg = self._config.padding.comment
        return dict(left=cfg.left, inside=cfg.inside, right=cfg.right)


class BlankLinePadding(Padding):
    left: PaddingValue


class EotPadding(Padding):
    """Whitespace around the end-of-text line of a heredoc value."""
    left: PaddingValue
    right: PaddingValue
    _fields = ('left', 'right')

    def _defaults(self) -> dict[str, PadAmount]:
        return dict(left=0, right=0)
