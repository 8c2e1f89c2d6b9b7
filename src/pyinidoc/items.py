# -*- encoding: utf-8 -*-
# @File   : items.py
# @Time   : 2024/11/03 15:30:08
# @Author : Kariko Lin

"""Minor items (comments, blank lines) and the base of major items."""

from typing import Iterator

from .config import IniConfig
from .consts import CommentChar
from .errors import InvalidName
from .padding import BlankLinePadding, CommentPadding


class Comment:
    def __init__(
        self, text: str = '',
        char: CommentChar | str | None = None,
        config: IniConfig | None = None
    ) -> None:
        config = config or IniConfig()
        self.text = text
        if char is None:
            hash_cfg = config.hash_for_comments
            char = (CommentChar.HASH
                    if hash_cfg.allow and hash_cfg.is_default
                    else CommentChar.SEMICOLON)
        self.char = CommentChar(char)
        self.padding = CommentPadding(config)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = value or ''

    def __str__(self) -> str:
        p = self.padding
        return f'{p.left}{self.char.value}{p.inside}{self.text}{p.right}'

    def __repr__(self) -> str:
        return f'Comment({self.text!r}, {self.char.value!r})'


class BlankLine:
    def __init__(self, config: IniConfig | None = None) -> None:
        self.padding = BlankLinePadding(config)

    def __str__(self) -> str:
        return str(self.padding.left)

    def __repr__(self) -> str:
        return 'BlankLine()'


MinorItem = Comment | BlankLine


def validate_name(name: object) -> str:
    if not isinstance(name, str) or not name.strip():
        raise InvalidName(name)
    return name.strip()


class MajorItem:
    """Base of `Section` and `Property`.

    Each major item owns the comments and blank lines written above it.
    Strings given as `items` become `BlankLine` when blank (their length
    kept as left padding), or `Comment` otherwise.
    """

    def __init__(
        self, name: str, *items: str | None,
        config: IniConfig | None = None
    ) -> None:
        self._config = config or IniConfig()
        self._name = validate_name(name)
        self.minor_items: list[MinorItem] = []
        # source line, only known for items read by the parser.
        self.lineno: int | None = None
        for i in items:
            if i is None or not i.strip():
                blank = BlankLine(self._config)
                blank.padding.left = len(i or '')
                self.minor_items.append(blank)
            else:
                self.minor_items.append(Comment(i, config=self._config))

    @property
    def name(self) -> str:
        return self._name

    def _rename(self, name: str) -> None:
        # owners keep name indexes, so renames go through them.
        self._name = validate_name(name)

    @property
    def config(self) -> IniConfig:
        return self._config

    @property
    def comments(self) -> Iterator[Comment]:
        return (i for i in self.minor_items if isinstance(i, Comment))

    def add_comment(self, text: str) -> Comment:
        comment = Comment(text, config=self._config)
        self.minor_items.append(comment)
        return comment

    def add_blank_line(self) -> BlankLine:
        blank = BlankLine(self._config)
        self.minor_items.append(blank)
        return blank
