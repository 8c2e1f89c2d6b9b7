# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2024/11/02 21:05:47
# @Author : Kariko Lin

"""Configuration objects.

There is no module level configuration: an `IniConfig` is handed to the
document (or to single items), and its values are copied into new padding
and value objects when they are constructed or reset. Changing a config
later does not touch items already built.
"""

from dataclasses import dataclass, field

PadAmount = int | str


@dataclass
class HashCommentConfig:
    # `#` lines are only comments when allowed.
    allow: bool = True
    is_default: bool = False


@dataclass
class SectionPaddingConfig:
    left: PadAmount = 0
    inside_left: PadAmount = 0
    inside_right: PadAmount = 0
    right: PadAmount = 0


@dataclass
class PropertyPaddingConfig:
    left: PadAmount = 0
    inside_left: PadAmount = 1
    inside_right: PadAmount = 1
    right: PadAmount = 0


@dataclass
class CommentPaddingConfig:
    left: PadAmount = 0
    inside: PadAmount = 1
    right: PadAmount = 0


@dataclass
class PaddingConfig:
    section: SectionPaddingConfig = field(
        default_factory=SectionPaddingConfig)
    property: PropertyPaddingConfig = field(
        default_factory=PropertyPaddingConfig)
    comment: CommentPaddingConfig = field(
        default_factory=CommentPaddingConfig)


@dataclass
class TypesConfig:
    true_string: str = '1'
    false_string: str = '0'
    # `%x` is the locale's short date representation.
    date_format: str = '%x'


def _blank(s: str | None) -> bool:
    return s is None or not s.strip()


@dataclass
class IniConfig:
    """Defaults for comment markers, paddings and typed values.

    Setters return the same instance so calls can be chained:

        ```python
        config = (IniConfig()
                  .allow_hash_for_comments(set_as_default=True)
                  .set_property_padding_defaults(left=4))
        ```
    """
    hash_for_comments: HashCommentConfig = field(
        default_factory=HashCommentConfig)
    padding: PaddingConfig = field(default_factory=PaddingConfig)
    types: TypesConfig = field(default_factory=TypesConfig)

    def allow_hash_for_comments(
        self, set_as_default: bool = False
    ) -> 'IniConfig':
        self.hash_for_comments.allow = True
        self.hash_for_comments.is_default = set_as_default
        return self

    def disallow_hash_for_comments(self) -> 'IniConfig':
        self.hash_for_comments.allow = False
        self.hash_for_comments.is_default = False
        return self

    def set_section_padding_defaults(
        self,
        left: PadAmount | None = None,
        inside_left: PadAmount | None = None,
        inside_right: PadAmount | None = None,
        right: PadAmount | None = None
    ) -> 'IniConfig':
        self.padding.section = SectionPaddingConfig(
            left=left or 0,
            inside_left=inside_left or 0,
            inside_right=inside_right or 0,
            right=right or 0)
        return self

    def set_property_padding_defaults(
        self,
        left: PadAmount | None = None,
        inside_left: PadAmount | None = None,
        inside_right: PadAmount | None = None,
        right: PadAmount | None = None
    ) -> 'IniConfig':
        self.padding.property = PropertyPaddingConfig(
            left=left or 0,
            inside_left=1 if inside_left is None else inside_left,
            inside_right=1 if inside_right is None else inside_right,
            right=right or 0)
        return self

    def set_comment_padding_defaults(
        self,
        left: PadAmount | None = None,
        inside: PadAmount | None = None,
        right: PadAmount | None = None
    ) -> 'IniConfig':
        self.padding.comment = CommentPaddingConfig(
            left=left or 0,
            inside=1 if inside is None else inside,
            right=right or 0)
        return self

    def set_boolean_strings(
        self, true_string: str = '1', false_string: str = '0'
    ) -> 'IniConfig':
        """Strings written for `True`/`False` values (also read back)."""
        self.types.true_string = '1' if _blank(true_string) else true_string
        self.types.false_string = (
            '0' if _blank(false_string) else false_string)
        return self

    def set_date_format(self, date_format: str | None = None) -> 'IniConfig':
        """`strftime`/`strptime` format for dates; blank means `%x`."""
        self.types.date_format = (
            '%x' if _blank(date_format) else date_format)
        return self


@dataclass
class LoadSettings:
    """Per-load options.

    `encoding` and `detect_encoding` only matter for byte sources
    (file paths and binary streams).
    """
    case_sensitive: bool = False
    ignore_blank_lines: bool = False
    ignore_comments: bool = False
    encoding: str | None = None
    detect_encoding: bool = False


@dataclass
class FormatOptions:
    ensure_blank_line_between_sections: bool = False
    ensure_blank_line_between_properties: bool = False
    # trailing items of the document are always collapsed.
    remove_successive_blank_lines: bool = False
