# -*- encoding: utf-8 -*-
# @File   : formatter.py
# @Time   : 2024/11/05 19:42:03
# @Author : Kariko Lin

from .config import FormatOptions
from .items import BlankLine, MinorItem
from .model import IniDocument


def _format_minor_items(
    items: list[MinorItem], remove_successive: bool
) -> None:
    for i in items:
        i.padding.reset()
    if not remove_successive:
        return
    for idx in range(len(items) - 1, 0, -1):
        if isinstance(items[idx], BlankLine) and \
                isinstance(items[idx - 1], BlankLine):
            del items[idx]


def _starts_with_blank(items: list[MinorItem]) -> bool:
    return bool(items) and isinstance(items[0], BlankLine)


def format_document(
    doc: IniDocument, options: FormatOptions | None = None
) -> None:
    """Reset every padding to the configured defaults and tidy blank lines.

    Running it twice with the same options changes nothing more.
    Trailing items of the document always lose their final blank lines
    and successive blank lines; leading items of sections and properties
    only when `options.remove_successive_blank_lines` is set.
    """
    options = options or FormatOptions()
    successive = options.remove_successive_blank_lines

    for s, section in enumerate(doc):
        _format_minor_items(section.minor_items, successive)
        if options.ensure_blank_line_between_sections and s > 0 \
                and not _starts_with_blank(section.minor_items):
            section.minor_items.insert(0, BlankLine(doc.config))
        section.padding.reset()

        for p, prop in enumerate(section):
            _format_minor_items(prop.minor_items, successive)
            if options.ensure_blank_line_between_properties and p > 0 \
                    and not _starts_with_blank(prop.minor_items):
                prop.minor_items.insert(0, BlankLine(doc.config))
            prop.padding.reset()
            prop.eot_padding.reset()

    trailing = doc.trailing_items
    while trailing and isinstance(trailing[-1], BlankLine):
        trailing.pop()
    _format_minor_items(trailing, True)


__all__ = ['format_document']
