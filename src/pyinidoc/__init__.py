# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/11/02 20:01:52
# @Author : Kariko Lin

"""Round-trip INI documents.

Comments, blank lines, paddings and heredoc values all survive a
load-edit-save cycle:

    ```python
    import pyinidoc

    doc = pyinidoc.loads(text)
    doc['Players']['Player3'] = 'Mia'
    assert doc.dumps().startswith(text)
    ```
"""

import logging

from .config import FormatOptions, IniConfig, LoadSettings
from .consts import CommentChar
from .errors import (
    DuplicateSection,
    FormatError,
    IniError,
    InvalidArgument,
    InvalidName,
    PropertyWithoutSection,
    UnrecognizedLine,
    UnterminatedValue,
)
from .formatter import format_document
from .items import BlankLine, Comment, MinorItem
from .model import IniDocument, Property, Section
from .padding import PaddingValue
from .parser import IniParser, load, loads
from .value import PropertyValue
from .writer import dump, dump_async, dumps

__all__ = [
    'IniDocument', 'Section', 'Property', 'Comment', 'BlankLine',
    'MinorItem', 'PropertyValue', 'PaddingValue', 'CommentChar',
    'IniConfig', 'LoadSettings', 'FormatOptions',
    'IniParser', 'load', 'loads', 'dump', 'dumps', 'dump_async',
    'format_document',
    'IniError', 'InvalidArgument', 'InvalidName', 'DuplicateSection',
    'FormatError', 'UnrecognizedLine', 'PropertyWithoutSection',
    'UnterminatedValue',
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
