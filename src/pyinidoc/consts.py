# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/11/02 20:31:04
# @Author : Kariko Lin

from enum import Enum
from re import compile as regex


class CommentChar(str, Enum):
    SEMICOLON = ';'
    HASH = '#'


DEFAULT_EOT = 'EOT'

# all patterns work on one physical line, without its line break.
SECTION_PATTERN = regex(r'^(\s*)\[(\s*)(.*?)(\s*)\](\s*)$')
# name: anything up to the first `=` not escaped by a backslash.
PROPERTY_PATTERN = regex(r'^(\s*)((?:\\.|[^=\\])+?)(\s*)=(\s*)(.*?)(\s*)$')
COMMENT_PATTERN = regex(r'^(\s*)([;#])(\s*)(.*?)(\s*)$')
MULTILINE_START_PATTERN = regex(r'^<<(\w+)$')
NEWLINE_PATTERN = regex(r'\r\n|\r|\n')

TRUE_WORDS = frozenset({'1', 'true', 'yes', 'y', 'on', 't'})
FALSE_WORDS = frozenset({'0', 'false', 'no', 'n', 'off', 'f'})
