# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 15:02:47
# @Author : Kariko Lin

from os import linesep
from re import compile as regex

SECTION_LINE = regex(r'^\s*\[(.+?)\]\s*(?:[;#].*)?$')
ENTRY_LINE = regex(r'^\s*([^=;#]+?)\s*=\s*(.*)$')
LINE_BREAK = regex(r'\r\n|\r|\n')

COMMENT_MARKS = (';', '#')
ESCAPE_MARK = '\\'

# checked in order, the first one found wins.
KNOWN_NEWLINES = ('\r\n', '\n', '\r')
DEFAULT_NEWLINE = linesep

FORBIDDEN_NAME_CHARS = frozenset('[]=\r\n')
FORBIDDEN_KEY_CHARS = FORBIDDEN_NAME_CHARS | frozenset(COMMENT_MARKS)

DEFAULT_ENCODING = 'utf-8'
# `chardet` guesses below this are ignored.
MIN_CODEC_CONFIDENCE = 0.8
FALLBACK_ENCODING = 'latin-1'
