# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/10 01:04:45
# @Author : Kariko Lin

"""Classic INI reading, `[section]` and `key=value` only.

The parser never fails: anything it doesn't understand is kept
as an opaque line, so writing the document back reproduces it.
"""

import logging
from codecs import BOM_UTF8
from codecs import lookup as lookup_codec
from os import PathLike, fdopen, remove, replace
from os.path import dirname, exists
from shutil import copymode
from tempfile import mkstemp

import chardet

from ..abstract import FileHandler
from .consts import (
    COMMENT_MARKS,
    DEFAULT_ENCODING,
    DEFAULT_NEWLINE,
    ENTRY_LINE,
    ESCAPE_MARK,
    FALLBACK_ENCODING,
    KNOWN_NEWLINES,
    LINE_BREAK,
    MIN_CODEC_CONFIDENCE,
    SECTION_LINE
)
from .model import IniDocument, IniEntry, IniLine
from .serializer import serialize

_log = logging.getLogger(__name__)


def detect_newline(text: str) -> str | None:
    for i in KNOWN_NEWLINES:
        if i in text:
            return i
    return None


def split_comment(text: str) -> tuple[str, str | None]:
    """Split `value ; comment` at the first unescaped `;` or `#`.

    The comment keeps its mark, while the value is right-stripped.
    A backslash escapes the char next to it; nothing is unescaped.
    """
    escaped = False
    for idx, ch in enumerate(text):
        if escaped:
            escaped = False
        elif ch == ESCAPE_MARK:
            escaped = True
        elif ch in COMMENT_MARKS:
            return text[:idx].rstrip(), text[idx:]
    return text.rstrip(), None


def parse(text: str, *, case_sensitive: bool = False) -> IniDocument:
    """Build an `IniDocument` out of INI text."""
    doc = IniDocument(
        case_sensitive=case_sensitive,
        newline=detect_newline(text) or DEFAULT_NEWLINE)
    if not text:
        return doc

    lines = LINE_BREAK.split(text)
    if lines[-1] == '':
        lines.pop()
    else:
        doc.trailing_newline = False

    block = doc._layout[0]  # global pairs, before any header.
    for lineno, i in enumerate(lines, 1):
        if (m := SECTION_LINE.match(i)) and (name := m.group(1).strip()):
            if name in doc:
                _log.debug('line %d: [%s] declared again, merged.',
                           lineno, name)
            block = doc._open_section(name, i)
            continue
        if not i.strip() or i.lstrip()[0] in COMMENT_MARKS:
            block.lines.append(IniLine(raw=i))
            continue
        if (m := ENTRY_LINE.match(i)) and (key := m.group(1).strip()):
            value, comment = split_comment(m.group(2))
            if key in block.section:
                _log.debug('line %d: %s "%s" overridden.',
                           lineno, block.section, key)
            block.section._append_parsed(block, IniEntry(
                key=key, value=value, comment=comment, raw=i))
            continue
        _log.debug('line %d: not an INI line, kept as is.', lineno)
        block.lines.append(IniLine(raw=i))
    return doc


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str = DEFAULT_ENCODING, *,
        case_sensitive: bool = False
    ) -> None:
        super().__init__(filename)
        self._encoding = encoding
        # the codec that decoded the file last time, used for writing back.
        self._codec = encoding
        self._case_sensitive = case_sensitive

    def _decode(self, raw: bytes) -> tuple[str, str]:
        codec = self._encoding
        if (raw.startswith(BOM_UTF8)
                and lookup_codec(codec).name == 'utf-8'):
            codec = 'utf-8-sig'
        try:
            return raw.decode(codec), codec
        except UnicodeDecodeError:
            _log.warning('%s is not %s encoded, guessing with chardet.',
                         self._fn, codec)

        guess = chardet.detect(raw)
        codec = guess.get('encoding')
        if codec is not None and guess['confidence'] >= MIN_CODEC_CONFIDENCE:
            try:
                return raw.decode(codec), codec
            except (UnicodeDecodeError, LookupError):
                _log.warning('%s guessed as %s, but failed to decode.',
                             self._fn, codec)
        # latin-1 decodes anything.
        _log.warning('%s decoded as %s.', self._fn, FALLBACK_ENCODING)
        return raw.decode(FALLBACK_ENCODING), FALLBACK_ENCODING

    def read(self) -> IniDocument:
        """Read the file this parser refers to.

        May raise `OSError`, like `FileNotFoundError`.
        """
        with open(self._fn, 'rb') as fp:
            raw = fp.read()
        text, self._codec = self._decode(raw)
        return parse(text, case_sensitive=self._case_sensitive)

    def write(self, instance: IniDocument) -> None:
        """Replace the file with the serialized `instance`.

        The text goes to a temporary file beside the target first,
        and then takes its place, so the file is never half written.
        May raise `OSError` or `UnicodeEncodeError`.
        """
        data = serialize(instance).encode(self._codec)
        fd, tmp = mkstemp(prefix='.', suffix='.tmp', dir=dirname(self._fn))
        try:
            with fdopen(fd, 'wb') as fp:
                fp.write(data)
            if exists(self._fn):
                copymode(self._fn, tmp)
            replace(tmp, self._fn)
        except BaseException:
            if exists(tmp):
                remove(tmp)
            raise

    def __str__(self) -> str:
        return 'INI file: ' + super().__str__() + f'({self._codec})'
