# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/10 00:57:10
# @Author : Kariko Lin

"""
Basically INI Structure, with its original layout kept.

Semantics (sections and key-value pairs) are served by the two mappings,
while the layout (headers, comments, blank lines, shadowed duplicates)
is a list of `IniBlock`s which the serializer walks through.
"""

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Iterator
from warnings import warn

from .consts import DEFAULT_NEWLINE


@dataclass(kw_only=True)
class IniLine:
    """Blank, comment or unparsable line, kept verbatim.

    `key` is set (folded) when the line is an earlier duplicate
    of an entry, which means the line got shadowed by the later one.
    """
    raw: str
    key: str | None = None


@dataclass(kw_only=True)
class IniEntry:
    key: str
    value: str
    comment: str | None = None
    # original line text. dropped once the value changed.
    raw: str | None = None


class IniBlock:
    """A header line and the lines below it, until the next header.

    A section declared twice owns two blocks.
    """
    def __init__(self, section: 'IniSection', header: str | None = None):
        self.section = section
        # `None` means "render it": `[name]`, or nothing for the global one.
        self.header = header
        self.lines: list[IniEntry | IniLine] = []

    def __repr__(self) -> str:
        return '<IniBlock %r { .lines = %d }>' % (
            self.section.name, len(self.lines))


class IniSection(MutableMapping[str, str]):
    """INI section dict, of raw string values.

    Use `self.entry()` to get the whole entry (value with inline comment).
    Keys are case-insensitive unless the owner document says otherwise,
    while the first-seen spelling is what gets written back.
    """
    def __init__(
        self, name: str, /, *,
        case_sensitive: bool = False,
        header: str | None = None
    ) -> None:
        self._name = name
        self._case_sensitive = case_sensitive
        self._entries: dict[str, IniEntry] = {}
        self._blocks: list[IniBlock] = [IniBlock(self, header)]

    @property
    def name(self) -> str:
        return self._name

    def _fold(self, key: str) -> str:
        return key if self._case_sensitive else key.casefold()

    def __getitem__(self, key: str) -> str:
        return self._entries[self._fold(key)].value

    def __setitem__(self, key: str, value: str) -> None:
        folded = self._fold(key)
        if (ent := self._entries.get(folded)) is not None:
            # unchanged value keeps the original line, byte by byte.
            if ent.value != value:
                ent.value = value
                ent.raw = None
            return
        ent = IniEntry(key=key, value=value)
        self._entries[folded] = ent
        self.__insert(ent)

    def __delitem__(self, key: str) -> None:
        folded = self._fold(key)
        ent = self._entries.pop(folded)
        shadowed = 0
        for block in self._blocks:
            before = len(block.lines)
            block.lines = [
                i for i in block.lines
                if i is not ent and not (
                    isinstance(i, IniLine) and i.key == folded)
            ]
            shadowed += before - len(block.lines)
        if shadowed > 1:
            warn(f'{self} "{ent.key}" was declared {shadowed} times, '
                 'all of those lines are removed.')

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._fold(key) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return (i.key for i in self._entries.values())

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._entries))

    def entry(self, key: str) -> IniEntry:
        """Get the entry object (value and inline comment) of `key`."""
        return self._entries[self._fold(key)]

    def __insert(self, ent: IniEntry) -> None:
        # right after the last entry of the last block,
        # so trailing blanks and comments stay in the bottom.
        lines = self._blocks[-1].lines
        pos = 0
        for idx, i in enumerate(lines):
            if isinstance(i, IniEntry):
                pos = idx + 1
        lines.insert(pos, ent)

    def _open_block(self, header: str | None = None) -> IniBlock:
        """for parser, on a repeated section header."""
        block = IniBlock(self, header)
        self._blocks.append(block)
        return block

    def _append_parsed(self, block: IniBlock, ent: IniEntry) -> None:
        """for parser. The latter duplicate wins."""
        folded = self._fold(ent.key)
        if (old := self._entries.get(folded)) is not None:
            for b in self._blocks:
                for idx, i in enumerate(b.lines):
                    if i is old:
                        b.lines[idx] = IniLine(raw=old.raw or '', key=folded)
            # the original spelling is kept.
            ent.key = old.key
        self._entries[folded] = ent
        block.lines.append(ent)


class IniDocument(MutableMapping[str, IniSection]):
    """INI document representation, like:

        ```ini
        key = val  ; use self.header for pairs before any section.

        [section]
        key233 = val666  ; inline comments are kept.
        ```

    Section names are case-insensitive unless `case_sensitive=True`.
    """
    def __init__(
        self, *,
        case_sensitive: bool = False,
        newline: str = DEFAULT_NEWLINE
    ) -> None:
        self.case_sensitive = case_sensitive
        self.newline = newline
        self.trailing_newline = True
        self.__header = IniSection('', case_sensitive=case_sensitive)
        self.__sections: dict[str, IniSection] = {}
        self._layout: list[IniBlock] = [self.__header._blocks[0]]

    @property
    def header(self) -> IniSection:
        """Pairs placed before the first section header."""
        return self.__header

    def _fold(self, name: str) -> str:
        return name if self.case_sensitive else name.casefold()

    def __getitem__(self, name: str) -> IniSection:
        return self.__sections[self._fold(name)]

    def __setitem__(
        self, name: str, value: IniSection | Mapping[str, str]
    ) -> None:
        # copy first, in case of `doc[a] = doc[a]`.
        pairs = dict(value.items())
        section = self.setdefault(name)
        section.clear()
        section.update(pairs)

    def __delitem__(self, name: str) -> None:
        section = self.__sections.pop(self._fold(name))
        self._layout = [i for i in self._layout if i.section is not section]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._fold(name) in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__sections.values())

    def __repr__(self) -> str:
        return '<IniDocument { .sections = %d }>' % len(self)

    def setdefault(
        self, name: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        """If section `name` is not in self, then append it to the bottom
        (filled with `default`, if any)."""
        if name not in self:
            section = IniSection(name, case_sensitive=self.case_sensitive)
            self.__sections[self._fold(name)] = section
            self._layout.append(section._blocks[0])
            if default:
                section.update(default)
        return self[name]

    def _open_section(self, name: str, header: str) -> IniBlock:
        """for parser. Repeated headers feed the earlier section."""
        if name in self:
            block = self[name]._open_block(header)
        else:
            section = IniSection(
                name, case_sensitive=self.case_sensitive, header=header)
            self.__sections[self._fold(name)] = section
            block = section._blocks[0]
        self._layout.append(block)
        return block
