# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2024/10/12 16:40:19
# @Author : Kariko Lin

from typing import Iterator

from .model import IniDocument, IniEntry


def render_entry(ent: IniEntry) -> str:
    """`key=value`, then the inline comment if any."""
    line = f'{ent.key}={ent.value}'
    if ent.comment:
        line += f' {ent.comment}'
    return line


def iter_lines(doc: IniDocument) -> Iterator[str]:
    """Yield every line of `doc`, without line breaks.

    Untouched lines come out as they were read.
    """
    for block in doc._layout:
        if block.section is not doc.header:
            yield (block.header if block.header is not None
                   else str(block.section))
        for i in block.lines:
            if isinstance(i, IniEntry) and i.raw is None:
                yield render_entry(i)
            else:
                yield i.raw


def serialize(doc: IniDocument) -> str:
    lines = list(iter_lines(doc))
    if not lines:
        return ''
    text = doc.newline.join(lines)
    return text + doc.newline if doc.trailing_newline else text
