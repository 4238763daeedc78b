"""Lightweight markup parser for agent free-text fields.

Understands ``#``/``##``/``###`` headings, ``-``/``*`` bullets, ``1.`` numbered
items, blank lines and ``**bold**`` spans. Each line is classified on its own;
there is no nesting and no multi-line state, so malformed input simply
degrades to plain paragraphs.
"""

from __future__ import annotations

import re

from syncdash.models.markup import Block, Heading, ListItem, Paragraph, Spacer, Span

_HEADINGS = (("### ", 3), ("## ", 2), ("# ", 1))
_BULLETS = ("- ", "* ")
_ORDERED = re.compile(r"^\d+\.\s")
_EMPHASIS = re.compile(r"\*\*(.*?)\*\*")


def parse_markup(text: str | None) -> list[Block]:
    """Split ``text`` into render blocks, one per input line."""
    if not text:
        return []
    return [_parse_line(line.removesuffix("\r")) for line in text.split("\n")]


def parse_inline(text: str) -> list[Span]:
    """Split a line into plain and emphasized spans.

    An unterminated ``**`` never matches the pattern and stays in the plain
    text as-is.
    """
    parts = _EMPHASIS.split(text)
    # re.split with one group alternates plain, captured, plain, ...
    return [
        Span(text=part, emphasized=index % 2 == 1)
        for index, part in enumerate(parts)
        if part
    ]


def _parse_line(line: str) -> Block:
    for prefix, level in _HEADINGS:
        if line.startswith(prefix):
            return Heading(level=level, text=line[len(prefix) :])
    if line.startswith(_BULLETS):
        return ListItem(ordered=False, spans=parse_inline(line[2:]))
    match = _ORDERED.match(line)
    if match:
        return ListItem(ordered=True, spans=parse_inline(line[match.end() :]))
    if not line.strip():
        return Spacer()
    return Paragraph(spans=parse_inline(line))
