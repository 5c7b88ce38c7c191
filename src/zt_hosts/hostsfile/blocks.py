"""Paragraph tokenizer for managed hosts-file blocks.

Pure functions over lists of lines. Lines may keep their terminators
(``str.splitlines(keepends=True)``); blankness ignores them.
"""

from __future__ import annotations

import re
from typing import Sequence


def is_blank(line: str) -> bool:
    return not line.strip()


def has_tag(line: str, tag: str) -> bool:
    """True if ``tag`` occurs in ``line`` as a whole word."""
    return re.search(r"(?<!\w)" + re.escape(tag) + r"(?!\w)", line) is not None


def split_paragraphs(lines: Sequence[str]) -> list[tuple[int, int]]:
    """Return ``(start, end)`` spans of maximal non-blank runs.

    ``lines[start:end]`` is one paragraph. Blank lines belong to no span.
    """
    spans = []
    start = None
    for i, line in enumerate(lines):
        if is_blank(line):
            if start is not None:
                spans.append((start, i))
                start = None
        elif start is None:
            start = i
    if start is not None:
        spans.append((start, len(lines)))
    return spans


def tagged_paragraphs(lines: Sequence[str], tag: str) -> list[tuple[int, int]]:
    """Spans of the paragraphs that contain ``tag`` on any line."""
    return [
        (start, end) for start, end in split_paragraphs(lines)
        if any(has_tag(line, tag) for line in lines[start:end])
    ]


def remove_tagged(lines: Sequence[str], tag: str) -> list[str]:
    """Return a copy of ``lines`` without the paragraphs tagged by ``tag``.

    The single blank line following a removed paragraph goes with it, so
    repeated remove/append cycles do not accumulate blank lines.
    """
    drop: set[int] = set()
    for start, end in tagged_paragraphs(lines, tag):
        drop.update(range(start, end))
        if end < len(lines) and is_blank(lines[end]):
            drop.add(end)
    return [line for i, line in enumerate(lines) if i not in drop]


def strip_trailing_blank(lines: Sequence[str]) -> list[str]:
    """Return ``lines`` without blank lines at the end."""
    end = len(lines)
    while end and is_blank(lines[end - 1]):
        end -= 1
    return list(lines[:end])
