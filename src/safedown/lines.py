#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/lines.py
"""Line scanning and classification.

A document is never sliced into per-line strings. Instead it is described by
a list of :class:`LineSpan` offset pairs into the original text, and nested
blocks are handled by advancing the ``start`` of a span past the marker that
was consumed (a ``>`` or a ``* ``) and classifying the same line again.

"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from safedown.constants import INDENT_WIDTH, LIST_MARKERS


class BlockKind(IntEnum):
    """Structural role of a line, and of the block it belongs to."""

    NONE = 0
    EMPTY = 1
    PREFORMATTED = 2
    INDENT = 2
    PARAGRAPH = 3
    LIST = 4
    QUOTE = 5
    EOF = 7


class LineSpan(NamedTuple):
    """Offsets of one source line within the document, terminator excluded."""

    start: int
    end: int

    def advance(self, count: int) -> LineSpan:
        """Return a span whose start has moved ``count`` characters forward."""
        return LineSpan(min(self.start + count, self.end), self.end)

    def extract(self, text: str) -> str:
        """Return the text covered by this span."""
        return text[self.start : self.end]


def split_lines(text: str) -> list[LineSpan]:
    """Split a document into line spans on line-feed characters.

    Parameters
    ----------
    text : str
        The whole document

    Returns
    -------
    list[LineSpan]
        One span per line. A final line-feed does not start an extra empty
        line; an empty document is a single empty line.

    Examples
    --------
        >>> split_lines("a\\nbc")
        [LineSpan(start=0, end=1), LineSpan(start=2, end=4)]
        >>> split_lines("a\\n")
        [LineSpan(start=0, end=1)]

    """
    spans: list[LineSpan] = []
    scan = 0
    length = len(text)
    while True:
        newline = text.find("\n", scan)
        if newline == -1:
            spans.append(LineSpan(scan, length))
            break
        spans.append(LineSpan(scan, newline))
        scan = newline + 1
        if scan >= length:
            break
    return spans


def classify_line(text: str, span: LineSpan) -> tuple[BlockKind, int]:
    """Determine what kind of block a line belongs to.

    Scanning starts at ``span.start``. Since blocks nest, the same line is
    classified again by each nested level, after the caller has advanced the
    span past the marker reported by the previous call.

    Parameters
    ----------
    text : str
        The whole document
    span : LineSpan
        The line to classify

    Returns
    -------
    tuple[BlockKind, int]
        The line kind and the number of characters consumed by its marker
        (indent, ``>`` or bullet plus separator). Paragraph lines consume
        nothing, leading spaces included.

    """
    scan = span.start
    end = span.end
    indent = 0
    while scan < end:
        char = text[scan]
        scan += 1
        if char == "\t":
            return BlockKind.INDENT, scan - span.start
        if char == " ":
            indent += 1
            if indent == INDENT_WIDTH:
                return BlockKind.INDENT, scan - span.start
            continue
        if char == ">":
            if scan < end and text[scan] in " \t":
                scan += 1
            return BlockKind.QUOTE, scan - span.start
        if char in LIST_MARKERS and scan < end and text[scan] in " \t":
            return BlockKind.LIST, scan + 1 - span.start
        if char == "\r":
            return BlockKind.EMPTY, 0
        return BlockKind.PARAGRAPH, 0
    return BlockKind.EMPTY, 0
