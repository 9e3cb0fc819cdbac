#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/blocks.py
"""Assembly of classified lines into nested blocks.

Blocks nest (a list inside a quote inside a list item, ...), so assembly is
recursive. The source text is never sliced when preparing a nested block.
Each level works on its own list of :class:`LineSpan` objects, advances the
start of a span past the marker it consumed, and hands a sub-range of that
list to the next level, which classifies the same lines again.

"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from safedown.constants import DEFAULT_MAX_NESTING_DEPTH
from safedown.exceptions import InputTooComplexError
from safedown.inline import InlineRenderer
from safedown.lines import BlockKind, LineSpan, classify_line
from safedown.utils.escape import escape_html_text

logger = logging.getLogger(__name__)


class RenderedBlock(NamedTuple):
    """A flushed block: its kind and its HTML.

    Paragraph and preformatted content is stored without its wrapping tags so
    that a list item made of a single paragraph can be rendered tight.
    """

    kind: BlockKind
    html: str

    def to_html(self) -> str:
        """Return the block wrapped in its container tags."""
        if self.kind == BlockKind.PARAGRAPH:
            return f"<p>{self.html}</p>"
        if self.kind == BlockKind.PREFORMATTED:
            return f"<pre><code>{self.html}</code></pre>"
        return self.html


class BlockAssembler:
    """Render a range of lines as a sequence of blocks.

    Parameters
    ----------
    inline : InlineRenderer
        Renderer for paragraph text
    max_depth : int, default DEFAULT_MAX_NESTING_DEPTH
        Maximum nesting of quotes and list items

    """

    def __init__(self, inline: InlineRenderer, max_depth: int = DEFAULT_MAX_NESTING_DEPTH):
        """Initialize the assembler with an inline renderer and nesting limit."""
        self.inline = inline
        self.max_depth = max_depth

    def render(self, text: str, lines: Sequence[LineSpan], depth: int = 0) -> str:
        """Render lines of the document to HTML.

        Parameters
        ----------
        text : str
            The whole document
        lines : sequence of LineSpan
            The lines making up this block range
        depth : int, default 0
            Current nesting depth

        Returns
        -------
        str
            Rendered HTML

        Raises
        ------
        InputTooComplexError
            If quotes or list items nest deeper than ``max_depth``

        """
        return "".join(block.to_html() for block in self.assemble(text, lines, depth))

    def render_item(self, text: str, lines: Sequence[LineSpan], depth: int) -> str:
        """Render the lines of one list item.

        An item that is a single paragraph is rendered without ``<p>``.
        """
        blocks = self.assemble(text, lines, depth)
        if len(blocks) == 1 and blocks[0].kind == BlockKind.PARAGRAPH:
            return blocks[0].html
        return "".join(block.to_html() for block in blocks)

    def assemble(self, text: str, lines: Sequence[LineSpan], depth: int = 0) -> list[RenderedBlock]:
        """Group lines into blocks and render each one.

        Returns
        -------
        list[RenderedBlock]
            Flushed blocks in document order. Runs of two or more blank lines
            between blocks appear as ``EMPTY`` blocks holding ``<br>`` markers.

        """
        if depth > self.max_depth:
            raise InputTooComplexError(depth, self.max_depth, parsing_stage="blocks")

        # Classification advances the spans of this level only
        spans = list(lines)
        count = len(spans)
        out: list[RenderedBlock] = []
        items: list[str] = []
        buffer: list[str] = []
        block = BlockKind.NONE
        blank = 0
        start = 0

        for i in range(count + 1):
            if i == count:
                kind = BlockKind.EOF
            else:
                kind, consumed = classify_line(text, spans[i])
                if consumed:
                    spans[i] = spans[i].advance(consumed)
            if kind == BlockKind.EMPTY:
                blank += 1
                continue

            # Continue the current block
            if block == BlockKind.PREFORMATTED:
                if kind == BlockKind.INDENT:
                    if blank:
                        buffer.append("\n" * blank)
                        blank = 0
                    buffer.append(spans[i].extract(text))
                    buffer.append("\n")
                    continue
            elif block == BlockKind.PARAGRAPH:
                if kind == BlockKind.PARAGRAPH and not blank:
                    buffer.append(" ")
                    buffer.append(spans[i].extract(text))
                    continue
            elif block == BlockKind.QUOTE:
                if kind == BlockKind.QUOTE or (kind == BlockKind.PARAGRAPH and not blank):
                    blank = 0
                    continue
            elif block == BlockKind.LIST:
                if kind == BlockKind.PARAGRAPH and not blank:
                    continue
                if kind == BlockKind.LIST:
                    items.append(self.render_item(text, spans[start : i - blank], depth + 1))
                    start = i
                    blank = 0
                    continue

            # The previous block ended before this line
            if block == BlockKind.PREFORMATTED:
                out.append(RenderedBlock(block, escape_html_text("".join(buffer))))
            elif block == BlockKind.PARAGRAPH:
                out.append(RenderedBlock(block, self.inline.render("".join(buffer).strip(" \t"))))
            elif block == BlockKind.LIST:
                items.append(self.render_item(text, spans[start : i - blank], depth + 1))
                html = "".join(f"<li>{item}</li>" for item in items)
                out.append(RenderedBlock(block, f"<ul>{html}</ul>"))
                items = []
            elif block == BlockKind.QUOTE:
                inner = self.render(text, spans[start : i - blank], depth + 1)
                out.append(RenderedBlock(block, f"<blockquote>{inner}</blockquote>"))

            # Fill in any white space
            if blank > 1:
                out.append(RenderedBlock(BlockKind.EMPTY, "<br>" * (blank - 1)))
            blank = 0

            # Start a new block
            if kind in (BlockKind.LIST, BlockKind.QUOTE):
                start = i
                block = kind
            elif kind == BlockKind.PARAGRAPH:
                buffer = [spans[i].extract(text)]
                block = kind
            elif kind == BlockKind.INDENT:
                buffer = [spans[i].extract(text), "\n"]
                block = BlockKind.PREFORMATTED
            elif kind == BlockKind.EOF:
                break
            else:
                block = BlockKind.NONE

        return out
