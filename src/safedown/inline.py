#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/inline.py
"""Rendering of span-level markup inside a block.

The renderer scans the text from beginning to end looking for characters
that might begin a construct (``\\ * _ [ < > & :``). When one is found, the
surrounding text is inspected to decide whether it is markup or plain text.
Emphasis and link bodies are rendered recursively.

Delimiter matching is done by linear scans instead of backtracking regular
expressions, so untrusted input cannot cause catastrophic backtracking.

"""

from __future__ import annotations

import logging
import re
from functools import partial
from typing import NamedTuple, Optional

from safedown.constants import (
    AUTOLINK_SCHEMES,
    DEFAULT_MAX_NESTING_DEPTH,
    ESCAPABLE_CHARACTERS,
    INLINE_TRIGGERS,
    REFERENCE_ID_CHARACTERS,
)
from safedown.exceptions import InputTooComplexError
from safedown.links import LinkDescriptor, LinkResolver
from safedown.utils.escape import is_entity_at

logger = logging.getLogger(__name__)

_TRIGGER_PATTERN = re.compile("[" + re.escape(INLINE_TRIGGERS) + "]")

# A URL run: scheme, colon, then everything up to whitespace, less one
# trailing period
_AUTOLINK_PATTERN = re.compile(r"(?<!\w)(?:https?|ftp):\S+?(?=\.?(?:\s|$))")


class LinkMatch(NamedTuple):
    """A ``[label](url "title")`` or ``[label][refid]`` match."""

    end: int
    label: str
    url: Optional[str]
    title: Optional[str]
    refid: Optional[str]


def find_emphasis_close(text: str, start: int, marker: str, strong: bool) -> int | None:
    """Find where emphasised content that begins at ``start`` ends.

    Content is a non-empty run of units: an escaped marker, any character
    other than the marker, or a nested pair of the other strength (``*x*``
    inside bold, ``**x**`` inside emphasis). The closing delimiter (one
    marker, or two for bold) must not be followed by another marker.

    Units are tried in that order, and after each unit closing is tried
    before extending the content. Positions that cannot lead to a close are
    remembered, so the scan is linear in the length of the text.

    Parameters
    ----------
    text : str
        Text being scanned
    start : int
        Index of the first content character, just after the opening delimiter
    marker : str
        ``*`` or ``_``
    strong : bool
        True for a doubled delimiter

    Returns
    -------
    int or None
        Index of the closing delimiter, or None if the content cannot be closed

    """
    length = len(text)
    closer = marker * 2 if strong else marker
    pair = marker if strong else marker * 2

    def closes(i: int) -> bool:
        return text.startswith(closer, i) and not text.startswith(marker, i + len(closer))

    def next_positions(i: int) -> list[int]:
        if i >= length:
            return []
        positions = []
        char = text[i]
        if char == "\\" and text.startswith(marker, i + 1):
            positions.append(i + 2)
        if char != marker:
            positions.append(i + 1)
        elif text.startswith(pair, i):
            inner_close = text.find(marker, i + len(pair))
            if inner_close != -1 and text.startswith(pair, inner_close):
                positions.append(inner_close + len(pair))
        return positions

    seen = bytearray(length + 2)
    stack = [(start, iter(next_positions(start)))]
    while stack:
        position = next(stack[-1][1], None)
        if position is None:
            stack.pop()
            continue
        if seen[position]:
            continue
        seen[position] = 1
        if closes(position):
            return position
        stack.append((position, iter(next_positions(position))))
    return None


def match_link(text: str, pos: int) -> LinkMatch | None:
    """Match link markup starting at the ``[`` at ``pos``.

    Recognizes ``[label](url)``, ``[label](url "title")`` and
    ``[label][refid]``. The label may not contain brackets and the URL part
    may not contain parentheses.

    Returns
    -------
    LinkMatch or None
        The match, or None if the text is not link markup

    """
    label_end = pos + 1
    length = len(text)
    while label_end < length and text[label_end] not in "[]":
        label_end += 1
    if label_end >= length or text[label_end] != "]" or label_end == pos + 1:
        return None
    label = text[pos + 1 : label_end]
    opener = label_end + 1
    if opener >= length:
        return None

    if text[opener] == "(":
        close = opener + 1
        while close < length and text[close] not in "()":
            close += 1
        if close >= length or text[close] != ")" or close == opener + 1:
            return None
        url, title = _split_link_target(text[opener + 1 : close])
        if not url:
            return None
        return LinkMatch(close + 1, label, url, title, None)

    if text[opener] == "[":
        close = opener + 1
        while close < length and text[close] in REFERENCE_ID_CHARACTERS:
            close += 1
        if close >= length or text[close] != "]":
            return None
        return LinkMatch(close + 1, label, None, None, text[opener + 1 : close])

    return None


def _marker_run(text: str, start: int) -> tuple[str, int]:
    """Return the run of identical markers at ``start`` as literal text, and its end.

    A rule such as ``______`` would otherwise nest one empty span per pair
    of markers.
    """
    marker = text[start]
    end = start
    while end < len(text) and text[end] == marker:
        end += 1
    return text[start:end], end


def _split_link_target(target: str) -> tuple[str, Optional[str]]:
    """Split ``url "title"`` into its URL and optional title."""
    if len(target) >= 2 and target.endswith('"'):
        open_quote = target.rfind('"', 0, len(target) - 1)
        if open_quote > 0 and target[open_quote - 1] in " \t":
            url = target[:open_quote].rstrip(" \t")
            if url:
                return url.strip(), target[open_quote + 1 : -1] or None
    return target.strip(), None


class InlineRenderer:
    """Render the span-level markup of one block to HTML.

    Parameters
    ----------
    resolver : LinkResolver
        Filters and renders the links found in the text
    max_depth : int, default DEFAULT_MAX_NESTING_DEPTH
        Maximum nesting of emphasis and link bodies

    Examples
    --------
        >>> renderer = InlineRenderer(LinkResolver())
        >>> renderer.render("*a* & <b>")
        '<em>a</em> &amp; &lt;b&gt;'

    """

    def __init__(self, resolver: LinkResolver, max_depth: int = DEFAULT_MAX_NESTING_DEPTH):
        """Initialize the renderer with a link resolver and nesting limit."""
        self.resolver = resolver
        self.max_depth = max_depth

    def render(self, text: str, depth: int = 0, allow_links: bool = True) -> str:
        """Render markdown text within a block into HTML.

        Parameters
        ----------
        text : str
            Markup to process
        depth : int, default 0
            Current nesting depth
        allow_links : bool, default True
            When False, link markup and bare URLs are left as text. Used for
            link bodies so anchors never nest.

        Returns
        -------
        str
            Rendered HTML

        Raises
        ------
        InputTooComplexError
            If emphasis or links nest deeper than ``max_depth``

        """
        if depth > self.max_depth:
            raise InputTooComplexError(depth, self.max_depth, parsing_stage="inline")

        parts: list[str] = []
        last = 0
        scan = 0
        length = len(text)
        while True:
            found = _TRIGGER_PATTERN.search(text, scan)
            if found is None:
                break
            at = found.start()
            char = text[at]
            scan = at + 1
            put: Optional[str] = None

            if char == "\\":
                if scan < length and text[scan] in ESCAPABLE_CHARACTERS:
                    put = text[scan]
                    scan += 1

            elif char in "*_":
                emphasis = self._render_emphasis(text, at, depth, allow_links)
                if emphasis is not None:
                    put, scan = emphasis

            elif char == "<":
                put = "&lt;"

            elif char == ">":
                put = "&gt;"

            elif char == "&":
                if not is_entity_at(text, at):
                    put = "&amp;"

            elif char == "[":
                if allow_links:
                    link = self._render_link(text, at, depth)
                    if link is not None:
                        put, scan = link

            elif char == ":":
                if allow_links:
                    autolink = self._render_autolink(text, at, last, depth)
                    if autolink is not None:
                        at, put, scan = autolink

            if put is not None:
                parts.append(text[last:at])
                parts.append(put)
                last = scan

        if not parts:
            return text
        parts.append(text[last:])
        return "".join(parts)

    def _render_emphasis(self, text: str, at: int, depth: int, allow_links: bool) -> tuple[str, int] | None:
        marker = text[at]
        if text.startswith(marker, at + 1):
            close = find_emphasis_close(text, at + 2, marker, strong=True)
            if close is not None:
                if not text[at + 2 : close].strip(marker):
                    return _marker_run(text, at)
                inner = self.render(text[at + 2 : close], depth + 1, allow_links)
                return f"<strong>{inner}</strong>", close + 2

        close = find_emphasis_close(text, at + 1, marker, strong=False)
        if close is not None:
            if not text[at + 1 : close].strip(marker):
                return _marker_run(text, at)
            inner = self.render(text[at + 1 : close], depth + 1, allow_links)
            return f"<em>{inner}</em>", close + 1
        return None

    def _render_link(self, text: str, at: int, depth: int) -> tuple[str, int] | None:
        match = match_link(text, at)
        if match is None:
            return None
        render_text = partial(self.render, depth=depth + 1, allow_links=False)
        if match.url is None:
            # [label][refid]: references are not resolved, the label stays as text
            return render_text(match.label), match.end
        link = LinkDescriptor(url=match.url, text=match.label, title=match.title, label=match.label)
        return self.resolver.resolve(link, render_text), match.end

    def _render_autolink(self, text: str, colon: int, last: int, depth: int) -> tuple[int, str, int] | None:
        for scheme in AUTOLINK_SCHEMES:
            start = colon - len(scheme)
            if start < last or not text.startswith(scheme, start):
                continue
            match = _AUTOLINK_PATTERN.match(text, start)
            if match is None:
                return None
            render_text = partial(self.render, depth=depth + 1, allow_links=False)
            return start, self.resolver.resolve(match.group(0), render_text), match.end()
        return None
