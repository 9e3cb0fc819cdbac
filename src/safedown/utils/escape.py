#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/utils/escape.py
"""HTML escaping utilities.

Text content is escaped with the three entities ``&lt; &gt; &amp;`` only.
Attribute values additionally escape both quote characters. Author-supplied
entity references such as ``&copy;`` or ``&#x2014;`` are recognized so that
escaping never double-encodes them.

"""

from __future__ import annotations

import html
import re

# Something that looks like an entity: &copy; &#x2001; &#32;
ENTITY_PATTERN = re.compile(r"&(?:[a-zA-Z][a-zA-Z0-9]+|#[0-9]+|#[xX][0-9a-fA-F]+);")

_BARE_AMPERSAND = re.compile(r"&(?!(?:[a-zA-Z][a-zA-Z0-9]+|#[0-9]+|#[xX][0-9a-fA-F]+);)")


def is_entity_at(text: str, pos: int) -> bool:
    """Return True if a syntactically valid entity reference starts at ``pos``.

    Examples
    --------
        >>> is_entity_at("AT&amp;T", 2)
        True
        >>> is_entity_at("AT&T", 2)
        False

    """
    return ENTITY_PATTERN.match(text, pos) is not None


def escape_html_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for literal display inside an element.

    Every ampersand is escaped, including ones that start an entity, so the
    text displays exactly as written. Used for preformatted blocks.

    Parameters
    ----------
    text : str
        Raw text

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_html_text("if a < b && c")
        'if a &lt; b &amp;&amp; c'

    """
    if not text:
        return text
    return html.escape(text, quote=False)


def escape_html_attribute(value: str) -> str:
    """Escape a value for use inside a double-quoted HTML attribute.

    Bare ampersands are escaped while valid entity references are kept, so
    escaping an already escaped value is a no-op.

    Parameters
    ----------
    value : str
        Attribute value

    Returns
    -------
    str
        Escaped value safe to place between double quotes

    Examples
    --------
        >>> escape_html_attribute('a"b')
        'a&quot;b'
        >>> escape_html_attribute("?x=1&amp;y=2&z=3")
        '?x=1&amp;y=2&amp;z=3'

    """
    if not value:
        return value

    result = _BARE_AMPERSAND.sub("&amp;", value)
    result = result.replace("<", "&lt;")
    result = result.replace(">", "&gt;")
    result = result.replace('"', "&quot;")
    result = result.replace("'", "&#x27;")

    return result
