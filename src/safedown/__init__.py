"""safedown - convert text to safe HTML with some styling.

safedown converts text to HTML using a restricted subset of markdown. No
inline HTML is allowed at all, and links are supported but disabled by
default, so the converter can be used on unrestricted user input such as
comments or chat messages.

Supported Markup
----------------
- **Inline**: ``*em*``, ``_em_``, ``**strong**``, ``__strong__``,
  ``[label](url "title")``, bare ``http:``/``https:``/``ftp:`` URLs.
  ``<``, ``>`` and ``&`` are always converted to entities.
- **Blocks**: folded paragraphs, ``>`` blockquotes, indented preformatted
  text, ``*``/``-``/``+`` bullet lists.

Examples
--------
Basic usage:

    >>> from safedown import convert
    >>> convert("Safedown is *awesome*.")
    '<p>Safedown is <em>awesome</em>.</p>'

Links are mangled unless a filter accepts them:

    >>> convert("http://example.com")
    '<p>hxxp //example.com</p>'
    >>> from safedown.filters import safe_links
    >>> convert("http://example.com", filter_links=safe_links)
    '<p><a href="http://example.com">http://example.com</a></p>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "0.1.0"

from safedown.api import convert
from safedown.converter import Safedown
from safedown.exceptions import (
    FileError,
    InputTooComplexError,
    InvalidOptionsError,
    ParsingError,
    SafedownError,
    ValidationError,
)
from safedown.links import Accept, LinkDescriptor, LinkResolver, Reject, Replace
from safedown.options import SafedownOptions

__all__ = [
    "__version__",
    "convert",
    "Safedown",
    "SafedownOptions",
    "LinkDescriptor",
    "LinkResolver",
    "Accept",
    "Reject",
    "Replace",
    "SafedownError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "InputTooComplexError",
    "FileError",
]
