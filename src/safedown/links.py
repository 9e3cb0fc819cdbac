#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/links.py
"""Link descriptors, link filtering and link rendering.

Every link found in the input, whether written as ``[label](url "title")`` or
recognized as a bare ``http:``/``https:``/``ftp:`` URL, is turned into a
:class:`LinkDescriptor` and passed to :class:`LinkResolver`. Links are
disabled by default: unless the configured filter accepts a link, the URL is
mangled into plain text that a human can reconstruct but a browser cannot
follow, e.g. ``http://example.com`` becomes ``hxxp //example.com``.

Filters
-------
A filter is any callable taking a :class:`LinkDescriptor`. Its return value
is normalized by :func:`coerce_filter_result`:

- ``True`` or :class:`Accept` - form an anchor from the descriptor as is
- a falsy value or :class:`Reject` - mangle the link
- :class:`Replace`, a mapping or a :class:`LinkDescriptor` - override
  ``url``, ``text``, ``title`` and ``click`` with the given string or
  ``None`` values; anything else is ignored

A filter that raises or returns some other shape is treated as a rejection.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from typing import Any, Callable, Mapping, Optional, Union

from safedown.constants import MANGLE_TOKEN
from safedown.exceptions import InputTooComplexError
from safedown.utils.escape import escape_html_attribute

logger = logging.getLogger(__name__)

UNSET: Any = object()

_OVERRIDABLE_FIELDS = ("url", "text", "title", "click")


@dataclass
class LinkDescriptor:
    """Components of an anchor tag.

    Parameters
    ----------
    url : str or None
        URL to visit, or None for an inactive link
    text : str
        Markup rendered as the body of the link
    title : str or None
        ``title`` attribute of the anchor tag
    click : str or None
        ``onclick`` attribute of the anchor tag
    label : str or None
        The label the author wrote for an explicit ``[label](url)`` link.
        Informational only: it is rendered only if a filter copies it into
        ``text``.

    """

    url: Optional[str]
    text: str
    title: Optional[str] = None
    click: Optional[str] = None
    label: Optional[str] = field(default=None, compare=False)


@dataclass(frozen=True)
class Accept:
    """Filter result: render the link as an anchor."""


@dataclass(frozen=True)
class Reject:
    """Filter result: mangle the link into inactive text."""


@dataclass(frozen=True)
class Replace:
    """Filter result: override some descriptor fields, then render.

    Fields left unset keep the descriptor's value. Only ``str`` and ``None``
    values are accepted.

    Raises
    ------
    TypeError
        If a field is given a value that is neither a string nor None

    """

    url: Optional[str] = UNSET
    text: Optional[str] = UNSET
    title: Optional[str] = UNSET
    click: Optional[str] = UNSET

    def __post_init__(self) -> None:
        """Validate that every override is a string or None."""
        for name in _OVERRIDABLE_FIELDS:
            value = getattr(self, name)
            if value is not UNSET and value is not None and not isinstance(value, str):
                raise TypeError(f"Replace.{name} must be a string or None, got {type(value).__name__}")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> Replace:
        """Build a replacement from a mapping, ignoring unusable entries."""
        overrides: dict[str, Any] = {}
        for key, value in values.items():
            if key not in _OVERRIDABLE_FIELDS:
                logger.debug("Ignoring unknown link filter field %r", key)
                continue
            if value is not None and not isinstance(value, str):
                logger.debug("Ignoring link filter field %r of type %s", key, type(value).__name__)
                continue
            overrides[key] = value
        return cls(**overrides)

    def apply(self, link: LinkDescriptor) -> LinkDescriptor:
        """Return a copy of ``link`` with the overrides applied."""
        overrides = {name: getattr(self, name) for name in _OVERRIDABLE_FIELDS if getattr(self, name) is not UNSET}
        if overrides.get("text", "") is None:
            overrides["text"] = ""
        return replace(link, **overrides)


FilterResult = Union[Accept, Reject, Replace]
LinkFilter = Callable[[LinkDescriptor], Any]


def coerce_filter_result(value: Any) -> FilterResult:
    """Normalize whatever a link filter returned into a :data:`FilterResult`.

    Parameters
    ----------
    value : Any
        Raw return value of a filter

    Returns
    -------
    FilterResult
        ``Accept``, ``Reject`` or ``Replace``

    """
    if isinstance(value, (Accept, Reject, Replace)):
        return value
    if value is True:
        return Accept()
    if not value:
        return Reject()
    if isinstance(value, Mapping):
        return Replace.from_mapping(value)
    if isinstance(value, LinkDescriptor):
        return Replace.from_mapping({f.name: getattr(value, f.name) for f in fields(value)})

    logger.warning("Link filter returned unsupported value of type %s; rejecting link", type(value).__name__)
    return Reject()


def mangle_url(url: str) -> str:
    """Alter a URL so it no longer works while staying readable.

    Examples
    --------
        >>> mangle_url("http://google.com")
        'hxxp //google.com'
        >>> mangle_url("ftp://host:21/file")
        'fxx //host 21/file'

    """
    return url[:1] + MANGLE_TOKEN + url[3:].replace(":", " ")


def mangle_link(link: LinkDescriptor) -> LinkDescriptor:
    """Deactivate a link, showing its mangled URL as the link text."""
    if link.url is None:
        return link
    return replace(link, text=mangle_url(link.url), url=None)


class LinkResolver:
    """Apply the link filter and render links to HTML.

    Parameters
    ----------
    filter_links : callable or None, default None
        Link filter. When None, every link is mangled.

    Examples
    --------
        >>> resolver = LinkResolver()
        >>> resolver.resolve("http://example.com", str)
        'hxxp //example.com'

    """

    def __init__(self, filter_links: LinkFilter | None = None):
        """Initialize the resolver with an optional link filter."""
        self.filter_links = filter_links

    def normalize(self, link: Union[str, LinkDescriptor]) -> LinkDescriptor:
        """Build the descriptor the filter is shown.

        A bare string becomes a link to itself. Title and click are cleared,
        since only a filter may set them, and the text is set to the URL.
        """
        if isinstance(link, str):
            return LinkDescriptor(url=link, text=link)
        return replace(link, title=None, click=None, text=link.url if link.url is not None else link.text)

    def apply_filter(self, link: LinkDescriptor) -> LinkDescriptor:
        """Run the filter over a normalized descriptor and return the result to render."""
        result: FilterResult = Reject()
        if self.filter_links is not None:
            try:
                result = coerce_filter_result(self.filter_links(replace(link)))
            except InputTooComplexError:
                raise
            except Exception as e:
                logger.warning("Link filter raised %s for %r; rejecting link: %s", type(e).__name__, link.url, e)
                result = Reject()

        if isinstance(result, Accept):
            logger.debug("Link accepted: %r", link.url)
            return link
        if isinstance(result, Replace):
            logger.debug("Link replaced: %r", link.url)
            return result.apply(link)

        logger.debug("Link mangled: %r", link.url)
        return mangle_link(link)

    def render(self, link: LinkDescriptor, render_text: Callable[[str], str]) -> str:
        """Render a filtered descriptor as an anchor or as plain content.

        Parameters
        ----------
        link : LinkDescriptor
            Descriptor returned by :meth:`apply_filter`
        render_text : callable
            Renders the link text markup to HTML

        Returns
        -------
        str
            HTML for the link

        """
        if link.url is None and link.click is None:
            return render_text(link.text)

        parts = ["<a"]
        if link.url is not None:
            parts.append(f' href="{escape_html_attribute(link.url)}"')
        if link.title is not None:
            parts.append(f' title="{escape_html_attribute(link.title)}"')
        if link.click is not None:
            parts.append(f' onclick="{escape_html_attribute(link.click)}"')
        parts.append(">")
        parts.append(render_text(link.text))
        parts.append("</a>")
        return "".join(parts)

    def resolve(self, link: Union[str, LinkDescriptor], render_text: Callable[[str], str]) -> str:
        """Normalize, filter and render a link.

        Parameters
        ----------
        link : str or LinkDescriptor
            A bare URL (autolink) or a descriptor built from link markup
        render_text : callable
            Renders the link text markup to HTML

        Returns
        -------
        str
            HTML for the link

        """
        return self.render(self.apply_filter(self.normalize(link)), render_text)
