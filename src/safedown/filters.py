#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/filters.py
"""Ready-made link filters.

Links are mangled unless a filter accepts them. These filters cover the
common policies; any callable taking a
:class:`~safedown.links.LinkDescriptor` can be used instead.

Examples
--------
    >>> from safedown import convert
    >>> convert("[docs](https://example.com/docs)", filter_links=safe_links)
    '<p><a href="https://example.com/docs">https://example.com/docs</a></p>'
    >>> convert("[x](javascript:alert)", filter_links=safe_links)
    '<p>jxxascript alert</p>'

"""

from __future__ import annotations

import logging
from typing import Iterable

from safedown.constants import SAFE_LINK_SCHEMES
from safedown.links import Accept, LinkDescriptor, LinkFilter, Reject
from safedown.utils.security import get_url_scheme, is_relative_url, is_url_scheme_dangerous

logger = logging.getLogger(__name__)


def accept_all(link: LinkDescriptor) -> Accept:
    """Render every link as an anchor."""
    return Accept()


def reject_all(link: LinkDescriptor) -> Reject:
    """Mangle every link. Same as configuring no filter."""
    return Reject()


def allow_schemes(*schemes: str, allow_relative: bool = False) -> LinkFilter:
    """Build a filter accepting links whose URL scheme is in ``schemes``.

    Dangerous schemes (``javascript:``, ``vbscript:``, ``data:text/html``, ...)
    are rejected even when listed.

    Parameters
    ----------
    *schemes : str
        Accepted schemes, without the colon
    allow_relative : bool, default False
        Also accept relative URLs such as ``/path`` or ``#anchor``

    Returns
    -------
    callable
        The link filter

    """
    allowed = _normalize_schemes(schemes)

    def scheme_filter(link: LinkDescriptor) -> Accept | Reject:
        url = link.url
        if not url or is_url_scheme_dangerous(url):
            return Reject()
        if is_relative_url(url.strip()):
            return Accept() if allow_relative else Reject()
        if get_url_scheme(url) in allowed:
            return Accept()
        logger.debug("Scheme of %r is not allowed", url)
        return Reject()

    scheme_filter.__name__ = f"allow_schemes({', '.join(sorted(allowed))})"
    return scheme_filter


def _normalize_schemes(schemes: Iterable[str]) -> frozenset[str]:
    return frozenset(scheme.lower().rstrip(":") for scheme in schemes)


safe_links = allow_schemes(*SAFE_LINK_SCHEMES)
