#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/utils/security.py
"""URL safety checks used by the built-in link filters."""

from __future__ import annotations

import logging
from urllib.parse import urlparse

from safedown.constants import DANGEROUS_SCHEMES

logger = logging.getLogger(__name__)


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative URL.

    Relative URLs do not have a scheme and typically start with #, /, ./, ../, or ?.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL is relative, False otherwise

    Examples
    --------
    >>> is_relative_url("#section")
    True
    >>> is_relative_url("../parent/file.html")
    True
    >>> is_relative_url("https://example.com")
    False
    >>> is_relative_url("javascript:alert(1)")
    False

    """
    if not url:
        return False

    if url.startswith(("#", "/", "./", "../", "?")):
        return True

    # No colon before the first path separator means there is no scheme
    head = url.split("/", 1)[0]
    return ":" not in head


def get_url_scheme(url: str) -> str:
    """Return the lowercased scheme of a URL, or an empty string.

    Examples
    --------
    >>> get_url_scheme("HTTPS://example.com")
    'https'
    >>> get_url_scheme("/relative")
    ''

    """
    if not url or is_relative_url(url.strip()):
        return ""
    try:
        return urlparse(url.strip()).scheme.lower()
    except ValueError:
        return ""


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks or malicious code execution.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    # Browsers ignore embedded whitespace and control characters in schemes
    url_lower = "".join(ch for ch in url.lower() if ch > " ")

    if is_relative_url(url_lower):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        # If URL parsing fails, consider it potentially dangerous
        logger.debug("Could not parse URL %r, treating it as dangerous", url[:50])
        return True

    return scheme in ("javascript", "vbscript", "about")
