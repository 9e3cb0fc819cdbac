#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/api.py
"""Module-level conversion functions."""

from __future__ import annotations

from typing import Any, Mapping, Union

from safedown.converter import Safedown
from safedown.options import SafedownOptions


def convert(
    source: Union[str, bytes],
    options: Union[SafedownOptions, Mapping[str, Any], None] = None,
    **kwargs: Any,
) -> str:
    """Convert markup source to a sanitized HTML fragment.

    This is a convenience wrapper that builds a :class:`Safedown` converter
    for a single call. Reuse a converter when converting many documents with
    the same options.

    Parameters
    ----------
    source : str or bytes
        Markup source
    options : SafedownOptions, mapping or None, default None
        Converter options
    **kwargs : Any
        Option fields overriding ``options``, e.g. ``filter_links``

    Returns
    -------
    str
        HTML fragment

    Raises
    ------
    ValidationError
        If ``source`` or an option is invalid
    InputTooComplexError
        If the input nests too deeply

    Examples
    --------
        >>> convert("**bold** & <i>")
        '<p><strong>bold</strong> &amp; &lt;i&gt;</p>'

        >>> from safedown.filters import accept_all
        >>> convert("see http://example.com", filter_links=accept_all)
        '<p>see <a href="http://example.com">http://example.com</a></p>'

    """
    return Safedown(options, **kwargs).convert(source)
