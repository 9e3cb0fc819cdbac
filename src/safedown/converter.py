#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/safedown/converter.py
"""The safedown converter.

:class:`Safedown` wires the line scanner, block assembler, inline renderer
and link resolver together. An instance holds only its immutable options, so
one converter can serve any number of documents.

"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from safedown.blocks import BlockAssembler
from safedown.exceptions import InputTooComplexError, InvalidOptionsError, ValidationError
from safedown.inline import InlineRenderer
from safedown.lines import split_lines
from safedown.links import LinkResolver
from safedown.options import SafedownOptions

logger = logging.getLogger(__name__)


class Safedown:
    """Convert a restricted subset of markdown to safe HTML.

    No inline HTML is allowed at all: ``<``, ``>`` and ``&`` are always
    escaped. Links are supported but disabled by default.

    Inline styles:
      * ``*text*``, ``_text_`` - emphasis
      * ``**text**``, ``__text__`` - strong
      * ``[link](url)`` - links
      * ``http:...`` - autolinking of URLs

    Block styles:
      * ``> `` - blockquote
      * indented text - preformatted
      * paragraphs - folded
      * ``* `` (or ``- `` or ``+ ``) - bullet

    Parameters
    ----------
    options : SafedownOptions, mapping or None, default None
        Converter options. A mapping is read with
        :meth:`SafedownOptions.from_mapping`, ignoring unknown keys.
    **kwargs : Any
        Option fields overriding ``options``

    Raises
    ------
    InvalidOptionsError
        If ``options`` is neither a SafedownOptions, a mapping nor None
    ValidationError
        If an option value is invalid

    Examples
    --------
        >>> sd = Safedown()
        >>> sd.convert("Safedown is *awesome*.")
        '<p>Safedown is <em>awesome</em>.</p>'

    """

    def __init__(self, options: Union[SafedownOptions, Mapping[str, Any], None] = None, **kwargs: Any):
        """Initialize the converter from options and keyword overrides."""
        try:
            if options is None or isinstance(options, Mapping):
                resolved = SafedownOptions.from_mapping(options)
            elif isinstance(options, SafedownOptions):
                resolved = options
            else:
                raise InvalidOptionsError(type(options))
            if kwargs:
                resolved = resolved.create_updated(**kwargs)
        except (TypeError, ValueError) as e:
            raise ValidationError(f"Invalid options: {e}", parameter_name="options", original_error=e) from e

        self.options: SafedownOptions = resolved
        self._links = LinkResolver(resolved.filter_links)
        self._inline = InlineRenderer(self._links, max_depth=resolved.max_nesting_depth)
        self._blocks = BlockAssembler(self._inline, max_depth=resolved.max_nesting_depth)

    def convert(self, source: Union[str, bytes]) -> str:
        """Convert markup source to an HTML fragment.

        Parameters
        ----------
        source : str or bytes
            Markup source. Bytes are decoded as UTF-8, replacing invalid
            sequences.

        Returns
        -------
        str
            HTML suitable for display

        Raises
        ------
        ValidationError
            If ``source`` is not text
        InputTooComplexError
            If the input nests deeper than ``max_nesting_depth``

        """
        if isinstance(source, (bytes, bytearray)):
            source = bytes(source).decode("utf-8", errors="replace")
        elif not isinstance(source, str):
            raise ValidationError(
                f"source must be str or bytes, got {type(source).__name__}",
                parameter_name="source",
                parameter_value=type(source),
            )

        lines = split_lines(source)
        logger.debug("Converting %d characters in %d lines", len(source), len(lines))
        try:
            return self._blocks.render(source, lines)
        except RecursionError as e:
            # The stack ran out before the configured limit; the depth reached is unknown
            raise InputTooComplexError(
                None, self.options.max_nesting_depth, parsing_stage="conversion", original_error=e
            ) from e
