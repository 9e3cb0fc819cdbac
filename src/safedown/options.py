#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/safedown/options.py
"""Configuration options for the safedown converter.

Options are immutable: they are fixed when a :class:`~safedown.Safedown`
converter is built and never change during a conversion.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from safedown.constants import DEFAULT_MAX_NESTING_DEPTH
from safedown.links import LinkFilter

logger = logging.getLogger(__name__)

# Constructor-style option names and the fields they set
_OPTION_KEYS = {
    "filterLinks": "filter_links",
    "filter_links": "filter_links",
    "maxNestingDepth": "max_nesting_depth",
    "max_nesting_depth": "max_nesting_depth",
}


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class SafedownOptions(CloneFrozenMixin):
    """Configuration options for markup-to-HTML conversion.

    Parameters
    ----------
    filter_links : callable or None, default None
        Called with a :class:`~safedown.links.LinkDescriptor` for every link.
        Return ``True`` (or ``Accept()``) to render an anchor, a falsy value
        (or ``Reject()``) to mangle the link, or a mapping / ``Replace`` to
        override its url, text, title or click attributes. When None, every
        link is mangled.
    max_nesting_depth : int, default 64
        Maximum nesting of blocks (quotes, list items) and of inline spans
        (emphasis, link bodies). Deeper input raises
        :class:`~safedown.exceptions.InputTooComplexError`.

    Examples
    --------
    Allow every link:
        >>> from safedown.filters import accept_all
        >>> options = SafedownOptions(filter_links=accept_all)

    From constructor-style keys:
        >>> options = SafedownOptions.from_mapping({"filterLinks": accept_all, "color": "red"})

    """

    filter_links: Optional[LinkFilter] = field(
        default=None,
        metadata={"help": "Callable deciding how links are rendered; links are mangled when unset"},
    )
    max_nesting_depth: int = field(
        default=DEFAULT_MAX_NESTING_DEPTH,
        metadata={"help": "Maximum block or inline nesting before conversion fails", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.filter_links is not None and not callable(self.filter_links):
            raise ValueError(f"filter_links must be callable, got {type(self.filter_links).__name__}")
        if isinstance(self.max_nesting_depth, bool) or not isinstance(self.max_nesting_depth, int):
            raise ValueError(f"max_nesting_depth must be an integer, got {type(self.max_nesting_depth).__name__}")
        if self.max_nesting_depth <= 0:
            raise ValueError(f"max_nesting_depth must be positive, got {self.max_nesting_depth}")

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> SafedownOptions:
        """Build options from constructor-style keys.

        Recognized keys are ``filterLinks``/``filter_links`` and
        ``maxNestingDepth``/``max_nesting_depth``. Unknown keys are ignored.

        Parameters
        ----------
        options : Mapping or None
            Option names and values

        Returns
        -------
        SafedownOptions
            The parsed options

        """
        if not options:
            return cls()

        values: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_KEYS.get(key)
            if name is None:
                logger.debug("Ignoring unknown option %r", key)
                continue
            values[name] = value
        return cls(**values)
