#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Escaping and URL safety helpers shared by the converter and its filters."""

from safedown.utils.escape import ENTITY_PATTERN, escape_html_attribute, escape_html_text, is_entity_at
from safedown.utils.security import get_url_scheme, is_relative_url, is_url_scheme_dangerous

__all__ = [
    "ENTITY_PATTERN",
    "escape_html_attribute",
    "escape_html_text",
    "is_entity_at",
    "get_url_scheme",
    "is_relative_url",
    "is_url_scheme_dangerous",
]
