#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for safedown.

This module centralizes the hardcoded values used across the conversion
engine so they can be discovered and tuned in one place.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Conversion Behavior - Nesting limits and markup characters
3. Security Constants - Link schemes and the output tag whitelist
4. CLI - Exit codes
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

LinkPolicy = Literal["mangle", "safe", "all"]

# =============================================================================
# Conversion Behavior
# =============================================================================

# Maximum block or inline nesting before a conversion is abandoned
DEFAULT_MAX_NESTING_DEPTH = 64

# Leading spaces that turn a line into preformatted text
INDENT_WIDTH = 4

# Characters that may start a list item when followed by a space or tab
LIST_MARKERS = frozenset("*-+")

# Characters that start an inline construct
INLINE_TRIGGERS = "\\*_[<>&:"

# Characters that may follow a backslash to be emitted literally
ESCAPABLE_CHARACTERS = frozenset("\\*[")

# Characters allowed in the id of a [label][refid] link
REFERENCE_ID_CHARACTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789.,_")

# Schemes recognized for autolinks, longest first so "https" wins over "http"
AUTOLINK_SCHEMES = ("https", "http", "ftp")

DEFAULT_LINK_POLICY: LinkPolicy = "mangle"

# =============================================================================
# Security Constants
# =============================================================================

# Replaces the two characters after the first letter of a rejected URL
MANGLE_TOKEN = "xx"

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}
SAFE_LINK_SCHEMES = frozenset({"http", "https", "ftp", "ftps", "mailto"})

# Every tag the converter is able to emit
ALLOWED_TAGS = frozenset({"p", "strong", "em", "a", "ul", "li", "blockquote", "pre", "code", "br"})
ALLOWED_ANCHOR_ATTRIBUTES = frozenset({"href", "title", "onclick"})

# =============================================================================
# CLI
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
