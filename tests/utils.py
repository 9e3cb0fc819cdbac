"""Test utilities for the safedown test suite.

Helpers for inspecting generated HTML: extracting tags and attributes so
tests can assert that nothing outside the whitelist is ever emitted.
"""

import re

from safedown.constants import ALLOWED_ANCHOR_ATTRIBUTES, ALLOWED_TAGS

TAG_PATTERN = re.compile(r"<(/?)([^\s>/]*)([^>]*)>")
ATTRIBUTE_PATTERN = re.compile(r'\s([a-zA-Z]+)="([^"]*)"')


def extract_tags(html: str) -> list[tuple[bool, str, str]]:
    """Return ``(is_closing, name, raw_attributes)`` for every tag in ``html``."""
    return [(bool(m.group(1)), m.group(2), m.group(3)) for m in TAG_PATTERN.finditer(html)]


def extract_attributes(raw_attributes: str) -> dict[str, str]:
    """Parse the double-quoted attributes of one tag."""
    return dict(ATTRIBUTE_PATTERN.findall(raw_attributes))


def assert_safe_html(html: str) -> None:
    """Assert that ``html`` contains only whitelisted tags and attributes."""
    for is_closing, name, raw_attributes in extract_tags(html):
        assert name in ALLOWED_TAGS, f"Unexpected tag <{name}> in {html!r}"
        if is_closing or name != "a":
            assert raw_attributes == "", f"Unexpected attributes on <{name}>: {raw_attributes!r}"
            continue
        attributes = extract_attributes(raw_attributes)
        assert set(attributes) <= ALLOWED_ANCHOR_ATTRIBUTES, f"Unexpected anchor attributes: {raw_attributes!r}"
        # Every attribute must be fully consumed by the pattern
        assert ATTRIBUTE_PATTERN.sub("", raw_attributes) == "", f"Malformed attributes: {raw_attributes!r}"


def strip_tags(html: str) -> str:
    """Remove every tag, leaving text content."""
    return TAG_PATTERN.sub("", html)
