"""Integration tests for full document conversion.

These tests run complete documents through the converter with the various
link policies, checking the block and inline stages together.
"""

import pytest
from utils import assert_safe_html, extract_attributes, extract_tags

from safedown import LinkDescriptor, Replace, Safedown
from safedown.filters import allow_schemes, safe_links

DOCUMENT = """\
Welcome to the *project* board. Read the [guide](https://example.com/guide "The guide")
before posting, and see [our faq][faq] too.

> **Note:** links to http://internal.example.com are
mangled for everyone.


* first _item_
* second item
continues here
* > a quote in a list

    def hello():
        return "<hi>"

Bye & thanks &mdash; the team
"""


def keep_label(link: LinkDescriptor) -> Replace:
    """Accept links on example.com, showing the author's label."""
    if link.url and link.url.startswith("https://example.com"):
        return Replace(text=link.label or link.url)
    return Replace(url=None, text=link.url)


@pytest.mark.integration
class TestDocumentConversion:
    """Tests for complete documents."""

    def test_default_policy(self, converter):
        html = converter.convert(DOCUMENT)

        assert html == (
            "<p>Welcome to the <em>project</em> board. Read the hxxps //example.com/guide"
            " before posting, and see our faq too.</p>"
            "<blockquote><p><strong>Note:</strong> links to hxxp //internal.example.com are"
            " mangled for everyone.</p></blockquote>"
            "<br>"
            "<ul><li>first <em>item</em></li><li>second item continues here</li>"
            "<li><blockquote><p>a quote in a list</p></blockquote></li></ul>"
            '<pre><code>def hello():\n    return "&lt;hi&gt;"\n</code></pre>'
            "<p>Bye &amp; thanks &mdash; the team</p>"
        )
        assert_safe_html(html)

    def test_safe_links_policy(self):
        html = Safedown(filter_links=safe_links).convert(DOCUMENT)

        anchors = [extract_attributes(attrs) for closing, name, attrs in extract_tags(html) if name == "a" and not closing]
        assert anchors == [
            {"href": "https://example.com/guide"},
            {"href": "http://internal.example.com"},
        ]
        assert_safe_html(html)

    def test_label_restoring_filter(self):
        html = Safedown({"filterLinks": keep_label}).convert(DOCUMENT)

        assert '<a href="https://example.com/guide">guide</a>' in html
        assert "links to http://internal.example.com are" in html
        assert_safe_html(html)

    def test_https_only_policy(self):
        html = Safedown(filter_links=allow_schemes("https")).convert(DOCUMENT)

        assert '<a href="https://example.com/guide">' in html
        assert "hxxp //internal.example.com" in html

    def test_converter_reuse_is_stateless(self, converter):
        first = converter.convert(DOCUMENT)
        converter.convert("* unrelated\n\n\n\n> input")
        assert converter.convert(DOCUMENT) == first
