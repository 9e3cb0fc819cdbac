#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_filters.py
"""Unit tests for the ready-made link filters."""

import pytest

from safedown import convert
from safedown.filters import accept_all, allow_schemes, reject_all, safe_links
from safedown.links import Accept, LinkDescriptor, Reject


def link(url):
    return LinkDescriptor(url=url, text=url or "")


@pytest.mark.unit
class TestSimpleFilters:
    """Tests for accept_all and reject_all."""

    def test_accept_all(self):
        assert accept_all(link("javascript:alert(1)")) == Accept()

    def test_reject_all(self):
        assert reject_all(link("https://example.com")) == Reject()

    def test_reject_all_matches_default(self):
        source = "[a](http://example.com) and http://example.org"
        assert convert(source, filter_links=reject_all) == convert(source)


@pytest.mark.unit
@pytest.mark.security
class TestAllowSchemes:
    """Tests for scheme allow-lists."""

    def test_listed_scheme_accepted(self):
        assert allow_schemes("https")(link("https://example.com")) == Accept()

    def test_unlisted_scheme_rejected(self):
        assert allow_schemes("https")(link("http://example.com")) == Reject()

    def test_scheme_case_insensitive(self):
        only_https = allow_schemes("HTTPS:")
        assert only_https(link("HtTpS://example.com")) == Accept()

    def test_relative_rejected_by_default(self):
        assert allow_schemes("https")(link("/path")) == Reject()

    @pytest.mark.parametrize("url", ["/path", "#top", "../up", "page.html"])
    def test_relative_allowed(self, url):
        assert allow_schemes("https", allow_relative=True)(link(url)) == Accept()

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JaVaScRiPt:alert(1)",
            "java\tscript:alert(1)",
            " javascript:alert(1)",
            "vbscript:msgbox(1)",
            "data:text/html,<script>alert(1)</script>",
        ],
    )
    def test_dangerous_scheme_rejected_even_when_listed(self, url):
        permissive = allow_schemes("javascript", "vbscript", "data", allow_relative=True)
        assert permissive(link(url)) == Reject()

    @pytest.mark.parametrize("url", [None, ""])
    def test_missing_url_rejected(self, url):
        assert allow_schemes("https", allow_relative=True)(link(url)) == Reject()

    def test_filter_name(self):
        assert allow_schemes("https", "http").__name__ == "allow_schemes(http, https)"


@pytest.mark.unit
@pytest.mark.security
class TestSafeLinks:
    """Tests for the safe_links filter."""

    @pytest.mark.parametrize(
        "url",
        ["http://example.com", "https://example.com", "ftp://example.com", "mailto:me@example.com"],
    )
    def test_safe_schemes(self, url):
        assert safe_links(link(url)) == Accept()

    @pytest.mark.parametrize("url", ["javascript:alert(1)", "file:///etc/passwd", "/relative", "about:blank"])
    def test_other_urls(self, url):
        assert safe_links(link(url)) == Reject()

    def test_in_conversion(self):
        html = convert("[a](https://example.com) [b](javascript:alert)", filter_links=safe_links)
        assert html == '<p><a href="https://example.com">https://example.com</a> jxxascript alert</p>'
