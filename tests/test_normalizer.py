"""Tests for metagen.services.normalizer."""

from metagen.services.normalizer import (
    extract_domain,
    normalize_url,
    parse_keywords,
    topic_from_path,
)


class TestNormalizeUrl:
    def test_adds_https_when_scheme_missing(self):
        assert normalize_url("example.com/page") == "https://example.com/page"

    def test_keeps_existing_https(self):
        assert normalize_url("https://example.com") == "https://example.com"

    def test_keeps_existing_http(self):
        assert normalize_url("http://example.com") == "http://example.com"

    def test_scheme_check_is_case_insensitive(self):
        assert normalize_url("HTTPS://example.com") == "HTTPS://example.com"

    def test_strips_surrounding_whitespace(self):
        assert normalize_url("  example.com  ") == "https://example.com"


class TestExtractDomain:
    def test_schemeless_url_matches_https_url(self):
        assert extract_domain("example.com/page") == "example.com"
        assert extract_domain("https://example.com/page") == "example.com"

    def test_strips_www_prefix(self):
        assert extract_domain("https://www.example.com/") == "example.com"

    def test_lowercases_hostname(self):
        assert extract_domain("https://WWW.Example.COM") == "example.com"

    def test_drops_port(self):
        assert extract_domain("example.com:8080/x") == "example.com"

    def test_www_inside_hostname_is_kept(self):
        assert extract_domain("https://shop.www.example.com") == "shop.www.example.com"


class TestTopicFromPath:
    def test_last_segment_is_title_cased(self):
        assert topic_from_path("https://example.com/blog/cold-brew-tips") == "Cold Brew Tips"

    def test_trailing_slash_is_ignored(self):
        assert topic_from_path("example.com/guides/espresso-basics/") == "Espresso Basics"

    def test_root_path_is_empty(self):
        assert topic_from_path("https://example.com/") == ""
        assert topic_from_path("example.com") == ""


class TestParseKeywords:
    def test_trims_and_preserves_order(self):
        assert parse_keywords("coffee, espresso ,latte") == ["coffee", "espresso", "latte"]

    def test_drops_empty_terms(self):
        assert parse_keywords("coffee,, ,espresso,") == ["coffee", "espresso"]

    def test_keeps_duplicates(self):
        assert parse_keywords("coffee, coffee") == ["coffee", "coffee"]

    def test_blank_input_gives_empty_list(self):
        assert parse_keywords("   ") == []
