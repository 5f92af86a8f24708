"""Unit tests for profile field normalization."""

import pytest

from domain.normalization import (
    build_profile_fields,
    build_social,
    normalize_skills,
    normalize_website,
)


class TestNormalizeSkills:
    def test_string_is_split_and_space_prefixed(self):
        assert normalize_skills("a, b,c") == [" a", " b", " c"]

    def test_single_skill(self):
        assert normalize_skills("Python") == [" Python"]

    def test_empty_elements_are_kept(self):
        assert normalize_skills("a,,b") == [" a", " ", " b"]

    def test_list_passes_through(self):
        assert normalize_skills(["Python", "SQL"]) == ["Python", "SQL"]


class TestNormalizeWebsite:
    def test_empty_gives_empty(self):
        assert normalize_website("") == ""
        assert normalize_website(None) == ""
        assert normalize_website("   ") == ""

    def test_bare_host_gets_https(self):
        assert normalize_website("example.com") == "https://example.com"

    def test_http_is_forced_to_https(self):
        assert normalize_website("http://example.com/blog") == "https://example.com/blog"

    def test_canonical_url_is_unchanged(self):
        assert normalize_website("https://example.com") == "https://example.com"
        assert normalize_website("https://example.com/blog?a=1") == "https://example.com/blog?a=1"

    def test_www_and_trailing_slash_are_stripped(self):
        assert normalize_website("https://www.example.com/") == "https://example.com"

    def test_host_is_lowercased(self):
        assert normalize_website("HTTPS://Example.COM/Path") == "https://example.com/Path"

    def test_default_port_is_dropped_custom_port_kept(self):
        assert normalize_website("https://example.com:443/x") == "https://example.com/x"
        assert normalize_website("example.com:8080") == "https://example.com:8080"

    def test_tracking_params_removed_and_query_sorted(self):
        result = normalize_website("http://example.com/p?utm_source=x&b=2&a=1")

        assert result == "https://example.com/p?a=1&b=2"

    def test_protocol_relative_url(self):
        assert normalize_website("//example.com") == "https://example.com"

    def test_normalizing_twice_is_stable(self):
        once = normalize_website("www.Example.com/docs/")

        assert normalize_website(once) == once


class TestBuildSocial:
    def test_keeps_only_supplied_networks(self):
        links = {
            "youtube": "https://youtube.com/u",
            "twitter": None,
            "facebook": "",
            "linkedin": "https://linkedin.com/in/u",
        }

        assert build_social(links) == {
            "youtube": "https://youtube.com/u",
            "linkedin": "https://linkedin.com/in/u",
        }

    def test_ignores_unknown_networks(self):
        assert build_social({"myspace": "https://myspace.com/u"}) == {}

    def test_nothing_supplied_gives_empty_mapping(self):
        assert build_social({}) == {}


class TestBuildProfileFields:
    def test_normalizes_every_field(self):
        fields = build_profile_fields(
            status="Developer",
            skills="HTML, CSS",
            company="Acme",
            website="acme.dev",
            github_username="octocat",
            social={"twitter": "https://twitter.com/octocat", "youtube": None},
        )

        assert fields.status == "Developer"
        assert fields.skills == [" HTML", " CSS"]
        assert fields.company == "Acme"
        assert fields.website == "https://acme.dev"
        assert fields.location is None
        assert fields.bio is None
        assert fields.github_username == "octocat"
        assert fields.social == {"twitter": "https://twitter.com/octocat"}

    def test_omitted_optionals_are_cleared(self):
        fields = build_profile_fields(status="Student", skills=["Go"])

        assert fields.company is None
        assert fields.website == ""
        assert fields.social == {}


class TestNormalizeWebsiteRejects:
    def test_non_numeric_port(self):
        with pytest.raises(ValueError):
            normalize_website("example.com:abc")

    def test_out_of_range_port(self):
        with pytest.raises(ValueError):
            normalize_website("example.com:99999")
