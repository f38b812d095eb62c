"""Tests for listing-path resolution and revision extraction."""

import pytest

from versioning.lister import ListingTarget, compile_revision_matcher, extract_revisions, resolve_listing


class TestResolveListing:
    """Tests for resolve_listing."""

    def test_no_marker(self):
        assert resolve_listing("/some/pattern/with/no/revision") is None

    def test_marker_first(self):
        target = resolve_listing("[revision]/lib")
        assert target == ListingTarget(directory="", remainder="[revision]/lib")
        assert target.name_template == "[revision]"

    def test_nested_segment_is_not_listed_as_directory(self):
        target = resolve_listing("/some/version-[revision]/lib/")
        assert target.directory == "/some/"
        assert target.remainder == "version-[revision]/lib/"
        assert target.name_template == "version-[revision]"

    def test_first_marker_governs_truncation(self):
        target = resolve_listing("/some/proj-[revision]/[revision]/lib/")
        assert target.directory == "/some/"
        assert target.name_template == "proj-[revision]"

    def test_substituted_directory(self):
        assert resolve_listing("/org.acme/proj1/[revision]").directory == "/org.acme/proj1/"

    def test_absolute_url(self):
        target = resolve_listing("https://repo.example.com/ivy/org.acme/[revision]/ivy.xml")
        assert target.directory == "https://repo.example.com/ivy/org.acme/"


class TestExtractRevisions:
    """Tests for extract_revisions and the compiled matcher."""

    def test_full_match_required(self):
        names = ["version-1", "version-2.1", "nonmatching", "xversion-3"]
        assert extract_revisions("version-[revision]", names) == ["1", "2.1"]

    def test_literal_characters_are_escaped(self):
        assert extract_revisions("[revision].jar", ["1.0.jar", "1.0xjar"]) == ["1.0"]

    def test_regex_metacharacters_in_template(self):
        assert extract_revisions("lib+[revision](x)", ["lib+1(x)", "libb1x"]) == ["1"]

    def test_listing_order_and_duplicates_preserved(self):
        assert extract_revisions("[revision]", ["b", "a", "b"]) == ["b", "a", "b"]

    def test_captures_no_separator(self):
        matcher = compile_revision_matcher("[revision]")
        assert matcher.fullmatch("1.0/extra") is None
        assert matcher.fullmatch("") is None

    @pytest.mark.parametrize("names", [None, [], ()])
    def test_absent_or_empty_listing(self, names):
        assert extract_revisions("[revision]", names) == []
