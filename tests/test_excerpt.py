"""Tests for document titles and highlighted excerpts."""
from deso_mcp.search.excerpt import (
    MAX_EXCERPT_LENGTH,
    build_excerpt,
    extract_excerpt,
    get_document_title,
    highlight_terms,
    locate_matches,
)


class TestGetDocumentTitle:
    """Heading detection and filename fallback."""

    def test_first_level_one_heading(self):
        content = "intro text\n# Getting Started  \n# Second\n"
        assert get_document_title(content, "guide.md") == "Getting Started"

    def test_level_two_heading_ignored(self):
        content = "## Not a title\nbody\n"
        assert get_document_title(content, "my-doc.md") == "my doc"

    def test_heading_after_line_ten_ignored(self):
        content = "\n" * 10 + "# Too Late\n"
        assert get_document_title(content, "late_title.md") == "late title"

    def test_heading_on_line_ten_found(self):
        content = "\n" * 9 + "# Just In Time\n"
        assert get_document_title(content, "x.md") == "Just In Time"

    def test_fallback_replaces_dashes_and_underscores(self):
        assert get_document_title("", "deso-tutorial_build-apps.md") == "deso tutorial build apps"

    def test_fallback_without_extension(self):
        assert get_document_title("no heading", "README") == "README"

    def test_fallback_strips_only_last_extension(self):
        assert get_document_title("", "api.v1.json") == "api.v1"


class TestLocateMatches:
    """Matching lines and their context windows."""

    def test_context_clipped_at_start(self):
        lines = ["fee first", "b", "c", "d"]
        matches = locate_matches(lines, ["fee"])
        assert len(matches) == 1
        assert matches[0].line_number == 1
        assert matches[0].context == "fee first\nb\nc"

    def test_context_two_lines_each_side(self):
        lines = ["a", "b", "c", "FEE here", "d", "e", "f"]
        matches = locate_matches(lines, ["fee"])
        assert matches[0].context == "b\nc\nFEE here\nd\ne"
        assert matches[0].matched_line == "FEE here"

    def test_every_matching_line_reported(self):
        lines = ["fee", "x", "transaction", "fee again"]
        matches = locate_matches(lines, ["fee", "transaction"])
        assert [m.line_number for m in matches] == [1, 3, 4]

    def test_no_matches(self):
        assert locate_matches(["nothing", "here"], ["fee"]) == []


class TestHighlightTerms:
    """Bold markers around case-insensitive occurrences."""

    def test_preserves_original_case(self):
        assert highlight_terms("Fee and FEE", ["fee"]) == "**Fee** and **FEE**"

    def test_terms_applied_in_sequence(self):
        assert highlight_terms("transaction fees", ["transaction", "fee"]) == "**transaction** **fee**s"

    def test_overlapping_terms_nest_markers(self):
        assert highlight_terms("feed", ["feed", "fee"]) == "****fee**d**"

    def test_metacharacters_match_literally(self):
        assert highlight_terms("a.b and axb", ["a.b"]) == "**a.b** and axb"


class TestBuildExcerpt:
    """First-match selection and truncation."""

    def test_empty_without_matches(self):
        assert build_excerpt([], ["fee"]) == ""

    def test_uses_first_match_only(self):
        lines = ["fee one"] + ["filler"] * 10 + ["fee two"]
        matches = locate_matches(lines, ["fee"])
        excerpt = build_excerpt(matches, ["fee"])
        assert "**fee** one" in excerpt
        assert "two" not in excerpt

    def test_truncates_long_excerpt(self):
        lines = ["fee " + "x" * 600]
        excerpt = build_excerpt(locate_matches(lines, ["fee"]), ["fee"])
        assert len(excerpt) == MAX_EXCERPT_LENGTH + 3
        assert excerpt.endswith("...")

    def test_exactly_max_length_not_truncated(self):
        line = "fee" + "y" * (MAX_EXCERPT_LENGTH - 7)
        excerpt = build_excerpt(locate_matches([line], ["fee"]), ["fee"])
        assert len(excerpt) == MAX_EXCERPT_LENGTH
        assert not excerpt.endswith("...")


class TestExtractExcerpt:

    def test_title_text_and_matches(self):
        content = "# Intro\n\nThis covers transaction flow and fees.\n"
        excerpt = extract_excerpt(content, ["transaction", "fee"], "a.md")
        assert excerpt.title == "Intro"
        assert excerpt.text == "# Intro\n\nThis covers **transaction** flow and **fee**s.\n"
        assert len(excerpt.matches) == 1
