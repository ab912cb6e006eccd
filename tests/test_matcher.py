"""Tests for per-document scoring and file matching."""
import pytest

from deso_mcp.search.matcher import count_occurrences, match_document, match_file, score_content


class TestScoring:
    """Occurrence counting across terms."""

    def test_counts_substrings(self):
        assert count_occurrences("fees and feedback", "fee") == 2

    def test_counts_are_non_overlapping(self):
        assert count_occurrences("aaaa", "aa") == 2

    def test_regex_metacharacters_are_literal(self):
        assert count_occurrences("a+b a+b ab", "a+b") == 2
        assert count_occurrences("x.y", ".") == 1

    def test_score_sums_terms_case_insensitively(self):
        assert score_content("Transaction FEE fee", ["transaction", "fee"]) == 3


class TestMatchDocument:
    """Result construction for a single document."""

    def test_zero_score_returns_none(self):
        assert match_document("nothing relevant", ["fee"], "docs/a.md", "docs") is None

    def test_result_fields(self):
        content = "# Intro\n\nThis covers transaction flow and fees.\n"
        result = match_document(content, ["transaction", "fee"], "docs/docs/a.md", "docs")

        assert result is not None
        assert result.title == "Intro"
        assert result.path == "docs/docs/a.md"
        assert result.repository == "docs"
        assert result.score == 2
        assert result.match_count == 1
        assert "**transaction**" in result.excerpt

    def test_fallback_title_uses_path_name(self):
        result = match_document("fee schedule", ["fee"], "core/fee_rules.txt", "core")
        assert result.title == "fee rules"

    def test_to_dict(self):
        result = match_document("fee", ["fee"], "docs/f.md", "docs")
        assert result.to_dict() == {
            "title": "f",
            "path": "docs/f.md",
            "repository": "docs",
            "score": 1,
            "excerpt": "**fee**",
            "match_count": 1,
        }


class TestMatchFile:
    """Reading files from disk."""

    @pytest.mark.asyncio
    async def test_path_relative_to_base(self, tmp_path):
        doc = tmp_path / "docs" / "guide.md"
        doc.parent.mkdir()
        doc.write_text("fee", encoding="utf-8")

        result = await match_file(doc, "docs", ["fee"], tmp_path)

        assert result.path == "docs/guide.md"

    @pytest.mark.asyncio
    async def test_invalid_utf8_replaced(self, tmp_path):
        doc = tmp_path / "notes.md"
        doc.write_bytes(b"caf\xe9 fee schedule\n")

        result = await match_file(doc, "docs", ["fee"], tmp_path)

        assert result.path == "notes.md"
        assert result.score == 1
        assert "caf\ufffd **fee** schedule" in result.excerpt

    @pytest.mark.asyncio
    async def test_missing_file_skipped(self, tmp_path):
        assert await match_file(tmp_path / "gone.md", "docs", ["fee"], tmp_path) is None
