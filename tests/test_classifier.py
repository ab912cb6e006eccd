"""Tests for searchable file detection."""
import pytest

from deso_mcp.search.classifier import is_searchable_file


class TestIsSearchableFile:
    """Allow-list checks by extension and by bare name."""

    @pytest.mark.parametrize("name", [
        "guide.md", "notes.txt", "index.ts", "App.tsx", "main.go",
        "schema.graphql", "config.yaml", "package-lock.json", "yarn.lock",
        "script.sh", "settings.toml", "prod.env",
    ])
    def test_allow_listed_extensions(self, name):
        assert is_searchable_file(name)

    def test_extension_is_case_insensitive(self):
        assert is_searchable_file("README.MD")
        assert is_searchable_file("Main.GO")

    @pytest.mark.parametrize("name", ["logo.png", "archive.tar.gz", "binary", "Makefile", "font.woff2"])
    def test_other_files_rejected(self, name):
        assert not is_searchable_file(name)

    def test_readme_and_license_without_extension(self):
        assert is_searchable_file("README")
        assert is_searchable_file("LICENSE")

    def test_bare_names_are_case_sensitive(self):
        assert not is_searchable_file("readme")
        assert not is_searchable_file("License")

    def test_only_last_extension_counts(self):
        assert is_searchable_file("image.png.md")
        assert not is_searchable_file("notes.md.bak")
