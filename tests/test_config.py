"""Tests for server configuration loading."""
from pathlib import Path

import pytest
from pydantic import ValidationError

from deso_mcp.config import (
    DEFAULT_REPOSITORIES,
    LoggingConfig,
    RepositoriesConfig,
    SearchConfig,
    ServerConfig,
    load_server_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("DESO_MCP_CONFIG", "DESO_REPOS_PATH", "DESO_MCP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:

    def test_defaults(self):
        config = ServerConfig()

        assert config.repositories.names == DEFAULT_REPOSITORIES
        assert config.repositories.base_path == Path("repos")
        assert config.repositories.extra_ignore_patterns == []
        assert config.search.max_display_results == 10
        assert config.logging.level == "INFO"

    def test_no_file_uses_defaults(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = load_server_config()

        assert config.repositories.names == DEFAULT_REPOSITORIES


class TestValidation:

    def test_relative_base_path_resolved(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        config = RepositoriesConfig(base_path="checkouts")

        assert config.base_path == (tmp_path / "checkouts").resolve()

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValidationError, match="duplicate"):
            RepositoriesConfig(names=["docs", "docs"])

    @pytest.mark.parametrize("name", ["", "  ", "a/b", "..", "a\\b"])
    def test_bad_names_rejected(self, name):
        with pytest.raises(ValidationError):
            RepositoriesConfig(names=[name])

    def test_display_limit_bounds(self):
        with pytest.raises(ValidationError):
            SearchConfig(max_display_results=0)

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            LoggingConfig(level="verbose")


class TestYamlLoading:

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "deso-mcp.yaml"
        path.write_text(
            "repositories:\n"
            f"  base_path: {tmp_path / 'repos'}\n"
            "  names: [docs, backend]\n"
            "  extra_ignore_patterns: ['vendor/']\n"
            "search:\n"
            "  max_display_results: 5\n",
            encoding="utf-8",
        )

        config = ServerConfig.from_yaml(path)

        assert config.repositories.base_path == (tmp_path / "repos").resolve()
        assert config.repositories.names == ["docs", "backend"]
        assert config.repositories.extra_ignore_patterns == ["vendor/"]
        assert config.search.max_display_results == 5

    def test_empty_yaml_is_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert ServerConfig.from_yaml(path).search.max_display_results == 10

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ServerConfig.from_yaml(tmp_path / "absent.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("repositories: [unclosed\n", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ServerConfig.from_yaml(path)

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- docs\n- core\n", encoding="utf-8")

        with pytest.raises(ValueError, match="must be a mapping"):
            ServerConfig.from_yaml(path)

    def test_invalid_values_name_the_file(self, tmp_path):
        path = tmp_path / "invalid.yaml"
        path.write_text("search:\n  max_display_results: 0\n", encoding="utf-8")

        with pytest.raises(ValueError, match="invalid.yaml"):
            ServerConfig.from_yaml(path)


class TestEnvironment:

    def test_config_path_from_env(self, tmp_path, monkeypatch):
        path = tmp_path / "custom.yaml"
        path.write_text("repositories:\n  names: [graphql]\n", encoding="utf-8")
        monkeypatch.setenv("DESO_MCP_CONFIG", str(path))

        assert load_server_config().repositories.names == ["graphql"]

    def test_default_config_location(self, tmp_path, monkeypatch):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "deso-mcp.yaml").write_text(
            "search:\n  max_display_results: 3\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)

        assert load_server_config().search.max_display_results == 3

    def test_explicit_path_wins(self, tmp_path, monkeypatch):
        env_file = tmp_path / "env.yaml"
        env_file.write_text("search:\n  max_display_results: 7\n", encoding="utf-8")
        explicit = tmp_path / "explicit.yaml"
        explicit.write_text("search:\n  max_display_results: 9\n", encoding="utf-8")
        monkeypatch.setenv("DESO_MCP_CONFIG", str(env_file))

        assert load_server_config(explicit).search.max_display_results == 9

    def test_env_overrides(self, tmp_path, monkeypatch):
        path = tmp_path / "c.yaml"
        path.write_text("repositories:\n  base_path: /nowhere\nlogging:\n  level: ERROR\n", encoding="utf-8")
        monkeypatch.setenv("DESO_REPOS_PATH", str(tmp_path / "repos"))
        monkeypatch.setenv("DESO_MCP_LOG_LEVEL", "debug")

        config = ServerConfig.from_yaml(path)

        assert config.repositories.base_path == (tmp_path / "repos").resolve()
        assert config.logging.level == "DEBUG"
