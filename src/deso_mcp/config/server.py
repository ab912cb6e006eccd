"""Server configuration loading and validation.

Loads YAML configuration for the DeSo MCP server with full validation.
Every field has a default, so running without a config file is supported.
"""
from __future__ import annotations
import os
import yaml
from pathlib import Path
from typing import Any, Literal
from pydantic import BaseModel, Field, field_validator


DEFAULT_REPOSITORIES = [
    "docs",
    "core",
    "identity",
    "frontend",
    "backend",
    "deso-js",
    "deso-chat",
    "deso-ui",
    "graphql",
]


class RepositoriesConfig(BaseModel):
    """Location and names of the searchable repository checkouts."""
    base_path: Path = Field(Path("repos"), description="Directory holding one checkout per repository")
    names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_REPOSITORIES),
        description="Repository roots searched, in order"
    )
    extra_ignore_patterns: list[str] = Field(
        default_factory=list,
        description="Additional gitignore-style patterns for directories to skip"
    )

    @field_validator("base_path")
    @classmethod
    def resolve_base_path(cls, v: Path) -> Path:
        """Anchor relative paths at the working directory."""
        return Path(v).expanduser().resolve()

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Repository names must be unique, non-empty, single path components."""
        seen = set()
        for name in v:
            if not name or not name.strip():
                raise ValueError("repository names must be non-empty")
            if "/" in name or "\\" in name or name in (".", ".."):
                raise ValueError(f"repository name must be a single directory name: {name!r}")
            if name in seen:
                raise ValueError(f"duplicate repository name: {name!r}")
            seen.add(name)
        return v


class SearchConfig(BaseModel):
    """Presentation settings for search results."""
    max_display_results: int = Field(10, ge=1, le=100, description="Results rendered per search")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Log level")
    format: str = Field(
        "%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string"
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.upper()
        return v


class ServerConfig(BaseModel):
    """Complete server configuration."""
    repositories: RepositoriesConfig = Field(default_factory=RepositoriesConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_mapping(cls, data: dict[str, Any] | None) -> ServerConfig:
        """Validate a raw mapping after applying environment overrides.

        DESO_REPOS_PATH replaces repositories.base_path and
        DESO_MCP_LOG_LEVEL replaces logging.level.
        """
        data = dict(data or {})

        repos_path = os.getenv("DESO_REPOS_PATH")
        if repos_path:
            data["repositories"] = {**(data.get("repositories") or {}), "base_path": repos_path}

        log_level = os.getenv("DESO_MCP_LOG_LEVEL")
        if log_level:
            data["logging"] = {**(data.get("logging") or {}), "level": log_level}

        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> ServerConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Validated ServerConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Configuration in {config_path} must be a mapping")

        try:
            return cls.from_mapping(data)
        except Exception as e:
            raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    @classmethod
    def from_env(cls, env_var: str = "DESO_MCP_CONFIG") -> ServerConfig:
        """Load configuration from the path in an environment variable.

        Falls back to config/deso-mcp.yaml, then to built-in defaults.
        """
        config_path = os.getenv(env_var)

        if not config_path:
            default_path = Path("config/deso-mcp.yaml")
            if default_path.exists():
                return cls.from_yaml(default_path)
            return cls.from_mapping({})

        return cls.from_yaml(config_path)


def load_server_config(config_path: str | Path | None = None) -> ServerConfig:
    """Load server configuration from file or environment.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Validated ServerConfig instance

    Raises:
        ValueError: If configuration is invalid
    """
    if config_path:
        return ServerConfig.from_yaml(config_path)

    return ServerConfig.from_env()
