"""Shared pytest fixtures for all tests."""
import pytest

from deso_mcp.config import RepositoriesConfig, ServerConfig
from deso_mcp.mcp import tools


def write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def repos_dir(tmp_path):
    """A repositories directory with a few small checkouts.

    Layout:
        docs/docs/a.md            "transaction" x1, "fee" x1
        docs/guides/fees.md       "fee" x4
        docs/node_modules/x.md    excluded directory
        docs/.git/config.md       hidden directory
        backend/routes/post.go    "transaction" x2
        backend/logo.png          excluded extension
        identity/README           extensionless, allow-listed
    """
    base = tmp_path / "repos"
    write(base / "docs" / "docs" / "a.md", "# Intro\n\nThis covers transaction flow and fees.\n")
    write(
        base / "docs" / "guides" / "fees.md",
        "# Fee Guide\n\nEvery fee is paid in nanos.\nThe fee rate is per KB.\nSee fee tables.\n",
    )
    write(base / "docs" / "node_modules" / "x.md", "transaction fee transaction fee\n")
    write(base / "docs" / ".git" / "config.md", "transaction fee\n")
    write(
        base / "backend" / "routes" / "post.go",
        "package routes\n\n// Build the transaction\nfunc Post() {}\n// submit transaction\n",
    )
    write(base / "backend" / "logo.png", "transaction fee transaction fee\n")
    write(base / "identity" / "README", "Identity service\nsigns every transaction\n")
    return base


@pytest.fixture
def server_config(repos_dir):
    return ServerConfig(
        repositories=RepositoriesConfig(
            base_path=repos_dir,
            names=["docs", "core", "identity", "backend"],
        )
    )


@pytest.fixture
def installed_config(server_config):
    """Install a config for the MCP tools and restore lazy loading afterwards."""
    tools.set_server_config(server_config)
    yield server_config
    tools.set_server_config(None)
