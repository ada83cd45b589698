"""Shared pytest fixtures for component-index tests."""

import logging
from pathlib import Path

import pytest


def write_component(
    component_dir: Path,
    name: str,
    version: str = "0.0.1",
    description: str = "",
    homepage: str = "",
    type_: str = "Component",
) -> Path:
    """Create a component directory with a `publish.yaml`."""
    component_dir.mkdir(parents=True, exist_ok=True)
    (component_dir / "publish.yaml").write_text(
        f"""Type: {type_}
Name: {name}
Version: {version}
Description: {description}
HomePage: {homepage}
"""
    )
    return component_dir


@pytest.fixture
def mock_root_home(tmp_path: Path) -> Path:
    """Create an empty mock ~/.s directory."""
    root_home = tmp_path / ".s"
    root_home.mkdir()
    return root_home


@pytest.fixture
def serverless_root(mock_root_home: Path) -> Path:
    root = mock_root_home / "components" / "devsapp.cn"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def github_root(mock_root_home: Path) -> Path:
    root = mock_root_home / "components" / "github.com"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def populated_root_home(mock_root_home: Path, serverless_root: Path, github_root: Path) -> Path:
    """Root home with components in both registries plus some noise."""
    write_component(
        serverless_root / "devsapp" / "fc",
        "fc",
        version="0.1.2",
        description="Function Compute",
        homepage="https://www.serverless-devs.com",
    )
    (serverless_root / "devsapp" / "fc" / "index.js").write_bytes(b"x" * 100)

    write_component(serverless_root / "website", "website", version="1.0.0", description="Static site")

    # Not components
    (serverless_root / "empty-dir").mkdir()
    write_component(serverless_root / "app", "app", type_="Application")

    write_component(github_root / "alice" / "tool", "tool", version="2.0.0", description="Alice tool")
    return mock_root_home


@pytest.fixture
def make_component():
    return write_component


@pytest.fixture(autouse=True)
def restore_logging():
    """The CLI group reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
