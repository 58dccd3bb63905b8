"""Pytest fixtures for extents tests."""

import pytest

from extents import Extent, disable_verbose


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty project with no user config.

    The working directory is a fresh git-like root so config discovery
    never walks above it.
    """
    project = tmp_path / "project"
    project.mkdir()
    (project / ".git").mkdir()
    monkeypatch.chdir(project)

    user_config = tmp_path / "home" / ".config" / "extents" / "config.toml"
    monkeypatch.setattr("extents.config.USER_CONFIG_PATH", user_config)
    monkeypatch.setattr("extents.cli.config_cmd.USER_CONFIG_PATH", user_config)
    yield project
    disable_verbose()


@pytest.fixture
def ext_xy() -> Extent:
    """Extent over X and Y."""
    return Extent(X=(1.0, 2.0), Y=(3.0, 4.0))


@pytest.fixture
def ext_xz() -> Extent:
    """Extent sharing X with ext_xy, plus Z."""
    return Extent(X=(1.5, 2.5), Z=(0.0, 1.0))
