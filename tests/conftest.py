"""Pytest configuration and fixtures."""
import logging
from pathlib import Path

import pytest
import structlog

from team_links.renderer import ProfileLinkRenderer

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def renderer():
    """Renderer with the default GitHub tokens."""
    return ProfileLinkRenderer()


@pytest.fixture
def templates_dir():
    return PROJECT_ROOT / "templates"


@pytest.fixture
def roster_file(tmp_path):
    """Write a small team.yaml and return its path."""
    path = tmp_path / "team.yaml"
    path.write_text(
        "members:\n"
        "  - name: Alex Mercer\n"
        "    title: Senior Software Engineer\n"
        "    github: octocat\n"
        "    bio: Works on the **publishing pipeline**.\n"
        "  - name: Kenji Tanaka\n"
        "    title: Full-Stack Developer\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def reset_logging():
    """Undo configure_logging() so handlers don't outlive captured streams."""
    yield
    root = logging.getLogger()
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    structlog.reset_defaults()
