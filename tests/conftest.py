"""
Shared fixtures for hugo-calendar tests.
"""

from pathlib import Path

import pytest

from hugo_calendar import configuration
from hugo_calendar.repository.configuration import CONFIGURATION_REPO


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Keep rich output free of escape codes regardless of the environment."""
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the configuration at a file that does not exist yet."""
    config_path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)
    CONFIGURATION_REPO.reload()
    yield config_path
    CONFIGURATION_REPO.reload()


@pytest.fixture
def hugo_project(tmp_path) -> Path:
    """An empty Hugo project with a content/posts directory."""
    project = tmp_path / "site"
    (project / "content" / "posts").mkdir(parents=True)
    return project


def _write_post(project: Path, slug: str, front_matter: str, body: str = "") -> Path:
    post_dir = project / "content" / "posts" / slug
    post_dir.mkdir(parents=True, exist_ok=True)
    path = post_dir / "index.md"
    path.write_text(f"---\n{front_matter}\n---\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def write_post():
    """Write content/posts/<slug>/index.md with the given front matter and body."""
    return _write_post
