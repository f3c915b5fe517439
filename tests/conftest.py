"""
conftest.py
-----------
Shared pytest fixtures for Daily Thoughts tests.

Provides fixtures for:
- A content directory with a few entries
- A static asset directory
- Config dicts and a Flask test client
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory

from dailythoughts.config import default_config
from dailythoughts.server import create_app


ENTRY_IDS = ["2024-03-01", "2024-02-15", "2024-01-10"]


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_dir(tmp_dir):
    """Content directory holding three entries and a stray non-entry file."""
    root = tmp_dir / "content" / "daily"
    root.mkdir(parents=True)
    for entry_id in ENTRY_IDS:
        (root / f"{entry_id}.md").write_text(f"Thoughts from **{entry_id}**.\n", encoding="utf-8")
    (root / "README.txt").write_text("not an entry", encoding="utf-8")
    return root


@pytest.fixture
def static_dir(tmp_dir):
    """Static asset directory with a stylesheet and a directory index."""
    root = tmp_dir / "static"
    (root / "docs").mkdir(parents=True)
    (root / "style.css").write_text("body { color: black; }\n", encoding="utf-8")
    (root / "docs" / "index.html").write_text("<p>docs</p>\n", encoding="utf-8")
    return root


# ----- App Fixtures -----

@pytest.fixture
def cfg(tmp_dir, content_dir, static_dir):
    """Default config pointed at the temporary directories."""
    config = default_config(tmp_dir)
    config["content_root"] = content_dir
    config["static_root"] = static_dir
    config["listing_intro"] = ""
    return config


@pytest.fixture
def app(cfg):
    app = create_app(cfg)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
