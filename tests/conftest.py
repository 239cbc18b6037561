"""Shared fixtures: every test gets a fresh repository in its own tmp_path."""

from pathlib import Path

import pytest

from minigit.repo_utils import init_repo


@pytest.fixture
def repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Initialize a repository in tmp_path and make it the working directory."""
    init_repo(tmp_path)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_file(repo: Path):
    """Create (or overwrite) a file in the repository and return its path."""

    def _write(relative_path: str, content: str | bytes) -> Path:
        path = repo / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            content = content.encode()
        path.write_bytes(content)
        return path

    return _write
