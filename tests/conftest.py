import subprocess
from pathlib import Path

import pytest


@pytest.fixture
def tmp_git_repo(tmp_path):
    """Create a temporary git repository on branch 'trunk' with user config set."""
    repo = tmp_path / "repo"
    repo.mkdir()

    def git(cmd):
        subprocess.check_call(f"git -C {repo} {cmd}", shell=True)

    git("init -q")
    git("symbolic-ref HEAD refs/heads/trunk")
    git('config user.email "test@example.com"')
    git('config user.name "Test User"')
    git("config commit.gpgsign false")
    return repo, git


@pytest.fixture
def write_file():
    def _write(base: Path, name: str, content: str = "sample"):
        path = base / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def committed_repo(tmp_git_repo, write_file):
    """A repository with a single commit containing file.txt."""
    repo, git = tmp_git_repo
    write_file(repo, "file.txt", "one\n")
    git("add file.txt")
    git('commit -q -m "feat: first"')
    return repo, git


@pytest.fixture
def anyio_backend():
    """Run coroutine tests under asyncio only."""
    return "asyncio"
