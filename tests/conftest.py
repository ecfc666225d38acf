"""Shared test fixtures for git heat map tests."""

import logging
import shutil
import subprocess
from pathlib import Path

import pytest

GIT_AVAILABLE = shutil.which("git") is not None

# Identity and signing flags so commits work on any machine
_GIT_COMMIT_FLAGS = [
    "-c",
    "user.name=Test",
    "-c",
    "user.email=test@test.com",
    "-c",
    "commit.gpgsign=false",
]


class RepoBuilder:
    """Build a throwaway git repository one commit at a time."""

    def __init__(self, path: Path):
        self.path = path
        self._counter = 0
        self.git("init", "-q")

    def git(self, *args: str) -> str:
        result = subprocess.run(
            ["git", "-C", str(self.path), *_GIT_COMMIT_FLAGS, *args],
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout

    def commit(self, files: list[str], message: str = "") -> None:
        """Modify every listed file and commit them together."""
        self._counter += 1
        for name in files:
            target = self.path / name
            target.parent.mkdir(parents=True, exist_ok=True)
            with open(target, "a", encoding="utf-8") as f:
                f.write(f"change {self._counter}\n")
        self.git("add", "--", *files)
        self.git("commit", "-q", "-m", message or f"commit {self._counter}")

    def remove(self, name: str) -> None:
        self._counter += 1
        self.git("rm", "-q", "--", name)
        self.git("commit", "-q", "-m", f"remove {name}")


@pytest.fixture
def isolated_env(monkeypatch, tmp_path):
    """Keep git and config discovery confined to tmp_path."""
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    for var in (
        "GIT_DIR",
        "GIT_WORK_TREE",
        "GIT_HEAT_MAP_USE_STYLING",
        "GIT_HEAT_MAP_LOG",
        "GIT_HEAT_MAP_LOG_DIR",
        "GIT_HEAT_MAP_LOG_FILE",
        "GIT_HEAT_MAP_DEFAULT_RESULTS",
        "GIT_HEAT_MAP_EXCLUDE_DELETED",
    ):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def make_repo(isolated_env):
    """Factory creating an empty repository under tmp_path."""
    if not GIT_AVAILABLE:
        pytest.skip("git not found")

    def _make(name: str = "repo") -> RepoBuilder:
        path = isolated_env / name
        path.mkdir()
        return RepoBuilder(path)

    return _make


@pytest.fixture
def abc_repo(make_repo):
    """Three commits touching [a.txt], [a.txt, b.txt], [b.txt]."""
    repo = make_repo()
    repo.commit(["a.txt"])
    repo.commit(["a.txt", "b.txt"])
    repo.commit(["b.txt"])
    return repo


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("git_heat_map")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
