"""Stream changed paths out of git history via subprocess."""

import subprocess
from pathlib import Path
from typing import Iterator, Optional

from ..exceptions import HistoryReadError, NotARepositoryError
from ..logging_config import get_logger

logger = get_logger(__name__)


class GitHistoryExtractor:
    """Read the committed history of one working tree, one path per changed file.

    Only committed history reachable from HEAD is consulted; the index and the
    working directory are never looked at. Paths are reported exactly as git
    recorded them, so a renamed file shows up under each of its names.
    """

    def __init__(self, repo_path: str | Path = "."):
        self.repo_path = str(Path(repo_path).resolve())
        self._toplevel: Optional[Path] = None

    def toplevel(self) -> Path:
        """Return the working tree root, or raise NotARepositoryError.

        The root is looked up once per extractor and remembered.
        """
        if self._toplevel is not None:
            return self._toplevel

        if not Path(self.repo_path).is_dir():
            raise NotARepositoryError(Path(self.repo_path), "directory does not exist")

        try:
            result = subprocess.run(
                ["git", "-C", self.repo_path, "rev-parse", "--show-toplevel"],
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            raise NotARepositoryError(Path(self.repo_path), "git executable not found")

        if result.returncode != 0:
            raise NotARepositoryError(
                Path(self.repo_path), result.stderr.strip() or "git rev-parse failed"
            )
        self._toplevel = Path(result.stdout.strip())
        return self._toplevel

    def has_commits(self) -> bool:
        """True once HEAD points at a commit. Fresh repositories have none."""
        result = subprocess.run(
            ["git", "-C", self.repo_path, "rev-parse", "--verify", "--quiet", "HEAD"],
            capture_output=True,
            text=True,
        )
        return result.returncode == 0

    def existing_paths(self) -> set[str]:
        """Paths tracked at HEAD. Empty when there are no commits."""
        if not self.has_commits():
            return set()

        result = subprocess.run(
            self._git("ls-tree", "-r", "--name-only", "HEAD"),
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if result.returncode != 0:
            raise HistoryReadError(result.stderr.strip(), returncode=result.returncode)
        return {line for line in result.stdout.splitlines() if line}

    def stream_paths(self, exclude_deleted: bool = False) -> Iterator[str]:
        """Yield one path per (commit, changed file) pair, newest commit first.

        Merge commits and other commits without a file-level diff contribute
        nothing. Paths deleted in a later commit keep their earlier mentions
        unless ``exclude_deleted`` is set, in which case only paths present at
        HEAD are yielded.

        Raises:
            NotARepositoryError: If the extractor does not point at a working tree
            HistoryReadError: If git log exits with an error
        """
        root = self.toplevel()
        logger.debug("Reading history of %s", root)

        if not self.has_commits():
            logger.info("Repository has no commits yet")
            return

        keep = self.existing_paths() if exclude_deleted else None

        proc = subprocess.Popen(
            self._git("log", "--pretty=format:", "--name-only"),
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        try:
            stdout = proc.stdout
            if stdout is None:
                raise HistoryReadError("git log produced no output stream")
            for line in stdout:
                path = line.rstrip("\n")
                if not path:
                    continue
                if keep is not None and path not in keep:
                    continue
                yield path

            stderr = proc.stderr.read() if proc.stderr else ""
            proc.wait()
            if proc.returncode != 0:
                raise HistoryReadError(
                    stderr.strip() or "git log failed", returncode=proc.returncode
                )
        finally:
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            if proc.stdout:
                proc.stdout.close()
            if proc.stderr:
                proc.stderr.close()

    def _git(self, *args: str) -> list[str]:
        # quotepath=off keeps non-ASCII paths readable instead of octal-escaped
        return ["git", "-C", self.repo_path, "-c", "core.quotepath=off", *args]
