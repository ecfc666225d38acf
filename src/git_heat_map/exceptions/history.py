"""History-related exceptions: repository detection and git log reads."""

from pathlib import Path
from typing import Dict, Optional

from .base import HeatMapError


class HistoryError(HeatMapError):
    """Base class for errors raised while reading repository history."""

    pass


class NotARepositoryError(HistoryError):
    """Raised when the target directory is not a git working tree."""

    exit_code = 3

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Not a git repository: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason


class HistoryReadError(HistoryError):
    """Raised when git fails while streaming the commit history."""

    exit_code = 4

    def __init__(self, reason: str, returncode: Optional[int] = None):
        details: Dict[str, str] = {"reason": reason}
        if returncode is not None:
            details["returncode"] = str(returncode)

        super().__init__("Failed to read git history", details=details)
        self.reason = reason
        self.returncode = returncode
