"""Exception hierarchy for git heat map."""

from .base import HeatMapError
from .config import ConfigurationError, InvalidConfigError, InvalidLimitError
from .history import HistoryError, HistoryReadError, NotARepositoryError
from .presentation import PresentationUnavailable

__all__ = [
    "HeatMapError",
    "HistoryError",
    "NotARepositoryError",
    "HistoryReadError",
    "ConfigurationError",
    "InvalidConfigError",
    "InvalidLimitError",
    "PresentationUnavailable",
]
