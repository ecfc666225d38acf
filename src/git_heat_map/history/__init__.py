"""Repository history access."""

from .extractor import GitHistoryExtractor

__all__ = ["GitHistoryExtractor"]
