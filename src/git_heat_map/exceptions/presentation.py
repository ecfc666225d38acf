"""Presentation exceptions. These are recovered from, never fatal."""

from .base import HeatMapError


class PresentationUnavailable(HeatMapError):
    """Raised when styled output cannot be used and plain text must be rendered."""

    def __init__(self, reason: str):
        super().__init__("Styled output unavailable", details={"reason": reason})
        self.reason = reason
