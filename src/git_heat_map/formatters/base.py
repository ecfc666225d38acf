"""Base renderer interface for heat map output."""

from abc import ABC, abstractmethod

from rich.console import Console

from .table import TableSpec


class BaseRenderer(ABC):
    """Abstract base class for table renderers."""

    @abstractmethod
    def render(self, spec: TableSpec) -> str:
        """Return the table as a string."""

    @abstractmethod
    def display(self, spec: TableSpec, console: Console) -> None:
        """Write the rendered table to the output console."""
