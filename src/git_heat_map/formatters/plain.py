"""Plain-text pipe table renderer."""

from rich.console import Console

from .base import BaseRenderer
from .table import TableSpec


class PlainRenderer(BaseRenderer):
    """Pipe-delimited text, written to stdout byte for byte."""

    def render(self, spec: TableSpec) -> str:
        return "\n".join(spec.lines())

    def display(self, spec: TableSpec, console: Console) -> None:
        # Bypass rich markup, highlighting and wrapping so long paths stay intact
        console.file.write(self.render(spec) + "\n")
        console.file.flush()
