"""Styled renderer: the table as Markdown, drawn by rich."""

from rich.console import Console
from rich.markdown import Markdown

from .base import BaseRenderer
from .table import TableSpec

TITLE = "Git Heat Map Results"


class StyledRenderer(BaseRenderer):
    """Wraps the table in a Markdown document and lets rich draw it."""

    def render(self, spec: TableSpec) -> str:
        return "\n".join([f"## {TITLE}", "", *spec.lines()])

    def display(self, spec: TableSpec, console: Console) -> None:
        console.print(Markdown(self.render(spec)))
