"""Table renderers for heat map results."""

from .base import BaseRenderer
from .plain import PlainRenderer
from .styled import StyledRenderer
from .table import TableSpec, build_table_spec


def get_renderer(styled: bool) -> BaseRenderer:
    """Pick the renderer for the resolved styling flag."""
    return StyledRenderer() if styled else PlainRenderer()


__all__ = [
    "BaseRenderer",
    "PlainRenderer",
    "StyledRenderer",
    "TableSpec",
    "build_table_spec",
    "get_renderer",
]
