"""
git heat map - find out what files/directories have changed the most.

Counts how many commits touched each path in a git repository's history and
ranks the paths by that count.
"""

__version__ = "0.1.0"

from .core import HeatMapResult, build_heat_map, render_heat_map
from .ranking import FrequencyEntry, rank_paths

__all__ = [
    "build_heat_map",  # Main entry point
    "render_heat_map",
    "rank_paths",
    "FrequencyEntry",
    "HeatMapResult",
]
