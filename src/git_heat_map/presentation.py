"""Terminal presentation: styling fallback, banner, and the results prompt."""

from __future__ import annotations

from typing import Any, Optional

import typer
from rich.console import Console
from rich.panel import Panel

from .exceptions import InvalidLimitError, PresentationUnavailable
from .logging_config import get_logger
from .ranking import validate_limit

logger = get_logger(__name__)

GIT_ICON = "🌱"


def check_styling(console: Console) -> None:
    """Raise PresentationUnavailable if rich output cannot reach a terminal."""
    if not console.is_terminal:
        raise PresentationUnavailable("output is not a terminal")
    if console.is_dumb_terminal:
        raise PresentationUnavailable("terminal does not support styling")


def resolve_styling(requested: bool, console: Console) -> bool:
    """Return whether styled rendering will actually be used.

    Styling that was asked for but cannot be shown degrades to plain text
    with a warning rather than failing the run.
    """
    if not requested:
        return False
    try:
        check_styling(console)
    except PresentationUnavailable as e:
        logger.warning("%s. Falling back to plain output.", e)
        return False
    return True


def show_banner(console: Console) -> None:
    console.print(
        Panel(
            f"{GIT_ICON} git heat map\n\n"
            "Find out what files/directories\n"
            "have changed the most.",
            style="color(212)",
            border_style="color(212)",
            padding=(2, 3),
            expand=False,
        )
    )
    console.print()


def prompt_for_limit(default: int, console: Console) -> int:
    """Ask for a results count until the user confirms a positive integer.

    Ctrl-C or end of input raises typer.Abort, which ends the process.
    """
    show_banner(console)
    while True:
        value = typer.prompt("How many results?", default=default, type=int, err=True)
        try:
            limit = validate_limit(value)
        except InvalidLimitError as e:
            console.print(f"[red]{e.reason}[/red]")
            continue
        if typer.confirm(f"Is this correct?: {limit}", default=True, err=True):
            return limit


def resolve_limit(
    value: Optional[Any],
    interactive: bool,
    default: int,
    console: Console,
) -> int:
    """Turn the optional RESULTS argument into a validated limit.

    An explicit value is validated as-is. Without one, the interactive
    prompt is used when available; otherwise the run cannot continue.

    Raises:
        InvalidLimitError: For a bad explicit value, or no value and no prompt
    """
    if value is not None:
        return validate_limit(value)
    if not interactive:
        raise InvalidLimitError(
            value, "provide a number of results, e.g. 25, or run in a terminal to be prompted"
        )
    return prompt_for_limit(default, console)
