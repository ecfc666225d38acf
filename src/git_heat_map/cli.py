"""Command-line interface for git heat map"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import LOG_MODES, load_config
from .core import build_heat_map, render_heat_map
from .exceptions import HeatMapError
from .history import GitHistoryExtractor
from .logging_config import setup_logging
from .presentation import resolve_limit, resolve_styling

app = typer.Typer(
    name="git-heat-map",
    help="Find out what files/directories have changed the most in a git repository.",
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-heat-map {__version__}")
        raise typer.Exit()


def _validate_log_mode(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in LOG_MODES:
        raise typer.BadParameter(f"expected one of: {', '.join(LOG_MODES)}")
    return value


@app.command()
def heat_map(
    results: Optional[str] = typer.Argument(
        None,
        help="Number of results to display (prompted for, default 25, when omitted in a terminal)",
        show_default=False,
    ),
    repo: Path = typer.Option(
        Path("."),
        "--repo",
        "-C",
        help="Directory inside the git working tree to analyze",
        file_okay=False,
        dir_okay=True,
    ),
    styled: Optional[bool] = typer.Option(
        None,
        "--styled/--plain",
        help="Render with rich styling or as plain text [env: GIT_HEAT_MAP_USE_STYLING, default: styled]",
        show_default=False,
    ),
    log: Optional[str] = typer.Option(
        None,
        "--log",
        help="Log to stdout, log file, both, or off [env: GIT_HEAT_MAP_LOG, default: off]",
        callback=_validate_log_mode,
        show_default=False,
    ),
    log_dir: Optional[Path] = typer.Option(
        None,
        "--log-dir",
        help="Directory to store the log file [env: GIT_HEAT_MAP_LOG_DIR, default: system temp dir]",
        file_okay=False,
        show_default=False,
    ),
    log_file: Optional[str] = typer.Option(
        None,
        "--log-file",
        help="Log file name [env: GIT_HEAT_MAP_LOG_FILE, default: git_heat_map.log]",
        show_default=False,
    ),
    exclude_deleted: Optional[bool] = typer.Option(
        None,
        "--exclude-deleted/--include-deleted",
        help="Skip paths that no longer exist at HEAD [env: GIT_HEAT_MAP_EXCLUDE_DELETED]",
        show_default=False,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file path (TOML format)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (DEBUG) logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
):
    """
    Find out what files/directories have changed the most in a git repository.

    Counts, for every path in the history reachable from HEAD, the number of
    commits that touched it, and prints the most changed paths as a table.

    [bold cyan]Examples:[/bold cyan]

      git-heat-map 25

      git-heat-map 10 --repo ~/src/project --plain

      GIT_HEAT_MAP_LOG=both git-heat-map 5
    """
    try:
        settings = load_config(
            config_file=config,
            use_styling=styled,
            log=log,
            log_dir=str(log_dir) if log_dir is not None else None,
            log_file=log_file,
            exclude_deleted=exclude_deleted,
        )
        logger = setup_logging(settings, verbose=verbose)

        extractor = GitHistoryExtractor(repo)
        extractor.toplevel()

        use_styling = resolve_styling(settings.use_styling, console)
        interactive = use_styling and sys.stdin.isatty()
        limit = resolve_limit(results, interactive, settings.default_results, err_console)

        result = build_heat_map(
            repo, limit, exclude_deleted=settings.exclude_deleted, extractor=extractor
        )
    except HeatMapError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(e.exit_code)

    render_heat_map(result.entries, styled=use_styling, console=console)

    logger.info("Git heat map generation complete")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
