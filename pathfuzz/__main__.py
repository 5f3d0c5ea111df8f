from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from pathfuzz import __version__
from pathfuzz.models import RankedMatch
from pathfuzz.ranking import DEFAULT_LIMIT, find_matches
from pathfuzz.rendering import format_match_line

__all__ = [
    "RankedMatch",
    "cli",
    "find_matches",
    "run",
]

logger = logging.getLogger("pathfuzz")


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(f"pathfuzz {__version__}")
    raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


cli = typer.Typer(add_completion=False)


@cli.command(help="Find files whose paths fuzzily match PATTERN, best matches first.")
def run(
    pattern: str = typer.Argument(
        ...,
        help="Pattern to match, one fuzzy component per path segment. "
        "Prefix a component with ^ or end it with $ to anchor it.",
    ),
    directories: list[str] | None = typer.Argument(
        None,
        help="Directories to search. Defaults to the current directory.",
        show_default=False,
    ),
    limit: int = typer.Option(
        DEFAULT_LIMIT,
        "--limit",
        "-l",
        min=1,
        envvar="PATHFUZZ_LIMIT",
        help="Maximum number of matches to print.",
    ),
    exact: bool = typer.Option(
        False,
        "--exact",
        "-x",
        envvar="PATHFUZZ_EXACT",
        help="Require every pattern component to equal its path component.",
    ),
    scores: bool = typer.Option(
        False,
        "--scores",
        help="Print the score in front of each match.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log skipped directories and match counts to stderr.",
    ),
    _version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    _configure_logging(verbose)
    roots = directories or ["."]
    logger.debug("Searching %s for %r", ", ".join(roots), pattern)

    matches = find_matches(pattern, roots, limit=limit, exact=exact)
    logger.debug("%d match(es) shown", len(matches))

    console = Console(soft_wrap=True, highlight=False, emoji=False)
    for match in matches:
        console.print(format_match_line(match, show_score=scores))


if __name__ == "__main__":
    cli()
