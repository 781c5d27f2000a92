"""Name matching CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import structlog
import typer

from namematch.cli.context import CLIContext
from namematch.cli.formatters import (
    print_did_you_mean,
    print_distance,
    print_error,
    print_info,
    print_warning,
)
from namematch.infrastructure.similarity import (
    edit_distance,
    edit_distance_with_substrings,
)
from namematch.modules.matcher import find_best_match_impl

logger = structlog.get_logger()


def distance(
    a: Annotated[str, typer.Argument(help="First string")],
    b: Annotated[str, typer.Argument(help="Second string")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-l", min=0, help="Give up above this distance"),
    ] = None,
    substrings: Annotated[
        bool,
        typer.Option("--substrings", "-s", help="Use the substring-aware score"),
    ] = False,
) -> None:
    """Show the edit distance between two strings.

    \b
    Examples:
        namematch distance kitten sitting
        namematch distance capture force_capture --substrings
        namematch distance foo fooooo --limit 2
    """
    measure = edit_distance_with_substrings if substrings else edit_distance
    label = "score" if substrings else "distance"

    result = measure(a, b) if limit is None else measure(a, b, limit)
    if result is None:
        print_error(f"The {label} between '{a}' and '{b}' exceeds {limit}")
        raise typer.Exit(code=1)

    print_distance(a, b, result, label=label)


def suggest(
    lookup: Annotated[str, typer.Argument(help="The name to look up")],
    candidates: Annotated[
        list[str] | None,
        typer.Argument(help="Known names, in order of preference"),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option(
            "--file",
            "-f",
            help="Read known names from a file, one per line",
            dir_okay=False,
        ),
    ] = None,
    max_distance: Annotated[
        int | None,
        typer.Option(
            "--max-distance", "-d", min=0, help="Largest edit distance to accept"
        ),
    ] = None,
    substrings: Annotated[
        bool,
        typer.Option("--substrings", "-s", help="Rank with the substring-aware score"),
    ] = False,
    no_substrings: Annotated[
        bool,
        typer.Option(
            "--no-substrings",
            help="Use plain edit distance even if substrings are enabled in config",
        ),
    ] = False,
) -> None:
    """Suggest the known name closest to LOOKUP.

    \b
    Examples:
        namematch suggest kakfa kafka redis mysql
        namematch suggest bar_foo foo_bar
        namematch suggest forced_capture --file names.txt --substrings
    """
    config = CLIContext.get().get_config()

    names = list(candidates or [])
    if file is not None:
        try:
            file_names = _read_names(file)
        except OSError as e:
            print_error(f"Cannot read candidates from {file}: {e}")
            raise typer.Exit(code=1) from e
        if not file_names:
            print_warning(f"No names found in {file}")
        names.extend(file_names)

    if not names:
        print_error("No candidate names given")
        raise typer.Exit(code=1)

    if max_distance is None:
        max_distance = config.max_distance
    if substrings and no_substrings:
        print_error("Cannot use both --substrings and --no-substrings")
        raise typer.Exit(code=1)
    use_substrings = substrings or (config.use_substrings and not no_substrings)

    logger.debug(
        "suggest_started",
        lookup=lookup,
        candidates=len(names),
        max_distance=max_distance,
        substrings=use_substrings,
    )

    best = find_best_match_impl(use_substrings, names, lookup, max_distance)
    if best is None:
        print_error(f"No known name is close to '{lookup}'")
        raise typer.Exit(code=1)

    if best == lookup:
        print_info(f"'{lookup}' is a known name")
        return

    print_did_you_mean([best])


def _read_names(path: Path) -> list[str]:
    """Read one name per line, skipping blank lines."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip()]
