"""Main CLI application."""

from __future__ import annotations

import typer

from namematch import __version__
from namematch.cli import match
from namematch.cli.context import CLIContext
from namematch.infrastructure.logging import configure_logging

# Main application
app = typer.Typer(
    name="namematch",
    help="Find the closest known name for a mistyped one.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("distance")(match.distance)
app.command("suggest")(match.suggest)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"namematch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(  # noqa: ARG001 - handled by callback
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print results.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit logs as JSON.",
    ),
) -> None:
    """namematch: "did you mean" suggestions for mistyped names.

    Compare names by edit distance and pick the best known match.
    """
    ctx = CLIContext.get()
    ctx.verbose = verbose
    ctx.quiet = quiet

    # Configure before loading config so its warnings land on stderr
    configure_logging(debug=verbose, json_logs=json_logs)
    if not json_logs and ctx.get_config().json_logs:
        configure_logging(debug=verbose, json_logs=True)
