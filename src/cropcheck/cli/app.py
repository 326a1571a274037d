"""Root Typer app with global options."""

from __future__ import annotations

from typing import Optional

import typer

app = typer.Typer(
    name="cropcheck",
    help="Produce photo quality validation for automated grading.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        from cropcheck import __version__

        typer.echo(f"cropcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version."
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Package log level"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Emit logs as JSON lines"),
) -> None:
    """cropcheck — is this produce photo good enough to grade?"""
    from cropcheck.logging_config import configure_logging

    configure_logging(log_level, json_logs)


# Import and register commands
from cropcheck.cli.validate import check_resolution, validate  # noqa: E402
from cropcheck.cli.suggest import suggest_cmd  # noqa: E402

app.command()(validate)
app.command(name="check-resolution")(check_resolution)
app.command(name="suggest")(suggest_cmd)
