"""cropcheck suggest — localized remediation text lookup."""

from __future__ import annotations

import typer

from cropcheck.core.localizer import DEFAULT_LANGUAGE, suggest


def suggest_cmd(
    issue_type: str = typer.Argument(..., help="Issue type, e.g. TOO_DARK"),
    lang: str = typer.Option(DEFAULT_LANGUAGE, "-l", "--lang", help="Language code"),
) -> None:
    """Print the remediation suggestion for an issue type."""
    typer.echo(suggest(issue_type.upper(), lang))
