"""GUID inspection commands."""

from __future__ import annotations

import json

import typer

from ..utils.guid import is_guid, normalize_guid
from .common import emit_values, handle_cli_errors

app = typer.Typer(help="Check and canonicalize GUIDs")


@app.command("check")
@handle_cli_errors
def guid_check(
    values: list[str] = typer.Argument(..., help="Values to test"),  # noqa: B008
    strict: bool = typer.Option(False, "--strict", help="Exit 1 if any value is not a GUID"),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON list"),
) -> None:
    """Report which values are validly formatted GUIDs."""

    flags = is_guid(values)
    if as_json:
        typer.echo(
            json.dumps([{"value": value, "guid": flag} for value, flag in zip(values, flags)])
        )
    else:
        for value, flag in zip(values, flags):
            typer.echo(f"{value}\t{'true' if flag else 'false'}")
    if strict and not all(flags):
        raise typer.Exit(1)


@app.command("normalize")
@handle_cli_errors
def guid_normalize(
    values: list[str] = typer.Argument(..., help="GUIDs in N, D, B or P format"),  # noqa: B008
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON list"),
) -> None:
    """Print the canonical lowercase hyphenated form of each GUID."""

    emit_values(normalize_guid(values), as_json=as_json)


__all__ = ["app", "guid_check", "guid_normalize"]
