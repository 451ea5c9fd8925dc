"""AAD version commands."""

from __future__ import annotations

import typer

from ..cli_utils import parse_version_token
from ..version import normalize_aad_version
from .common import handle_cli_errors

app = typer.Typer(help="Resolve Azure AD endpoint versions")


@app.command("normalize")
@handle_cli_errors
def version_normalize(
    token: str = typer.Argument(..., help="v1.0, v2.0, 1 or 2"),
) -> None:
    """Print the numeric code for an AAD version token."""

    version = normalize_aad_version(parse_version_token(token))
    typer.echo(str(int(version)))


__all__ = ["app", "version_normalize"]
