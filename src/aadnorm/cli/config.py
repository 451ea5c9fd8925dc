"""Commands for inspecting and changing stored aadnorm defaults."""

from __future__ import annotations

from dataclasses import asdict

import typer
from rich import print

from ..cli_utils import parse_version_token
from ..config import ConfigStore
from .common import emit_mapping, handle_cli_errors

app = typer.Typer(help="Stored defaults")


@app.command("show")
@handle_cli_errors
def config_show() -> None:
    """Display the stored defaults as JSON."""

    emit_mapping(asdict(ConfigStore().load()))


@app.command("set-tenant")
@handle_cli_errors
def config_set_tenant(tenant: str = typer.Argument(..., help="Default tenant")) -> None:
    """Normalize and persist a default tenant for subsequent commands."""

    cfg = ConfigStore().set_default_tenant(tenant)
    print(f"Default tenant set to {cfg.default_tenant}")


@app.command("set-version")
@handle_cli_errors
def config_set_version(token: str = typer.Argument(..., help="v1.0, v2.0, 1 or 2")) -> None:
    """Persist a default AAD version."""

    cfg = ConfigStore().set_aad_version(parse_version_token(token))
    print(f"Default AAD version set to {cfg.aad_version}")


@app.command("clear")
@handle_cli_errors
def config_clear() -> None:
    """Remove all stored defaults."""

    ConfigStore().clear()
    print("Stored defaults cleared")


__all__ = [
    "app",
    "config_show",
    "config_set_tenant",
    "config_set_version",
    "config_clear",
]
