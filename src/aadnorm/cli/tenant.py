"""Tenant normalization commands."""

from __future__ import annotations

import typer

from ..cli_utils import resolve_tenant_from_context
from ..tenant import normalize_tenant
from .common import emit_values, handle_cli_errors

app = typer.Typer(help="Normalize Azure AD tenants")


@app.command("normalize")
@handle_cli_errors
def tenant_normalize(
    ctx: typer.Context,
    tenants: list[str] | None = typer.Argument(  # noqa: B008
        None, help="Tenant GUIDs, domain names or bare names (defaults to the configured tenant)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Emit a JSON list"),
) -> None:
    """Print the normalized form of each tenant."""

    if not tenants:
        tenants = [resolve_tenant_from_context(ctx, None)]
    emit_values(normalize_tenant(tenants), as_json=as_json)


__all__ = ["app", "tenant_normalize"]
