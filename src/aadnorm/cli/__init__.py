from __future__ import annotations

import typer
from pydantic import ValidationError

from ..cli_utils import resolve_aad_version_from_context, resolve_tenant_from_context
from ..models import TenantIdentity
from . import config, guid, tenant, version
from .common import configure_logging, emit_mapping, handle_cli_errors

app = typer.Typer(help="Azure AD identifier normalization")


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("guid", guid.app)
_register_sub_app("tenant", tenant.app)
_register_sub_app("version", version.app)
_register_sub_app("config", config.app)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (defaults to AADNORM_LOG_LEVEL or WARNING)"
    ),
) -> None:
    """Initialize shared Typer context state."""

    ctx.ensure_object(dict)
    configure_logging(log_level)


@app.command("identity")
@handle_cli_errors
def identity(
    ctx: typer.Context,
    tenant_option: str | None = typer.Option(
        None, "--tenant", help="Tenant (defaults to AADNORM_TENANT or the stored tenant)"
    ),
    app_id: str | None = typer.Option(None, "--app", help="Application (client) ID GUID"),
    aad_version: str | None = typer.Option(
        None, "--aad-version", help="v1.0, v2.0, 1 or 2 (defaults to the stored version or 1)"
    ),
) -> None:
    """Print the normalized tenant, app ID and AAD version as JSON."""

    tenant_value = resolve_tenant_from_context(ctx, tenant_option)
    version_value = resolve_aad_version_from_context(ctx, aad_version)
    try:
        resolved = TenantIdentity(tenant=tenant_value, app=app_id, aad_version=version_value)
    except ValidationError as exc:
        messages = "; ".join(str(error["msg"]) for error in exc.errors())
        raise typer.BadParameter(messages) from exc
    emit_mapping(resolved.model_dump(mode="json"))


__all__ = [
    "app",
    "config",
    "guid",
    "identity",
    "tenant",
    "version",
]
