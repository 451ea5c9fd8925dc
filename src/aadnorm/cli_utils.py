from __future__ import annotations

import os

import typer

from .config import ConfigData, ConfigStore
from .version import AadVersion, normalize_aad_version

TENANT_ENV = "AADNORM_TENANT"
AAD_VERSION_ENV = "AADNORM_AAD_VERSION"


def _ensure_config(config: ConfigData | None) -> ConfigData:
    return config or ConfigStore().load()


def parse_version_token(raw: str) -> str | int:
    """Turn command-line digits into a number; leave ``v1.0``-style tokens alone."""

    stripped = raw.strip()
    if stripped.isascii() and stripped.isdigit():
        return int(stripped)
    return stripped


def resolve_tenant(option_value: str | None, *, config: ConfigData | None = None) -> str:
    """Return the effective tenant for a CLI command."""

    if option_value:
        return option_value

    env_tenant = os.getenv(TENANT_ENV)
    if env_tenant:
        return env_tenant

    cfg = _ensure_config(config)
    if cfg.default_tenant:
        return cfg.default_tenant

    raise typer.BadParameter(
        f"Tenant is not configured. Pass a tenant, export {TENANT_ENV}, or run "
        "`aadnorm config set-tenant <tenant>` to persist a default."
    )


def resolve_aad_version(
    option_value: str | None, *, config: ConfigData | None = None
) -> AadVersion:
    """Return the AAD version for a CLI command, defaulting to v1.0."""

    if option_value:
        return normalize_aad_version(parse_version_token(option_value))

    env_version = os.getenv(AAD_VERSION_ENV)
    if env_version:
        return normalize_aad_version(parse_version_token(env_version))

    cfg = _ensure_config(config)
    if cfg.aad_version is not None:
        return normalize_aad_version(cfg.aad_version)

    return AadVersion.V1


def get_config_from_context(ctx: typer.Context, *, store: ConfigStore | None = None) -> ConfigData:
    """Return a cached :class:`ConfigData` instance stored on ``ctx``."""

    ctx.ensure_object(dict)
    existing = ctx.obj.get("config") if ctx.obj else None
    if isinstance(existing, ConfigData):
        return existing

    cfg_store = store or ConfigStore()
    cfg = cfg_store.load()
    ctx.obj["config"] = cfg
    return cfg


def resolve_tenant_from_context(
    ctx: typer.Context, option_value: str | None, *, store: ConfigStore | None = None
) -> str:
    """Resolve the tenant using cached CLI configuration."""

    cfg = get_config_from_context(ctx, store=store)
    return resolve_tenant(option_value, config=cfg)


def resolve_aad_version_from_context(
    ctx: typer.Context, option_value: str | None, *, store: ConfigStore | None = None
) -> AadVersion:
    """Resolve the AAD version using cached CLI configuration."""

    cfg = get_config_from_context(ctx, store=store)
    return resolve_aad_version(option_value, config=cfg)
