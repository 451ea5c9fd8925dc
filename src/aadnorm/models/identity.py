"""Typed model for the identifiers that precede an Azure AD token request."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..tenant import normalize_tenant
from ..utils.guid import normalize_guid
from ..version import AadVersion, normalize_aad_version


class TenantIdentity(BaseModel):
    """Tenant, app (client) ID and endpoint version in normalized form."""

    tenant: str
    app: str | None = Field(default=None, alias="appId")
    aad_version: AadVersion = Field(default=AadVersion.V1, alias="aadVersion")

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @field_validator("tenant")
    @classmethod
    def _normalize_tenant(cls, value: str) -> str:
        return normalize_tenant(value)

    @field_validator("app")
    @classmethod
    def _normalize_app(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return normalize_guid(value)

    @field_validator("aad_version", mode="before")
    @classmethod
    def _normalize_version(cls, value: Any) -> AadVersion:
        return normalize_aad_version(value)

    @property
    def version_token(self) -> str:
        return self.aad_version.token


__all__ = ["TenantIdentity"]
