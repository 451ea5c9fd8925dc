"""Re-export typed models for the aadnorm SDK."""

from __future__ import annotations

from .identity import TenantIdentity

__all__ = ["TenantIdentity"]
