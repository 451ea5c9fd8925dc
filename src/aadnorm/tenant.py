"""Normalization of Azure Active Directory tenant identifiers.

A tenant can be given as a GUID, a fully qualified domain name
(``contoso.onmicrosoft.com`` or ``contoso.com``) or a bare name (``contoso``).
The rules, applied to the lowercased value, are:

1. A recognised GUID is returned in canonical form.
2. The multi-tenant alias ``common`` is returned as is.
3. A value without a ``.`` gets ``.onmicrosoft.com`` appended.
4. Anything else is already a domain name and is returned as is.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import overload

from .errors import InvalidInput
from .utils.guid import canonical_guid, is_guid
from .utils.strings import as_string_batch

__all__ = ["COMMON_TENANT", "ONMICROSOFT_SUFFIX", "normalize_tenant"]

logger = logging.getLogger(__name__)

COMMON_TENANT = "common"
ONMICROSOFT_SUFFIX = ".onmicrosoft.com"


def _normalize_one(tenant: str) -> str:
    if is_guid(tenant):
        logger.debug("Canonicalizing GUID tenant %r", tenant)
        return canonical_guid(tenant)
    if tenant == COMMON_TENANT:
        return tenant
    if "." not in tenant:
        logger.debug("Expanding bare tenant name %r", tenant)
        return tenant + ONMICROSOFT_SUFFIX
    return tenant


@overload
def normalize_tenant(values: str) -> str: ...


@overload
def normalize_tenant(values: Sequence[str]) -> list[str]: ...


def normalize_tenant(values: str | Sequence[str]) -> str | list[str]:
    """Return the normalized tenant ID or name for each of ``values``.

    Examples:
        >>> normalize_tenant("microsoft")
        'microsoft.onmicrosoft.com'
        >>> normalize_tenant("microsoft.com")
        'microsoft.com'
        >>> normalize_tenant(["Common", "{72F988BF-86F1-41AF-91AB-2D7CD011DB47}"])
        ['common', '72f988bf-86f1-41af-91ab-2d7cd011db47']

    Raises:
        InvalidInput: If ``values`` is not a string or a sequence of strings.
    """

    batch = as_string_batch(values)
    if batch is None:
        raise InvalidInput("Tenant must be a character string or a sequence of strings")
    items, scalar = batch
    normalized = [_normalize_one(item.lower()) for item in items]
    return normalized[0] if scalar else normalized
