"""Azure AD endpoint versions."""

from __future__ import annotations

from enum import IntEnum

from .errors import InvalidVersion

__all__ = ["AadVersion", "normalize_aad_version"]


class AadVersion(IntEnum):
    """The two Azure AD endpoint versions, compared as plain integers."""

    V1 = 1
    V2 = 2

    @property
    def token(self) -> str:
        return f"v{self.value}.0"


_TOKENS = {version.token: version for version in AadVersion}


def normalize_aad_version(token: str | int) -> AadVersion:
    """Resolve ``"v1.0"``, ``"v2.0"``, ``1`` or ``2`` to an :class:`AadVersion`.

    Raises:
        InvalidVersion: For any other value, including ``bool`` and numeric
            strings such as ``"1"``.
    """

    if isinstance(token, AadVersion):
        return token
    if isinstance(token, str):
        if token in _TOKENS:
            return _TOKENS[token]
        raise InvalidVersion(token)
    if isinstance(token, bool) or not isinstance(token, (int, float)):
        raise InvalidVersion(token)
    if token in (1, 2):
        return AadVersion(int(token))
    raise InvalidVersion(token)
