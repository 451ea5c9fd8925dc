from __future__ import annotations

from collections.abc import Sequence
from typing import Any


class AadNormError(Exception):
    """Base error for aadnorm."""


class InvalidInput(AadNormError, TypeError):
    pass


class InvalidGuid(AadNormError, ValueError):
    def __init__(self, values: Sequence[Any]) -> None:
        shown = ", ".join(repr(value) for value in values[:5])
        if len(values) > 5:
            shown += f" (+{len(values) - 5} more)"
        super().__init__(f"Not a GUID: {shown}")
        self.values = list(values)


class InvalidVersion(AadNormError, ValueError):
    def __init__(self, value: Any) -> None:
        super().__init__(f"Invalid AAD version: {value!r} (expected 'v1.0', 'v2.0', 1 or 2)")
        self.value = value


class ConfigError(AadNormError):
    """Raised when the stored aadnorm configuration cannot be read."""
