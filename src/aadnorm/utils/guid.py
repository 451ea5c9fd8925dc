"""Utilities for recognising and canonicalising GUID values.

Four spellings are accepted, matching the .NET ``Guid.Parse`` "N", "D", "B"
and "P" formats::

    72f988bf86f141af91ab2d7cd011db47          # N
    72f988bf-86f1-41af-91ab-2d7cd011db47      # D
    {72f988bf-86f1-41af-91ab-2d7cd011db47}    # B
    (72f988bf-86f1-41af-91ab-2d7cd011db47)    # P

All of them canonicalise to the lowercase "D" form.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from typing import overload

from ..errors import InvalidGuid
from .strings import as_string_batch, is_batch

__all__ = ["GUID_PATTERNS", "is_guid", "normalize_guid", "canonical_guid"]

logger = logging.getLogger(__name__)

_HYPHENATED = r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"

GUID_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[0-9a-f]{32}"),
    re.compile(_HYPHENATED),
    re.compile(r"\{" + _HYPHENATED + r"\}"),
    re.compile(r"\(" + _HYPHENATED + r"\)"),
)

_GROUP_OFFSETS = (0, 8, 12, 16, 20, 32)


def _matches_guid(value: str) -> bool:
    candidate = value.lower()
    return any(pattern.fullmatch(candidate) for pattern in GUID_PATTERNS)


def canonical_guid(value: str) -> str:
    """Regroup an already validated GUID into lowercase 8-4-4-4-12 form."""

    digits = value.lower()
    if digits[:1] in ("{", "("):
        digits = digits[1:-1]
    digits = digits.replace("-", "")
    return "-".join(
        digits[start:end] for start, end in zip(_GROUP_OFFSETS, _GROUP_OFFSETS[1:])
    )


@overload
def is_guid(values: str) -> bool: ...


@overload
def is_guid(values: Sequence[str]) -> list[bool]: ...


@overload
def is_guid(values: object) -> bool | list[bool]: ...


def is_guid(values: object) -> bool | list[bool]:
    """Report which of ``values`` are validly formatted GUIDs.

    Args:
        values: A string, or a sequence of strings.

    Returns:
        A ``bool`` for a single string, otherwise a list of booleans parallel
        to ``values``. Input that is not string-typed is never an error: it is
        reported as ``False`` (for every element, when a sequence was given).
    """

    batch = as_string_batch(values)
    if batch is None:
        if is_batch(values):
            return [False] * len(values)  # type: ignore[arg-type]
        return False
    items, scalar = batch
    flags = [_matches_guid(item) for item in items]
    return flags[0] if scalar else flags


@overload
def normalize_guid(values: str) -> str: ...


@overload
def normalize_guid(values: Sequence[str]) -> list[str]: ...


def normalize_guid(values: str | Sequence[str]) -> str | list[str]:
    """Return the canonical form of every GUID in ``values``.

    The whole batch is validated before anything is converted; a single
    unrecognised value rejects the batch.

    Raises:
        InvalidGuid: If any value is not a validly formatted GUID.
    """

    batch = as_string_batch(values)
    if batch is None:
        raise InvalidGuid(list(values) if is_batch(values) else [values])  # type: ignore[arg-type]
    items, scalar = batch
    rejected = [item for item in items if not _matches_guid(item)]
    if rejected:
        logger.debug("Rejected %d of %d GUID values", len(rejected), len(items))
        raise InvalidGuid(rejected)
    canonical = [canonical_guid(item) for item in items]
    return canonical[0] if scalar else canonical
