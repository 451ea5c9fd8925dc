"""Helpers for accepting a single string or an ordered batch of strings."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["StringBatch", "as_string_batch", "is_batch"]

StringBatch = tuple[list[str], bool]


def is_batch(values: object) -> bool:
    """Return ``True`` when ``values`` is an ordered, non-text sequence."""

    return isinstance(values, Sequence) and not isinstance(values, (str, bytes, bytearray))


def as_string_batch(values: object) -> StringBatch | None:
    """Return ``(items, scalar)`` for string-typed input, else ``None``.

    A bare ``str`` becomes a one-item batch with ``scalar`` set so callers can
    hand back a single value. Sequences qualify only when every element is a
    ``str``; anything else (``None``, numbers, ``bytes``, mixed sequences) is
    not string-typed.
    """

    if isinstance(values, str):
        return [values], True
    if not is_batch(values):
        return None
    items = list(values)  # type: ignore[call-overload]
    if not all(isinstance(item, str) for item in items):
        return None
    return items, False
