from __future__ import annotations

# ruff: noqa: S101
import pytest

from aadnorm.errors import InvalidVersion
from aadnorm.version import AadVersion, normalize_aad_version


@pytest.mark.parametrize(
    ("token", "expected"),
    [
        ("v1.0", 1),
        ("v2.0", 2),
        (1, 1),
        (2, 2),
        (2.0, 2),
        (AadVersion.V2, 2),
    ],
)
def test_normalize_aad_version_accepts_known_tokens(token: object, expected: int) -> None:
    result = normalize_aad_version(token)  # type: ignore[arg-type]
    assert result == expected
    assert isinstance(result, AadVersion)


@pytest.mark.parametrize("token", [3, 0, 1.5, "1", "v3.0", "V1.0", "", None, True, [1]])
def test_normalize_aad_version_rejects_other_values(token: object) -> None:
    with pytest.raises(InvalidVersion) as exc:
        normalize_aad_version(token)  # type: ignore[arg-type]
    assert exc.value.value == token


def test_version_token_round_trips() -> None:
    assert AadVersion.V1.token == "v1.0"
    assert normalize_aad_version(AadVersion.V2.token) is AadVersion.V2
