from __future__ import annotations

import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner


# Ensure the repository-local ``src`` directory is importable when the project is
# not installed as a package. Pytest executes from the repository root where the
# ``src`` layout is not on ``sys.path`` by default, so the aadnorm package would
# otherwise be missing.
SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


@pytest.fixture
def config_home(monkeypatch, tmp_path):
    """Point the config store at an empty temporary home."""

    import aadnorm.config as config_module

    monkeypatch.setenv("AADNORM_HOME", str(tmp_path))
    monkeypatch.setattr(config_module, "AADNORM_DIR", str(tmp_path), raising=False)
    monkeypatch.setattr(config_module, "CONFIG_PATH", str(tmp_path / "config.json"), raising=False)
    monkeypatch.delenv("AADNORM_TENANT", raising=False)
    monkeypatch.delenv("AADNORM_AAD_VERSION", raising=False)
    return tmp_path


@pytest.fixture
def cli_runner(config_home):
    """Provide a CLI runner backed by an isolated config home."""

    return CliRunner()
