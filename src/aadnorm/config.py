from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .tenant import normalize_tenant
from .version import normalize_aad_version

logger = logging.getLogger(__name__)

AADNORM_DIR = os.path.expanduser(os.getenv("AADNORM_HOME", "~/.aadnorm"))
CONFIG_PATH = os.path.join(AADNORM_DIR, "config.json")


@dataclass
class ConfigData:
    default_tenant: str | None = None
    aad_version: int | None = None


class ConfigStore:
    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else Path(CONFIG_PATH)

    def _ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                raw = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Config file {self.path} is not valid UTF-8 JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file {self.path} must contain a JSON object")
        return raw

    def _write(self, data: dict[str, Any]) -> None:
        self._ensure()
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        known = {key: raw.get(key) for key in ("default_tenant", "aad_version")}
        ignored = sorted(set(raw) - set(known))
        if ignored:
            logger.debug("Ignoring unknown config keys: %s", ", ".join(ignored))
        return ConfigData(**known)

    def save(self, cfg: ConfigData) -> None:
        self._write(asdict(cfg))

    def set_default_tenant(self, tenant: str) -> ConfigData:
        """Persist the normalized form of ``tenant`` as the default tenant."""

        cfg = self.load()
        cfg.default_tenant = normalize_tenant(tenant)
        self.save(cfg)
        return cfg

    def set_aad_version(self, token: str | int) -> ConfigData:
        """Persist the numeric code of the AAD version ``token``."""

        cfg = self.load()
        cfg.aad_version = int(normalize_aad_version(token))
        self.save(cfg)
        return cfg

    def clear(self) -> ConfigData:
        cfg = ConfigData()
        self.save(cfg)
        return cfg
