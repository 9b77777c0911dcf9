from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib


@dataclass
class AppConfig:
    catalog_path: str
    log_level: str = "WARNING"

    @classmethod
    def from_file(cls, path: str) -> AppConfig:
        p = Path(path)
        with p.open("rb") as f:
            cfg = tomllib.load(f)

        # Support both 'data' and 'paths' sections for backward compatibility
        data_section = cfg.get("data", {}) or cfg.get("paths", {})
        logging_section = cfg.get("logging", {})

        # Read environment variables if already present (no implicit .env loading)
        catalog = os.getenv("CATALOG_PATH") or data_section.get("catalog_path")
        if not catalog:
            raise ValueError(f"No catalog_path configured in {p} and CATALOG_PATH is unset")
        level = os.getenv("LOG_LEVEL") or logging_section.get("level", "WARNING")

        return cls(catalog_path=catalog, log_level=str(level).upper())
