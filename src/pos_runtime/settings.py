from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime settings sourced from environment variables."""

    log_level: str = "INFO"
    # Catalog adapter: "memory" (demo data) or "json"
    catalog_adapter: str = "memory"
    catalog_path: Optional[str] = None
    # Cart defaults
    default_vat_percentage: float = 0.0
    currency: str = "BDT"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            log_level=os.getenv("LOG_LEVEL", cls.log_level),
            catalog_adapter=os.getenv("CATALOG_ADAPTER", cls.catalog_adapter).lower(),
            catalog_path=os.getenv("CATALOG_PATH"),
            default_vat_percentage=float(os.getenv("DEFAULT_VAT_PERCENTAGE", cls.default_vat_percentage)),
            currency=os.getenv("CURRENCY", cls.currency),
        )


def get_settings(_cache: dict[str, Settings] = {}) -> Settings:
    """Provide a simple cached settings object."""

    if "settings" not in _cache:
        _cache["settings"] = Settings.from_env()
    return _cache["settings"]
