from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pos_runtime.ports.catalog_repository import CatalogRepository
    from pos_runtime.ports.clock import Clock

from pos_runtime.adapters.catalog.in_memory_catalog_repository import InMemoryCatalogRepository
from pos_runtime.adapters.catalog.json_catalog_repository import JsonCatalogRepository
from pos_runtime.adapters.clock.system_clock import SystemClock
from pos_runtime.application.pricing_service import PricingService
from pos_runtime.settings import Settings, get_settings


def create_adapters(settings: Settings | None = None) -> tuple["CatalogRepository", "Clock"]:
    """
    Factory function to create adapters based on the CATALOG_ADAPTER setting.

    If CATALOG_ADAPTER=json, reads the catalog from CATALOG_PATH.
    Otherwise, uses the in-memory demo catalog (default).
    """
    settings = settings or get_settings()
    clock: Clock = SystemClock()

    if settings.catalog_adapter == "json":
        if not settings.catalog_path:
            raise ValueError("Missing required setting: CATALOG_PATH")
        catalog_repo: CatalogRepository = JsonCatalogRepository(settings.catalog_path)
    else:
        catalog_repo = InMemoryCatalogRepository()

    return catalog_repo, clock


def create_pricing_service(settings: Settings | None = None) -> PricingService:
    catalog_repo, clock = create_adapters(settings)
    return PricingService(catalog_repo=catalog_repo, clock=clock)
