"""Catalog repository backed by a JSON file exported from the shop store."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional

import jsonschema

from pos_runtime.adapters.catalog.schema import CATALOG_SCHEMA
from pos_runtime.application.errors import CatalogLoadError
from pos_runtime.domain.pricing.models import Product, ShopSettings
from pos_runtime.domain.pricing.parsing import product_from_record, shop_settings_from_record
from pos_runtime.ports.catalog_repository import CatalogRepository

logger = logging.getLogger(__name__)


def validate_catalog(data: Any) -> None:
    """
    Validate catalog data against CATALOG_SCHEMA and check product ids are unique.

    Raises:
        ValueError: if the data does not match the schema or repeats a product id
    """
    try:
        jsonschema.validate(instance=data, schema=CATALOG_SCHEMA)
    except jsonschema.ValidationError as e:
        raise ValueError(f"JSON validation failed: {e.message}") from e
    except jsonschema.SchemaError as e:
        raise ValueError(f"Schema error: {e.message}") from e

    seen: set[str] = set()
    for record in data["products"]:
        if record["id"] in seen:
            raise ValueError(f"Duplicate product id: {record['id']}")
        seen.add(record["id"])


class JsonCatalogRepository(CatalogRepository):
    """
    Reads products and shop settings from a JSON file.

    The file is re-read whenever its modification time changes, so offer edits
    made by the back office are visible on the next lookup.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._loaded_mtime: Optional[float] = None
        self._products: dict[str, Product] = {}
        self._settings = ShopSettings()

    def _load(self) -> None:
        if not self.path.exists():
            raise CatalogLoadError(f"Catalog file not found: {self.path}", path=str(self.path))

        mtime = self.path.stat().st_mtime
        if self._loaded_mtime == mtime:
            return

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise CatalogLoadError(f"Invalid JSON in catalog file {self.path}: {e}", path=str(self.path)) from e

        try:
            validate_catalog(data)
            products = [product_from_record(record) for record in data["products"]]
        except ValueError as e:
            logger.warning("Rejected catalog file %s: %s", self.path, e)
            raise CatalogLoadError(str(e), path=str(self.path)) from e

        self._products = {product.id: product for product in products}
        self._settings = shop_settings_from_record(data.get("settings"))
        self._loaded_mtime = mtime
        logger.info(
            "Loaded catalog %s: %d products, %d offers",
            self.path,
            len(self._products),
            len(self._settings.special_offers),
        )

    def get_product(self, product_id: str) -> Optional[Product]:
        self._load()
        return self._products.get(product_id)

    def list_products(self) -> Iterable[Product]:
        self._load()
        return list(self._products.values())

    def get_shop_settings(self) -> ShopSettings:
        self._load()
        return self._settings
