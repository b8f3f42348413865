from __future__ import annotations

from typing import Iterable, Optional, Protocol

from pos_runtime.domain.pricing.models import Product, ShopSettings


class CatalogRepository(Protocol):
    def get_product(self, product_id: str) -> Optional[Product]: ...

    def list_products(self) -> Iterable[Product]: ...

    def get_shop_settings(self) -> ShopSettings: ...
