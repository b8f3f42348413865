from __future__ import annotations

from typing import Iterable, List, Optional

from pos_runtime.domain.pricing.models import (
    AppliesTo,
    DiscountOffer,
    DiscountType,
    Product,
    ShopSettings,
)
from pos_runtime.ports.catalog_repository import CatalogRepository


def demo_products() -> List[Product]:
    return [
        Product.new(
            "prod_b550",
            price=18500,
            mrp=19500,
            category_id="cat_motherboard",
            name="B550 Motherboard",
            stock=8,
            purchase_price=16800,
        ),
        Product.new(
            "prod_r5_5600",
            price=15000,
            category_id="cat_processor",
            name="Ryzen 5 5600",
            stock=12,
            purchase_price=13900,
        ),
        Product.new(
            "prod_chips",
            price=60,
            category_id="cat_snacks",
            name="Potato Chips",
            stock=40,
            unit="pack",
            purchase_price=45,
        ),
        Product.new(
            "prod_milk", price=90, mrp=95, category_id="cat_dairy_eggs", name="Milk 1L", stock=0, purchase_price=80
        ),
    ]


def demo_settings() -> ShopSettings:
    return ShopSettings.new(
        special_offers_enabled=True,
        special_offers=[
            DiscountOffer.new(
                "offer_1",
                name="Motherboard Mania",
                discount_type=DiscountType.PERCENTAGE,
                discount_value=10,
                applies_to=AppliesTo.CATEGORIES,
                target_ids=["cat_motherboard"],
            ),
            DiscountOffer.new(
                "offer_2",
                name="Staff Discount on Snacks",
                discount_type=DiscountType.FIXED,
                discount_value=50,
                applies_to=AppliesTo.PRODUCTS,
                target_ids=[],
            ),
        ],
    )


class InMemoryCatalogRepository(CatalogRepository):
    def __init__(
        self, products: Optional[List[Product]] = None, settings: Optional[ShopSettings] = None
    ) -> None:
        # Provide a minimal demo catalog when none supplied
        self.products = products if products is not None else demo_products()
        self.settings = settings if settings is not None else demo_settings()

    def get_product(self, product_id: str) -> Optional[Product]:
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def list_products(self) -> Iterable[Product]:
        return list(self.products)

    def get_shop_settings(self) -> ShopSettings:
        return self.settings

    def replace_settings(self, settings: ShopSettings) -> None:
        """Swap in an edited offer configuration."""
        self.settings = settings
