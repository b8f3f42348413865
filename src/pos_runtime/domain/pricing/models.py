from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from pos_runtime.domain.common.ids import CategoryId, OfferId, ProductId


class AppliesTo(str, Enum):
    """Scope an offer is applied to."""

    ALL = "all"
    CATEGORIES = "categories"
    PRODUCTS = "products"


class DiscountType(str, Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Product:
    """Catalog product as supplied by the inventory store. Read-only here."""

    id: ProductId
    price: float
    category_id: CategoryId
    mrp: Optional[float] = None
    name: str = ""
    stock: int = 0
    unit: str = "pcs"
    purchase_price: float = 0.0
    is_deleted: bool = False

    @staticmethod
    def new(
        product_id: str,
        price: float,
        category_id: str,
        mrp: Optional[float] = None,
        name: str = "",
        stock: int = 0,
        unit: str = "pcs",
        purchase_price: float = 0.0,
        is_deleted: bool = False,
    ) -> "Product":
        return Product(
            id=ProductId(product_id),
            price=price,
            category_id=CategoryId(category_id),
            mrp=mrp,
            name=name,
            stock=stock,
            unit=unit,
            purchase_price=purchase_price,
            is_deleted=is_deleted,
        )


@dataclass(frozen=True)
class DiscountOffer:
    """A promotional offer from the admin-edited offer list."""

    id: OfferId
    name: str
    discount_type: DiscountType
    discount_value: float
    applies_to: AppliesTo
    target_ids: tuple[str, ...] = ()  # category or product ids, depending on applies_to
    enabled: bool = True
    expiry_date: Optional[datetime] = None

    @staticmethod
    def new(
        offer_id: str,
        discount_type: DiscountType | str,
        discount_value: float,
        applies_to: AppliesTo | str = AppliesTo.ALL,
        target_ids: Iterable[str] | None = None,
        enabled: bool = True,
        expiry_date: Optional[datetime] = None,
        name: str = "",
    ) -> "DiscountOffer":
        return DiscountOffer(
            id=OfferId(offer_id),
            name=name,
            discount_type=DiscountType(discount_type),
            discount_value=discount_value,
            applies_to=AppliesTo(applies_to),
            target_ids=tuple(target_ids or ()),
            enabled=enabled,
            expiry_date=expiry_date,
        )


@dataclass(frozen=True)
class ShopSettings:
    """Snapshot of the shop-wide offer configuration."""

    special_offers_enabled: bool = False
    special_offers: tuple[DiscountOffer, ...] = field(default_factory=tuple)

    @staticmethod
    def new(
        special_offers_enabled: bool = False,
        special_offers: Iterable[DiscountOffer] | None = None,
    ) -> "ShopSettings":
        return ShopSettings(
            special_offers_enabled=special_offers_enabled,
            special_offers=tuple(special_offers or ()),
        )


@dataclass(frozen=True)
class PriceDetails:
    """Resolved price of a product under the current offers."""

    original_price: float
    final_price: float
    best_offer: Optional[DiscountOffer]
    mrp: Optional[float]
    save_amount: float

    @property
    def discount_amount(self) -> float:
        return self.original_price - self.final_price
