from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional

from pos_runtime.domain.pricing.eligibility import check_offer_eligibility, compute_offer_discount
from pos_runtime.domain.pricing.models import DiscountOffer, PriceDetails, Product, ShopSettings

if TYPE_CHECKING:
    from pos_runtime.ports.clock import Clock


def resolve_now(clock: "Clock | None") -> datetime:
    """Sample the current time at call time, never at import time."""
    if clock is None:
        return datetime.now(timezone.utc)
    return clock.now()


def display_price(product: Product) -> float:
    """Reference price for savings: MRP when it is above the selling price."""
    if product.mrp is not None and product.mrp > product.price:
        return product.mrp
    return product.price


def calculate_product_price(
    product: Product, settings: ShopSettings, clock: "Clock | None" = None
) -> PriceDetails:
    """
    Resolve the single best offer for a product and compute its sale price.

    Offers are scanned in list order. Each eligible offer yields a candidate
    discount clamped to the product price; the strictly greatest candidate
    wins, so on equal discounts the earliest offer is kept.

    Pure: inputs are never mutated and no state survives the call. Expiry is
    checked against ``clock.now()`` (UTC now when no clock is given).
    """
    price = product.price
    best_offer: Optional[DiscountOffer] = None
    best_discount = 0.0

    offers = settings.special_offers
    if settings.special_offers_enabled and offers:
        now = resolve_now(clock)
        for offer in offers:
            if not check_offer_eligibility(offer, product, now).eligible:
                continue
            discount = compute_offer_discount(offer, price)
            if discount > best_discount:
                best_discount = discount
                best_offer = offer

    final_price = price - best_discount
    save_amount = display_price(product) - final_price

    return PriceDetails(
        original_price=price,
        final_price=final_price,
        best_offer=best_offer,
        mrp=product.mrp,
        save_amount=save_amount if save_amount > 0 else 0.0,
    )
