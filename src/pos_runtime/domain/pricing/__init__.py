from __future__ import annotations

from pos_runtime.domain.pricing.eligibility import (
    OfferEligibility,
    check_offer_eligibility,
    compute_offer_discount,
    is_offer_expired,
    matches_target,
)
from pos_runtime.domain.pricing.evaluator import calculate_product_price, display_price
from pos_runtime.domain.pricing.explain import OfferEvaluation, explain_offers
from pos_runtime.domain.pricing.models import (
    AppliesTo,
    DiscountOffer,
    DiscountType,
    PriceDetails,
    Product,
    ShopSettings,
)

__all__ = [
    "AppliesTo",
    "DiscountOffer",
    "DiscountType",
    "PriceDetails",
    "Product",
    "ShopSettings",
    "OfferEligibility",
    "OfferEvaluation",
    "calculate_product_price",
    "check_offer_eligibility",
    "compute_offer_discount",
    "display_price",
    "explain_offers",
    "is_offer_expired",
    "matches_target",
]
