from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from pos_runtime.domain.pricing import rules
from pos_runtime.domain.pricing.models import AppliesTo, DiscountOffer, DiscountType, Product


@dataclass(frozen=True)
class OfferEligibility:
    """Result of the eligibility filter for one offer against one product."""

    eligible: bool
    reason: Optional[str] = None  # first rejection reason, None when eligible


def _as_applies_to(value: object) -> Optional[AppliesTo]:
    try:
        return AppliesTo(value)
    except ValueError:
        return None


def _as_discount_type(value: object) -> Optional[DiscountType]:
    try:
        return DiscountType(value)
    except ValueError:
        return None


def _as_magnitude(value: object) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if math.isnan(value):
        return None
    return float(value)


def _as_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_offer_expired(offer: DiscountOffer, now: datetime) -> bool:
    """Expired only once ``expiry_date`` is strictly earlier than ``now``."""
    if offer.expiry_date is None:
        return False
    return _as_aware(offer.expiry_date) < _as_aware(now)


def matches_target(offer: DiscountOffer, product: Product) -> bool:
    applies_to = _as_applies_to(offer.applies_to)
    if applies_to is None:
        return False
    target_ids = offer.target_ids or ()
    if applies_to is AppliesTo.ALL:
        return True
    if applies_to is AppliesTo.CATEGORIES:
        return product.category_id in target_ids
    if applies_to is AppliesTo.PRODUCTS:
        return product.id in target_ids
    raise AssertionError(f"Unhandled applies_to: {applies_to!r}")


def is_malformed(offer: object) -> bool:
    """True when the offer cannot be interpreted at all."""
    if not isinstance(offer, DiscountOffer):
        return True
    if _as_applies_to(offer.applies_to) is None:
        return True
    if _as_discount_type(offer.discount_type) is None:
        return True
    if _as_magnitude(offer.discount_value) is None:
        return True
    if offer.expiry_date is not None and not isinstance(offer.expiry_date, datetime):
        return True
    if offer.target_ids is not None and not isinstance(offer.target_ids, (tuple, list, set, frozenset)):
        return True
    return False


def check_offer_eligibility(offer: DiscountOffer, product: Product, now: datetime) -> OfferEligibility:
    """
    Apply the eligibility filter in order: shape, enabled flag, expiry, target scope.

    Never raises; malformed offers are reported as ineligible.
    """
    if is_malformed(offer):
        return OfferEligibility(eligible=False, reason=rules.MALFORMED_OFFER)
    if not offer.enabled:
        return OfferEligibility(eligible=False, reason=rules.OFFER_DISABLED)
    if is_offer_expired(offer, now):
        return OfferEligibility(eligible=False, reason=rules.OFFER_EXPIRED)
    if not matches_target(offer, product):
        if AppliesTo(offer.applies_to) is AppliesTo.CATEGORIES:
            return OfferEligibility(eligible=False, reason=rules.CATEGORY_NOT_TARGETED)
        return OfferEligibility(eligible=False, reason=rules.PRODUCT_NOT_TARGETED)
    return OfferEligibility(eligible=True)


def compute_offer_discount(offer: DiscountOffer, price: float) -> float:
    """
    Candidate discount of ``offer`` on ``price``, clamped to ``[0, price]``.

    Percentage offers take ``discount_value`` percent of the price; fixed
    offers take ``discount_value`` as an absolute amount.
    """
    discount_type = _as_discount_type(offer.discount_type)
    value = _as_magnitude(offer.discount_value)
    if discount_type is None or value is None:
        return 0.0

    if discount_type is DiscountType.PERCENTAGE:
        discount = price * (value / 100)
    elif discount_type is DiscountType.FIXED:
        discount = value
    else:
        raise AssertionError(f"Unhandled discount_type: {discount_type!r}")

    if price - discount < 0:
        discount = price
    if discount < 0:
        discount = 0.0
    return discount
