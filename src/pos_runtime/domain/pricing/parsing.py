"""Conversion of catalog store records into pricing domain values.

Records use the store's camelCase keys (``categoryId``, ``specialOffers``,
``discountValue`` ...). Offers are parsed leniently: an entry that cannot be
interpreted is dropped with a warning instead of failing the whole list.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Iterable, Mapping, Optional

from pos_runtime.domain.pricing.models import (
    AppliesTo,
    DiscountOffer,
    DiscountType,
    PriceDetails,
    Product,
    ShopSettings,
)

logger = logging.getLogger(__name__)


def parse_expiry(value: Any) -> Optional[datetime]:
    """
    Parse an offer expiry.

    ``None`` and blank strings mean "no expiry". Date-only values expire at
    midnight UTC; naive datetimes are read as UTC.

    Raises:
        ValueError: if the value is not a recognisable date or datetime
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    else:
        raise ValueError(f"Unsupported expiry value: {value!r}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _as_number(value: Any, field_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{field_name} must be a number, got {value!r}")
    return value


def product_from_record(record: Mapping[str, Any]) -> Product:
    """
    Build a Product from a store record.

    Raises:
        ValueError: if ``id`` or ``price`` is missing or invalid
    """
    product_id = record.get("id")
    if not product_id:
        raise ValueError("Product record is missing 'id'")
    price = _as_number(record.get("price"), "price")
    if price < 0:
        raise ValueError(f"Product {product_id} has a negative price")

    mrp = record.get("mrp")
    if mrp is not None:
        mrp = _as_number(mrp, "mrp")

    return Product.new(
        product_id=str(product_id),
        price=price,
        category_id=str(record.get("categoryId") or ""),
        mrp=mrp,
        name=record.get("name", ""),
        stock=int(record.get("stock", 0)),
        unit=record.get("unit", "pcs"),
        purchase_price=record.get("purchasePrice", 0.0),
        is_deleted=bool(record.get("isDeleted", False)),
    )


def offer_from_record(record: Any) -> Optional[DiscountOffer]:
    """Build a DiscountOffer from a store record, or return None when it is malformed."""
    if not isinstance(record, Mapping):
        logger.warning("Skipping offer that is not an object: %r", record)
        return None

    offer_id = record.get("id", "")
    try:
        discount_type = DiscountType(record.get("discountType"))
        applies_to = AppliesTo(record.get("appliesTo"))
        discount_value = _as_number(record.get("discountValue"), "discountValue")
        expiry_date = parse_expiry(record.get("expiryDate"))
    except ValueError as e:
        logger.warning("Skipping malformed offer %s: %s", offer_id or "<no id>", e)
        return None

    target_ids = record.get("targetIds") or []
    if not isinstance(target_ids, (list, tuple)):
        logger.warning("Skipping malformed offer %s: targetIds is not a list", offer_id or "<no id>")
        return None

    return DiscountOffer.new(
        offer_id=str(offer_id),
        name=record.get("name", ""),
        discount_type=discount_type,
        discount_value=discount_value,
        applies_to=applies_to,
        target_ids=[str(t) for t in target_ids],
        enabled=bool(record.get("enabled", False)),
        expiry_date=expiry_date,
    )


def offers_from_records(records: Iterable[Any] | None) -> list[DiscountOffer]:
    offers: list[DiscountOffer] = []
    for record in records or []:
        offer = offer_from_record(record)
        if offer is not None:
            offers.append(offer)
    return offers


def shop_settings_from_record(record: Mapping[str, Any] | None) -> ShopSettings:
    """An absent ``specialOffersEnabled`` flag counts as disabled."""
    if not record:
        return ShopSettings()
    return ShopSettings.new(
        special_offers_enabled=bool(record.get("specialOffersEnabled", False)),
        special_offers=offers_from_records(record.get("specialOffers")),
    )


def offer_to_record(offer: DiscountOffer) -> dict[str, Any]:
    return {
        "id": offer.id,
        "name": offer.name,
        "discountType": DiscountType(offer.discount_type).value,
        "discountValue": offer.discount_value,
        "appliesTo": AppliesTo(offer.applies_to).value,
        "targetIds": list(offer.target_ids),
        "enabled": offer.enabled,
        "expiryDate": offer.expiry_date.isoformat() if offer.expiry_date else None,
    }


def price_details_to_record(details: PriceDetails) -> dict[str, Any]:
    return {
        "originalPrice": details.original_price,
        "finalPrice": details.final_price,
        "bestOffer": offer_to_record(details.best_offer) if details.best_offer else None,
        "mrp": details.mrp,
        "saveAmount": details.save_amount,
    }
