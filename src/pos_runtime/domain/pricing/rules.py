from __future__ import annotations

# Offer rejection reasons
OFFER_DISABLED = "OFFER_DISABLED"
OFFER_EXPIRED = "OFFER_EXPIRED"
CATEGORY_NOT_TARGETED = "CATEGORY_NOT_TARGETED"
PRODUCT_NOT_TARGETED = "PRODUCT_NOT_TARGETED"
MALFORMED_OFFER = "MALFORMED_OFFER"

# Outcome codes for a single offer evaluation
OFFER_SELECTED = "OFFER_SELECTED"
OFFER_OUTBID = "OFFER_OUTBID"  # eligible, but an earlier or larger discount won
OFFER_NO_DISCOUNT = "OFFER_NO_DISCOUNT"  # eligible, candidate discount is zero
OFFERS_DISABLED = "OFFERS_DISABLED"  # master switch off, list not consulted
