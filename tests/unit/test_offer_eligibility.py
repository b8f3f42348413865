from datetime import datetime, timedelta, timezone

import pytest

from pos_runtime.domain.pricing import rules
from pos_runtime.domain.pricing.eligibility import (
    check_offer_eligibility,
    compute_offer_discount,
    is_offer_expired,
    matches_target,
)
from pos_runtime.domain.pricing.models import AppliesTo, DiscountOffer, DiscountType, Product

NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)


def make_product(product_id: str = "p1", category_id: str = "catA", price: float = 200) -> Product:
    return Product.new(product_id=product_id, price=price, category_id=category_id)


def test_offer_expiring_now_is_still_live():
    offer = DiscountOffer.new("o", DiscountType.FIXED, 10, expiry_date=NOW)
    assert not is_offer_expired(offer, NOW)
    assert is_offer_expired(offer, NOW + timedelta(microseconds=1))


def test_no_expiry_never_expires():
    offer = DiscountOffer.new("o", DiscountType.FIXED, 10)
    assert not is_offer_expired(offer, datetime(2999, 1, 1, tzinfo=timezone.utc))


def test_naive_expiry_is_read_as_utc():
    offer = DiscountOffer.new("o", DiscountType.FIXED, 10, expiry_date=datetime(2024, 6, 1, 11, 0, 0))
    assert is_offer_expired(offer, NOW)


def test_matches_target_for_each_scope():
    product = make_product(product_id="p1", category_id="catA")
    assert matches_target(DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.ALL), product)
    assert matches_target(DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.CATEGORIES, ["catA"]), product)
    assert not matches_target(DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.CATEGORIES, ["p1"]), product)
    assert matches_target(DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.PRODUCTS, ["p1"]), product)
    assert not matches_target(DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.PRODUCTS, ["catA"]), product)


def test_all_scope_ignores_target_ids():
    offer = DiscountOffer.new("o", DiscountType.FIXED, 1, AppliesTo.ALL, ["other"])
    assert matches_target(offer, make_product())


@pytest.mark.parametrize(
    "offer, expected_reason",
    [
        (DiscountOffer.new("o", DiscountType.FIXED, 10, enabled=False), rules.OFFER_DISABLED),
        (DiscountOffer.new("o", DiscountType.FIXED, 10, expiry_date=NOW - timedelta(days=1)), rules.OFFER_EXPIRED),
        (DiscountOffer.new("o", DiscountType.FIXED, 10, AppliesTo.CATEGORIES, ["catB"]), rules.CATEGORY_NOT_TARGETED),
        (DiscountOffer.new("o", DiscountType.FIXED, 10, AppliesTo.PRODUCTS, ["p9"]), rules.PRODUCT_NOT_TARGETED),
    ],
)
def test_rejection_reasons(offer, expected_reason):
    result = check_offer_eligibility(offer, make_product(), NOW)
    assert not result.eligible
    assert result.reason == expected_reason


def test_disabled_takes_precedence_over_expired():
    offer = DiscountOffer.new("o", DiscountType.FIXED, 10, enabled=False, expiry_date=NOW - timedelta(days=1))
    assert check_offer_eligibility(offer, make_product(), NOW).reason == rules.OFFER_DISABLED


def test_eligible_offer_has_no_reason():
    offer = DiscountOffer.new("o", DiscountType.PERCENTAGE, 10)
    result = check_offer_eligibility(offer, make_product(), NOW)
    assert result.eligible
    assert result.reason is None


@pytest.mark.parametrize(
    "overrides",
    [
        {"applies_to": "everything"},
        {"discount_type": "bogo"},
        {"discount_value": "10"},
        {"discount_value": float("nan")},
        {"discount_value": True},
        {"expiry_date": "2024-01-01"},
        {"target_ids": "catA"},
    ],
)
def test_malformed_offers_are_ineligible(overrides):
    fields = {
        "id": "o",
        "name": "",
        "discount_type": DiscountType.FIXED,
        "discount_value": 10,
        "applies_to": AppliesTo.CATEGORIES,
        "target_ids": ("catA",),
    }
    fields.update(overrides)
    offer = DiscountOffer(**fields)
    result = check_offer_eligibility(offer, make_product(), NOW)
    assert not result.eligible
    assert result.reason == rules.MALFORMED_OFFER


def test_plain_string_scope_values_are_accepted():
    offer = DiscountOffer(
        id="o", name="", discount_type="fixed", discount_value=10, applies_to="products", target_ids=("p1",)
    )  # type: ignore[arg-type]
    assert check_offer_eligibility(offer, make_product(), NOW).eligible
    assert compute_offer_discount(offer, 200) == 10


def test_compute_percentage_discount():
    offer = DiscountOffer.new("o", DiscountType.PERCENTAGE, 25)
    assert compute_offer_discount(offer, 200) == 50


def test_compute_discount_clamps_to_price_and_zero():
    assert compute_offer_discount(DiscountOffer.new("o", DiscountType.FIXED, 500), 200) == 200
    assert compute_offer_discount(DiscountOffer.new("o", DiscountType.PERCENTAGE, 120), 200) == 200
    assert compute_offer_discount(DiscountOffer.new("o", DiscountType.FIXED, -5), 200) == 0
    assert compute_offer_discount(DiscountOffer.new("o", DiscountType.PERCENTAGE, -10), 200) == 0
