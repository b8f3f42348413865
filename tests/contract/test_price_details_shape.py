from datetime import datetime, timezone

from pos_runtime.adapters.clock.system_clock import FixedClock
from pos_runtime.app.api.models.pricing import ProductPriceResponse
from pos_runtime.domain.pricing.evaluator import calculate_product_price
from pos_runtime.domain.pricing.models import AppliesTo, DiscountOffer, DiscountType, Product, ShopSettings
from pos_runtime.domain.pricing.parsing import offer_from_record, price_details_to_record

CLOCK = FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc))

PRODUCT = Product.new("p1", price=1000, mrp=1200, category_id="catA", name="Widget")
OFFER = DiscountOffer.new(
    "o1",
    name="Summer",
    discount_type=DiscountType.PERCENTAGE,
    discount_value=10,
    applies_to=AppliesTo.CATEGORIES,
    target_ids=["catA"],
    expiry_date=datetime(2024, 12, 31, tzinfo=timezone.utc),
)
SETTINGS = ShopSettings.new(special_offers_enabled=True, special_offers=[OFFER])


def test_price_record_uses_store_field_names():
    record = price_details_to_record(calculate_product_price(PRODUCT, SETTINGS, CLOCK))
    assert set(record) == {"originalPrice", "finalPrice", "bestOffer", "mrp", "saveAmount"}
    assert set(record["bestOffer"]) == {
        "id",
        "name",
        "discountType",
        "discountValue",
        "appliesTo",
        "targetIds",
        "enabled",
        "expiryDate",
    }
    assert record["bestOffer"]["discountType"] == "percentage"
    assert record["bestOffer"]["appliesTo"] == "categories"


def test_best_offer_record_parses_back_to_same_offer():
    record = price_details_to_record(calculate_product_price(PRODUCT, SETTINGS, CLOCK))
    assert offer_from_record(record["bestOffer"]) == OFFER


def test_baseline_record_has_null_offer():
    record = price_details_to_record(calculate_product_price(PRODUCT, ShopSettings(), CLOCK))
    assert record["bestOffer"] is None
    assert record["finalPrice"] == record["originalPrice"] == 1000
    assert record["saveAmount"] == 200


def test_api_response_carries_every_price_field():
    details = calculate_product_price(PRODUCT, SETTINGS, CLOCK)
    body = ProductPriceResponse.from_domain(PRODUCT, details).model_dump()
    assert body["product_id"] == "p1"
    assert body["product_name"] == "Widget"
    assert body["original_price"] == details.original_price
    assert body["final_price"] == details.final_price
    assert body["mrp"] == 1200
    assert body["save_amount"] == details.save_amount
    assert body["best_offer"]["id"] == "o1"
    assert body["best_offer"]["target_ids"] == ["catA"]
