from datetime import datetime, timedelta, timezone

import pytest

from pos_runtime.adapters.clock.system_clock import FixedClock
from pos_runtime.domain.common.errors import UnknownSlotError
from pos_runtime.domain.pricing.evaluator import calculate_product_price
from pos_runtime.domain.pricing.models import AppliesTo, DiscountOffer, DiscountType, Product, ShopSettings
from pos_runtime.domain.quotation.evaluator import build_quotation

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)

CPU = Product.new("cpu1", price=15000, category_id="cat_processor", stock=3)
BOARD = Product.new("mb1", price=18500, mrp=19500, category_id="cat_motherboard", stock=3)
MOUSE = Product.new("mouse1", price=800, category_id="cat_electronics", stock=3)

SETTINGS = ShopSettings.new(
    special_offers_enabled=True,
    special_offers=[
        DiscountOffer.new("mb", DiscountType.FIXED, 1500, AppliesTo.CATEGORIES, ["cat_motherboard"]),
    ],
)


def test_lines_follow_slot_order_and_skip_empty_slots():
    quotation = build_quotation(
        {"mouse": MOUSE, "cpu": CPU, "ram_1": None, "motherboard": BOARD}, SETTINGS, FixedClock(NOW)
    )
    assert [line.slot for line in quotation.lines] == ["cpu", "motherboard", "mouse"]


def test_total_is_sum_of_line_final_prices():
    clock = FixedClock(NOW)
    quotation = build_quotation({"cpu": CPU, "motherboard": BOARD, "mouse": MOUSE}, SETTINGS, clock)
    expected = sum(calculate_product_price(p, SETTINGS, clock).final_price for p in (CPU, BOARD, MOUSE))
    assert quotation.total == expected == 15000 + 17000 + 800
    assert quotation.savings == 1500
    assert quotation.priced_at == NOW


def test_board_line_carries_offer():
    quotation = build_quotation({"motherboard": BOARD}, SETTINGS, FixedClock(NOW))
    line = quotation.lines[0]
    assert line.price.best_offer is not None
    assert line.price.best_offer.id == "mb"
    assert line.price.save_amount == 2500


def test_unknown_slot_is_rejected():
    with pytest.raises(UnknownSlotError):
        build_quotation({"gpu_2": CPU}, SETTINGS, FixedClock(NOW))


def test_all_lines_priced_at_one_instant():
    class TickingClock:
        def __init__(self) -> None:
            self.current = NOW - timedelta(seconds=1)

        def now(self) -> datetime:
            self.current += timedelta(seconds=1)
            return self.current

    expiring = ShopSettings.new(
        special_offers_enabled=True,
        special_offers=[DiscountOffer.new("flash", DiscountType.FIXED, 100, expiry_date=NOW + timedelta(milliseconds=500))],
    )
    quotation = build_quotation({"cpu": CPU, "mouse": MOUSE}, expiring, TickingClock())
    assert all(line.price.best_offer is not None for line in quotation.lines)
    assert quotation.total == 15000 + 800 - 200


def test_empty_selection_gives_zero_total():
    quotation = build_quotation({}, SETTINGS, FixedClock(NOW))
    assert quotation.lines == []
    assert quotation.total == 0
