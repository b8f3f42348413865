from datetime import datetime, timezone

import pytest

from pos_runtime.adapters.clock.system_clock import FixedClock
from pos_runtime.domain.cart.evaluator import (
    add_to_cart,
    compute_cart_cost,
    compute_cart_totals,
    ensure_cart_not_empty,
    update_cart_quantity,
)
from pos_runtime.domain.cart.models import CartLine
from pos_runtime.domain.common.errors import EmptyCartError, OutOfStockError, StockExceededError
from pos_runtime.domain.pricing.models import AppliesTo, DiscountOffer, DiscountType, Product, ShopSettings

CLOCK = FixedClock(datetime(2024, 6, 1, tzinfo=timezone.utc))

SETTINGS = ShopSettings.new(
    special_offers_enabled=True,
    special_offers=[
        DiscountOffer.new("snacks", DiscountType.FIXED, 10, AppliesTo.CATEGORIES, ["cat_snacks"]),
    ],
)


def make_product(product_id: str = "chips", price: float = 60, stock: int = 2, category_id: str = "cat_snacks") -> Product:
    return Product.new(product_id, price=price, category_id=category_id, stock=stock, purchase_price=40)


def test_add_new_product_captures_offer_price():
    lines = add_to_cart([], make_product(), SETTINGS, CLOCK)
    assert lines == [CartLine(product_id="chips", quantity=1, price_at_sale=50)]


def test_add_existing_product_increments_quantity():
    product = make_product()
    lines = add_to_cart([], product, SETTINGS, CLOCK)
    lines = add_to_cart(lines, product, SETTINGS, CLOCK)
    assert len(lines) == 1
    assert lines[0].quantity == 2


def test_existing_line_keeps_captured_price_after_offer_change():
    product = make_product()
    lines = add_to_cart([], product, SETTINGS, CLOCK)
    lines = add_to_cart(lines, product, ShopSettings(), CLOCK)
    assert lines[0].price_at_sale == 50


def test_add_out_of_stock_product_raises():
    with pytest.raises(OutOfStockError):
        add_to_cart([], make_product(stock=0), SETTINGS, CLOCK)


def test_add_beyond_stock_raises():
    product = make_product(stock=1)
    lines = add_to_cart([], product, SETTINGS, CLOCK)
    with pytest.raises(StockExceededError) as exc_info:
        add_to_cart(lines, product, SETTINGS, CLOCK)
    assert exc_info.value.available == 1
    assert exc_info.value.requested == 2


def test_add_does_not_mutate_input_lines():
    lines: list[CartLine] = []
    add_to_cart(lines, make_product(), SETTINGS, CLOCK)
    assert lines == []


def test_update_quantity():
    product = make_product(stock=5)
    lines = add_to_cart([], product, SETTINGS, CLOCK)
    lines = update_cart_quantity(lines, product, 4)
    assert lines[0].quantity == 4


def test_update_quantity_to_zero_removes_line():
    chips = make_product()
    soda = make_product("soda", price=30, category_id="cat_beverages")
    lines = add_to_cart(add_to_cart([], chips, SETTINGS, CLOCK), soda, SETTINGS, CLOCK)
    lines = update_cart_quantity(lines, chips, 0)
    assert [line.product_id for line in lines] == ["soda"]


def test_update_quantity_beyond_stock_raises():
    product = make_product(stock=2)
    lines = add_to_cart([], product, SETTINGS, CLOCK)
    with pytest.raises(StockExceededError):
        update_cart_quantity(lines, product, 3)


def test_cart_totals():
    lines = [
        CartLine(product_id="a", quantity=2, price_at_sale=100),
        CartLine(product_id="b", quantity=1, price_at_sale=50),
    ]
    totals = compute_cart_totals(lines, vat_percentage=10, invoice_discount=25)
    assert totals.subtotal == 250
    assert totals.tax_amount == pytest.approx(25)
    assert totals.grand_total == pytest.approx(250)


def test_empty_cart_totals_are_zero():
    totals = compute_cart_totals([])
    assert totals.subtotal == 0
    assert totals.grand_total == 0


def test_cart_cost_uses_purchase_price():
    chips = make_product()
    lines = [
        CartLine(product_id="chips", quantity=3, price_at_sale=50),
        CartLine(product_id="gone", quantity=1, price_at_sale=10),
    ]
    assert compute_cart_cost(lines, {"chips": chips}) == 120


def test_ensure_cart_not_empty():
    with pytest.raises(EmptyCartError):
        ensure_cart_not_empty([])
    ensure_cart_not_empty([CartLine(product_id="a", quantity=1, price_at_sale=1)])
