from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING, Mapping, Sequence

from pos_runtime.domain.cart.models import CartLine, CartTotals
from pos_runtime.domain.common.errors import EmptyCartError, OutOfStockError, StockExceededError
from pos_runtime.domain.pricing.evaluator import calculate_product_price
from pos_runtime.domain.pricing.models import Product, ShopSettings

if TYPE_CHECKING:
    from pos_runtime.ports.clock import Clock

logger = logging.getLogger(__name__)


def _find_line(lines: Sequence[CartLine], product_id: str) -> CartLine | None:
    for line in lines:
        if line.product_id == product_id:
            return line
    return None


def add_to_cart(
    lines: Sequence[CartLine],
    product: Product,
    settings: ShopSettings,
    clock: "Clock | None" = None,
) -> list[CartLine]:
    """
    Add one unit of ``product`` to the cart and return the new cart.

    A new line is priced with the offer-resolved final price at the time of
    adding; an existing line keeps its captured price and gains one unit.

    Raises:
        OutOfStockError: if the product has no stock
        StockExceededError: if one more unit would exceed the stock
    """
    if product.stock <= 0:
        raise OutOfStockError(product.id)

    existing = _find_line(lines, product.id)
    if existing is not None:
        if existing.quantity >= product.stock:
            raise StockExceededError(product.id, existing.quantity + 1, product.stock)
        return [
            replace(line, quantity=line.quantity + 1) if line.product_id == product.id else line
            for line in lines
        ]

    price = calculate_product_price(product, settings, clock)
    logger.debug(
        "Adding product %s at %.2f (offer=%s)",
        product.id,
        price.final_price,
        price.best_offer.id if price.best_offer else None,
    )
    return [*lines, CartLine(product_id=product.id, quantity=1, price_at_sale=price.final_price)]


def update_cart_quantity(lines: Sequence[CartLine], product: Product, new_quantity: int) -> list[CartLine]:
    """
    Set the quantity of the product's line. A quantity of zero or less removes it.

    Raises:
        StockExceededError: if ``new_quantity`` exceeds the product stock
    """
    if new_quantity <= 0:
        return [line for line in lines if line.product_id != product.id]
    if new_quantity > product.stock:
        raise StockExceededError(product.id, new_quantity, product.stock)
    return [
        replace(line, quantity=new_quantity) if line.product_id == product.id else line
        for line in lines
    ]


def compute_cart_totals(
    lines: Sequence[CartLine], vat_percentage: float = 0.0, invoice_discount: float = 0.0
) -> CartTotals:
    subtotal = sum((line.line_total for line in lines), 0.0)
    tax_amount = subtotal * (vat_percentage / 100)
    grand_total = (subtotal + tax_amount) - invoice_discount
    return CartTotals(
        subtotal=subtotal,
        vat_percentage=vat_percentage,
        tax_amount=tax_amount,
        invoice_discount=invoice_discount,
        grand_total=grand_total,
    )


def compute_cart_cost(lines: Sequence[CartLine], products: Mapping[str, Product]) -> float:
    """Cost of goods sold for the cart; lines for unknown products cost nothing."""
    total = 0.0
    for line in lines:
        product = products.get(line.product_id)
        purchase_price = product.purchase_price if product else 0.0
        total += purchase_price * line.quantity
    return total


def ensure_cart_not_empty(lines: Sequence[CartLine]) -> None:
    if not lines:
        raise EmptyCartError("Cart is empty")
