from __future__ import annotations

from dataclasses import dataclass

from pos_runtime.domain.common.ids import ProductId


@dataclass(frozen=True)
class CartLine:
    """A product line in the checkout cart, priced when it was added."""

    product_id: ProductId
    quantity: int
    price_at_sale: float
    discount: float = 0.0
    returned_quantity: int = 0

    @property
    def line_total(self) -> float:
        return self.price_at_sale * self.quantity


@dataclass(frozen=True)
class CartTotals:
    subtotal: float
    vat_percentage: float
    tax_amount: float
    invoice_discount: float
    grand_total: float
    cost: float = 0.0  # purchase cost of the goods, 0 when not looked up
