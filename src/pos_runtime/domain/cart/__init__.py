from __future__ import annotations

from pos_runtime.domain.cart.evaluator import (
    add_to_cart,
    compute_cart_cost,
    compute_cart_totals,
    ensure_cart_not_empty,
    update_cart_quantity,
)
from pos_runtime.domain.cart.models import CartLine, CartTotals

__all__ = [
    "CartLine",
    "CartTotals",
    "add_to_cart",
    "compute_cart_cost",
    "compute_cart_totals",
    "ensure_cart_not_empty",
    "update_cart_quantity",
]
