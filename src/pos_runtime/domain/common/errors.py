from __future__ import annotations


class PricingDomainError(Exception):
    """Base class for cart and quotation rule violations."""


class OutOfStockError(PricingDomainError):
    def __init__(self, product_id: str) -> None:
        super().__init__(f"Product {product_id} is out of stock")
        self.product_id = product_id


class StockExceededError(PricingDomainError):
    """Raised when a cart quantity would exceed the available stock."""

    def __init__(self, product_id: str, requested: int, available: int) -> None:
        super().__init__(
            f"Requested quantity {requested} for product {product_id} exceeds available stock {available}"
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class EmptyCartError(PricingDomainError):
    pass


class UnknownSlotError(PricingDomainError):
    def __init__(self, slot: str) -> None:
        super().__init__(f"Unknown component slot: {slot}")
        self.slot = slot
