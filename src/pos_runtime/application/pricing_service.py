from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Mapping, Optional, Sequence

from pos_runtime.application.errors import UnknownProductError
from pos_runtime.domain.cart.evaluator import (
    add_to_cart,
    compute_cart_cost,
    compute_cart_totals,
    ensure_cart_not_empty,
    update_cart_quantity,
)
from pos_runtime.domain.cart.models import CartLine, CartTotals
from pos_runtime.domain.common.errors import StockExceededError
from pos_runtime.domain.pricing.evaluator import calculate_product_price
from pos_runtime.domain.pricing.explain import OfferEvaluation, explain_offers
from pos_runtime.domain.pricing.models import PriceDetails, Product
from pos_runtime.domain.quotation.evaluator import build_quotation
from pos_runtime.domain.quotation.models import Quotation
from pos_runtime.ports.catalog_repository import CatalogRepository
from pos_runtime.ports.clock import Clock

logger = logging.getLogger(__name__)


class PricingService:
    """
    Application entry point for price lookups, carts and quotations.

    Shop settings are read from the catalog on every call so that offer edits
    and expiries take effect on the next lookup.
    """

    def __init__(self, catalog_repo: CatalogRepository, clock: Clock) -> None:
        self.catalog_repo = catalog_repo
        self.clock = clock

    def _require_product(self, product_id: str) -> Product:
        product = self.catalog_repo.get_product(product_id)
        if product is None:
            raise UnknownProductError(product_id)
        return product

    def price_product(self, product_id: str) -> tuple[Product, PriceDetails]:
        product = self._require_product(product_id)
        settings = self.catalog_repo.get_shop_settings()
        return product, calculate_product_price(product, settings, self.clock)

    def price_catalog(self, include_deleted: bool = False) -> List[tuple[Product, PriceDetails]]:
        settings = self.catalog_repo.get_shop_settings()
        priced: List[tuple[Product, PriceDetails]] = []
        for product in self.catalog_repo.list_products():
            if product.is_deleted and not include_deleted:
                continue
            priced.append((product, calculate_product_price(product, settings, self.clock)))
        return priced

    def explain_product(self, product_id: str) -> tuple[Product, List[OfferEvaluation]]:
        product = self._require_product(product_id)
        settings = self.catalog_repo.get_shop_settings()
        return product, explain_offers(product, settings, self.clock)

    def build_quotation(self, selections: Mapping[str, Optional[str]]) -> Quotation:
        """Price a slot -> product id selection; ``None`` leaves a slot empty."""
        products = {
            slot: self._require_product(product_id) if product_id else None
            for slot, product_id in selections.items()
        }
        quotation = build_quotation(products, self.catalog_repo.get_shop_settings(), self.clock)
        logger.info("Built quotation with %d lines, total=%.2f", len(quotation.lines), quotation.total)
        return quotation

    def add_to_cart(self, lines: Sequence[CartLine], product_id: str) -> List[CartLine]:
        product = self._require_product(product_id)
        return add_to_cart(lines, product, self.catalog_repo.get_shop_settings(), self.clock)

    def update_cart_quantity(self, lines: Sequence[CartLine], product_id: str, quantity: int) -> List[CartLine]:
        product = self._require_product(product_id)
        return update_cart_quantity(lines, product, quantity)

    def cart_totals(
        self, lines: Sequence[CartLine], vat_percentage: float = 0.0, invoice_discount: float = 0.0
    ) -> CartTotals:
        totals = compute_cart_totals(lines, vat_percentage, invoice_discount)
        products = {product.id: product for product in self.catalog_repo.list_products()}
        return replace(totals, cost=compute_cart_cost(lines, products))

    def checkout(
        self, lines: Sequence[CartLine], vat_percentage: float = 0.0, invoice_discount: float = 0.0
    ) -> CartTotals:
        """
        Check a cart against the current catalog and return its final totals.

        Nothing is persisted; the caller records the sale.

        Raises:
            EmptyCartError: if the cart has no lines
            UnknownProductError: if a line refers to a product not in the catalog
            StockExceededError: if a line asks for more than the current stock
        """
        ensure_cart_not_empty(lines)
        for line in lines:
            product = self._require_product(line.product_id)
            if line.quantity > product.stock:
                raise StockExceededError(product.id, line.quantity, product.stock)
        totals = self.cart_totals(lines, vat_percentage, invoice_discount)
        logger.info(
            "Checked out cart with %d lines, grand_total=%.2f, cost=%.2f",
            len(lines),
            totals.grand_total,
            totals.cost,
        )
        return totals
