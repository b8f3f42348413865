"""Pydantic models for pricing, cart and quotation API payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from pos_runtime.domain.cart.models import CartLine, CartTotals
from pos_runtime.domain.common.ids import ProductId
from pos_runtime.domain.pricing.explain import OfferEvaluation
from pos_runtime.domain.pricing.models import DiscountOffer, PriceDetails, Product
from pos_runtime.domain.quotation.models import Quotation


class DiscountOfferModel(BaseModel):
    """Offer as shown to the customer or the back office."""

    id: str
    name: str
    discount_type: str = Field(..., description="percentage/fixed")
    discount_value: float
    applies_to: str = Field(..., description="all/categories/products")
    target_ids: list[str] = Field(default_factory=list)
    enabled: bool
    expiry_date: datetime | None = None

    @classmethod
    def from_domain(cls, offer: DiscountOffer) -> "DiscountOfferModel":
        return cls(
            id=offer.id,
            name=offer.name,
            discount_type=str(getattr(offer.discount_type, "value", offer.discount_type)),
            discount_value=offer.discount_value,
            applies_to=str(getattr(offer.applies_to, "value", offer.applies_to)),
            target_ids=list(offer.target_ids or ()),
            enabled=offer.enabled,
            expiry_date=offer.expiry_date,
        )


class ProductPriceResponse(BaseModel):
    product_id: str
    product_name: str
    original_price: float
    final_price: float
    best_offer: DiscountOfferModel | None = None
    mrp: float | None = None
    save_amount: float

    @classmethod
    def from_domain(cls, product: Product, details: PriceDetails) -> "ProductPriceResponse":
        return cls(
            product_id=product.id,
            product_name=product.name,
            original_price=details.original_price,
            final_price=details.final_price,
            best_offer=DiscountOfferModel.from_domain(details.best_offer) if details.best_offer else None,
            mrp=details.mrp,
            save_amount=details.save_amount,
        )


class PriceListResponse(BaseModel):
    items: list[ProductPriceResponse]


class OfferEvaluationModel(BaseModel):
    offer: DiscountOfferModel
    eligible: bool
    outcome: str = Field(..., description="Rejection reason or OFFER_SELECTED/OFFER_OUTBID/OFFER_NO_DISCOUNT")
    candidate_discount: float
    selected: bool

    @classmethod
    def from_domain(cls, evaluation: OfferEvaluation) -> "OfferEvaluationModel":
        return cls(
            offer=DiscountOfferModel.from_domain(evaluation.offer),
            eligible=evaluation.eligible,
            outcome=evaluation.outcome,
            candidate_discount=evaluation.candidate_discount,
            selected=evaluation.selected,
        )


class ProductOffersResponse(BaseModel):
    product_id: str
    offers: list[OfferEvaluationModel]


class CartLineModel(BaseModel):
    product_id: str
    quantity: int = Field(..., ge=0)
    price_at_sale: float
    discount: float = 0.0
    returned_quantity: int = 0

    def to_domain(self) -> CartLine:
        return CartLine(
            product_id=ProductId(self.product_id),
            quantity=self.quantity,
            price_at_sale=self.price_at_sale,
            discount=self.discount,
            returned_quantity=self.returned_quantity,
        )

    @classmethod
    def from_domain(cls, line: CartLine) -> "CartLineModel":
        return cls(
            product_id=line.product_id,
            quantity=line.quantity,
            price_at_sale=line.price_at_sale,
            discount=line.discount,
            returned_quantity=line.returned_quantity,
        )


class AddCartItemRequest(BaseModel):
    lines: list[CartLineModel] = Field(default_factory=list)
    product_id: str


class UpdateCartQuantityRequest(BaseModel):
    lines: list[CartLineModel] = Field(default_factory=list)
    product_id: str
    quantity: int


class CartResponse(BaseModel):
    lines: list[CartLineModel]


class CartTotalsRequest(BaseModel):
    lines: list[CartLineModel] = Field(default_factory=list)
    vat_percentage: Optional[float] = Field(None, ge=0, description="Defaults to DEFAULT_VAT_PERCENTAGE")
    invoice_discount: float = Field(0.0, ge=0)


class CartTotalsResponse(BaseModel):
    subtotal: float
    vat_percentage: float
    tax_amount: float
    invoice_discount: float
    grand_total: float
    cost: float = Field(..., description="Purchase cost of the goods in the cart")
    currency: str

    @classmethod
    def from_domain(cls, totals: CartTotals, currency: str) -> "CartTotalsResponse":
        return cls(
            subtotal=totals.subtotal,
            vat_percentage=totals.vat_percentage,
            tax_amount=totals.tax_amount,
            invoice_discount=totals.invoice_discount,
            grand_total=totals.grand_total,
            cost=totals.cost,
            currency=currency,
        )


class QuotationRequest(BaseModel):
    selections: dict[str, Optional[str]] = Field(..., description="Component slot -> product id")


class QuotationLineModel(BaseModel):
    slot: str
    price: ProductPriceResponse


class QuotationResponse(BaseModel):
    lines: list[QuotationLineModel]
    total: float
    savings: float
    priced_at: datetime

    @classmethod
    def from_domain(cls, quotation: Quotation) -> "QuotationResponse":
        return cls(
            lines=[
                QuotationLineModel(
                    slot=line.slot,
                    price=ProductPriceResponse.from_domain(line.product, line.price),
                )
                for line in quotation.lines
            ],
            total=quotation.total,
            savings=quotation.savings,
            priced_at=quotation.priced_at,
        )
