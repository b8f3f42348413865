"""Pydantic models for API payloads."""

from pos_runtime.app.api.models.pricing import (
    AddCartItemRequest,
    CartLineModel,
    CartResponse,
    CartTotalsRequest,
    CartTotalsResponse,
    DiscountOfferModel,
    OfferEvaluationModel,
    PriceListResponse,
    ProductOffersResponse,
    ProductPriceResponse,
    QuotationRequest,
    QuotationResponse,
    UpdateCartQuantityRequest,
)

__all__ = [
    "AddCartItemRequest",
    "CartLineModel",
    "CartResponse",
    "CartTotalsRequest",
    "CartTotalsResponse",
    "DiscountOfferModel",
    "OfferEvaluationModel",
    "PriceListResponse",
    "ProductOffersResponse",
    "ProductPriceResponse",
    "QuotationRequest",
    "QuotationResponse",
    "UpdateCartQuantityRequest",
]
