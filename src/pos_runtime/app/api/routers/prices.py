"""Router for product price endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from pos_runtime.app.api.dependencies import get_pricing_service
from pos_runtime.app.api.models.pricing import (
    OfferEvaluationModel,
    PriceListResponse,
    ProductOffersResponse,
    ProductPriceResponse,
)
from pos_runtime.application.errors import CatalogLoadError, UnknownProductError
from pos_runtime.application.pricing_service import PricingService

router = APIRouter()


@router.get("/products/prices", response_model=PriceListResponse)
def list_product_prices(
    include_deleted: bool = Query(False, description="Include soft-deleted products"),
    service: PricingService = Depends(get_pricing_service),
) -> PriceListResponse:
    """Price every catalog product under the current offers (product cards)."""
    try:
        priced = service.price_catalog(include_deleted=include_deleted)
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return PriceListResponse(
        items=[ProductPriceResponse.from_domain(product, details) for product, details in priced]
    )


@router.get("/products/{product_id}/price", response_model=ProductPriceResponse)
def get_product_price(
    product_id: str,
    service: PricingService = Depends(get_pricing_service),
) -> ProductPriceResponse:
    try:
        product, details = service.price_product(product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ProductPriceResponse.from_domain(product, details)


@router.get("/products/{product_id}/offers", response_model=ProductOffersResponse)
def get_product_offers(
    product_id: str,
    service: PricingService = Depends(get_pricing_service),
) -> ProductOffersResponse:
    """
    Explain every configured offer for a product.

    Returns each offer with its eligibility outcome and candidate discount;
    exactly one offer is marked selected when a discount applies.
    """
    try:
        product, evaluations = service.explain_product(product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return ProductOffersResponse(
        product_id=product.id,
        offers=[OfferEvaluationModel.from_domain(e) for e in evaluations],
    )
