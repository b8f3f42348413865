"""Router for checkout cart endpoints.

The cart itself is held by the client; each call takes the current lines and
returns the updated ones.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pos_runtime.app.api.dependencies import get_pricing_service
from pos_runtime.app.api.models.pricing import (
    AddCartItemRequest,
    CartLineModel,
    CartResponse,
    CartTotalsRequest,
    CartTotalsResponse,
    UpdateCartQuantityRequest,
)
from pos_runtime.application.errors import CatalogLoadError, UnknownProductError
from pos_runtime.application.pricing_service import PricingService
from pos_runtime.domain.common.errors import EmptyCartError, OutOfStockError, StockExceededError
from pos_runtime.settings import get_settings

router = APIRouter()


@router.post("/cart/items", response_model=CartResponse)
def add_cart_item(
    req: AddCartItemRequest,
    service: PricingService = Depends(get_pricing_service),
) -> CartResponse:
    try:
        lines = service.add_to_cart([line.to_domain() for line in req.lines], req.product_id)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (OutOfStockError, StockExceededError) as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return CartResponse(lines=[CartLineModel.from_domain(line) for line in lines])


@router.post("/cart/quantity", response_model=CartResponse)
def update_cart_quantity(
    req: UpdateCartQuantityRequest,
    service: PricingService = Depends(get_pricing_service),
) -> CartResponse:
    try:
        lines = service.update_cart_quantity(
            [line.to_domain() for line in req.lines], req.product_id, req.quantity
        )
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StockExceededError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return CartResponse(lines=[CartLineModel.from_domain(line) for line in lines])


@router.post("/cart/totals", response_model=CartTotalsResponse)
def get_cart_totals(
    req: CartTotalsRequest,
    service: PricingService = Depends(get_pricing_service),
) -> CartTotalsResponse:
    settings = get_settings()
    vat_percentage = req.vat_percentage
    if vat_percentage is None:
        vat_percentage = settings.default_vat_percentage
    try:
        totals = service.cart_totals(
            [line.to_domain() for line in req.lines],
            vat_percentage=vat_percentage,
            invoice_discount=req.invoice_discount,
        )
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return CartTotalsResponse.from_domain(totals, settings.currency)


@router.post("/cart/checkout", response_model=CartTotalsResponse)
def checkout_cart(
    req: CartTotalsRequest,
    service: PricingService = Depends(get_pricing_service),
) -> CartTotalsResponse:
    """Check the cart against current stock and return the totals to record the sale with."""
    settings = get_settings()
    vat_percentage = req.vat_percentage
    if vat_percentage is None:
        vat_percentage = settings.default_vat_percentage
    try:
        totals = service.checkout(
            [line.to_domain() for line in req.lines],
            vat_percentage=vat_percentage,
            invoice_discount=req.invoice_discount,
        )
    except EmptyCartError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StockExceededError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return CartTotalsResponse.from_domain(totals, settings.currency)
