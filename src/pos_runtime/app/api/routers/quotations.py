"""Router for PC builder quotation endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from pos_runtime.app.api.dependencies import get_pricing_service
from pos_runtime.app.api.models.pricing import QuotationRequest, QuotationResponse
from pos_runtime.application.errors import CatalogLoadError, UnknownProductError
from pos_runtime.application.pricing_service import PricingService
from pos_runtime.domain.common.errors import UnknownSlotError

router = APIRouter()


@router.post("/quotations", response_model=QuotationResponse)
def create_quotation(
    req: QuotationRequest,
    service: PricingService = Depends(get_pricing_service),
) -> QuotationResponse:
    try:
        quotation = service.build_quotation(req.selections)
    except UnknownProductError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UnknownSlotError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except CatalogLoadError as e:
        raise HTTPException(status_code=503, detail=str(e))
    return QuotationResponse.from_domain(quotation)
