"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from pos_runtime.app.factory import create_pricing_service
from pos_runtime.application.pricing_service import PricingService

_services: dict[str, PricingService] = {}


def get_pricing_service() -> PricingService:
    """Provide one PricingService per process; catalog reads stay per request."""
    if "service" not in _services:
        _services["service"] = create_pricing_service()
    return _services["service"]
