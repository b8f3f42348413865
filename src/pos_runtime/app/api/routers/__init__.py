"""API routers for POS-facing endpoints."""

from pos_runtime.app.api.routers.cart import router as cart_router
from pos_runtime.app.api.routers.prices import router as prices_router
from pos_runtime.app.api.routers.quotations import router as quotations_router

__all__ = ["prices_router", "cart_router", "quotations_router"]
