from __future__ import annotations

from fastapi import FastAPI

from pos_runtime.app.api.routers import cart_router, prices_router, quotations_router
from pos_runtime.app.health import router as health_router
from pos_runtime.observability.logging import configure_logging

configure_logging()

app = FastAPI(title="POS Pricing Runtime")
app.include_router(health_router)
app.include_router(prices_router, prefix="/v1", tags=["prices"])
app.include_router(cart_router, prefix="/v1", tags=["cart"])
app.include_router(quotations_router, prefix="/v1", tags=["quotations"])
