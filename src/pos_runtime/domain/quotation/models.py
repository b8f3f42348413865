from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from pos_runtime.domain.pricing.models import PriceDetails, Product

# PC builder component slots, in quotation order
COMPONENT_SLOTS: tuple[str, ...] = (
    "cpu",
    "cpu_cooler",
    "motherboard",
    "ram_1",
    "ram_2",
    "storage_1",
    "storage_2",
    "graphics_card",
    "power_supply",
    "casing",
    "monitor",
    "keyboard",
    "mouse",
    "headphone",
    "ups",
)


@dataclass(frozen=True)
class QuotationLine:
    slot: str
    product: Product
    price: PriceDetails


@dataclass(frozen=True)
class Quotation:
    lines: list[QuotationLine]
    total: float
    savings: float  # sum of offer discounts across lines
    priced_at: datetime
