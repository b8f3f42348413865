from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Mapping, Optional

from pos_runtime.domain.common.errors import UnknownSlotError
from pos_runtime.domain.pricing.evaluator import calculate_product_price, resolve_now
from pos_runtime.domain.pricing.models import Product, ShopSettings
from pos_runtime.domain.quotation.models import COMPONENT_SLOTS, Quotation, QuotationLine

if TYPE_CHECKING:
    from pos_runtime.ports.clock import Clock


class _PinnedClock:
    def __init__(self, clock: "Clock | None") -> None:
        self.instant = resolve_now(clock)

    def now(self) -> datetime:
        return self.instant


def build_quotation(
    selections: Mapping[str, Optional[Product]],
    settings: ShopSettings,
    clock: "Clock | None" = None,
) -> Quotation:
    """
    Price a PC builder selection.

    Lines follow COMPONENT_SLOTS order and empty slots are skipped. Every line
    is priced against the same instant, so the printed total always equals the
    sum of the printed line prices.

    Raises:
        UnknownSlotError: if a selection names a slot outside COMPONENT_SLOTS
    """
    for slot in selections:
        if slot not in COMPONENT_SLOTS:
            raise UnknownSlotError(slot)

    pinned = _PinnedClock(clock)
    lines: list[QuotationLine] = []
    for slot in COMPONENT_SLOTS:
        product = selections.get(slot)
        if product is None:
            continue
        price = calculate_product_price(product, settings, pinned)
        lines.append(QuotationLine(slot=slot, product=product, price=price))

    total = sum((line.price.final_price for line in lines), 0.0)
    savings = sum((line.price.discount_amount for line in lines), 0.0)
    return Quotation(lines=lines, total=total, savings=savings, priced_at=pinned.instant)
