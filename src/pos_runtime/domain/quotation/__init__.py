from __future__ import annotations

from pos_runtime.domain.quotation.evaluator import build_quotation
from pos_runtime.domain.quotation.models import COMPONENT_SLOTS, Quotation, QuotationLine

__all__ = ["COMPONENT_SLOTS", "Quotation", "QuotationLine", "build_quotation"]
