from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from pos_runtime.domain.pricing import rules
from pos_runtime.domain.pricing.eligibility import check_offer_eligibility, compute_offer_discount
from pos_runtime.domain.pricing.evaluator import resolve_now
from pos_runtime.domain.pricing.models import DiscountOffer, Product, ShopSettings

if TYPE_CHECKING:
    from pos_runtime.ports.clock import Clock


@dataclass(frozen=True)
class OfferEvaluation:
    """How a single offer fared against a product."""

    offer: DiscountOffer
    eligible: bool
    outcome: str  # rejection reason or one of the OFFER_* outcome codes
    candidate_discount: float
    selected: bool


def explain_offers(
    product: Product, settings: ShopSettings, clock: "Clock | None" = None
) -> list[OfferEvaluation]:
    """
    Evaluate every configured offer against ``product`` and report why it won or lost.

    Uses the same eligibility and tie-break rules as ``calculate_product_price``,
    so the offer marked ``selected`` is always that function's ``best_offer``.
    """
    # entries that are not offers at all cannot be reported
    offers = [offer for offer in settings.special_offers or () if isinstance(offer, DiscountOffer)]
    if not settings.special_offers_enabled:
        return [
            OfferEvaluation(
                offer=offer,
                eligible=False,
                outcome=rules.OFFERS_DISABLED,
                candidate_discount=0.0,
                selected=False,
            )
            for offer in offers
        ]

    now = resolve_now(clock)
    best_index: Optional[int] = None
    best_discount = 0.0
    rows: list[tuple[DiscountOffer, bool, Optional[str], float]] = []

    for index, offer in enumerate(offers):
        eligibility = check_offer_eligibility(offer, product, now)
        discount = compute_offer_discount(offer, product.price) if eligibility.eligible else 0.0
        rows.append((offer, eligibility.eligible, eligibility.reason, discount))
        if eligibility.eligible and discount > best_discount:
            best_discount = discount
            best_index = index

    evaluations: list[OfferEvaluation] = []
    for index, (offer, eligible, reason, discount) in enumerate(rows):
        selected = index == best_index
        if not eligible:
            outcome = reason or rules.MALFORMED_OFFER
        elif selected:
            outcome = rules.OFFER_SELECTED
        elif discount > 0:
            outcome = rules.OFFER_OUTBID
        else:
            outcome = rules.OFFER_NO_DISCOUNT
        evaluations.append(
            OfferEvaluation(
                offer=offer,
                eligible=eligible,
                outcome=outcome,
                candidate_discount=discount,
                selected=selected,
            )
        )
    return evaluations
