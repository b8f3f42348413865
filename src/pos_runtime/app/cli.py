from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Optional

from pos_runtime.adapters.clock.system_clock import FixedClock
from pos_runtime.app.factory import create_adapters
from pos_runtime.application.errors import CatalogLoadError, UnknownProductError
from pos_runtime.application.pricing_service import PricingService
from pos_runtime.domain.common.errors import PricingDomainError
from pos_runtime.domain.pricing.parsing import price_details_to_record
from pos_runtime.observability.logging import configure_logging


def parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"Invalid ISO timestamp: {value!r}") from e


def parse_selection(value: str) -> tuple[str, str]:
    slot, sep, product_id = value.partition("=")
    if not sep or not slot or not product_id:
        raise argparse.ArgumentTypeError(f"Expected slot=product_id, got {value!r}")
    return slot, product_id


def _build_service(as_of: Optional[datetime]) -> PricingService:
    catalog_repo, clock = create_adapters()
    if as_of is not None:
        clock = FixedClock(as_of)
    return PricingService(catalog_repo=catalog_repo, clock=clock)


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(description="POS pricing runtime CLI")
    parser.add_argument(
        "--as-of", dest="as_of_ts", type=parse_datetime, help="Evaluate offers at this ISO timestamp"
    )
    subparsers = parser.add_subparsers(dest="command")

    price_parser = subparsers.add_parser("price", help="Price a single product")
    price_parser.add_argument("--product", required=True, dest="product_id")

    subparsers.add_parser("catalog", help="Price every product in the catalog")

    quote_parser = subparsers.add_parser("quote", help="Build a PC builder quotation")
    quote_parser.add_argument(
        "--select",
        action="append",
        type=parse_selection,
        default=[],
        dest="selections",
        help="slot=product_id, repeatable",
    )

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 0

    try:
        service = _build_service(args.as_of_ts)
    except ValueError as e:
        # adapter misconfiguration, e.g. CATALOG_ADAPTER=json without CATALOG_PATH
        print(f"error: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "price":
            product, details = service.price_product(args.product_id)
            output = {"productId": product.id, **price_details_to_record(details)}
        elif args.command == "catalog":
            output = [
                {"productId": product.id, **price_details_to_record(details)}
                for product, details in service.price_catalog()
            ]
        else:
            quotation = service.build_quotation(dict(args.selections))
            output = {
                "lines": [
                    {"slot": line.slot, "productId": line.product.id, **price_details_to_record(line.price)}
                    for line in quotation.lines
                ],
                "total": quotation.total,
                "savings": quotation.savings,
                "pricedAt": quotation.priced_at.isoformat(),
            }
    except (UnknownProductError, CatalogLoadError, PricingDomainError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
