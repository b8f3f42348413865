"""JSON schema for catalog files consumed by JsonCatalogRepository.

Products are validated strictly. Offers are only required to be objects: the
pricing layer skips offers it cannot interpret, so one bad offer must not
reject the whole catalog.
"""

from __future__ import annotations

from typing import Any

CATALOG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": ["products", "settings"],
    "properties": {
        "products": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "price", "categoryId"],
                "properties": {
                    "id": {"type": "string", "minLength": 1},
                    "name": {"type": "string"},
                    "categoryId": {"type": "string"},
                    "price": {"type": "number", "minimum": 0},
                    "mrp": {"type": ["number", "null"]},
                    "purchasePrice": {"type": "number"},
                    "stock": {"type": "integer"},
                    "unit": {"type": "string"},
                    "isDeleted": {"type": "boolean"},
                },
            },
        },
        "settings": {
            "type": "object",
            "properties": {
                "specialOffersEnabled": {"type": "boolean"},
                "specialOffers": {"type": "array", "items": {"type": "object"}},
                "currency": {"type": "string"},
            },
        },
    },
}
