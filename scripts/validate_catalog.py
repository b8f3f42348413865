#!/usr/bin/env python3
"""Validation script for catalog JSON files.

Scans all *.json files under catalog/ and validates them against the catalog
schema. Exits with error code if any invalid files are found.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from pos_runtime.adapters.catalog.json_catalog_repository import validate_catalog
from pos_runtime.domain.pricing.parsing import offer_from_record


def find_repo_root() -> Path:
    """Find the repository root by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


def validate_json_file(file_path: Path) -> tuple[bool, str | None, list[str]]:
    """Validate a catalog file; also report offers the pricing layer would skip."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return False, f"Invalid JSON: {e}", []

    try:
        validate_catalog(data)
    except ValueError as e:
        return False, str(e), []

    skipped = [
        str(record.get("id", f"#{index}")) if isinstance(record, dict) else f"#{index}"
        for index, record in enumerate(data["settings"].get("specialOffers", []))
        if offer_from_record(record) is None
    ]
    return True, None, skipped


def main() -> int:
    """Main validation function."""
    paths = [Path(p) for p in sys.argv[1:]]
    if not paths:
        catalog_dir = find_repo_root() / "catalog"
        paths = sorted(catalog_dir.glob("*.json")) if catalog_dir.exists() else []

    errors: list[str] = []
    for path in paths:
        valid, error, skipped = validate_json_file(path)
        if not valid:
            errors.append(f"{path}: {error}")
            continue
        print(f"✓ {path}")
        for offer_id in skipped:
            print(f"  warning: offer {offer_id} is malformed and will be ignored")

    # Report errors
    if errors:
        print("\nValidation errors:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print("\nAll files validated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
