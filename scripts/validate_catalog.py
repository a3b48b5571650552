#!/usr/bin/env python3
"""
Catalog Validation Script

Reports per-field coverage of the product catalog JSON and catches
problems that would stop the API from starting (missing names,
duplicate ids).

Usage:
    python scripts/validate_catalog.py [path/to/products.json]
"""

import json
import sys
from typing import List, Tuple

import pandas as pd

REQUIRED_FIELDS = ["name", "category", "imageUrl"]

REPORT_FIELDS = [
    # basic
    "id", "name", "englishName", "description", "category",
    "volume", "imageUrl", "tags", "collections",
    # characteristics
    "mainBenefits", "aromaDescription", "extractionMethod", "plantPart",
    "mainIngredients", "usageInstructions", "cautions",
    # commercial
    "retailPrice", "memberPrice", "pvPoints", "productCode",
]


def _is_present(value) -> bool:
    if value is None:
        return False
    if isinstance(value, float) and pd.isna(value):
        return False
    if isinstance(value, (list, tuple)):
        return len(value) > 0
    if isinstance(value, str):
        return value.strip() != ""
    return True


def field_coverage(df: pd.DataFrame, fields: List[str]) -> pd.DataFrame:
    """
    Compute how many products carry a non-empty value for each field.

    Args:
        df: One row per product
        fields: Field names to report on

    Returns:
        DataFrame indexed by field with present, total and percent columns
    """
    total = len(df)
    rows = []
    for field in fields:
        present = int(df[field].map(_is_present).sum()) if field in df.columns else 0
        rows.append({
            "field": field,
            "present": present,
            "total": total,
            "percent": round(100.0 * present / total, 1) if total else 0.0,
        })
    return pd.DataFrame(rows).set_index("field")


def validate_catalog(df: pd.DataFrame) -> Tuple[bool, List[str]]:
    """
    Validate catalog rows.

    Returns:
        tuple: (is_valid, error_messages)
    """
    errors = []

    for field in REQUIRED_FIELDS:
        if field not in df.columns:
            errors.append(f"CRITICAL: Field '{field}' is missing from every product")
            continue
        missing = df[~df[field].map(_is_present)]
        for position in missing.index:
            errors.append(f"CRITICAL: Product at position {position} has no '{field}'")

    if "id" in df.columns:
        ids = df["id"].dropna()
        duplicated = ids[ids.duplicated()].unique()
        for product_id in duplicated:
            errors.append(f"CRITICAL: Duplicate product id '{product_id}'")

    return len(errors) == 0, errors


def load_catalog_frame(path: str) -> pd.DataFrame:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("products", [])
    return pd.DataFrame(data)


def main(argv: List[str]) -> int:
    path = argv[1] if len(argv) > 1 else "./data/products.json"

    try:
        df = load_catalog_frame(path)
    except (OSError, ValueError) as e:
        print(f"Failed to load catalog: {e}")
        return 1

    print("=" * 60)
    print(f"Catalog field coverage: {path} ({len(df)} products)")
    print("=" * 60)
    print(field_coverage(df, REPORT_FIELDS).to_string())

    if "category" in df.columns:
        print("\nProducts per category:")
        print(df["category"].value_counts().to_string())

    is_valid, errors = validate_catalog(df)
    print()
    if is_valid:
        print("[OK] Catalog is valid")
        return 0

    for error in errors:
        print(error)
    print(f"\n[ERROR] {len(errors)} problem(s) found")
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
