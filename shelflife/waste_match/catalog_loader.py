"""
Catalog Loader - Parse the inventory JSON source into InventoryItems.

The source is a list of records with camelCase keys (unitPrice,
shelfLifeDays, ...). snake_case keys are accepted as well. Rows missing a
SKU, a name or a usable price are skipped and counted rather than passed
on to the matcher.
"""

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional

from .catalog import Catalog, build_catalog
from .models import InventoryItem

logger = logging.getLogger(__name__)

# Source key -> accepted spellings
FIELD_ALIASES = {
    "unit_price": ["unitPrice", "unit_price", "price"],
    "shelf_life_days": ["shelfLifeDays", "shelf_life_days"],
    "quantity_at_risk": ["quantityAtRisk", "quantity_at_risk"],
    "days_until_expiry": ["daysUntilExpiry", "days_until_expiry"],
}


def _get(row: dict, key: str) -> Any:
    """Fetch a field by any of its accepted spellings."""
    for alias in FIELD_ALIASES.get(key, [key]):
        if alias in row and row[alias] is not None:
            return row[alias]
    return None


def parse_number(value: Any) -> Optional[float]:
    """Parse a finite float, tolerating "1,200" style strings."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.replace(",", "").strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_int(value: Any) -> Optional[int]:
    number = parse_number(value)
    if number is None:
        return None
    return int(number)


def parse_item(row: dict) -> Optional[InventoryItem]:
    """
    Parse a row dict into InventoryItem.

    Returns None if the row can't be used (no SKU, no name, or a missing
    or negative price).
    """
    if not isinstance(row, dict):
        return None

    sku = str(row.get("sku") or "").strip()
    name = str(row.get("name") or "").strip()
    if not sku or not name:
        return None

    unit_price = parse_number(_get(row, "unit_price"))
    if unit_price is None or unit_price < 0:
        return None

    quantity_at_risk = parse_number(_get(row, "quantity_at_risk"))
    if quantity_at_risk is not None and quantity_at_risk < 0:
        quantity_at_risk = None

    return InventoryItem(
        sku=sku,
        name=name,
        brand=str(row.get("brand") or "").strip(),
        category=str(row.get("category") or "").strip(),
        unit_price=unit_price,
        unit=str(row.get("unit") or "").strip(),
        location=str(row.get("location") or "").strip(),
        shelf_life_days=_parse_int(_get(row, "shelf_life_days")) or 0,
        quantity_at_risk=quantity_at_risk,
        days_until_expiry=_parse_int(_get(row, "days_until_expiry")),
    )


def parse_rows(rows: list, source: Optional[Path] = None) -> Catalog:
    """Parse already-decoded rows, keeping source order."""
    items = []
    skipped = 0

    for position, row in enumerate(rows):
        item = parse_item(row)
        if item is None:
            skipped += 1
            logger.warning(f"Skipping malformed catalog row {position}: {row!r}")
            continue
        items.append(item)

    return build_catalog(items, source=source, skipped=skipped)


def load_catalog(catalog_path: str | Path) -> Catalog:
    """
    Load the inventory catalog from a JSON file.

    Args:
        catalog_path: Path to a JSON file holding a list of records

    Returns:
        Catalog in file order

    Raises:
        FileNotFoundError: catalog file does not exist
        ValueError: unsupported format or the document is not a list
    """
    path = Path(catalog_path)
    if not path.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    if path.suffix.lower() != ".json":
        raise ValueError(f"Unsupported catalog format: {path.suffix}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Catalog must be a list of records: {path}")

    catalog = parse_rows(data, source=path)
    logger.info(
        f"Loaded {len(catalog)} catalog items from {path.name}"
        + (f" ({catalog.skipped} skipped)" if catalog.skipped else "")
    )
    return catalog
