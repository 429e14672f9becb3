"""
Waste Risk - Projected loss for one at-risk batch.

Callers usually know only part of the picture (a name, maybe a count).
Anything missing is filled in from the catalog item the name or SKU
resolves to.
"""

from typing import Any, Iterable, Optional

from .catalog import Catalog
from .catalog_loader import parse_number
from .models import WasteRiskAssessment
from .resolver import resolve_item


def assess_waste_risk(
    catalog: Catalog,
    item_name: str,
    sku: Optional[str] = None,
    quantity: Any = None,
    unit_price: Any = None,
    days_until_expiry: Optional[int] = None,
    location: Optional[str] = None,
    notes: Optional[Iterable[str]] = None,
) -> WasteRiskAssessment:
    """
    Build a risk assessment, inferring gaps from the catalog.

    Args:
        catalog: Catalog to resolve against
        item_name: Display name for the batch
        sku: Preferred lookup key; item_name is used when absent or empty
        quantity: Units at risk (number or numeric string)
        unit_price: Selling price per unit (number or numeric string)
        days_until_expiry: Days remaining before the batch expires
        location: Shelf or storage location
        notes: Short action cues passed through unchanged

    Returns:
        WasteRiskAssessment. total_loss is None when quantity or unit price
        is still unknown after inference.
    """
    item = resolve_item(catalog, sku or item_name)

    resolved_quantity = parse_number(quantity)
    if resolved_quantity is None and item is not None:
        resolved_quantity = item.quantity_at_risk

    resolved_price = parse_number(unit_price)
    if resolved_price is None and item is not None:
        resolved_price = item.unit_price

    if days_until_expiry is None and item is not None:
        days_until_expiry = item.days_until_expiry

    if location is None and item is not None:
        location = item.location or None

    total_loss = None
    if resolved_quantity is not None and resolved_price is not None:
        total_loss = resolved_quantity * resolved_price

    return WasteRiskAssessment(
        item_name=item_name,
        item=item,
        sku=sku or (item.sku if item else None),
        quantity=resolved_quantity,
        unit_price=resolved_price,
        days_until_expiry=days_until_expiry,
        location=location,
        total_loss=total_loss,
        notes=tuple(notes or ()),
    )
