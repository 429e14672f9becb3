"""
Loss Estimator - What an at-risk quantity is worth.
"""

import math
from typing import Optional

from .catalog import Catalog
from .matcher import match_items
from .models import LossEstimate, MatchQuery


def estimate_loss(
    catalog: Catalog,
    name_or_sku: Optional[str],
    quantity: float,
) -> Optional[LossEstimate]:
    """
    Estimate the money lost if `quantity` units of an item are wasted.

    The identifier is tried as both SKU and name; only the top-ranked
    match is used. A non-finite quantity falls back to the item's
    quantity_at_risk (or 0).

    Returns None for an empty identifier, a quantity <= 0, or no match.
    """
    if not name_or_sku or quantity <= 0:
        return None

    matches = match_items(catalog, MatchQuery(sku=name_or_sku, name=name_or_sku))
    if not matches:
        return None

    item = matches[0].item
    if math.isfinite(quantity):
        effective_quantity = quantity
    else:
        effective_quantity = item.quantity_at_risk if item.quantity_at_risk is not None else 0

    return LossEstimate(
        item=item,
        quantity=effective_quantity,
        total_value=item.unit_price * effective_quantity,
        per_unit_value=item.unit_price,
    )
