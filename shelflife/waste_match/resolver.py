"""
Item Resolver - Quick single-item lookup by name or SKU.

Used where one best guess is enough (e.g. filling in a risk card).
No ranking: exact SKU/name first, then the first name containing the
query.
"""

from typing import Optional

from .catalog import Catalog, normalize
from .models import InventoryItem


def resolve_item(catalog: Catalog, query: Optional[str]) -> Optional[InventoryItem]:
    """
    Resolve a name or SKU to a single catalog item.

    Returns None for an empty query or when nothing matches.
    """
    q = normalize(query)
    if not q:
        return None

    for item, keys in catalog.entries():
        if keys.sku == q or keys.name == q:
            return item

    for item, keys in catalog.entries():
        if q in keys.name:
            return item

    return None
