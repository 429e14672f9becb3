"""
Expiry - Expiring stock and the urgency timeline built from it.

Urgency tiers:
| Days left | Tier     |
|-----------|----------|
| <= 3      | critical |
| <= 7      | high     |
| <= 14     | medium   |
| <= 30     | low      |
| > 30      | none     |
"""

from .catalog import Catalog
from .models import ExpiryTimeline, InventoryItem, TimelineEntry, Urgency

DEFAULT_WITHIN_DAYS = 30

URGENCY_TIERS = (
    (3, Urgency.CRITICAL),
    (7, Urgency.HIGH),
    (14, Urgency.MEDIUM),
    (30, Urgency.LOW),
)


def expiring_items(catalog: Catalog, within_days: float = DEFAULT_WITHIN_DAYS) -> list[InventoryItem]:
    """
    Items expiring within `within_days`, soonest first.

    Items without a days_until_expiry value are never included.
    """
    expiring = [
        item for item in catalog
        if item.days_until_expiry is not None and item.days_until_expiry <= within_days
    ]
    return sorted(expiring, key=lambda item: item.days_until_expiry)


def urgency_for(days: int) -> Urgency:
    for limit, urgency in URGENCY_TIERS:
        if days <= limit:
            return urgency
    return Urgency.NONE


def urgency_label(days: int) -> str:
    """Short human label for days remaining."""
    if days <= 0:
        return "EXPIRED"
    if days == 1:
        return "Tomorrow"
    if days <= 3:
        return f"{days} days - URGENT"
    return f"{days} days"


def build_expiry_timeline(catalog: Catalog, within_days: int = DEFAULT_WITHIN_DAYS) -> ExpiryTimeline:
    """
    Timeline of expiring stock with per-item loss.

    Quantity is the item's quantity_at_risk (0 when unknown), so an item
    with no recorded risk still shows up but contributes no loss.
    """
    entries = []
    for item in expiring_items(catalog, within_days):
        quantity = item.quantity_at_risk or 0
        days = item.days_until_expiry
        entries.append(TimelineEntry(
            item=item,
            days_until_expiry=days,
            quantity=quantity,
            loss=quantity * item.unit_price,
            urgency=urgency_for(days),
            label=urgency_label(days),
        ))

    return ExpiryTimeline(within_days=within_days, entries=tuple(entries))
