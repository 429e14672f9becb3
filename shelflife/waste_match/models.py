"""
Data models for Waste Match.

All structured data uses dataclasses for type hints, __eq__, and __repr__.
Catalog records are frozen - nothing downstream of the loader may change them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class MatchedBy(Enum):
    """Which criterion produced a match, in decreasing specificity."""
    SKU = "sku"
    NAME = "name"
    BRAND = "brand"
    CATEGORY = "category"


class Urgency(Enum):
    """Expiry urgency tiers used by the timeline."""
    CRITICAL = "critical"  # <= 3 days
    HIGH = "high"          # <= 7 days
    MEDIUM = "medium"      # <= 14 days
    LOW = "low"            # <= 30 days
    NONE = "none"


@dataclass(frozen=True)
class InventoryItem:
    """
    A single catalog record.

    Prices are per `unit` (e.g. "per pack", "per kg").
    """
    sku: str
    name: str
    brand: str
    category: str
    unit_price: float
    unit: str = ""
    location: str = ""
    shelf_life_days: int = 0
    quantity_at_risk: Optional[float] = None
    days_until_expiry: Optional[int] = None

    def to_dict(self) -> dict:
        """Serialize using the catalog source's camelCase keys."""
        return {
            "sku": self.sku,
            "name": self.name,
            "brand": self.brand,
            "category": self.category,
            "unitPrice": self.unit_price,
            "unit": self.unit,
            "location": self.location,
            "shelfLifeDays": self.shelf_life_days,
            "quantityAtRisk": self.quantity_at_risk,
            "daysUntilExpiry": self.days_until_expiry,
        }


@dataclass(frozen=True)
class MatchQuery:
    """Free-form lookup query. Empty or missing fields are ignored."""
    sku: Optional[str] = None
    name: Optional[str] = None
    brand: Optional[str] = None
    category: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "MatchQuery":
        if not data:
            return cls()
        return cls(
            sku=data.get("sku"),
            name=data.get("name"),
            brand=data.get("brand"),
            category=data.get("category"),
        )


@dataclass(frozen=True)
class MatchResult:
    """A ranked candidate for a query."""
    item: InventoryItem
    match_confidence: float
    matched_by: MatchedBy

    def to_dict(self) -> dict:
        return {
            "item": self.item.to_dict(),
            "matchConfidence": self.match_confidence,
            "matchedBy": self.matched_by.value,
        }


@dataclass(frozen=True)
class LossEstimate:
    """Money lost if `quantity` units of `item` go to waste."""
    item: InventoryItem
    quantity: float
    total_value: float
    per_unit_value: float

    def to_dict(self) -> dict:
        return {
            "item": self.item.to_dict(),
            "quantity": self.quantity,
            "totalValue": self.total_value,
            "perUnitValue": self.per_unit_value,
        }


@dataclass(frozen=True)
class WasteRiskAssessment:
    """
    Risk spotlight for one at-risk batch.

    Values the caller did not supply are inferred from the resolved
    catalog item. `total_loss` is None when quantity or price is unknown.
    """
    item_name: str
    item: Optional[InventoryItem]
    sku: Optional[str]
    quantity: Optional[float]
    unit_price: Optional[float]
    days_until_expiry: Optional[int]
    location: Optional[str]
    total_loss: Optional[float]
    notes: tuple[str, ...] = ()

    @property
    def per_unit_loss(self) -> Optional[float]:
        return self.unit_price

    def to_dict(self) -> dict:
        return {
            "itemName": self.item_name,
            "sku": self.sku,
            "item": self.item.to_dict() if self.item else None,
            "quantity": self.quantity,
            "unitPrice": self.unit_price,
            "perUnitLoss": self.per_unit_loss,
            "daysUntilExpiry": self.days_until_expiry,
            "location": self.location,
            "totalLoss": self.total_loss,
            "notes": list(self.notes),
        }


@dataclass(frozen=True)
class TimelineEntry:
    """One row of the expiry timeline."""
    item: InventoryItem
    days_until_expiry: int
    quantity: float
    loss: float
    urgency: Urgency
    label: str

    def to_dict(self) -> dict:
        return {
            "sku": self.item.sku,
            "name": self.item.name,
            "daysUntilExpiry": self.days_until_expiry,
            "quantity": self.quantity,
            "unitPrice": self.item.unit_price,
            "loss": self.loss,
            "category": self.item.category,
            "location": self.item.location,
            "urgency": self.urgency.value,
            "label": self.label,
        }


@dataclass(frozen=True)
class ExpiryTimeline:
    """Expiring stock ordered soonest first."""
    within_days: int
    entries: tuple[TimelineEntry, ...] = field(default_factory=tuple)

    @property
    def total_at_risk(self) -> float:
        return sum(entry.loss for entry in self.entries)

    def to_dict(self) -> dict:
        return {
            "withinDays": self.within_days,
            "entries": [entry.to_dict() for entry in self.entries],
            "count": len(self.entries),
            "totalAtRisk": self.total_at_risk,
        }


@dataclass(frozen=True)
class FlashSaleQuote:
    """Discounted offer for clearing at-risk stock."""
    product_name: str
    current_price: float
    stock: int
    discount_percent: int
    new_price: int
    recovered_revenue: int
    message: str
    share_url: str

    def to_dict(self) -> dict:
        return {
            "productName": self.product_name,
            "currentPrice": self.current_price,
            "stock": self.stock,
            "discountPercent": self.discount_percent,
            "newPrice": self.new_price,
            "recoveredRevenue": self.recovered_revenue,
            "message": self.message,
            "shareUrl": self.share_url,
        }
