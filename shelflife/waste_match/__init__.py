# Waste Match: inventory lookup, loss and expiry engine
# Siloed module - no imports from backend

from .models import (
    InventoryItem, MatchQuery, MatchResult, MatchedBy, LossEstimate,
    WasteRiskAssessment, ExpiryTimeline, TimelineEntry, Urgency, FlashSaleQuote,
)
from .config import load_config, Config, FlashSaleSettings
from .catalog import Catalog, build_catalog, list_catalog, normalize
from .catalog_loader import load_catalog, parse_item
from .resolver import resolve_item
from .matcher import match_items
from .loss import estimate_loss
from .expiry import expiring_items, build_expiry_timeline
from .risk import assess_waste_risk
from .flash_sale import build_flash_sale
from .report import format_currency, format_matches, format_timeline, export_timeline_csv

__version__ = "1.0.0"

__all__ = [
    # Models
    "InventoryItem",
    "MatchQuery",
    "MatchResult",
    "MatchedBy",
    "LossEstimate",
    "WasteRiskAssessment",
    "ExpiryTimeline",
    "TimelineEntry",
    "Urgency",
    "FlashSaleQuote",
    # Config
    "Config",
    "FlashSaleSettings",
    "load_config",
    # Catalog
    "Catalog",
    "build_catalog",
    "list_catalog",
    "normalize",
    "load_catalog",
    "parse_item",
    # Lookup
    "resolve_item",
    "match_items",
    # Loss and expiry
    "estimate_loss",
    "expiring_items",
    "build_expiry_timeline",
    "assess_waste_risk",
    "build_flash_sale",
    # Report
    "format_currency",
    "format_matches",
    "format_timeline",
    "export_timeline_csv",
]
