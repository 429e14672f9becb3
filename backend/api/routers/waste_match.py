"""
Waste match API router.

Tool endpoints for the chat/UI layer: catalog listing, ranked matching,
loss estimates, expiry queries, risk spotlights and flash-sale quotes.
"Not found" is a null payload, not a 404.
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from backend.api.models import (
    MatchRequest, LossEstimateRequest, WasteRiskRequest, FlashSaleRequest
)
from backend.core.config import settings

from shelflife.waste_match import (
    Catalog, Config, load_config, load_catalog,
    match_items, estimate_loss, expiring_items, resolve_item,
    build_expiry_timeline, assess_waste_risk, build_flash_sale, MatchQuery,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Waste Match"])

# Loaded on first use. The catalog slot is only ever replaced whole.
_waste_match_state = {
    "config": None,
    "catalog": None,
    "initialized": False,
}


def set_catalog(catalog: Catalog, config: Optional[Config] = None):
    """Swap in a catalog (and optionally config)."""
    if config is not None:
        _waste_match_state["config"] = config
    elif _waste_match_state["config"] is None:
        _waste_match_state["config"] = Config()
    _waste_match_state["catalog"] = catalog
    _waste_match_state["initialized"] = True


def _catalog_path(config: Config) -> Path:
    if settings.CATALOG_PATH:
        return Path(settings.CATALOG_PATH)
    return config.catalog_path


def _config() -> Config:
    """
    Engine config, loaded once from WASTE_MATCH_CONFIG (or the bundled file).

    Cached independently of the catalog so a missing catalog file never
    hides the configured settings.

    Raises:
        FileNotFoundError, ValueError: config file missing or invalid
    """
    if _waste_match_state["config"] is None:
        _waste_match_state["config"] = load_config(settings.CONFIG_PATH or None)
    return _waste_match_state["config"]


def _init_waste_match() -> bool:
    """Load config and catalog if not already done."""
    if _waste_match_state["initialized"]:
        return True

    try:
        config = _config()
        catalog = load_catalog(_catalog_path(config))
    except (FileNotFoundError, ValueError) as e:
        logger.warning(f"Failed to initialize waste match: {e}")
        return False

    set_catalog(catalog, config)
    return True


def _require_catalog() -> Catalog:
    _init_waste_match()
    catalog = _waste_match_state.get("catalog")
    if catalog is None:
        raise HTTPException(status_code=503, detail="Inventory catalog not loaded")
    return catalog


def _require_config() -> Config:
    try:
        return _config()
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Waste match config not loaded: {e}")


@router.get("/api/catalog/status")
def catalog_status():
    """Get catalog load status."""
    _init_waste_match()
    catalog = _waste_match_state.get("catalog")

    return {
        "loaded": catalog is not None,
        "itemCount": len(catalog) if catalog else 0,
        "skipped": catalog.skipped if catalog else 0,
        "source": str(catalog.source) if catalog and catalog.source else None,
    }


@router.post("/api/catalog/reload")
def reload_catalog():
    """Re-read the catalog file and swap it in."""
    try:
        config = _config()
        catalog = load_catalog(_catalog_path(config))
    except (FileNotFoundError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Catalog reload failed: {e}")

    set_catalog(catalog, config)
    logger.info(f"Catalog reloaded with {len(catalog)} items")
    return {"reloaded": True, "itemCount": len(catalog), "skipped": catalog.skipped}


@router.get("/api/catalog")
def list_catalog_items():
    """List every inventory item with SKU, unit price and storage hints."""
    catalog = _require_catalog()
    items = [item.to_dict() for item in catalog]
    return {"items": items, "count": len(items)}


@router.post("/api/catalog/matches")
def find_matches(request: Optional[MatchRequest] = None):
    """Find items by SKU, brand, category or fuzzy name. Ranked by confidence."""
    catalog = _require_catalog()
    query = MatchQuery(**request.model_dump()) if request else None

    results = match_items(catalog, query)
    return {
        "matches": [r.to_dict() for r in results],
        "count": len(results),
    }


@router.post("/api/catalog/loss-estimate")
def loss_estimate(request: LossEstimateRequest):
    """Estimate total loss for an item given its name or SKU plus quantity at risk."""
    catalog = _require_catalog()
    estimate = estimate_loss(catalog, request.nameOrSku, request.quantity)
    return {"estimate": estimate.to_dict() if estimate else None}


@router.get("/api/catalog/expiring")
def list_expiring(within_days: Optional[int] = Query(None, alias="withinDays")):
    """Items expiring within the window, soonest first."""
    catalog = _require_catalog()
    window = within_days if within_days is not None else _config().default_within_days

    items = [item.to_dict() for item in expiring_items(catalog, window)]
    return {"withinDays": window, "items": items, "count": len(items)}


@router.get("/api/catalog/resolve")
def resolve(q: str = Query("")):
    """Resolve a name or SKU to a single item."""
    catalog = _require_catalog()
    item = resolve_item(catalog, q)
    return {"query": q, "item": item.to_dict() if item else None}


@router.get("/api/catalog/expiry-timeline")
def expiry_timeline(within_days: Optional[int] = Query(None, alias="withinDays")):
    """Expiry timeline with urgency tiers and total value at risk."""
    catalog = _require_catalog()
    window = within_days if within_days is not None else _config().default_within_days

    timeline = build_expiry_timeline(catalog, window)
    payload = timeline.to_dict()
    payload["currencySymbol"] = _config().currency_symbol
    return payload


@router.post("/api/catalog/waste-risk")
def waste_risk(request: WasteRiskRequest):
    """Projected loss for an at-risk batch, filling gaps from the catalog."""
    catalog = _require_catalog()
    assessment = assess_waste_risk(
        catalog,
        request.itemName,
        sku=request.sku,
        quantity=request.quantity,
        unit_price=request.unitPrice,
        days_until_expiry=request.daysUntilExpiry,
        location=request.location,
        notes=request.notes,
    )
    payload = assessment.to_dict()
    payload["currencySymbol"] = _config().currency_symbol
    return payload


@router.post("/api/catalog/flash-sale")
def flash_sale(request: FlashSaleRequest):
    """Quote a flash sale with a shareable WhatsApp link."""
    config = _require_config()
    quote = build_flash_sale(
        request.productName,
        request.currentPrice,
        request.stock,
        discount_percent=request.discountPercent,
        settings=config.flash_sale,
        currency_symbol=config.currency_symbol,
    )
    return quote.to_dict()
