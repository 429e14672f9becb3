"""
Configuration for Waste Match.

Handles the catalog location, currency display and flash-sale bounds.
Config is declarative JSON - edit the file, not the code.
"""

import json
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_CONFIG_PATH = Path(__file__).parent / "waste_match_config.json"
DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "inventory.json"


@dataclass
class FlashSaleSettings:
    """Discount bounds for flash-sale quotes (percent)."""
    default_discount_percent: int = 30
    min_discount_percent: int = 10
    max_discount_percent: int = 90

    def clamp(self, discount_percent: Optional[float]) -> int:
        """Keep a requested discount inside the configured range. NaN/inf count as 0."""
        if discount_percent is None:
            return self.default_discount_percent
        value = float(discount_percent)
        if not math.isfinite(value):
            value = 0
        return max(self.min_discount_percent, min(self.max_discount_percent, int(value)))


@dataclass
class Config:
    """Full configuration for waste match."""
    catalog_path: Path = DEFAULT_CATALOG_PATH
    currency_symbol: str = "₹"
    default_within_days: int = 30
    flash_sale: FlashSaleSettings = field(default_factory=FlashSaleSettings)


def load_config(config_path: Optional[str | Path] = None) -> Config:
    """
    Load configuration from JSON file.

    Args:
        config_path: Path to waste_match_config.json (defaults to the bundled file)

    Returns:
        Config object. A relative catalog_path resolves against the
        config file's directory.
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    catalog_path = data.get("catalog_path")
    if catalog_path:
        catalog_path = Path(catalog_path)
        if not catalog_path.is_absolute():
            catalog_path = path.parent / catalog_path
    else:
        catalog_path = DEFAULT_CATALOG_PATH

    sale_data = data.get("flash_sale", {})
    flash_sale = FlashSaleSettings(
        default_discount_percent=sale_data.get("default_discount_percent", 30),
        min_discount_percent=sale_data.get("min_discount_percent", 10),
        max_discount_percent=sale_data.get("max_discount_percent", 90),
    )

    return Config(
        catalog_path=catalog_path,
        currency_symbol=data.get("currency_symbol", "₹"),
        default_within_days=data.get("default_within_days", 30),
        flash_sale=flash_sale,
    )
