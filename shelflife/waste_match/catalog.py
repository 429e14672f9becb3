"""
Catalog - the immutable, ordered set of inventory records.

Catalog order is meaningful: it is the iteration order for first-match
resolution and for tie-breaking equal confidences. Normalized lookup keys
are built once at construction so the matcher never re-folds strings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional

from .models import InventoryItem


def normalize(value: Optional[str]) -> str:
    """Fold to lowercase and trim. None folds to ""."""
    if value is None:
        return ""
    return value.lower().strip()


@dataclass(frozen=True)
class ItemKeys:
    """Normalized searchable fields for one item."""
    sku: str
    name: str
    brand: str
    category: str


@dataclass(frozen=True)
class Catalog:
    """
    Indexed inventory catalog.

    Attributes:
        items: Records in source order
        source: Where the records were loaded from (None for in-memory catalogs)
        skipped: Number of malformed source rows left out at load time
    """
    items: tuple[InventoryItem, ...] = ()
    source: Optional[Path] = None
    skipped: int = 0
    _keys: tuple[ItemKeys, ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self):
        # Accept any iterable but always store a tuple
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "_keys", tuple(
            ItemKeys(
                sku=normalize(item.sku),
                name=normalize(item.name),
                brand=normalize(item.brand),
                category=normalize(item.category),
            )
            for item in self.items
        ))

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def list_items(self) -> list[InventoryItem]:
        """All records in catalog order."""
        return list(self.items)

    def entries(self) -> Iterator[tuple[InventoryItem, ItemKeys]]:
        """Records paired with their normalized keys, in catalog order."""
        return zip(self.items, self._keys)


def build_catalog(
    items: Iterable[InventoryItem],
    source: Optional[Path] = None,
    skipped: int = 0,
) -> Catalog:
    """Build a catalog from already-parsed records."""
    return Catalog(items=tuple(items), source=source, skipped=skipped)


def list_catalog(catalog: Catalog) -> list[InventoryItem]:
    """Every catalog record, in order."""
    return catalog.list_items()
