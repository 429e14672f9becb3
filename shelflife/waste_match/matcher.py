"""
Waste Matcher - Core lookup engine.

Resolves partial or misspelled identifiers against the catalog.

Priority tiers (first rule that fires wins, one result per item):
| Rule     | Fires when                                    | Confidence |
|----------|-----------------------------------------------|------------|
| sku      | query SKU == item SKU                         | 1.0        |
| name     | item name contains query name, or vice versa  | 0.9        |
| brand    | item brand contains query brand               | 0.6        |
| category | item category contains query category         | 0.4        |

If nothing fires and a name was given, a coarse token-overlap pass
(fuzzy fallback) gives the query a last chance.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from .catalog import Catalog, ItemKeys, normalize
from .models import MatchedBy, MatchQuery, MatchResult

logger = logging.getLogger(__name__)

MAX_RESULTS = 5
MAX_FUZZY_RESULTS = 3

# Fuzzy fallback heuristics. Changing any of these changes ranking output.
FUZZY_MIN_CONFIDENCE = 0.3     # strictly greater than this to be kept
FUZZY_FLOOR = 0.2
FUZZY_LENGTH_PENALTY = 0.02    # per character of length difference


@dataclass(frozen=True)
class MatchRule:
    """One priority tier: a predicate over normalized (query, item) keys."""
    matched_by: MatchedBy
    confidence: float
    fires: Callable[[ItemKeys, ItemKeys], bool]


# Evaluated top to bottom. Order and confidences are part of the contract.
MATCH_RULES: tuple[MatchRule, ...] = (
    MatchRule(
        MatchedBy.SKU, 1.0,
        lambda q, k: bool(q.sku) and k.sku == q.sku,
    ),
    MatchRule(
        MatchedBy.NAME, 0.9,
        lambda q, k: bool(q.name) and (q.name in k.name or k.name in q.name),
    ),
    MatchRule(
        MatchedBy.BRAND, 0.6,
        lambda q, k: bool(q.brand) and q.brand in k.brand,
    ),
    MatchRule(
        MatchedBy.CATEGORY, 0.4,
        lambda q, k: bool(q.category) and q.category in k.category,
    ),
)


def _normalize_query(query: Optional[MatchQuery | dict]) -> ItemKeys:
    if query is None or isinstance(query, dict):
        query = MatchQuery.from_dict(query)
    return ItemKeys(
        sku=normalize(query.sku),
        name=normalize(query.name),
        brand=normalize(query.brand),
        category=normalize(query.category),
    )


def _first_rule(query: ItemKeys, keys: ItemKeys) -> Optional[MatchRule]:
    for rule in MATCH_RULES:
        if rule.fires(query, keys):
            return rule
    return None


def fuzzy_confidence(item_name: str, query_name: str) -> float:
    """
    Token-overlap score for an already-normalized item name and query.

    overlap counts item-name tokens found anywhere inside the query string,
    then a small penalty is taken per character of length difference.
    """
    tokens = item_name.split()
    overlap = sum(1 for token in tokens if token in query_name)
    length_diff = abs(len(item_name) - len(query_name))
    return max(FUZZY_FLOOR, overlap / max(1, len(tokens)) - length_diff * FUZZY_LENGTH_PENALTY)


def _fuzzy_matches(catalog: Catalog, query_name: str) -> list[MatchResult]:
    candidates = []
    for item, keys in catalog.entries():
        confidence = fuzzy_confidence(keys.name, query_name)
        if confidence > FUZZY_MIN_CONFIDENCE:
            candidates.append(MatchResult(item, confidence, MatchedBy.NAME))

    candidates.sort(key=lambda r: r.match_confidence, reverse=True)
    return candidates[:MAX_FUZZY_RESULTS]


def match_items(
    catalog: Catalog,
    query: Optional[MatchQuery | dict] = None,
) -> list[MatchResult]:
    """
    Find catalog items for a free-form query.

    Args:
        catalog: Catalog to search
        query: MatchQuery or dict with optional sku/name/brand/category.
            None is the same as an empty query.

    Returns:
        Matches ordered by confidence (ties keep catalog order). At most 5
        from the primary tiers, at most 3 from the fuzzy fallback. Empty
        list when nothing matches.
    """
    q = _normalize_query(query)

    results = []
    for item, keys in catalog.entries():
        rule = _first_rule(q, keys)
        if rule is not None:
            results.append(MatchResult(item, rule.confidence, rule.matched_by))

    if not results and q.name:
        logger.debug(f"No direct match for {q.name!r}, trying fuzzy fallback")
        fuzzy = _fuzzy_matches(catalog, q.name)
        if fuzzy:
            return fuzzy

    # Stable sort: equal confidences stay in catalog order
    results.sort(key=lambda r: r.match_confidence, reverse=True)
    return results[:MAX_RESULTS]
