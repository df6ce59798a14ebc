from __future__ import annotations

from typing import Iterable, List

from ..menu_store import MenuItem
from .matcher import match_items
from .quantity import extract_quantity
from .types import MatchResult


def extract_order(utterance: str, catalog: Iterable[MenuItem]) -> List[MatchResult]:
    """
    Turns one utterance into (item, quantity) pairs.

    The first quantity in the utterance applies to every matched item
    ("two burgers and three tacos" -> 2 of each). An empty list means the
    utterance was not understood; quantity is never 0.
    """
    items = match_items(utterance, catalog)
    if not items:
        return []

    qty = extract_quantity(utterance)
    return [MatchResult(item=it, quantity=qty) for it in items]
