from __future__ import annotations

from typing import Iterable, List

from ..menu_store import MenuItem
from ..text import lower_text


def item_matches(text: str, item: MenuItem) -> bool:
    """
    Match precedence for one item, first rule wins:
      1. full name appears in the text
      2. multi-keyword item: ALL keywords appear
      3. single-keyword item: that keyword appears

    `text` must already be lowercased.
    """
    if lower_text(item.name) in text:
        return True

    keywords = item.keywords
    if len(keywords) > 1:
        return all(lower_text(kw) in text for kw in keywords)
    if len(keywords) == 1:
        return lower_text(keywords[0]) in text
    return False


def match_items(utterance: str, catalog: Iterable[MenuItem]) -> List[MenuItem]:
    """
    Items the utterance refers to, in catalog order. Each item is tested once,
    so duplicates cannot occur. Unmatched text yields [] (never raises).
    """
    t = lower_text(utterance)
    if not t:
        return []
    return [it for it in catalog if item_matches(t, it)]
