# truckorder/api/text.py
from __future__ import annotations


def lower_text(s) -> str:
    """
    Lowercases an utterance or menu string for substring matching.
    - None and non-string input become ""
    - no punctuation stripping ("fish & chips" must still match "&")
    """
    if not isinstance(s, str):
        return ""
    return s.lower()


def format_price(amount: float) -> str:
    return f"${amount:.2f}"
