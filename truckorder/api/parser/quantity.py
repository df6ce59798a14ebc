from __future__ import annotations

import re

from ..text import lower_text

DEFAULT_QUANTITY = 1

# CPython's default int-from-str limit; longer runs are transcript noise
MAX_DIGITS = 4300

_EN = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
}

# Leftmost match wins; no word boundaries ("someone" -> one). ASCII digits only.
_QTY_RX = re.compile(r"\d+|one|two|three|four|five", re.ASCII)


def extract_quantity(utterance: str) -> int:
    """
    Deterministically extract an order quantity from free text.

    Rules:
    - Scan the lowercased text for the first run of digits or one of the
      words one..five.
    - Words map through a fixed lookup, digits parse as base-10.
    - No match, a parsed value of 0, or a digit run longer than MAX_DIGITS
      falls back to 1.

    Total: never raises, always returns an int >= 1.
    """
    t = lower_text(utterance)
    if not t:
        return DEFAULT_QUANTITY

    m = _QTY_RX.search(t)
    if not m:
        return DEFAULT_QUANTITY

    tok = m.group(0)
    if tok in _EN:
        return _EN[tok]

    if len(tok) > MAX_DIGITS:
        return DEFAULT_QUANTITY
    try:
        val = int(tok, 10)
    except ValueError:
        # interpreter limit lowered via PYTHONINTMAXSTRDIGITS
        return DEFAULT_QUANTITY
    # "0" / "00" never yields a zero-quantity order
    return val or DEFAULT_QUANTITY
