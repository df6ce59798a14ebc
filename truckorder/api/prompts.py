# truckorder/api/prompts.py
"""
Text the voice/UI layer speaks or displays after an order attempt.

This module contains ONLY response wording and composition.
- the orchestrator decides which response applies
- callers own speech synthesis and on-screen display
"""

from typing import Sequence

from .menu_store import MenuItem
from .parser.types import MatchResult
from .text import format_price

NOT_FOUND_TEXT = "Sorry, I couldn't find that item on our menu."


def added_to_cart_text(results: Sequence[MatchResult]) -> str:
    """'Added 2 Chicken Tacos, 2 Loaded Nachos to your cart!'"""
    names = ", ".join(f"{r.quantity} {r.item.name}" for r in results)
    return f"Added {names} to your cart!"


def click_to_add_text(item: MenuItem) -> str:
    return f"Added {item.name} to cart"


def describe_item(item: MenuItem) -> str:
    return f"{item.name} - {format_price(item.price)}"
