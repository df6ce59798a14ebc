from __future__ import annotations

from dataclasses import dataclass

from ..menu_store import MenuItem


@dataclass(frozen=True)
class MatchResult:
    item: MenuItem
    quantity: int  # always >= 1

    @property
    def line_total(self) -> float:
        return round(self.item.price * self.quantity, 2)
