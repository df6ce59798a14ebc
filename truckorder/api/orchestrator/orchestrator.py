# truckorder/api/orchestrator/orchestrator.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from truckorder.api.menu_store import MenuCatalog, default_catalog
from truckorder.api.parser.order_extractor import extract_order
from truckorder.api.parser.types import MatchResult
from truckorder.api.prompts import NOT_FOUND_TEXT, added_to_cart_text
from truckorder.api.telemetry.emitter import TelemetryContext, TelemetryEmitter

logger = logging.getLogger("truckorder")


class OrderRoute(str, Enum):
    ADDED = "added"
    NOT_UNDERSTOOD = "not_understood"


@dataclass(frozen=True)
class OrderDecision:
    route: OrderRoute
    results: Tuple[MatchResult, ...]
    response_text: str
    execution_time_ms: float = 0.0


class OrderOrchestrator:
    """
    Entry point for whatever owns speech capture:
      - finalized utterance in, decision out (synchronous, no hidden state)
      - ADDED -> caller mutates its cart and speaks response_text
      - NOT_UNDERSTOOD -> caller re-prompts; telemetry emitted when ctx given
    """

    def __init__(
        self,
        *,
        catalog: Optional[MenuCatalog] = None,
        telemetry: Optional[TelemetryEmitter] = None,
    ):
        self._catalog = catalog if catalog is not None else default_catalog()
        self._telemetry = telemetry

    @property
    def catalog(self) -> MenuCatalog:
        return self._catalog

    def decide(
        self,
        utterance_text: str,
        *,
        telemetry_ctx: Optional[TelemetryContext] = None,
    ) -> OrderDecision:
        start = time.perf_counter()
        results = tuple(extract_order(utterance_text, self._catalog))
        elapsed_ms = round((time.perf_counter() - start) * 1000.0, 3)

        if results:
            logger.info(
                "order: ADDED items=%d qty=%d exec_ms=%.2f",
                len(results),
                results[0].quantity,
                elapsed_ms,
            )
            return OrderDecision(
                route=OrderRoute.ADDED,
                results=results,
                response_text=added_to_cart_text(results),
                execution_time_ms=elapsed_ms,
            )

        decision = OrderDecision(
            route=OrderRoute.NOT_UNDERSTOOD,
            results=(),
            response_text=NOT_FOUND_TEXT,
            execution_time_ms=elapsed_ms,
        )

        if self._telemetry and telemetry_ctx:
            self._telemetry.emit_not_understood(
                ctx=telemetry_ctx,
                utterance=utterance_text,
                decision=decision,
            )

        logger.info("order: NOT_UNDERSTOOD exec_ms=%.2f", elapsed_ms)
        return decision
