from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

from .. import settings

logger = logging.getLogger("truckorder")

MAX_UTTERANCE = 100

# Quantities ("2", "10") pass through; five or more digits in one run, with
# phone-style separators allowed between them, are contact or card numbers.
_LONG_DIGITS_RX = re.compile(r"\+?\d(?:[\s().-]*\d){4,}")
_EMAIL_RX = re.compile(r"[^\s@]+@[^\s@]+\.[a-z]{2,}", re.I)


@dataclass(frozen=True)
class TelemetryContext:
    session_id: str
    truck_id: str


@dataclass(frozen=True)
class TelemetryEvent:
    ts: datetime
    session_id: str
    truck_id: str
    event: str
    route: str
    utterance_redacted: str
    pii_redacted: bool
    truncation: str
    execution_time_ms: float


def redact_utterance(text: str) -> Tuple[str, bool, str]:
    """
    Returns (redacted, pii_redacted, truncation) for a not-understood utterance.
    truncation is "NONE" or "HEAD" (first MAX_UTTERANCE chars kept, ending in …).
    """
    if not isinstance(text, str) or not text.strip():
        return "", False, "NONE"

    raw = text.strip()
    red = _EMAIL_RX.sub("[EMAIL]", raw)
    red = _LONG_DIGITS_RX.sub("[NUMBER]", red)
    pii_redacted = red != raw

    if len(red) <= MAX_UTTERANCE:
        return red, pii_redacted, "NONE"
    return red[: MAX_UTTERANCE - 1] + "…", pii_redacted, "HEAD"


SinkFn = Callable[[TelemetryEvent], None]


def _log_sink(evt: TelemetryEvent) -> None:
    logger.info(
        "telemetry: %s session=%s truck=%s utterance=%r pii_redacted=%s",
        evt.event,
        evt.session_id,
        evt.truck_id,
        evt.utterance_redacted,
        evt.pii_redacted,
    )


class TelemetryEmitter:
    """
    Best-effort emitter. Never raises into the ordering path.

    The sink is called inline and must be cheap (append to a queue, log line).
    Defaults to a log sink.
    """

    def __init__(self, sink: Optional[SinkFn] = None, *, enabled: Optional[bool] = None) -> None:
        self._sink: SinkFn = sink or _log_sink
        self._enabled = settings.TELEMETRY_ENABLED if enabled is None else bool(enabled)

    @property
    def enabled(self) -> bool:
        return self._enabled

    def emit_not_understood(
        self,
        *,
        ctx: TelemetryContext,
        utterance: str,
        decision,  # keep untyped here to avoid import coupling
    ) -> None:
        """
        Called by the orchestrator. Must never raise.
        Expects decision to expose:
          - route.value
          - execution_time_ms
        """
        if not self._enabled:
            return

        try:
            utter_red, pii_redacted, trunc = redact_utterance(utterance)

            evt = TelemetryEvent(
                ts=datetime.now(timezone.utc),
                session_id=str(getattr(ctx, "session_id", "") or "unknown"),
                truck_id=str(getattr(ctx, "truck_id", "") or "unknown"),
                event="order_not_understood",
                route=str(getattr(getattr(decision, "route", None), "value", "UNKNOWN")),
                utterance_redacted=utter_red,
                pii_redacted=bool(pii_redacted),
                truncation=str(trunc),
                execution_time_ms=float(getattr(decision, "execution_time_ms", 0.0) or 0.0),
            )
            self._sink(evt)
        except Exception:
            logger.debug("telemetry: emit failed", exc_info=True)
