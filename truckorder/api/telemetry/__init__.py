from __future__ import annotations

from .emitter import TelemetryContext, TelemetryEmitter, TelemetryEvent, redact_utterance

_emitter: TelemetryEmitter | None = None


def get_telemetry_emitter() -> TelemetryEmitter:
    global _emitter
    if _emitter is None:
        _emitter = TelemetryEmitter()
    return _emitter


__all__ = [
    "TelemetryContext",
    "TelemetryEmitter",
    "TelemetryEvent",
    "get_telemetry_emitter",
    "redact_utterance",
]
