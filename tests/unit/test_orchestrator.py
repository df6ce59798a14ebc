import logging

from truckorder.api.orchestrator import OrderOrchestrator, OrderRoute
from truckorder.api.prompts import NOT_FOUND_TEXT
from truckorder.api.telemetry.emitter import TelemetryContext, TelemetryEmitter
from tests.helpers.menu_fixtures import truck_test_catalog


def test_orchestrator_match_routes_added():
    orch = OrderOrchestrator(catalog=truck_test_catalog())
    d = orch.decide("Two tacos please")
    assert d.route == OrderRoute.ADDED
    assert [(r.item.name, r.quantity) for r in d.results] == [("Chicken Tacos", 2)]
    assert d.response_text == "Added 2 Chicken Tacos to your cart!"
    assert d.execution_time_ms >= 0


def test_orchestrator_lists_every_item_in_confirmation():
    orch = OrderOrchestrator(catalog=truck_test_catalog())
    d = orch.decide("2 burgers and nachos")
    assert d.response_text == "Added 2 Classic Burger, 2 Loaded Nachos to your cart!"


def test_orchestrator_no_match_routes_not_understood():
    orch = OrderOrchestrator(catalog=truck_test_catalog())
    d = orch.decide("surprise me")
    assert d.route == OrderRoute.NOT_UNDERSTOOD
    assert d.results == ()
    assert d.response_text == NOT_FOUND_TEXT


def test_orchestrator_defaults_to_bundled_menu():
    orch = OrderOrchestrator()
    assert len(orch.catalog) == 6
    d = orch.decide("one loaded nachos")
    assert d.route == OrderRoute.ADDED


def test_no_match_emits_telemetry_when_ctx_given():
    events = []
    orch = OrderOrchestrator(
        catalog=truck_test_catalog(),
        telemetry=TelemetryEmitter(events.append, enabled=True),
    )
    orch.decide("call me at +31 6 1234 5678", telemetry_ctx=TelemetryContext("s-1", "truck-7"))

    assert len(events) == 1
    evt = events[0]
    assert evt.event == "order_not_understood"
    assert evt.route == "not_understood"
    assert evt.session_id == "s-1"
    assert evt.truck_id == "truck-7"
    assert "+31" not in evt.utterance_redacted
    assert evt.pii_redacted is True


def test_no_telemetry_without_ctx_or_on_match():
    events = []
    orch = OrderOrchestrator(
        catalog=truck_test_catalog(),
        telemetry=TelemetryEmitter(events.append, enabled=True),
    )
    orch.decide("surprise me")
    orch.decide("a burger", telemetry_ctx=TelemetryContext("s-1", "truck-7"))
    assert events == []


def test_failing_sink_never_breaks_ordering(caplog):
    def boom(_evt):
        raise RuntimeError("sink down")

    orch = OrderOrchestrator(
        catalog=truck_test_catalog(),
        telemetry=TelemetryEmitter(boom, enabled=True),
    )
    with caplog.at_level(logging.DEBUG, logger="truckorder"):
        d = orch.decide("surprise me", telemetry_ctx=TelemetryContext("s-1", "truck-7"))
    assert d.route == OrderRoute.NOT_UNDERSTOOD
    assert "telemetry: emit failed" in caplog.text


def test_decision_logged(caplog):
    orch = OrderOrchestrator(catalog=truck_test_catalog())
    with caplog.at_level(logging.INFO, logger="truckorder"):
        orch.decide("three nachos")
    assert "order: ADDED" in caplog.text
