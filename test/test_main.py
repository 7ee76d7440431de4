import logging

import pytest

from order_engine.errors import InvalidTransitionError
from order_engine.main import build_engine, run_demo
from order_engine.order_state import Status
from order_engine.reporting import LoggingReporter, RecordingReporter


@pytest.fixture
def engine(settings, reporter):
    return build_engine(settings=settings, reporter=reporter)


def test_engines_are_independent(settings):
    a = build_engine(settings=settings, reporter=RecordingReporter())
    b = build_engine(settings=settings, reporter=RecordingReporter())
    a.place_order(1, 1, "credit")
    assert len(a.store) == 1
    assert len(b.store) == 0
    assert b.ids.next_id() == 1


def test_place_order_validates_creates_and_charges(engine, reporter):
    order = engine.place_order(4, 2, "Bank")

    assert order is not None
    assert order.id == 1
    assert order.product.name == "Tablet"
    assert engine.store.get(1) is order
    assert reporter.messages()[0] == "Order validation successful"
    assert reporter.messages()[1] == "Processing 599.98 via Bank Transfer"
    assert reporter.records[-1] == ("Order #1 created successfully", "success")


def test_place_order_unsupported_method_stores_nothing(settings, reporter):
    settings.accepted_payment_methods = ["credit", "paypal", "bank", "cash"]
    engine = build_engine(settings=settings, reporter=reporter)

    assert engine.place_order(1, 1, "cash") is None

    assert engine.store.list() == []
    assert reporter.records == [
        ("Order validation successful", "success"),
        ("Unsupported payment method: 'cash'", "error"),
    ]
    # The id was not consumed.
    assert engine.ids.next_id() == 1


def test_place_order_bad_quantity_input(engine, reporter):
    assert engine.place_order(1, "abc", "credit") is None
    assert len(engine.store) == 0
    assert reporter.records == [("Quantity must be a whole number", "error")]


def test_place_order_rejected(engine, reporter):
    assert engine.place_order(1, 0, "credit") is None
    assert len(engine.store) == 0
    assert reporter.records == [("Quantity must be greater than 0", "error")]


def test_place_order_unknown_product(engine, reporter):
    assert engine.place_order(99, 1, "credit") is None
    assert reporter.records == [("Product #99 not found", "error")]


def test_ids_keep_increasing(engine):
    ids = [engine.place_order(1, 1, "credit").id for _ in range(3)]
    assert ids == [1, 2, 3]


def test_run_demo(engine):
    run_demo(engine)
    summary = engine.store.summary()
    assert summary.total_orders == 2
    assert summary.delivered_orders == 1
    assert summary.cancelled_orders == 1
    delivered = engine.store.by_status(Status.DELIVERED)[0]
    with pytest.raises(InvalidTransitionError):
        engine.facade.cancel_order(delivered)


def test_logging_reporter_levels(caplog):
    reporter = LoggingReporter()
    with caplog.at_level(logging.INFO, logger="order_engine.reporting"):
        reporter.report("done", "success")
        reporter.report("careful", "warning")
        reporter.report("broken", "error")
    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING, logging.ERROR]
    assert caplog.records[0].getMessage() == "[success] done"


def test_reporters_reject_unknown_severity():
    with pytest.raises(ValueError):
        RecordingReporter().report("x", "fatal")
    with pytest.raises(ValueError):
        LoggingReporter().report("x", "fatal")


def test_recording_reporter_forwards():
    sink = RecordingReporter()
    RecordingReporter(forward=sink).report("hello", "info")
    assert sink.records == [("hello", "info")]
