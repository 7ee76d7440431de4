import itertools

import pytest

from order_engine.errors import InvalidTransitionError
from order_engine.order_state import (
    VALID_TRANSITIONS,
    Status,
    is_terminal,
    is_valid_transition,
    legal_targets,
    next_status,
)
from _helper import RecordingSubscriber, make_order, metric_value

LEGAL = [(cur, tgt) for cur, targets in VALID_TRANSITIONS.items() for tgt in targets]
ILLEGAL = [
    (cur, tgt)
    for cur, tgt in itertools.product(Status, Status)
    if cur != tgt and tgt not in VALID_TRANSITIONS[cur]
]

# Shortest path from pending to each status
PATHS = {
    Status.PENDING: [],
    Status.PROCESSING: [Status.PROCESSING],
    Status.SHIPPED: [Status.PROCESSING, Status.SHIPPED],
    Status.DELIVERED: [Status.PROCESSING, Status.SHIPPED, Status.DELIVERED],
    Status.CANCELLED: [Status.CANCELLED],
}


def _order_in(status, reporter):
    order = make_order(reporter)
    for step in PATHS[status]:
        order.set_status(step)
    return order


def test_transition_table():
    assert legal_targets(Status.PENDING) == {Status.PROCESSING, Status.CANCELLED}
    assert legal_targets(Status.PROCESSING) == {Status.SHIPPED, Status.CANCELLED}
    assert legal_targets(Status.SHIPPED) == {Status.DELIVERED}
    assert is_terminal(Status.DELIVERED)
    assert is_terminal(Status.CANCELLED)
    assert not is_terminal(Status.SHIPPED)


def test_shipped_orders_cannot_be_cancelled():
    assert not is_valid_transition(Status.SHIPPED, Status.CANCELLED)
    with pytest.raises(InvalidTransitionError):
        next_status(Status.SHIPPED, Status.CANCELLED)


def test_next_status_accepts_plain_strings():
    assert next_status("pending", "processing") is Status.PROCESSING


def test_new_order_starts_pending(reporter):
    order = make_order(reporter)
    assert order.status is Status.PENDING
    assert order.get_status() == "pending"


@pytest.mark.parametrize("current,target", LEGAL)
def test_legal_transition_updates_status_and_notifies_once(reporter, current, target):
    order = _order_in(current, reporter)
    log: list = []
    order.attach(RecordingSubscriber("a", log))
    order.attach(RecordingSubscriber("b", log))

    order.set_status(target)

    assert order.status is target
    assert log == [("a", target), ("b", target)]


@pytest.mark.parametrize("current,target", ILLEGAL)
def test_illegal_transition_raises_and_leaves_status(reporter, current, target):
    order = _order_in(current, reporter)
    log: list = []
    order.attach(RecordingSubscriber("a", log))
    reporter.clear()

    with pytest.raises(InvalidTransitionError) as exc_info:
        order.set_status(target)

    assert exc_info.value.current is current
    assert exc_info.value.target is target
    assert order.status is current
    assert log == []
    assert reporter.records == [
        (f"Cannot change status from {current.value} to {target.value}. Invalid state transition.", "error"),
    ]


@pytest.mark.parametrize("status", list(Status))
def test_self_transition_is_reported_noop(reporter, status):
    order = _order_in(status, reporter)
    log: list = []
    order.attach(RecordingSubscriber("a", log))
    reporter.clear()

    order.set_status(status)

    assert order.status is status
    assert log == []
    assert reporter.records == [(f"Order is already in {status.value} status", "info")]


def test_unknown_target_rejected_before_any_effect(reporter):
    order = make_order(reporter)
    with pytest.raises(ValueError):
        order.set_status("refunded")
    assert order.status is Status.PENDING


def test_transition_metrics(reporter):
    order = make_order(reporter)
    ok_before = metric_value("order_status_transitions_total", from_status="pending", to_status="processing")
    bad_before = metric_value(
        "transitions_rejected_invalid_total", current_state="processing", attempted_state="delivered",
    )

    order.set_status(Status.PROCESSING)
    with pytest.raises(InvalidTransitionError):
        order.set_status(Status.DELIVERED)

    assert metric_value(
        "order_status_transitions_total", from_status="pending", to_status="processing",
    ) == ok_before + 1
    assert metric_value(
        "transitions_rejected_invalid_total", current_state="processing", attempted_state="delivered",
    ) == bad_before + 1
