"""
Subscriber fan-out for order status changes. Each Order gets its own OrderEvents
publisher at construction; notification runs synchronously in attachment order.
"""
import logging
from typing import TYPE_CHECKING, Protocol

from order_engine.config import NotificationPolicy
from order_engine.errors import NotificationError
from order_engine.metrics import subscriber_failures_total
from order_engine.reporting import Reporter

if TYPE_CHECKING:
    from order_engine.models import Order

logger = logging.getLogger(__name__)


class Subscriber(Protocol):
    def notify(self, order: "Order") -> None: ...


class OrderEvents:
    def __init__(self, reporter: Reporter, policy: NotificationPolicy = "best_effort") -> None:
        if policy not in ("best_effort", "fail_fast"):
            raise ValueError(f"Unknown notification policy: {policy!r}")
        self._reporter = reporter
        self.policy = policy
        self._subscribers: list[Subscriber] = []

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return tuple(self._subscribers)

    def attach(self, subscriber: Subscriber) -> None:
        # No duplicate detection: attaching twice means notified twice.
        self._subscribers.append(subscriber)
        self._reporter.report("New subscriber attached", "info")

    def detach(self, subscriber: Subscriber) -> None:
        """Remove the first entry that is this exact object. Absent subscriber: no-op."""
        for i, attached in enumerate(self._subscribers):
            if attached is subscriber:
                del self._subscribers[i]
                self._reporter.report("Subscriber detached", "info")
                return

    def notify_all(self, order: "Order") -> None:
        for subscriber in list(self._subscribers):
            try:
                subscriber.notify(order)
            except Exception as e:
                subscriber_failures_total.inc()
                if self.policy == "fail_fast":
                    logger.warning("Subscriber %r failed for order #%s, aborting fan-out", subscriber, order.id)
                    raise NotificationError(order.id, subscriber) from e
                logger.exception("Subscriber %r failed for order #%s: %s", subscriber, order.id, e)
                self._reporter.report(f"Notification failed for order #{order.id}: {e}", "error")

    def __len__(self) -> int:
        return len(self._subscribers)
