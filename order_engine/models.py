"""
Order aggregate. Status changes only through set_status(), which consults the
transition table and fans out to subscribers on success.
"""
import logging
from decimal import Decimal

from order_engine.errors import InvalidTransitionError
from order_engine.events import OrderEvents, Subscriber
from order_engine.metrics import order_status_transitions_total, transitions_rejected_invalid_total
from order_engine.order_state import INITIAL_STATUS, Status, next_status
from order_engine.product import Product
from order_engine.reporting import LoggingReporter, Reporter

logger = logging.getLogger(__name__)


class Order:
    def __init__(
        self,
        id: int,
        product: Product,
        quantity: int,
        payment_method: str,
        events: OrderEvents | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.id = id
        self.product = product
        self.quantity = quantity
        self.payment_method = payment_method
        self._reporter = reporter or LoggingReporter()
        self._events = events if events is not None else OrderEvents(self._reporter)
        self._status = INITIAL_STATUS

    @property
    def status(self) -> Status:
        return self._status

    @property
    def total_amount(self) -> Decimal:
        return self.product.price * self.quantity

    @property
    def subscribers(self) -> tuple[Subscriber, ...]:
        return self._events.subscribers

    def get_status(self) -> Status:
        return self._status

    def get_total_amount(self) -> Decimal:
        return self.total_amount

    def attach(self, subscriber: Subscriber) -> None:
        self._events.attach(subscriber)

    def detach(self, subscriber: Subscriber) -> None:
        self._events.detach(subscriber)

    def set_status(self, target: Status | str) -> None:
        """
        Move to target. Same status: reported no-op, no notification.
        Illegal target: reported, InvalidTransitionError raised, status unchanged.
        """
        target = Status(target)
        current = self._status
        if target == current:
            self._reporter.report(f"Order is already in {current} status", "info")
            return
        try:
            new_status = next_status(current, target)
        except InvalidTransitionError as e:
            transitions_rejected_invalid_total.labels(
                current_state=current.value, attempted_state=target.value,
            ).inc()
            logger.info("Rejected transition for order #%s: %s -> %s", self.id, current, target)
            self._reporter.report(str(e), "error")
            raise
        self._status = new_status
        order_status_transitions_total.labels(from_status=current.value, to_status=new_status.value).inc()
        logger.info("Order #%s: %s -> %s", self.id, current, new_status)
        self._events.notify_all(self)

    def details(self) -> str:
        return f"Order #{self.id}: {self.product.name}, Quantity: {self.quantity}, Status: {self._status}"

    def __repr__(self) -> str:
        return f"Order(id={self.id}, product={self.product.name!r}, quantity={self.quantity}, status={self._status.value!r})"
