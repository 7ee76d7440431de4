"""
Single entry point for creating orders and driving them through the lifecycle.
Each operation fixes the target status; legality is left to the state machine and
InvalidTransitionError reaches the caller unchanged. No retries.
"""
import logging

from order_engine.builder import OrderBuilder
from order_engine.config import Settings, settings as default_settings
from order_engine.metrics import orders_created_total
from order_engine.models import Order
from order_engine.order_state import Status
from order_engine.product import Product
from order_engine.reporting import Reporter
from order_engine.store import OrderStore
from order_engine.subscribers import CustomerSubscriber, WarehouseSubscriber

logger = logging.getLogger(__name__)


class OrderFacade:
    def __init__(
        self,
        reporter: Reporter,
        store: OrderStore | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._reporter = reporter
        self._store = store
        self._settings = settings or default_settings

    def create_order(self, product: Product, quantity: int, payment_method: str, order_id: int) -> Order:
        """Build a pending order with the customer and warehouse subscribers attached."""
        order = (
            OrderBuilder(self._reporter, self._settings.notification_policy)
            .set_product(product)
            .set_quantity(quantity)
            .set_payment_method(payment_method)
            .set_order_id(order_id)
            .build()
        )
        if self._store is not None:
            self._store.add(order)
        order.attach(CustomerSubscriber(self._settings.customer_name, self._reporter))
        order.attach(WarehouseSubscriber(self._reporter))
        orders_created_total.inc()
        logger.info("Created order #%s (%s x %d, %s)", order.id, product.name, quantity, payment_method)
        self._reporter.report(f"Order #{order.id} created successfully", "success")
        return order

    def process_order(self, order: Order) -> None:
        if self._transition(order, Status.PROCESSING):
            self._reporter.report(f"Order #{order.id} is being processed", "info")

    def ship_order(self, order: Order) -> None:
        if self._transition(order, Status.SHIPPED):
            self._reporter.report(f"Order #{order.id} has been shipped", "success")

    def deliver_order(self, order: Order) -> None:
        if self._transition(order, Status.DELIVERED):
            self._reporter.report(f"Order #{order.id} has been delivered", "success")

    def cancel_order(self, order: Order) -> None:
        if self._transition(order, Status.CANCELLED):
            self._reporter.report(f"Order #{order.id} has been cancelled", "warning")

    def _transition(self, order: Order, target: Status) -> bool:
        """False when the order was already in target (reported no-op)."""
        before = order.status
        order.set_status(target)
        return before is not target
