"""
Standard subscribers attached by the facade to every new order.
"""
from order_engine.models import Order
from order_engine.order_state import Status
from order_engine.reporting import Reporter


class CustomerSubscriber:
    """Reports every status change for customer-facing display."""

    def __init__(self, name: str, reporter: Reporter) -> None:
        self.name = name
        self._reporter = reporter

    def notify(self, order: Order) -> None:
        self._reporter.report(
            f"Notification for {self.name}: Order #{order.id} status changed to {order.status}",
            "info",
        )

    def __repr__(self) -> str:
        return f"CustomerSubscriber({self.name!r})"


class WarehouseSubscriber:
    """Reacts to processing and shipped only."""

    def __init__(self, reporter: Reporter) -> None:
        self._reporter = reporter

    def notify(self, order: Order) -> None:
        if order.status is Status.PROCESSING:
            self._reporter.report(f"Warehouse: Preparing order #{order.id} for shipping", "info")
        elif order.status is Status.SHIPPED:
            self._reporter.report(f"Warehouse: Order #{order.id} has been shipped", "success")

    def __repr__(self) -> str:
        return "WarehouseSubscriber()"
