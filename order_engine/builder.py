"""
Incremental construction of an Order. No re-validation: callers run the
validation pipeline first.
"""
from order_engine.config import NotificationPolicy
from order_engine.errors import ConstructionError
from order_engine.events import OrderEvents
from order_engine.models import Order
from order_engine.product import Product
from order_engine.reporting import LoggingReporter, Reporter


class OrderBuilder:
    """One builder per order. Reusing an instance after build() is not supported."""

    def __init__(self, reporter: Reporter | None = None, policy: NotificationPolicy = "best_effort") -> None:
        self._reporter = reporter or LoggingReporter()
        self._policy = policy
        self._product: Product | None = None
        self._quantity = 0
        self._payment_method = ""
        self._order_id = 0

    def set_product(self, product: Product) -> "OrderBuilder":
        self._product = product
        return self

    def set_quantity(self, quantity: int) -> "OrderBuilder":
        self._quantity = quantity
        return self

    def set_payment_method(self, method: str) -> "OrderBuilder":
        self._payment_method = method
        return self

    def set_order_id(self, order_id: int) -> "OrderBuilder":
        self._order_id = order_id
        return self

    def build(self) -> Order:
        if self._product is None:
            raise ConstructionError("Product is required to build an order")
        return Order(
            id=self._order_id,
            product=self._product,
            quantity=self._quantity,
            payment_method=self._payment_method,
            events=OrderEvents(self._reporter, self._policy),
            reporter=self._reporter,
        )
