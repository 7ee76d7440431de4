"""
Engine error taxonomy. Validation failures are not exceptions (see validation.py).
"""


class OrderEngineError(Exception):
    """Base class for every error raised by the lifecycle engine."""


class ConstructionError(OrderEngineError):
    """Raised by OrderBuilder.build() when a required field is missing."""


class InvalidTransitionError(OrderEngineError):
    """Raised when a status change is not allowed from the current status. Order is left unchanged."""
    def __init__(self, current, target):
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot change status from {_value(current)} to {_value(target)}. Invalid state transition."
        )


class NotificationError(OrderEngineError):
    """Raised under the fail_fast policy when a subscriber fails; the underlying error is chained."""
    def __init__(self, order_id: int, subscriber):
        self.order_id = order_id
        self.subscriber = subscriber
        super().__init__(f"Subscriber {subscriber!r} failed for order #{order_id}")


class DuplicateOrderError(OrderEngineError):
    """Raised when an order id is registered twice in the same store."""
    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order #{order_id} already exists")


class UnsupportedPaymentMethodError(OrderEngineError, ValueError):
    def __init__(self, method: str):
        self.method = method
        super().__init__(f"Unsupported payment method: {method!r}")


def _value(status) -> str:
    return getattr(status, "value", status)
