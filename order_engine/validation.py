"""
Validation pipeline gating order creation.

Checks run in order and stop at the first failure. A failing check returns a
human-readable reason, which is reported once and turns the result into False.
Rejection never raises.
"""
import logging
from typing import Callable

from pydantic import BaseModel, Field, ValidationError

from order_engine.config import Settings, settings as default_settings
from order_engine.metrics import validation_rejections_total
from order_engine.payments import normalize_method
from order_engine.reporting import Reporter

logger = logging.getLogger(__name__)


class ValidationRequest(BaseModel):
    product_name: str = Field(default="", description="Name of the product being ordered")
    quantity: int = Field(default=0, description="Requested quantity")
    payment_method: str = Field(default="", description="Payment method as entered by the customer")


# Reason reported when a raw field cannot be coerced at all.
_COERCION_REASONS = {
    "product_name": "Product name is required",
    "quantity": "Quantity must be a whole number",
    "payment_method": "Invalid payment method",
}

# A check returns None when the request passes, else the rejection reason.
Check = Callable[[ValidationRequest], str | None]


def check_product_name(request: ValidationRequest) -> str | None:
    if not request.product_name or not request.product_name.strip():
        return "Product name is required"
    return None


def check_quantity(request: ValidationRequest) -> str | None:
    if request.quantity <= 0:
        return "Quantity must be greater than 0"
    return None


def payment_method_check(accepted: list[str]) -> Check:
    allowed = frozenset(normalize_method(m) for m in accepted)

    def check_payment_method(request: ValidationRequest) -> str | None:
        if normalize_method(request.payment_method) not in allowed:
            return "Invalid payment method"
        return None

    return check_payment_method


class OrderValidator:
    """Ordered list of independent checks. Callers may append, remove or reorder `checks`."""

    def __init__(
        self,
        reporter: Reporter,
        checks: list[Check] | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._reporter = reporter
        if checks is None:
            cfg = settings or default_settings
            checks = [
                check_product_name,
                check_quantity,
                payment_method_check(cfg.accepted_payment_methods),
            ]
        self.checks: list[Check] = list(checks)

    def validate(self, request: ValidationRequest | dict) -> bool:
        if isinstance(request, dict):
            try:
                request = ValidationRequest(**request)
            except ValidationError as e:
                loc = e.errors()[0]["loc"]
                return self._reject(_COERCION_REASONS.get(loc[0] if loc else None, "Invalid order request"))
        for check in self.checks:
            reason = check(request)
            if reason is not None:
                return self._reject(reason)
        self._reporter.report("Order validation successful", "success")
        return True

    def _reject(self, reason: str) -> bool:
        logger.info("Order request rejected: %s", reason)
        validation_rejections_total.labels(reason=reason).inc()
        self._reporter.report(reason, "error")
        return False


def validate(request: ValidationRequest | dict, reporter: Reporter) -> bool:
    """Run the default pipeline once."""
    return OrderValidator(reporter).validate(request)
