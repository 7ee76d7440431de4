"""
Payment methods accepted at checkout and a processor that charges an order total.
"""
import logging
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel

from order_engine.errors import UnsupportedPaymentMethodError
from order_engine.reporting import Reporter

logger = logging.getLogger(__name__)


def normalize_method(text: str | None) -> str:
    """Canonical form for payment method input: stripped, lower-case."""
    return (text or "").strip().lower()


class PaymentMethod(str, Enum):
    CREDIT = "credit"
    PAYPAL = "paypal"
    BANK = "bank"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "PaymentMethod":
        """Case-insensitive lookup; raises UnsupportedPaymentMethodError."""
        try:
            return cls(normalize_method(text))
        except ValueError:
            raise UnsupportedPaymentMethodError(text) from None


_LABELS = {
    PaymentMethod.CREDIT: "Credit Card",
    PaymentMethod.PAYPAL: "PayPal",
    PaymentMethod.BANK: "Bank Transfer",
}


class PaymentReceipt(BaseModel):
    method: PaymentMethod
    amount: Decimal


class PaymentProcessor:
    def __init__(self, method: PaymentMethod | str, reporter: Reporter) -> None:
        self.method = PaymentMethod.parse(method)
        self._reporter = reporter

    def set_method(self, method: PaymentMethod | str) -> None:
        self.method = PaymentMethod.parse(method)
        self._reporter.report("Payment method updated", "info")

    def process(self, amount: Decimal | int | str) -> PaymentReceipt:
        amount = Decimal(str(amount))
        if amount <= 0:
            raise ValueError(f"Payment amount must be positive, got {amount}")
        logger.info("Charging %.2f via %s", amount, self.method.label)
        self._reporter.report(f"Processing {amount:.2f} via {self.method.label}", "info")
        return PaymentReceipt(method=self.method, amount=amount)
