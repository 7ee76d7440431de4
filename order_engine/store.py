"""
In-memory order collection owned by the composition root, plus the monotonic id
allocator callers use when creating orders. Nothing here is a process-wide singleton.
"""
from __future__ import annotations

import itertools
from decimal import Decimal

from pydantic import BaseModel

from order_engine.errors import DuplicateOrderError
from order_engine.models import Order
from order_engine.order_state import Status


class IdAllocator:
    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class SystemStatus(BaseModel):
    total_orders: int = 0
    pending_orders: int = 0
    processing_orders: int = 0
    shipped_orders: int = 0
    delivered_orders: int = 0
    cancelled_orders: int = 0
    total_revenue: Decimal = Decimal("0")


class OrderStore:
    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}

    def add(self, order: Order) -> None:
        if order.id in self._orders:
            raise DuplicateOrderError(order.id)
        self._orders[order.id] = order

    def get(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def list(self) -> list[Order]:
        """All orders, oldest first."""
        return list(self._orders.values())

    def by_status(self, status: Status | str) -> list[Order]:
        status = Status(status)
        return [o for o in self._orders.values() if o.status is status]

    def summary(self) -> SystemStatus:
        """Per-status counts; revenue excludes cancelled orders."""
        counts = {s: 0 for s in Status}
        revenue = Decimal("0")
        for order in self._orders.values():
            counts[order.status] += 1
            if order.status is not Status.CANCELLED:
                revenue += order.total_amount
        return SystemStatus(
            total_orders=len(self._orders),
            pending_orders=counts[Status.PENDING],
            processing_orders=counts[Status.PROCESSING],
            shipped_orders=counts[Status.SHIPPED],
            delivered_orders=counts[Status.DELIVERED],
            cancelled_orders=counts[Status.CANCELLED],
            total_revenue=revenue,
        )

    def __len__(self) -> int:
        return len(self._orders)
