"""
Order lifecycle state machine. Valid transitions enforce business rules.
Legality depends only on the current status, never on history.
"""
from enum import Enum

from order_engine.errors import InvalidTransitionError


class Status(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def __str__(self) -> str:
        return self.value


INITIAL_STATUS = Status.PENDING

# Current status -> allowed target statuses
VALID_TRANSITIONS: dict[Status, frozenset[Status]] = {
    Status.PENDING: frozenset({Status.PROCESSING, Status.CANCELLED}),
    Status.PROCESSING: frozenset({Status.SHIPPED, Status.CANCELLED}),
    Status.SHIPPED: frozenset({Status.DELIVERED}),  # shipped orders can no longer be cancelled
    Status.DELIVERED: frozenset(),  # terminal
    Status.CANCELLED: frozenset(),  # terminal
}


def legal_targets(current: Status) -> frozenset[Status]:
    return VALID_TRANSITIONS[Status(current)]


def is_valid_transition(current: Status, target: Status) -> bool:
    """True if target is allowed after current. Self-transitions are not transitions."""
    return Status(target) in legal_targets(current)


def is_terminal(status: Status) -> bool:
    return not legal_targets(status)


def next_status(current: Status, target: Status) -> Status:
    """Return the status after moving from current to target, or raise InvalidTransitionError."""
    current, target = Status(current), Status(target)
    if not is_valid_transition(current, target):
        raise InvalidTransitionError(current, target)
    return target
