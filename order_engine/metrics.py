"""
Prometheus metrics: orders created, status transitions, rejected transitions,
validation rejections and subscriber failures.
"""
from prometheus_client import Counter

orders_created_total = Counter(
    "orders_created_total",
    "Total orders created through the lifecycle facade",
)

order_status_transitions_total = Counter(
    "order_status_transitions_total",
    "Total successful order status transitions",
    ["from_status", "to_status"],
)

transitions_rejected_invalid_total = Counter(
    "transitions_rejected_invalid_total",
    "Total status changes rejected due to invalid order lifecycle transition",
    ["current_state", "attempted_state"],
)

validation_rejections_total = Counter(
    "validation_rejections_total",
    "Total order requests rejected by the validation pipeline",
    ["reason"],
)

# Subscriber notify() calls that raised
subscriber_failures_total = Counter(
    "subscriber_failures_total",
    "Total subscriber notifications that raised an error",
)
