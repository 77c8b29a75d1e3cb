"""Order domain constants.

Defines status choices and valid status transitions for the order
state machine.
"""

from typing import Optional

from django.db import models


class OrderStatus(models.TextChoices):
    NEW = "NEW", "New"
    PROCESSING = "PROCESSING", "Processing"
    COMPLETED = "COMPLETED", "Completed"
    CANCELLED = "CANCELLED", "Cancelled"


VALID_TRANSITIONS: dict[str, set[str]] = {
    OrderStatus.NEW: {OrderStatus.PROCESSING, OrderStatus.CANCELLED},
    OrderStatus.PROCESSING: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),
    OrderStatus.CANCELLED: set(),
}

TERMINAL_STATES: set[str] = {OrderStatus.COMPLETED, OrderStatus.CANCELLED}

ACTIVE_STATES: list[str] = [OrderStatus.NEW, OrderStatus.PROCESSING]


def parse_status(value: object) -> Optional[OrderStatus]:
    """Case-insensitive lookup of a status name; ``None`` when unknown."""
    if not isinstance(value, str):
        return None
    try:
        return OrderStatus(value.strip().upper())
    except ValueError:
        return None


def is_transition_allowed(current: str, target: str) -> bool:
    if current == target:
        return True
    return target in VALID_TRANSITIONS.get(current, set())
