"""Order and OrderItem models.

Business rules implemented:
- Status follows the NEW -> PROCESSING -> COMPLETED state machine, with
  CANCELLED reachable from any non-terminal state (enforced at service
  layer through ``can_transition_to``).
- ``order_time`` is stamped in UTC when the order is created.
- Deleting a customer cascades to their orders; deleting an order
  cascades to its items.  Pastries referenced by items are protected.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from modules.core.models import BaseModel
from modules.orders.constants import (
    TERMINAL_STATES,
    OrderStatus,
    is_transition_allowed,
)


class Order(BaseModel):
    """Order aggregate root."""

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="orders",
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices,
        default=OrderStatus.NEW,
    )
    order_time = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "orders"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["status"], name="orders_status_idx"),
        ]

    # ------------------------------------------------------------------
    # State Machine helpers
    # ------------------------------------------------------------------

    @property
    def is_terminal(self) -> bool:
        """Return ``True`` if the order is in a terminal state."""
        return self.status in TERMINAL_STATES

    def can_transition_to(self, new_status: str) -> bool:
        """Check whether transitioning to *new_status* is valid.

        Staying in the current status is always allowed.
        """
        return is_transition_allowed(self.status, new_status)

    def __str__(self) -> str:
        return f"Order #{self.pk} ({self.status})"


class OrderItem(models.Model):
    """Line item linking an Order to a Pastry."""

    order = models.ForeignKey(
        "orders.Order",
        on_delete=models.CASCADE,
        related_name="items",
    )
    pastry = models.ForeignKey(
        "pastries.Pastry",
        on_delete=models.PROTECT,
        related_name="order_items",
    )
    quantity = models.PositiveIntegerField()

    class Meta:
        db_table = "order_items"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gte=1),
                name="order_items_quantity_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.pastry_id} x{self.quantity}"
