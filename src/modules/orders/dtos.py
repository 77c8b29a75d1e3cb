"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``OrderItemDTO``: a single ``(pastry_id, quantity)`` line.
- ``CreateOrderDTO``: input for order creation.
- ``UpdateOrderDTO``: full replacement of customer, status and items.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class OrderItemDTO(BaseModel):
    """Immutable DTO for one order line."""

    model_config = ConfigDict(frozen=True)

    pastry_id: int
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    ``items`` may be empty here; the service reports that as
    ``EmptyOrder``.  ``status`` is the validated request value; the
    stored initial status is derived from the total quantity.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: int
    items: List[OrderItemDTO]
    status: Optional[str] = None

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.items)


class UpdateOrderDTO(BaseModel):
    """Immutable DTO for order update requests (PUT semantics)."""

    model_config = ConfigDict(frozen=True)

    customer_id: int
    status: str
    items: List[OrderItemDTO]
