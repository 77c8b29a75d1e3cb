"""Pastry DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreatePastryDTO`` / ``UpdatePastryDTO``: write payloads.
- ``PastryOutputDTO``: the snapshot stored in the catalogue cache.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

from modules.pastries.models import MAX_PRICE, MIN_PRICE

if TYPE_CHECKING:
    from modules.pastries.models import Pastry

PRICE_RANGE_MESSAGE = "Price must be greater than 0 and less than 10000."


class CreatePastryDTO(BaseModel):
    """Immutable DTO for pastry creation requests."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    price: Decimal

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Pastry name is required.")
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_in_range(cls, v: Decimal) -> Decimal:
        if not MIN_PRICE < v < MAX_PRICE:
            raise ValueError(PRICE_RANGE_MESSAGE)
        return v


class UpdatePastryDTO(CreatePastryDTO):
    """PUT semantics: both fields are required and replace the stored values."""


class PastryOutputDTO(BaseModel):
    """Immutable DTO for pastry API responses."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal

    @classmethod
    def from_entity(cls, pastry: Pastry) -> PastryOutputDTO:
        return cls(id=pastry.id, name=pastry.name, price=pastry.price)
