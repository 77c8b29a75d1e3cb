"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF Serializers)
and the Service layer.  DTOs are immutable (``frozen=True``).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CreateCustomerDTO(BaseModel):
    """Immutable DTO for customer creation requests."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    phone: str


class UpdateCustomerDTO(BaseModel):
    """Immutable DTO for customer update requests.

    PUT semantics: both fields are required and replace the stored values.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str
    phone: str
