"""Customer model.

Business rules implemented:
- Phone number must be unique (``+380XXXXXXXXX``).
- A customer owns their orders: deleting a customer cascades to them.
  The service layer refuses the delete while any order is still active.
"""

from __future__ import annotations

from django.core.validators import RegexValidator
from django.db import models

from modules.core.models import BaseModel

PHONE_PATTERN = r"^\+380\d{9}$"

phone_validator = RegexValidator(
    regex=PHONE_PATTERN,
    message="Invalid phone number format. Expected +380XXXXXXXXX.",
)


class Customer(BaseModel):
    """A shop customer identified by a unique phone number."""

    name = models.CharField(max_length=100)
    phone = models.CharField(max_length=13, unique=True, validators=[phone_validator])

    class Meta:
        db_table = "customers"
        ordering = ["id"]

    def __str__(self) -> str:
        return f"{self.name} (#{self.pk})"
