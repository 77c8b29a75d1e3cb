"""Pastry model.

Business rules implemented:
- Pastry name must be unique.
- Price must be greater than zero and lower than 10 000.
- A pastry referenced by any order item cannot be deleted (``PROTECT``
  on ``OrderItem.pastry``, checked up-front by the service layer).
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from modules.core.models import BaseModel

MIN_PRICE = Decimal("0")
MAX_PRICE = Decimal("10000")


class Pastry(BaseModel):
    """An item of the shop catalogue."""

    name = models.CharField(max_length=150, unique=True)
    price = models.DecimalField(max_digits=10, decimal_places=2)

    class Meta:
        db_table = "pastries"
        ordering = ["id"]
        verbose_name_plural = "pastries"
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0) & models.Q(price__lt=10000),
                name="pastries_price_range",
            ),
        ]

    def clean(self) -> None:
        super().clean()
        if self.price is not None and not MIN_PRICE < self.price < MAX_PRICE:
            raise ValidationError(
                {"price": "Price must be greater than 0 and less than 10000."}
            )

    def __str__(self) -> str:
        return f"{self.name} ({self.price})"
