"""Order business settings.

``OrderSettings`` is the immutable view of ``settings.ORDER_SETTINGS``
handed to ``OrderService``; tests build it directly.
"""

from __future__ import annotations

from django.conf import settings
from pydantic import BaseModel, ConfigDict, Field


class OrderSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    allow_new_orders: bool = True
    max_item_quantity: int = Field(default=100, ge=1)
    processing_threshold: int = Field(default=10, ge=0)

    @classmethod
    def from_django(cls) -> OrderSettings:
        raw = getattr(settings, "ORDER_SETTINGS", {})
        defaults = cls()
        return cls(
            allow_new_orders=raw.get("ALLOW_NEW_ORDERS", defaults.allow_new_orders),
            max_item_quantity=raw.get("MAX_ITEM_QUANTITY", defaults.max_item_quantity),
            processing_threshold=raw.get(
                "PROCESSING_THRESHOLD", defaults.processing_threshold
            ),
        )
