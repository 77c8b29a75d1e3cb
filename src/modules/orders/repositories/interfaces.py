"""Order repository interface.

Extends ``IRepository[Order]`` with aggregate-level writes: an order is
always persisted together with its items.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import datetime
from typing import TYPE_CHECKING, Iterable, Tuple

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.orders.models import Order

# (pastry_id, quantity)
ItemLine = Tuple[int, int]


class IOrderRepository(IRepository["Order"]):
    """Repository contract for the Order aggregate."""

    @abstractmethod
    def create(
        self,
        customer_id: int,
        status: str,
        order_time: datetime,
        items: Iterable[ItemLine],
    ) -> Order:
        """Insert an order and its items in one unit of work."""

    @abstractmethod
    def replace_items(self, order: Order, items: Iterable[ItemLine]) -> None:
        """Drop every existing item of ``order`` and insert ``items``."""
