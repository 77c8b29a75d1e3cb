"""Django ORM implementation of the Order repository.

All write operations are wrapped in ``transaction.atomic()`` so the
Order aggregate (Order + OrderItems) is persisted atomically.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.core.repositories.django_repository import DjangoRepository
from modules.orders.models import Order, OrderItem
from modules.orders.repositories.interfaces import IOrderRepository, ItemLine

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(DjangoRepository[Order], IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    model = Order

    # ------------------------------------------------------------------
    # Create (aggregate root + children)
    # ------------------------------------------------------------------

    @transaction.atomic
    def create(
        self,
        customer_id: int,
        status: str,
        order_time: datetime,
        items: Iterable[ItemLine],
    ) -> Order:
        order = Order.objects.create(
            customer_id=customer_id,
            status=status,
            order_time=order_time,
        )
        lines = OrderItem.objects.bulk_create(
            OrderItem(order=order, pastry_id=pastry_id, quantity=quantity)
            for pastry_id, quantity in items
        )
        logger.info("order.persisted", order_id=order.id, item_count=len(lines))
        return order

    @transaction.atomic
    def replace_items(self, order: Order, items: Iterable[ItemLine]) -> None:
        removed, _ = OrderItem.objects.filter(order=order).delete()
        lines = OrderItem.objects.bulk_create(
            OrderItem(order=order, pastry_id=pastry_id, quantity=quantity)
            for pastry_id, quantity in items
        )
        logger.info(
            "order.items_replaced",
            order_id=order.id,
            removed=removed,
            added=len(lines),
        )

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Order]:
        """Retrieve an order with its items prefetched.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return Order.objects.prefetch_related("items").filter(pk=id).first()
        except (ValueError, TypeError, ValidationError):
            return None
