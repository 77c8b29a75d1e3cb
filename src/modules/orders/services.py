"""Order service layer (Use Cases).

Orchestrates the business logic for order creation and status
management.  All write operations are atomic; the service defines the
unit-of-work boundary.

Business rules enforced:
- An order needs at least one item.
- Creation can be switched off through ``ORDER_SETTINGS``.
- No single line may exceed ``max_item_quantity`` units.
- Orders whose total quantity exceeds ``processing_threshold`` start in
  PROCESSING, the rest in NEW.
- Status changes follow the order state machine.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

import structlog
from django.db import transaction
from django.utils import timezone

from modules.orders.config import OrderSettings
from modules.orders.constants import OrderStatus, parse_status
from modules.orders.exceptions import (
    EmptyOrder,
    InvalidOrderStatus,
    ItemQuantityExceeded,
    OrderCreationDisabled,
    OrderNotFound,
    StatusTransitionNotAllowed,
)

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.orders.dtos import CreateOrderDTO, OrderItemDTO, UpdateOrderDTO
    from modules.orders.models import Order
    from modules.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives the repository via constructor injection (DIP).  When no
    ``order_settings`` are given they are read from Django settings.
    """

    def __init__(
        self,
        repository: IOrderRepository,
        order_settings: Optional[OrderSettings] = None,
    ) -> None:
        self._repo = repository
        if order_settings is None:
            order_settings = OrderSettings.from_django()
        self._settings = order_settings

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_order(self, dto: CreateOrderDTO) -> Order:
        """Create a new order.

        Steps:
        1. Reject an empty item list.
        2. Reject the request when new orders are disabled.
        3. Reject any line above the per-item quantity cap.
        4. Pick the initial status from the total quantity.
        5. Persist the order, stamped with the current UTC time, and its items.

        Raises:
            EmptyOrder: no items were supplied.
            OrderCreationDisabled: ``allow_new_orders`` is off.
            ItemQuantityExceeded: a line asks for too many units.
        """
        log = logger.bind(customer_id=dto.customer_id)

        self._check_items(dto.items)

        if not self._settings.allow_new_orders:
            log.warning("order.creation_disabled")
            raise OrderCreationDisabled(
                "Creating new orders is currently disabled."
            )

        self._check_quantities(dto.items)

        total = dto.total_quantity
        if total > self._settings.processing_threshold:
            initial_status = OrderStatus.PROCESSING
        else:
            initial_status = OrderStatus.NEW

        order = self._repo.create(
            customer_id=dto.customer_id,
            status=initial_status,
            order_time=timezone.now(),
            items=[(item.pastry_id, item.quantity) for item in dto.items],
        )
        log.info(
            "order.created",
            order_id=order.id,
            status=initial_status,
            total_quantity=total,
        )
        return order

    @transaction.atomic
    def update_order(self, id: int, dto: UpdateOrderDTO) -> Order:
        """Replace customer, status and the whole item list of an order.

        Raises:
            OrderNotFound: order does not exist.
            InvalidOrderStatus: ``dto.status`` is not a known status.
            StatusTransitionNotAllowed: the state machine forbids the move.
            EmptyOrder: no items were supplied.
            ItemQuantityExceeded: a line asks for too many units.
        """
        order = self._repo.get_by_id(id)
        if not order:
            raise OrderNotFound(f"Order {id} not found.")

        new_status = parse_status(dto.status)
        if new_status is None:
            raise InvalidOrderStatus(f"Invalid order status '{dto.status}'.")

        log = logger.bind(
            order_id=id,
            current_status=order.status,
            new_status=new_status,
        )

        if not order.can_transition_to(new_status):
            log.warning("order.invalid_transition")
            raise StatusTransitionNotAllowed(
                f"Cannot change order status from {order.status} to {new_status}."
            )

        self._check_items(dto.items)
        self._check_quantities(dto.items)

        old_status = order.status
        order.customer_id = dto.customer_id
        order.status = new_status
        order = self._repo.save(order)
        self._repo.replace_items(
            order, [(item.pastry_id, item.quantity) for item in dto.items]
        )

        if old_status != new_status:
            log.info("order.status_changed")
        log.info("order.updated")
        return order

    @transaction.atomic
    def delete_order(self, id: int) -> None:
        """Delete an order and its items.

        Raises:
            OrderNotFound: order does not exist.
        """
        if not self._repo.delete(id):
            raise OrderNotFound(f"Order {id} not found.")
        logger.info("order.deleted", order_id=id)

    @transaction.atomic
    def delete_all_orders(self) -> int:
        return self._repo.delete_all()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_orders(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """Return orders, optionally filtered."""
        return self._repo.list(filters)

    def get_order(self, id: int) -> Order:
        """Retrieve a single order with its items.

        Raises:
            OrderNotFound: order does not exist.
        """
        order = self._repo.get_by_id(id)
        if not order:
            raise OrderNotFound(f"Order {id} not found.")
        return order

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _check_items(items: List[OrderItemDTO]) -> None:
        if not items:
            raise EmptyOrder("An order must contain at least one item.")

    def _check_quantities(self, items: List[OrderItemDTO]) -> None:
        limit = self._settings.max_item_quantity
        for item in items:
            if item.quantity > limit:
                raise ItemQuantityExceeded(
                    f"Quantity for pastry {item.pastry_id} exceeds "
                    f"the maximum of {limit}."
                )
