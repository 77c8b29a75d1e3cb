"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected ``ICustomerRepository``.

Business rules enforced here:
- Phone number must be unique.
- A customer with active orders (not completed, not cancelled)
  cannot be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.customers.exceptions import (
    CustomerAlreadyExists,
    CustomerHasActiveOrders,
    CustomerNotFound,
)
from modules.customers.models import Customer

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from modules.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from modules.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)

DUPLICATE_PHONE_MESSAGE = "A customer with this phone number already exists."


class CustomerService:
    """Application service for Customer use-cases.

    Receives an ``ICustomerRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: ICustomerRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_customer(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer.

        Raises:
            CustomerAlreadyExists: if the phone number is already taken.
        """
        if self._repo.phone_taken(dto.phone):
            logger.warning("customer.duplicate_phone")
            raise CustomerAlreadyExists(DUPLICATE_PHONE_MESSAGE)

        try:
            customer = self._repo.save(Customer(name=dto.name, phone=dto.phone))
        except IntegrityError as exc:
            logger.warning("customer.duplicate_phone")
            raise CustomerAlreadyExists(DUPLICATE_PHONE_MESSAGE) from exc

        logger.info("customer.created", customer_id=customer.id)
        return customer

    @transaction.atomic
    def update_customer(self, id: int, dto: UpdateCustomerDTO) -> Customer:
        """Replace name and phone of an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerAlreadyExists: if the new phone belongs to someone else.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")

        log = logger.bind(customer_id=id)

        if self._repo.phone_taken(dto.phone, exclude_id=customer.id):
            log.warning("customer.duplicate_phone")
            raise CustomerAlreadyExists(DUPLICATE_PHONE_MESSAGE)

        customer.name = dto.name
        customer.phone = dto.phone
        try:
            customer = self._repo.save(customer)
        except IntegrityError as exc:
            log.warning("customer.duplicate_phone")
            raise CustomerAlreadyExists(DUPLICATE_PHONE_MESSAGE) from exc
        log.info("customer.updated")
        return customer

    @transaction.atomic
    def delete_customer(self, id: int) -> None:
        """Delete a customer together with their finished orders.

        The active-order guard runs first, so an unknown ID passes the
        guard and is then reported as not found.

        Raises:
            CustomerHasActiveOrders: the customer still has open orders.
            CustomerNotFound: if the customer does not exist.
        """
        if self._repo.has_active_orders(id):
            logger.warning("customer.delete_blocked", customer_id=id)
            raise CustomerHasActiveOrders(
                "Cannot delete the customer because they have active orders."
            )

        if not self._repo.delete(id):
            raise CustomerNotFound(f"Customer {id} not found.")
        logger.info("customer.deleted", customer_id=id)

    @transaction.atomic
    def delete_all_customers(self) -> int:
        """Delete every customer (their orders cascade)."""
        count = self._repo.delete_all()
        logger.warning("customer.deleted_all", row_count=count)
        return count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_customers(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet:
        """Return customers, optionally filtered."""
        return self._repo.list(filters)

    def get_customer(self, id: int) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
