"""Django ORM implementation of the Customer repository."""

from __future__ import annotations

from typing import Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.customers.models import Customer
from modules.customers.repositories.interfaces import ICustomerRepository
from modules.orders.constants import ACTIVE_STATES


class CustomerDjangoRepository(DjangoRepository[Customer], ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    model = Customer

    def phone_taken(self, phone: str, exclude_id: Optional[int] = None) -> bool:
        queryset = Customer.objects.filter(phone=phone)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    def exists(self, id: int) -> bool:
        return Customer.objects.filter(pk=id).exists()

    def has_active_orders(self, id: int) -> bool:
        return Customer.objects.filter(
            pk=id, orders__status__in=ACTIVE_STATES
        ).exists()
