"""Django ORM implementation of the Pastry repository."""

from __future__ import annotations

from typing import Optional

from modules.core.repositories.django_repository import DjangoRepository
from modules.pastries.models import Pastry
from modules.pastries.repositories.interfaces import IPastryRepository


class PastryDjangoRepository(DjangoRepository[Pastry], IPastryRepository):
    """Concrete Pastry repository backed by Django ORM."""

    model = Pastry

    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        queryset = Pastry.objects.filter(name=name)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.exists()

    def exists(self, id: int) -> bool:
        return Pastry.objects.filter(pk=id).exists()

    def is_used_in_orders(self, id: int) -> bool:
        return Pastry.objects.filter(pk=id, order_items__isnull=False).exists()

    def any_in_use(self) -> bool:
        return Pastry.objects.filter(order_items__isnull=False).exists()
