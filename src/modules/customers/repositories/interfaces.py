"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-ups required by the
phone uniqueness rule and the active-order delete guard.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def phone_taken(self, phone: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another customer already uses ``phone``."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Whether a customer with the given ID exists."""

    @abstractmethod
    def has_active_orders(self, id: int) -> bool:
        """Whether the customer has any order that is not in a terminal state."""
