"""Pastry repository interface.

Extends ``IRepository[Pastry]`` with the look-ups required by the
unique-name rule and the in-use delete guards.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.pastries.models import Pastry


class IPastryRepository(IRepository["Pastry"]):
    """Repository contract for the Pastry aggregate."""

    @abstractmethod
    def name_taken(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Whether another pastry already uses ``name``."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Whether a pastry with the given ID exists."""

    @abstractmethod
    def is_used_in_orders(self, id: int) -> bool:
        """Whether any order item references the pastry."""

    @abstractmethod
    def any_in_use(self) -> bool:
        """Whether any pastry at all is referenced by an order item."""
