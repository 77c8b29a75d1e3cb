"""Pastry service layer (Use Cases).

Orchestrates business logic for the Pastry aggregate, delegating
persistence to the injected ``IPastryRepository``.

Business rules enforced here:
- Pastry name must be unique.
- A pastry referenced by an order item cannot be deleted; neither can
  the whole catalogue while any pastry is referenced.
- The full catalogue is cached under a single key with an absolute
  expiry. Every write drops the key once its transaction commits.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.conf import settings
from django.core.cache import cache as default_cache
from django.db import IntegrityError, transaction

from modules.pastries.dtos import PastryOutputDTO
from modules.pastries.exceptions import (
    PastryAlreadyExists,
    PastryInUse,
    PastryNotFound,
)
from modules.pastries.models import Pastry

if TYPE_CHECKING:
    from django.core.cache.backends.base import BaseCache

    from modules.pastries.dtos import CreatePastryDTO, UpdatePastryDTO
    from modules.pastries.repositories.interfaces import IPastryRepository

logger = structlog.get_logger(__name__)

PASTRY_LIST_CACHE_KEY = "all_pastries"
DUPLICATE_NAME_MESSAGE = "A pastry with this name already exists."


class PastryService:
    """Application service for Pastry use-cases.

    Receives an ``IPastryRepository`` via constructor injection (DIP).
    ``cache`` defaults to Django's default cache alias.
    """

    def __init__(
        self,
        repository: IPastryRepository,
        cache: Optional[BaseCache] = None,
    ) -> None:
        self._repo = repository
        self._cache = cache if cache is not None else default_cache

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_pastry(self, dto: CreatePastryDTO) -> Pastry:
        """Create a new pastry.

        Raises:
            PastryAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        if self._repo.name_taken(dto.name):
            log.warning("pastry.duplicate_name")
            raise PastryAlreadyExists(DUPLICATE_NAME_MESSAGE)

        try:
            pastry = self._repo.save(Pastry(name=dto.name, price=dto.price))
        except IntegrityError as exc:
            log.warning("pastry.duplicate_name")
            raise PastryAlreadyExists(DUPLICATE_NAME_MESSAGE) from exc
        transaction.on_commit(self._invalidate_list)
        log.info("pastry.created", pastry_id=pastry.id)
        return pastry

    @transaction.atomic
    def update_pastry(self, id: int, dto: UpdatePastryDTO) -> Pastry:
        """Replace name and price of an existing pastry.

        Raises:
            PastryNotFound: if the pastry does not exist.
            PastryAlreadyExists: if the new name belongs to another pastry.
        """
        pastry = self._repo.get_by_id(id)
        if not pastry:
            raise PastryNotFound(f"Pastry {id} not found.")

        log = logger.bind(pastry_id=id)

        if self._repo.name_taken(dto.name, exclude_id=pastry.id):
            log.warning("pastry.duplicate_name", name=dto.name)
            raise PastryAlreadyExists(DUPLICATE_NAME_MESSAGE)

        pastry.name = dto.name
        pastry.price = dto.price
        try:
            pastry = self._repo.save(pastry)
        except IntegrityError as exc:
            log.warning("pastry.duplicate_name", name=dto.name)
            raise PastryAlreadyExists(DUPLICATE_NAME_MESSAGE) from exc
        transaction.on_commit(self._invalidate_list)
        log.info("pastry.updated")
        return pastry

    @transaction.atomic
    def delete_pastry(self, id: int) -> None:
        """Delete a pastry that no order refers to.

        Raises:
            PastryNotFound: if the pastry does not exist.
            PastryInUse: if an order item references the pastry.
        """
        if not self._repo.exists(id):
            raise PastryNotFound(f"Pastry {id} not found.")

        if self._repo.is_used_in_orders(id):
            logger.warning("pastry.delete_blocked", pastry_id=id)
            raise PastryInUse(
                "Cannot delete the pastry because it is used in existing orders."
            )

        self._repo.delete(id)
        transaction.on_commit(self._invalidate_list)
        logger.info("pastry.deleted", pastry_id=id)

    @transaction.atomic
    def delete_all_pastries(self) -> int:
        """Empty the catalogue.

        Raises:
            PastryInUse: if any pastry is referenced by an order item.
        """
        if self._repo.any_in_use():
            logger.warning("pastry.delete_all_blocked")
            raise PastryInUse(
                "Cannot delete all pastries because some are used in existing orders."
            )

        count = self._repo.delete_all()
        transaction.on_commit(self._invalidate_list)
        return count

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_pastries(self) -> List[PastryOutputDTO]:
        """Return the whole catalogue, served from cache when present."""
        cached = self._cache.get(PASTRY_LIST_CACHE_KEY)
        if cached is not None:
            logger.debug("pastry.cache_hit", key=PASTRY_LIST_CACHE_KEY)
            return cached

        logger.debug("pastry.cache_miss", key=PASTRY_LIST_CACHE_KEY)
        pastries = [PastryOutputDTO.from_entity(p) for p in self._repo.list()]
        self._cache.set(
            PASTRY_LIST_CACHE_KEY, pastries, timeout=settings.PASTRY_CACHE_TTL
        )
        return pastries

    def get_pastry(self, id: int) -> Pastry:
        """Retrieve a single pastry by ID, bypassing the cache.

        Raises:
            PastryNotFound: if the pastry does not exist.
        """
        pastry = self._repo.get_by_id(id)
        if not pastry:
            raise PastryNotFound(f"Pastry {id} not found.")
        return pastry

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _invalidate_list(self) -> None:
        self._cache.delete(PASTRY_LIST_CACHE_KEY)
        logger.debug("pastry.cache_invalidated", key=PASTRY_LIST_CACHE_KEY)
