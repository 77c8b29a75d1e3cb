"""Django ORM base implementation shared by the shop repositories.

Every concrete repository is a thin pass-through to the model's default
manager.  Error handling follows the Null Object pattern: look-ups return
``None`` instead of raising; the Service Layer decides how to translate a
missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Optional, Type, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=models.Model)


class DjangoRepository(Generic[M]):
    """Generic CRUD over a single Django model.

    Subclasses set ``model`` and add the look-ups their business rules need.
    """

    model: Type[M]

    @property
    def entity_name(self) -> str:
        return self.model._meta.model_name

    def get_by_id(self, id: int) -> Optional[M]:
        """Retrieve an entity by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        logger.debug("repository.get_by_id", entity=self.entity_name, entity_id=id)
        try:
            return self.model.objects.filter(pk=id).first()
        except (ValueError, TypeError, ValidationError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> models.QuerySet:
        """List entities with optional Django ORM look-ups."""
        queryset = self.model.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    @transaction.atomic
    def save(self, entity: M) -> M:
        """Persist (create or update) an entity."""
        is_new = entity._state.adding
        entity.save()
        logger.info(
            f"{self.entity_name}.saved",
            entity_id=entity.pk,
            is_new=is_new,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete an entity by ID.

        Returns ``True`` if the entity was found and removed, ``False``
        if nothing exists with the given ID.
        """
        entity = self.get_by_id(id)
        if not entity:
            return False
        entity.delete()
        logger.info(f"{self.entity_name}.deleted", entity_id=id)
        return True

    @transaction.atomic
    def delete_all(self) -> int:
        """Remove every row of the model (cascades follow the FK rules)."""
        count, _ = self.model.objects.all().delete()
        logger.warning(f"{self.entity_name}.deleted_all", row_count=count)
        return count
