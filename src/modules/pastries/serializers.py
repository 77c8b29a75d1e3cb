"""Pastry DRF serializers for API input/output.

The input serializer runs the field rules and the unique-name check
before the service is invoked.
"""

from __future__ import annotations

from decimal import Decimal

from rest_framework import serializers

from modules.pastries.dtos import PRICE_RANGE_MESSAGE
from modules.pastries.models import MAX_PRICE, MIN_PRICE, Pastry
from modules.pastries.repositories.django_repository import PastryDjangoRepository
from modules.pastries.services import DUPLICATE_NAME_MESSAGE


class PastrySerializer(serializers.ModelSerializer):
    """Read serializer for pastries.

    Accepts ``Pastry`` instances as well as ``PastryOutputDTO`` snapshots
    from the catalogue cache.
    """

    class Meta:
        model = Pastry
        fields = ["id", "name", "price"]
        read_only_fields = fields


class PastryInputSerializer(serializers.Serializer):
    """Validates create/update payloads.

    On update, pass ``context={"pastry_id": pk}`` so the uniqueness check
    ignores the pastry being edited.
    """

    name = serializers.CharField(
        max_length=150,
        error_messages={
            "required": "Pastry name is required.",
            "blank": "Pastry name is required.",
            "max_length": "Name cannot exceed 150 characters.",
        },
    )
    price = serializers.DecimalField(
        max_digits=10,
        decimal_places=2,
        error_messages={"required": "Pastry price is required."},
    )

    def validate_name(self, value: str) -> str:
        repository = self.context.get("repository") or PastryDjangoRepository()
        if repository.name_taken(value, exclude_id=self.context.get("pastry_id")):
            raise serializers.ValidationError(DUPLICATE_NAME_MESSAGE)
        return value

    def validate_price(self, value: Decimal) -> Decimal:
        if not MIN_PRICE < value < MAX_PRICE:
            raise serializers.ValidationError(PRICE_RANGE_MESSAGE)
        return value
