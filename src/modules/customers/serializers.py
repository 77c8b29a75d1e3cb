"""Customer DRF serializers for API input/output.

The input serializer is the declarative validation step that runs before
the service is invoked: field rules (required, length, phone format) plus
the cross-entity uniqueness check.  Business logic lives in the Service
Layer, which receives Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.models import PHONE_PATTERN, Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.customers.services import DUPLICATE_PHONE_MESSAGE


class CustomerSerializer(serializers.ModelSerializer):
    """Read serializer for the Customer resource."""

    class Meta:
        model = Customer
        fields = ["id", "name", "phone"]
        read_only_fields = fields


class CustomerInputSerializer(serializers.Serializer):
    """Validates create/update payloads.

    On update, pass ``context={"customer_id": pk}`` so the uniqueness
    check ignores the customer being edited.
    """

    name = serializers.CharField(
        max_length=100,
        error_messages={
            "required": "Customer name is required.",
            "blank": "Customer name is required.",
            "max_length": "Name cannot exceed 100 characters.",
        },
    )
    phone = serializers.RegexField(
        regex=PHONE_PATTERN,
        error_messages={
            "required": "Customer phone is required.",
            "blank": "Customer phone is required.",
            "invalid": "Invalid phone number format. Expected +380XXXXXXXXX.",
        },
    )

    def validate_phone(self, value: str) -> str:
        repository = self.context.get("repository") or CustomerDjangoRepository()
        if repository.phone_taken(value, exclude_id=self.context.get("customer_id")):
            raise serializers.ValidationError(DUPLICATE_PHONE_MESSAGE)
        return value
