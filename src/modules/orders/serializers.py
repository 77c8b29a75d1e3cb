"""Order DRF serializers for API input/output.

Input serializers check references (customer, pastries) and ranges
before the service is invoked.  Business logic lives in the Service
Layer, which receives Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.constants import OrderStatus, parse_status
from modules.orders.models import Order, OrderItem
from modules.pastries.repositories.django_repository import PastryDjangoRepository

MAX_ITEM_QUANTITY = 100

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class OrderItemInputSerializer(serializers.Serializer):
    """Validates a single ``{pastry_id, quantity}`` line."""

    pastry_id = serializers.IntegerField(
        error_messages={"required": "Pastry id is required."}
    )
    quantity = serializers.IntegerField(
        min_value=1,
        max_value=MAX_ITEM_QUANTITY,
        error_messages={
            "required": "Quantity is required.",
            "min_value": "Quantity must be between 1 and 100.",
            "max_value": "Quantity must be between 1 and 100.",
        },
    )

    def validate_pastry_id(self, value: int) -> int:
        if not PastryDjangoRepository().exists(value):
            raise serializers.ValidationError(f"Pastry {value} does not exist.")
        return value


class _OrderInputSerializer(serializers.Serializer):
    customer_id = serializers.IntegerField(
        error_messages={"required": "Customer id is required."}
    )
    items = OrderItemInputSerializer(
        many=True,
        allow_empty=False,
        error_messages={"empty": "An order must contain at least one item."},
    )

    def validate_customer_id(self, value: int) -> int:
        if not CustomerDjangoRepository().exists(value):
            raise serializers.ValidationError(f"Customer {value} does not exist.")
        return value


class CreateOrderSerializer(_OrderInputSerializer):
    """Validates the order creation payload.

    ``status`` is mandatory and must be ``NEW`` (any case).
    """

    status = serializers.CharField(
        error_messages={
            "required": "Status is required.",
            "blank": "Status is required.",
            "null": "Status is required.",
        }
    )

    def validate_status(self, value: str) -> str:
        if parse_status(value) != OrderStatus.NEW:
            raise serializers.ValidationError(
                "A new order can only be created with status NEW."
            )
        return OrderStatus.NEW.value


class UpdateOrderSerializer(_OrderInputSerializer):
    """Validates the full-replacement payload of ``PUT /orders/{id}/``."""

    status = serializers.CharField(
        error_messages={
            "required": "Status is required.",
            "blank": "Status is required.",
        }
    )

    def validate_status(self, value: str) -> str:
        parsed = parse_status(value)
        if parsed is None:
            valid = ", ".join(OrderStatus.values)
            raise serializers.ValidationError(
                f"Invalid status '{value}'. Expected one of: {valid}."
            )
        return parsed.value


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.ModelSerializer):
    class Meta:
        model = OrderItem
        fields = ["pastry_id", "quantity"]
        read_only_fields = fields


class OrderSummarySerializer(serializers.ModelSerializer):
    """Lightweight serializer for order lists (no nested items)."""

    class Meta:
        model = Order
        fields = ["id", "customer_id", "status", "order_time"]
        read_only_fields = fields


class OrderDetailSerializer(serializers.ModelSerializer):
    """Read serializer for a single order with its items."""

    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ["id", "customer_id", "status", "order_time", "items"]
        read_only_fields = fields
