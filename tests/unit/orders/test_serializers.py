from __future__ import annotations

import pytest

from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderDetailSerializer,
    OrderSummarySerializer,
    UpdateOrderSerializer,
)

pytestmark = pytest.mark.unit


def _payload(customer, pastry, **overrides):
    data = {
        "customer_id": customer.id,
        "items": [{"pastry_id": pastry.id, "quantity": 2}],
    }
    data.update(overrides)
    return data


def _create_payload(customer, pastry, **overrides):
    return _payload(customer, pastry, **{"status": "NEW", **overrides})


class TestCreateOrderSerializer:
    def test_status_required(self, customer, pastry):
        serializer = CreateOrderSerializer(data=_payload(customer, pastry))
        assert not serializer.is_valid()
        assert serializer.errors["status"] == ["Status is required."]

    @pytest.mark.parametrize("status", ["", None])
    def test_blank_status_rejected(self, customer, pastry, status):
        serializer = CreateOrderSerializer(
            data=_payload(customer, pastry, status=status)
        )
        assert not serializer.is_valid()
        assert serializer.errors["status"] == ["Status is required."]

    def test_status_new_any_case(self, customer, pastry):
        serializer = CreateOrderSerializer(
            data=_create_payload(customer, pastry, status="new")
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["status"] == "NEW"

    def test_status_other_than_new_rejected(self, customer, pastry):
        serializer = CreateOrderSerializer(
            data=_create_payload(customer, pastry, status="PROCESSING")
        )
        assert not serializer.is_valid()
        assert "status" in serializer.errors

    def test_unknown_customer(self, customer, pastry):
        serializer = CreateOrderSerializer(
            data=_create_payload(customer, pastry, customer_id=customer.id + 100)
        )
        assert not serializer.is_valid()
        assert "customer_id" in serializer.errors

    def test_empty_items(self, customer, pastry):
        serializer = CreateOrderSerializer(
            data=_create_payload(customer, pastry, items=[])
        )
        assert not serializer.is_valid()
        assert serializer.errors["items"]["non_field_errors"] == [
            "An order must contain at least one item."
        ]

    def test_unknown_pastry(self, customer, pastry):
        serializer = CreateOrderSerializer(
            data=_create_payload(
                customer, pastry, items=[{"pastry_id": pastry.id + 100, "quantity": 1}]
            )
        )
        assert not serializer.is_valid()
        # Python-side errors keep int indexes; JSON responses turn them into "0".
        assert "pastry_id" in serializer.errors["items"][0]

    @pytest.mark.parametrize("quantity", [0, 101, -3])
    def test_quantity_out_of_range(self, customer, pastry, quantity):
        serializer = CreateOrderSerializer(
            data=_create_payload(
                customer, pastry, items=[{"pastry_id": pastry.id, "quantity": quantity}]
            )
        )
        assert not serializer.is_valid()
        assert serializer.errors["items"][0]["quantity"] == [
            "Quantity must be between 1 and 100."
        ]


class TestUpdateOrderSerializer:
    def test_status_required(self, customer, pastry):
        serializer = UpdateOrderSerializer(data=_payload(customer, pastry))
        assert not serializer.is_valid()
        assert serializer.errors["status"] == ["Status is required."]

    def test_status_normalised(self, customer, pastry):
        serializer = UpdateOrderSerializer(
            data=_payload(customer, pastry, status="Cancelled")
        )
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["status"] == "CANCELLED"

    def test_unknown_status(self, customer, pastry):
        serializer = UpdateOrderSerializer(
            data=_payload(customer, pastry, status="SHIPPED")
        )
        assert not serializer.is_valid()
        assert "status" in serializer.errors


class TestOrderOutputSerializers:
    def test_summary_has_no_items(self, customer, pastry, make_order):
        order = make_order(customer, [(pastry, 2)])
        data = OrderSummarySerializer(order).data
        assert set(data) == {"id", "customer_id", "status", "order_time"}
        assert data["customer_id"] == customer.id

    def test_detail_lists_items(self, customer, pastry, make_order):
        order = make_order(customer, [(pastry, 2)])
        data = OrderDetailSerializer(order).data
        assert data["items"] == [{"pastry_id": pastry.id, "quantity": 2}]
