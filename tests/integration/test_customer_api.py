"""Integration tests for Customer API endpoints.

Covers:
- CRUD operations via /api/v1/customers/.
- Validation errors (400) and domain exception mapping (404, 409).
"""

from __future__ import annotations

import pytest

from modules.customers.models import Customer
from modules.orders.constants import OrderStatus

pytestmark = pytest.mark.integration

URL = "/api/v1/customers/"


def detail(pk) -> str:
    return f"{URL}{pk}/"


class TestCustomerList:
    def test_list_empty(self, api_client):
        response = api_client.get(URL)
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_customers(self, api_client, customer):
        response = api_client.get(URL)
        assert response.json() == [
            {"id": customer.id, "name": customer.name, "phone": customer.phone}
        ]

    def test_filter_by_name(self, api_client, customer):
        Customer.objects.create(name="Taras Shevchuk", phone="+380671112233")

        response = api_client.get(URL, {"name": "tara"})

        assert [c["name"] for c in response.json()] == ["Taras Shevchuk"]

    def test_filter_by_phone(self, api_client, customer):
        Customer.objects.create(name="Taras Shevchuk", phone="+380671112233")

        response = api_client.get(URL, {"phone": customer.phone})

        assert [c["id"] for c in response.json()] == [customer.id]


class TestCustomerRetrieve:
    def test_found(self, api_client, customer):
        response = api_client.get(detail(customer.id))
        assert response.status_code == 200
        assert response.json()["phone"] == customer.phone

    def test_not_found(self, api_client):
        response = api_client.get(detail(999))
        assert response.status_code == 404
        assert "detail" in response.json()


class TestCustomerCreate:
    def test_created_with_location(self, api_client):
        response = api_client.post(
            URL, {"name": "Iryna Bondar", "phone": "+380931234321"}, format="json"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Iryna Bondar"
        assert response["Location"].endswith(detail(body["id"]))
        assert Customer.objects.filter(phone="+380931234321").exists()

    def test_invalid_phone(self, api_client):
        response = api_client.post(
            URL, {"name": "Iryna", "phone": "0931234321"}, format="json"
        )
        assert response.status_code == 400
        assert "phone" in response.json()

    def test_duplicate_phone(self, api_client, customer):
        response = api_client.post(
            URL, {"name": "Other", "phone": customer.phone}, format="json"
        )
        assert response.status_code == 400
        assert "phone" in response.json()

    def test_missing_fields(self, api_client):
        response = api_client.post(URL, {}, format="json")
        assert response.status_code == 400
        assert set(response.json()) == {"name", "phone"}


class TestCustomerUpdate:
    def test_update_returns_204(self, api_client, customer):
        response = api_client.put(
            detail(customer.id),
            {"name": "Olena K.", "phone": customer.phone},
            format="json",
        )

        assert response.status_code == 204
        customer.refresh_from_db()
        assert customer.name == "Olena K."

    def test_phone_of_other_customer(self, api_client, customer):
        other = Customer.objects.create(name="Taras", phone="+380671112233")

        response = api_client.put(
            detail(customer.id),
            {"name": "Olena", "phone": other.phone},
            format="json",
        )

        assert response.status_code == 400
        assert "phone" in response.json()

    def test_not_found(self, api_client):
        response = api_client.put(
            detail(999), {"name": "Ghost", "phone": "+380501112233"}, format="json"
        )
        assert response.status_code == 404


class TestCustomerDelete:
    def test_delete(self, api_client, customer):
        response = api_client.delete(detail(customer.id))
        assert response.status_code == 204
        assert not Customer.objects.exists()

    def test_not_found(self, api_client):
        assert api_client.delete(detail(999)).status_code == 404

    @pytest.mark.parametrize("status", [OrderStatus.NEW, OrderStatus.PROCESSING])
    def test_active_order_blocks_delete(
        self, api_client, customer, pastry, make_order, status
    ):
        make_order(customer, [(pastry, 1)], status=status)

        response = api_client.delete(detail(customer.id))

        assert response.status_code == 409
        assert "active orders" in response.json()["detail"]
        assert Customer.objects.filter(pk=customer.id).exists()

    def test_finished_orders_are_removed_with_customer(
        self, api_client, customer, pastry, make_order
    ):
        make_order(customer, [(pastry, 1)], status=OrderStatus.COMPLETED)
        make_order(customer, [(pastry, 1)], status=OrderStatus.CANCELLED)

        assert api_client.delete(detail(customer.id)).status_code == 204
        assert not customer.orders.exists()

    def test_delete_all(self, api_client, customer):
        Customer.objects.create(name="Taras", phone="+380671112233")

        response = api_client.delete(URL)

        assert response.status_code == 200
        assert response.json() == {"message": "All customers have been deleted."}
        assert not Customer.objects.exists()
