from __future__ import annotations

import pytest

from modules.customers.models import Customer
from modules.customers.repositories.django_repository import CustomerDjangoRepository
from modules.orders.constants import OrderStatus

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return CustomerDjangoRepository()


class TestCustomerDjangoRepository:
    def test_get_by_id_malformed_returns_none(self, repo):
        assert repo.get_by_id("not-a-number") is None

    def test_phone_taken_excludes_given_id(self, repo, customer):
        assert repo.phone_taken(customer.phone)
        assert not repo.phone_taken(customer.phone, exclude_id=customer.id)

    @pytest.mark.parametrize(
        "status, expected",
        [
            (OrderStatus.NEW, True),
            (OrderStatus.PROCESSING, True),
            (OrderStatus.COMPLETED, False),
            (OrderStatus.CANCELLED, False),
        ],
    )
    def test_has_active_orders(
        self, repo, customer, pastry, make_order, status, expected
    ):
        make_order(customer, [(pastry, 1)], status=status)
        assert repo.has_active_orders(customer.id) is expected

    def test_delete_all_removes_rows(self, repo, customer):
        Customer.objects.create(name="Taras", phone="+380671112233")

        assert repo.delete_all() == 2
        assert not Customer.objects.exists()

    def test_delete_missing_returns_false(self, repo):
        assert repo.delete(12345) is False
