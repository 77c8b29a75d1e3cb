import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from modules.customers.models import Customer
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem
from modules.pastries.models import Pastry


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture(autouse=True)
def _clear_cache():
    """The local-memory cache outlives a single test; start each one empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Olena Kovalenko", phone="+380501234567")


@pytest.fixture()
def pastry():
    return Pastry.objects.create(name="Eclair", price="45.00")


@pytest.fixture()
def make_order():
    """Factory persisting an order with ``(pastry, quantity)`` lines."""

    def _make(customer, lines, status=OrderStatus.NEW):
        order = Order.objects.create(customer=customer, status=status)
        for pastry, quantity in lines:
            OrderItem.objects.create(order=order, pastry=pastry, quantity=quantity)
        return order

    return _make
