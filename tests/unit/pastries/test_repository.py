from __future__ import annotations

import pytest

from modules.pastries.models import Pastry
from modules.pastries.repositories.django_repository import PastryDjangoRepository

pytestmark = pytest.mark.unit


@pytest.fixture()
def repo():
    return PastryDjangoRepository()


class TestPastryDjangoRepository:
    def test_name_taken_excludes_given_id(self, repo, pastry):
        assert repo.name_taken(pastry.name)
        assert not repo.name_taken(pastry.name, exclude_id=pastry.id)

    def test_usage_checks(self, repo, customer, pastry, make_order):
        spare = Pastry.objects.create(name="Napoleon", price="380.00")
        assert not repo.any_in_use()

        make_order(customer, [(pastry, 2)])

        assert repo.is_used_in_orders(pastry.id)
        assert not repo.is_used_in_orders(spare.id)
        assert repo.any_in_use()

    def test_exists(self, repo, pastry):
        assert repo.exists(pastry.id)
        assert not repo.exists(pastry.id + 1)
