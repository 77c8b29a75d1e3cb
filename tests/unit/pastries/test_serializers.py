from __future__ import annotations

from decimal import Decimal

import pytest

from modules.pastries.dtos import PastryOutputDTO
from modules.pastries.serializers import PastryInputSerializer, PastrySerializer

pytestmark = pytest.mark.unit


class TestPastryInputSerializer:
    def test_valid_payload(self):
        serializer = PastryInputSerializer(data={"name": "Eclair", "price": "45.00"})
        assert serializer.is_valid(), serializer.errors
        assert serializer.validated_data["price"] == Decimal("45.00")

    @pytest.mark.parametrize("price", ["0", "-5", "10000", "10000.01"])
    def test_price_out_of_range(self, price):
        serializer = PastryInputSerializer(data={"name": "Eclair", "price": price})
        assert not serializer.is_valid()
        assert "price" in serializer.errors

    def test_name_too_long(self):
        serializer = PastryInputSerializer(data={"name": "x" * 151, "price": "1"})
        assert not serializer.is_valid()
        assert serializer.errors["name"] == ["Name cannot exceed 150 characters."]

    def test_taken_name_rejected(self, pastry):
        serializer = PastryInputSerializer(data={"name": pastry.name, "price": "1"})
        assert not serializer.is_valid()
        assert "already exists" in serializer.errors["name"][0]

    def test_own_name_allowed_on_update(self, pastry):
        serializer = PastryInputSerializer(
            data={"name": pastry.name, "price": "50"},
            context={"pastry_id": pastry.id},
        )
        assert serializer.is_valid(), serializer.errors


class TestPastrySerializer:
    def test_serializes_cached_snapshot(self):
        dto = PastryOutputDTO(id=1, name="Eclair", price=Decimal("45.00"))
        data = PastrySerializer(dto).data
        assert data["id"] == 1
        assert data["name"] == "Eclair"
        assert Decimal(str(data["price"])) == Decimal("45.00")
