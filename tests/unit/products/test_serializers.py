"""Unit tests for ProductSerializer (entity -> JSON)."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.products.entities import Product
from modules.products.serializers import ProductSerializer

pytestmark = pytest.mark.unit


def test_renders_all_fields():
    product = Product(
        id=1,
        name="Laptop",
        description="Ultrabook",
        price=Decimal("1299.99"),
        quantity=5,
    )

    assert ProductSerializer(product).data == {
        "id": 1,
        "name": "Laptop",
        "description": "Ultrabook",
        "price": "1299.99",
        "quantity": 5,
    }


def test_renders_missing_description_as_null():
    product = Product(id=2, name="Mouse", price=Decimal("20"), quantity=0)

    data = ProductSerializer(product).data

    assert data["description"] is None
    assert data["price"] == "20.00"


def test_renders_many():
    products = [
        Product(id=1, name="Laptop", price=Decimal("1"), quantity=1),
        Product(id=2, name="Mouse", price=Decimal("2"), quantity=2),
    ]

    data = ProductSerializer(products, many=True).data

    assert [item["id"] for item in data] == [1, 2]
