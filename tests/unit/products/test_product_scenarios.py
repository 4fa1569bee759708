"""Behavioural tests for the product core against both storage adapters.

Exercises ``ProductUseCase`` -> ``ProductService`` -> repository end to
end, without HTTP, once with the Django adapter and once in memory.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.core.errors import map_exception
from modules.products.entities import Product
from modules.products.exceptions import ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository
from modules.products.services import ProductService
from modules.products.use_cases import ProductUseCase
from shared.domain.exceptions import NotFoundError, ValidationError

pytestmark = pytest.mark.unit


@pytest.fixture(params=["django", "memory"])
def repository(request):
    if request.param == "django":
        return ProductDjangoRepository()
    return InMemoryProductRepository()


@pytest.fixture()
def use_case(repository):
    return ProductUseCase(ProductService(repository=repository))


@pytest.fixture()
def laptop(use_case):
    return use_case.create_product(
        Product(name="Laptop", price=Decimal("1299.99"), quantity=5)
    )


class TestScenarios:
    def test_create_laptop(self, laptop):
        assert laptop.id is not None
        assert laptop.name == "Laptop"

    def test_create_with_empty_name(self, use_case, repository):
        with pytest.raises(ValidationError) as exc_info:
            use_case.create_product(
                Product(name="", price=Decimal("10"), quantity=1)
            )

        assert exc_info.value.code == "VALIDATION_ERROR"
        assert "name is required" in exc_info.value.message
        assert repository.find_all() == []

    def test_get_missing_on_empty_storage(self, use_case):
        with pytest.raises(NotFoundError) as exc_info:
            use_case.get_product(999)

        assert exc_info.value.message == "Product with identifier 999 was not found"
        assert map_exception(exc_info.value, "/api/products/999").status == 404

    def test_update_replaces_whole_record(self, use_case, laptop):
        use_case.update_product(
            Product(
                id=laptop.id,
                name="Updated Laptop",
                price=Decimal("1199.99"),
                quantity=3,
            )
        )

        stored = use_case.get_product(laptop.id)
        assert stored == Product(
            id=laptop.id,
            name="Updated Laptop",
            price=Decimal("1199.99"),
            quantity=3,
            description=None,
        )

    def test_delete_then_get_fails(self, use_case, laptop):
        use_case.delete_product(laptop.id)

        with pytest.raises(ProductNotFound):
            use_case.get_product(laptop.id)

    def test_list_on_empty_storage(self, use_case):
        assert use_case.list_products() == []


class TestProperties:
    def test_create_then_get_round_trip(self, use_case):
        created = use_case.create_product(
            Product(
                name="Keyboard",
                description="Tenkeyless",
                price=Decimal("89.90"),
                quantity=25,
            )
        )

        assert use_case.get_product(created.id) == created

    @pytest.mark.parametrize(
        "price", [1299.99, Decimal("1.005"), Decimal("10"), 0]
    )
    def test_round_trip_holds_for_any_price_input(self, use_case, price):
        created = use_case.create_product(
            Product(name="Laptop", price=price, quantity=5)
        )

        assert use_case.get_product(created.id) == created
        assert use_case.list_products() == [created]

    def test_update_result_matches_stored(self, use_case, laptop):
        updated = use_case.update_product(
            Product(id=laptop.id, name="Laptop", price=Decimal("2.345"), quantity=1)
        )

        assert use_case.get_product(laptop.id) == updated

    def test_list_is_idempotent(self, use_case, laptop):
        use_case.create_product(Product(name="Mouse", price=Decimal("20"), quantity=2))

        assert use_case.list_products() == use_case.list_products()

    def test_ids_are_assigned_sequentially(self, use_case, laptop):
        second = use_case.create_product(
            Product(name="Mouse", price=Decimal("20"), quantity=2)
        )
        assert [p.id for p in use_case.list_products()] == [laptop.id, second.id]

    @pytest.mark.parametrize("offset", [None, 1, 999])
    def test_mutations_on_missing_ids_do_not_write(self, use_case, laptop, offset):
        missing_id = 0 if offset is None else laptop.id + offset
        with pytest.raises(NotFoundError):
            use_case.update_product(
                Product(id=missing_id, name="Ghost", price=Decimal("1"), quantity=1)
            )
        with pytest.raises(NotFoundError):
            use_case.delete_product(missing_id)

        assert use_case.list_products() == [laptop]

    def test_returned_values_do_not_alias_storage(self, use_case, laptop):
        laptop.name = "Mutated"

        assert use_case.get_product(laptop.id).name == "Laptop"
