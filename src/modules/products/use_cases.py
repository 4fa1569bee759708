"""Product use cases (application layer).

Forwards every call unchanged to ``ProductService``.  Entrypoints talk
to this layer so the domain service can be swapped without touching
transport code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from modules.products.entities import Product
    from modules.products.services import ProductService


class ProductUseCase:
    def __init__(self, service: Optional[ProductService]) -> None:
        if service is None:
            raise ValueError("ProductUseCase requires a product service.")
        self._service = service

    def create_product(self, product: Product) -> Product:
        return self._service.create_product(product)

    def get_product(self, id: int) -> Product:
        return self._service.get_product(id)

    def list_products(self) -> List[Product]:
        return self._service.list_products()

    def update_product(self, product: Product) -> Product:
        return self._service.update_product(product)

    def delete_product(self, id: int) -> None:
        self._service.delete_product(id)
