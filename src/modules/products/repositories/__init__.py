"""Product repositories package."""

from __future__ import annotations

from django.conf import settings

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.repositories.memory_repository import InMemoryProductRepository

# One process-wide store so the memory backend survives across requests.
_memory_repository = InMemoryProductRepository()


def build_product_repository() -> IProductRepository:
    """Return the adapter selected by ``PRODUCT_REPOSITORY_BACKEND``."""
    backend = getattr(settings, "PRODUCT_REPOSITORY_BACKEND", "django")
    if backend == "memory":
        return _memory_repository
    if backend == "django":
        return ProductDjangoRepository()
    raise ValueError(f"Unknown product repository backend: {backend!r}")


__all__ = [
    "IProductRepository",
    "InMemoryProductRepository",
    "ProductDjangoRepository",
    "build_product_repository",
]
