"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` by mapping ``ProductRecord`` rows to
``Product`` entities.  Error handling follows the Null Object pattern
for look-ups (``None`` instead of raising) and translates database
failures into ``BusinessError`` so ORM exception types never reach the
Service Layer.
"""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable, List, Optional, TypeVar

import structlog

from django.db import DatabaseError, transaction

from modules.products.entities import Product
from modules.products.models import ProductRecord
from modules.products.repositories.interfaces import IProductRepository
from shared.domain.exceptions import BusinessError

logger = structlog.get_logger(__name__)

PERSISTENCE_ERROR = "PERSISTENCE_ERROR"

F = TypeVar("F", bound=Callable[..., Any])


def _translate_storage_errors(func: F) -> F:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.error(
                "product.storage_failure",
                operation=func.__name__,
                error=str(exc),
            )
            raise BusinessError(
                "Product storage operation failed.", PERSISTENCE_ERROR
            ) from exc

    return wrapper  # type: ignore[return-value]


def _to_entity(record: ProductRecord) -> Product:
    return Product(
        id=record.id,
        name=record.name,
        description=record.description,
        price=record.price,
        quantity=record.quantity,
    )


def _to_record(product: Product) -> ProductRecord:
    return ProductRecord(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
    )


def _coerce_id(id: Any) -> Optional[int]:
    try:
        return int(id)
    except (TypeError, ValueError):
        return None


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @_translate_storage_errors
    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Insert a new row or replace the row with ``entity.id``.

        ``Model.save`` issues an UPDATE when the primary key is set and
        falls back to INSERT when no row matched.
        """
        record = _to_record(entity)
        record.save()
        # Reload so the returned entity carries the column-rounded price.
        record.refresh_from_db()
        logger.info("product.saved", product_id=record.id)
        return _to_entity(record)

    @_translate_storage_errors
    def find_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-integer ids.
        """
        pk = _coerce_id(id)
        if pk is None:
            return None
        record = ProductRecord.objects.filter(pk=pk).first()
        return _to_entity(record) if record is not None else None

    @_translate_storage_errors
    def find_all(self) -> List[Product]:
        return [_to_entity(record) for record in ProductRecord.objects.order_by("id")]

    @_translate_storage_errors
    @transaction.atomic
    def delete_by_id(self, id: int) -> None:
        pk = _coerce_id(id)
        if pk is None:
            return
        deleted, _ = ProductRecord.objects.filter(pk=pk).delete()
        logger.info("product.row_deleted", product_id=pk, rows=deleted)
