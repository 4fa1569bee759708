"""Product service layer (domain rules).

Applies the Product invariants and existence rules around storage,
delegating persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Name must be present and not blank after trimming.
- Price must be present and zero or positive.
- Quantity must be present and zero or positive.
- Update and delete require the product to exist.

Domain errors are raised, never caught: translating them into a
transport response is the caller's job.
"""

from __future__ import annotations

from dataclasses import replace
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.exceptions import ProductNotFound
from shared.domain.exceptions import ValidationError

if TYPE_CHECKING:
    from modules.products.entities import Product
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Domain service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    Holds no state besides the repository reference.
    """

    def __init__(self, repository: Optional[IProductRepository]) -> None:
        if repository is None:
            raise ValueError("ProductService requires a product repository.")
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_product(self, product: Product) -> Product:
        """Validate and store a new product.

        Any ``id`` on the input is discarded; storage assigns it.

        Raises:
            ValidationError: if an invariant is violated.
        """
        self._validate(product)
        stored = self._repo.save(replace(product, id=None))
        logger.info("product.created", product_id=stored.id, name=stored.name)
        return stored

    def update_product(self, product: Product) -> Product:
        """Replace an existing product with the supplied record.

        The existence check runs before validation.

        Raises:
            ProductNotFound: if no product has ``product.id``.
            ValidationError: if an invariant is violated.
        """
        self.get_product(product.id)
        self._validate(product)
        stored = self._repo.save(product)
        logger.info("product.updated", product_id=stored.id)
        return stored

    def delete_product(self, id: int) -> None:
        """Delete an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        self._repo.delete_by_id(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: Optional[int]) -> Product:
        """Retrieve a single product by id.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        logger.debug("product.lookup", product_id=id)
        product = self._repo.find_by_id(id) if id is not None else None
        if product is None:
            raise ProductNotFound(id)
        return product

    def list_products(self) -> List[Product]:
        """Return every stored product in repository order."""
        logger.debug("product.list")
        return list(self._repo.find_all())

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------

    def _validate(self, product: Product) -> None:
        if product.name is None or not product.name.strip():
            self._reject("Product name is required.", field="name")
        if not _is_valid_price(product.price):
            self._reject("Product price must be zero or positive.", field="price")
        if product.quantity is None or product.quantity < 0:
            self._reject(
                "Product quantity must be zero or positive.", field="quantity"
            )

    @staticmethod
    def _reject(message: str, field: str) -> None:
        logger.warning("product.validation_failed", field=field, reason=message)
        raise ValidationError(message)


def _is_valid_price(price: object) -> bool:
    """Finite and zero or positive; NaN and infinities are rejected."""
    if price is None:
        return False
    try:
        amount = Decimal(price)
    except (InvalidOperation, TypeError, ValueError):
        return False
    return amount.is_finite() and amount >= 0
