"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The DRF exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from typing import Any

from shared.domain.exceptions import NotFoundError

PRODUCT_RESOURCE = "Product"


class ProductNotFound(NotFoundError):
    """The requested product does not exist."""

    def __init__(self, identifier: Any) -> None:
        super().__init__(PRODUCT_RESOURCE, identifier)
