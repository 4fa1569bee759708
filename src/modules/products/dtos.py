"""Product DTOs for the HTTP boundary.

Framework-agnostic data transfer objects using Pydantic v2.  They run
the request-shape pass (presence, lengths, number formats) before the
payload reaches the service, which applies the business invariants a
second time on its own.  DTOs are immutable (``frozen=True``).

``ProductInputDTO`` is the body of create and update requests;
responses are rendered by ``ProductSerializer``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from modules.products.entities import Product

ProductName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=3, max_length=100)
]


class ProductInputDTO(BaseModel):
    """Immutable DTO for product create/update requests.

    Validates:
    - ``name`` is present and 3 to 100 characters once trimmed.
    - ``description`` is at most 1000 characters.
    - ``price`` is a decimal, zero or positive.
    - ``quantity`` is an integer, zero or positive.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: ProductName
    description: Optional[str] = Field(default=None, max_length=1000)
    price: Decimal = Field(ge=0, max_digits=19, decimal_places=2)
    quantity: int = Field(ge=0)

    def to_entity(self, id: Optional[int] = None) -> Product:
        return Product(
            id=id,
            name=self.name,
            description=self.description,
            price=self.price,
            quantity=self.quantity,
        )

