"""Product repository interface.

Narrows ``IRepository`` to the Product entity keyed by integer ids.
Concrete adapters live next to this module.
"""

from __future__ import annotations

from modules.core.repositories.interfaces import IRepository
from modules.products.entities import Product


class IProductRepository(IRepository[Product, int]):
    """Repository contract for the Product entity.

    Adapters must translate technical storage failures into
    ``shared.domain.exceptions.BusinessError`` so nothing
    storage-specific crosses the service boundary.
    """
