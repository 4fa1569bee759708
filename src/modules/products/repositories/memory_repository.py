"""In-memory implementation of the Product repository.

Keeps products in a dict keyed by id, in insertion order.  Values are
copied on the way in and on the way out, so callers can never change
stored state by mutating a returned ``Product``.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from typing import Dict, List, Optional

from modules.products.entities import Product
from modules.products.repositories.interfaces import IProductRepository


class InMemoryProductRepository(IProductRepository):
    """Dict-backed Product repository with sequential ids starting at 1."""

    def __init__(self) -> None:
        self._rows: Dict[int, Product] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, entity: Product) -> Product:
        with self._lock:
            id = entity.id if entity.id is not None else next(self._ids)
            stored = replace(entity, id=id)
            self._rows[id] = stored
            return replace(stored)

    def find_by_id(self, id: int) -> Optional[Product]:
        with self._lock:
            stored = self._rows.get(id)
            return replace(stored) if stored is not None else None

    def find_all(self) -> List[Product]:
        with self._lock:
            return [replace(product) for product in self._rows.values()]

    def delete_by_id(self, id: int) -> None:
        with self._lock:
            self._rows.pop(id, None)
