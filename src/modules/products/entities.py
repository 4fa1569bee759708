"""Product domain entity.

A plain record with no framework dependency.  Fields are optional at
the type level because callers may hand over incomplete data; the
``ProductService`` decides whether a value is acceptable.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Product:
    name: Optional[str] = None
    price: Optional[Decimal] = None
    quantity: Optional[int] = None
    description: Optional[str] = None
    id: Optional[int] = None
