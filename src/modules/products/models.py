"""Product persistence model.

``ProductRecord`` is the relational shape of the ``Product`` entity.
Only the Django repository adapter touches it; the domain layer works
with ``modules.products.entities.Product``.
"""

from __future__ import annotations

from django.core.validators import MaxLengthValidator, MinValueValidator
from django.db import models


class ProductRecord(models.Model):
    name = models.CharField(max_length=100)
    description = models.TextField(
        null=True,
        blank=True,
        validators=[MaxLengthValidator(1000)],
    )
    price = models.DecimalField(
        max_digits=19,
        decimal_places=2,
        validators=[MinValueValidator(0)],
    )
    quantity = models.IntegerField(validators=[MinValueValidator(0)])

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gte=0),
                name="products_quantity_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
