"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and renders
``Product`` entities.  Input is parsed by ``ProductInputDTO``.
"""

from __future__ import annotations

from rest_framework import serializers


class ProductSerializer(serializers.Serializer):
    """Read serializer for the Product resource."""

    id = serializers.IntegerField(read_only=True)
    name = serializers.CharField(min_length=3, max_length=100)
    description = serializers.CharField(
        max_length=1000, allow_null=True, required=False
    )
    price = serializers.DecimalField(max_digits=19, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=0)
