"""Product API views.

Exposes ``ProductUseCase`` via HTTP using a DRF ViewSet.  The view only
marshals: it parses the body into a ``ProductInputDTO``, calls the use
case and serialises the result.  Every failure propagates to
``modules.core.exception_handler``, which owns the error payload.
"""

from __future__ import annotations

from typing import Any

from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.serializers import ApiErrorSerializer
from modules.products.dtos import ProductInputDTO
from modules.products.repositories import build_product_repository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.use_cases import ProductUseCase

_error = OpenApiResponse(response=ApiErrorSerializer)


@extend_schema_view(
    list=extend_schema(
        summary="List all products",
        responses={200: ProductSerializer(many=True)},
    ),
    retrieve=extend_schema(
        summary="Get a product by id",
        responses={200: ProductSerializer, 404: _error},
    ),
    create=extend_schema(
        summary="Create a product",
        request=ProductSerializer,
        responses={201: ProductSerializer, 400: _error, 401: _error},
    ),
    update=extend_schema(
        summary="Replace a product",
        request=ProductSerializer,
        responses={200: ProductSerializer, 400: _error, 404: _error},
    ),
    destroy=extend_schema(
        summary="Delete a product",
        responses={204: None, 404: _error},
    ),
)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Wires ``ProductUseCase`` -> ``ProductService`` -> the configured
    repository adapter (DIP).  Does **not** extend ``ModelViewSet``:
    all storage access goes through the service/repository layer.
    """

    lookup_value_regex = r"[0-9]+"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._use_case = ProductUseCase(
            ProductService(repository=build_product_repository())
        )

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._use_case.list_products()
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str) -> Response:
        """GET /api/products/{pk}"""
        product = self._use_case.get_product(int(pk))
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        dto = ProductInputDTO.model_validate(request.data)
        product = self._use_case.create_product(dto.to_entity())
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str) -> Response:
        """PUT /api/products/{pk}

        Full replacement; the id in the path wins over any id in the body.
        """
        dto = ProductInputDTO.model_validate(request.data)
        product = self._use_case.update_product(dto.to_entity(id=int(pk)))
        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str) -> Response:
        """DELETE /api/products/{pk}"""
        self._use_case.delete_product(int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
