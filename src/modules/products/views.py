"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into status codes:
``ProductNotFound`` -> 404, ``ProductAlreadyExists`` and
``InvalidProductData`` -> 400.  Anything else propagates to
``custom_exception_handler``, which answers 500 with no body.
"""

from __future__ import annotations

from typing import Any, Mapping

import structlog
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers, status
from rest_framework.decorators import action
from rest_framework.exceptions import ParseError
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.core.exceptions import error_response, validation_error_response
from modules.products.dtos import (
    CreateProductDTO,
    ListProductsQueryDTO,
    UpdateProductDTO,
)
from modules.products.exceptions import (
    InvalidProductData,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import (
    CreateProductRequestSerializer,
    ProductListQuerySerializer,
    ProductPageSerializer,
    ProductSerializer,
    ProductSummarySerializer,
    UpdateProductRequestSerializer,
)
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)

_LIST_PARAMETERS = [
    OpenApiParameter("category", OpenApiTypes.STR, description="Exact category match."),
    OpenApiParameter("page", OpenApiTypes.INT, description="Zero-based page index."),
    OpenApiParameter("size", OpenApiTypes.INT, description="Page length."),
]


def _not_found(exc: ProductNotFound) -> Response:
    return error_response(status.HTTP_404_NOT_FOUND, "not_found", str(exc))


def _json_object(request: Request) -> Mapping[str, Any]:
    if not isinstance(request.data, Mapping):
        raise ParseError("Request body must be a JSON object.")
    return request.data


class ProductViewSet(GenericViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    Does **not** extend ``ModelViewSet``: all ORM access goes through
    the service/repository layer.
    """

    lookup_value_regex = r"\d+"
    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    @extend_schema(parameters=_LIST_PARAMETERS, responses=ProductPageSerializer)
    def list(self, request: Request) -> Response:
        """GET /api/v1/products?category=&page=&size="""
        return self._list(request.query_params)

    @extend_schema(
        deprecated=True,
        request=ProductListQuerySerializer,
        responses=ProductPageSerializer,
    )
    @action(detail=False, methods=["get"], url_path="list")
    def list_from_body(self, request: Request) -> Response:
        """GET /api/v1/products/list with a JSON body (deprecated)."""
        logger.warning("product.list_body_deprecated")
        response = self._list(_json_object(request))
        response["Deprecation"] = "true"
        return response

    @extend_schema(responses=serializers.ListField(child=serializers.CharField()))
    @action(detail=False, methods=["get"], url_path="categories")
    def categories(self, request: Request) -> Response:
        """GET /api/v1/products/categories"""
        return Response(self._service.list_categories())

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}"""
        try:
            product = self._service.get_product(int(pk))
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @extend_schema(
        request=CreateProductRequestSerializer,
        responses={201: ProductSummarySerializer},
    )
    def create(self, request: Request) -> Response:
        """POST /api/v1/products"""
        data = _json_object(request)

        try:
            dto = CreateProductDTO(
                category=data.get("category", ""),
                name=data.get("name", ""),
            )
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            product = self._service.create_product(dto)
        except ProductAlreadyExists as exc:
            return error_response(
                status.HTTP_400_BAD_REQUEST, "duplicate_name", str(exc), attr="name"
            )

        out = ProductSummarySerializer(product)
        return Response(out.data, status=status.HTTP_201_CREATED)

    @extend_schema(request=UpdateProductRequestSerializer, responses=ProductSerializer)
    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}"""
        data = _json_object(request)

        try:
            dto = UpdateProductDTO(
                category=data.get("category"),
                name=data.get("name"),
            )
        except PydanticValidationError as exc:
            return validation_error_response(exc)

        try:
            product = self._service.update_product(int(pk), dto)
        except ProductNotFound as exc:
            return _not_found(exc)
        except InvalidProductData as exc:
            return error_response(status.HTTP_400_BAD_REQUEST, "invalid_input", str(exc))
        except ProductAlreadyExists as exc:
            return error_response(
                status.HTTP_400_BAD_REQUEST, "duplicate_name", str(exc), attr="name"
            )

        return Response(ProductSerializer(product).data)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}"""
        try:
            self._service.delete_product(int(pk))
        except ProductNotFound as exc:
            return _not_found(exc)
        return Response(status=status.HTTP_204_NO_CONTENT)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _list(self, params: Mapping[str, Any]) -> Response:
        query_serializer = ProductListQuerySerializer(data=params)
        query_serializer.is_valid(raise_exception=True)
        query = ListProductsQueryDTO(**query_serializer.validated_data)
        page = self._service.list_products(query)
        return Response(ProductPageSerializer(page).data)
