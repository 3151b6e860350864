"""Product DRF serializers for API input/output.

The serializers operate at the Interface layer (API Views).
Business logic lives in the Service Layer, which receives
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from django.conf import settings
from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Product as returned by retrieve and update: name and category only."""

    class Meta:
        model = Product
        fields = ["name", "category"]
        read_only_fields = fields


class ProductSummarySerializer(serializers.ModelSerializer):
    """Product with its identifier, used by create and list responses."""

    class Meta:
        model = Product
        fields = ["id", "name", "category"]
        read_only_fields = fields


class ProductPageSerializer(serializers.Serializer):
    """Serialises a ``modules.core.pagination.Page`` of products."""

    content = ProductSummarySerializer(source="items", many=True)
    totalPages = serializers.IntegerField(source="total_pages")
    totalElements = serializers.IntegerField(source="total_elements")
    pageNumber = serializers.IntegerField(source="number")


class ProductListQuerySerializer(serializers.Serializer):
    """Validates the ``category`` / ``page`` / ``size`` list parameters."""

    category = serializers.CharField(allow_blank=True, allow_null=True, default="")
    page = serializers.IntegerField(min_value=0, default=0)
    size = serializers.IntegerField(
        min_value=1,
        max_value=settings.MAX_PAGE_SIZE,
        default=settings.DEFAULT_PAGE_SIZE,
    )


class CreateProductRequestSerializer(serializers.Serializer):
    """Request body of ``POST /products`` (OpenAPI documentation only)."""

    category = serializers.CharField()
    name = serializers.CharField()


class UpdateProductRequestSerializer(serializers.Serializer):
    """Request body of ``PATCH /products/{id}`` (OpenAPI documentation only)."""

    category = serializers.CharField(required=False, allow_blank=True)
    name = serializers.CharField(required=False, allow_blank=True)
