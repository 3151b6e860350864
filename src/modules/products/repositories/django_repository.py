"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.db import IntegrityError, transaction

from modules.core.pagination import Page, paginate
from modules.products.exceptions import ProductAlreadyExists
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or non-numeric IDs.
        """
        try:
            return Product.objects.filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def get_for_update(self, id: int) -> Optional[Product]:
        try:
            return Product.objects.select_for_update().filter(id=id).first()
        except (TypeError, ValueError):
            return None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Product]:
        """List products with optional Django ORM look-ups.

        Examples of valid filters::

            {"category": "Books"}
            {"name__icontains": "ball"}
        """
        queryset = Product.objects.all()
        if filters:
            queryset = queryset.filter(**filters)
        return list(queryset)

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        The write runs in its own savepoint so a UNIQUE violation on
        ``name`` can be reported as ``ProductAlreadyExists`` without
        poisoning the caller's transaction.
        """
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError:
            if self.exists_by_name(entity.name, exclude_id=entity.pk):
                logger.warning("product.duplicate_name_rejected_by_store", name=entity.name)
                raise ProductAlreadyExists(
                    f"Product name '{entity.name}' already registered."
                ) from None
            raise
        logger.info(
            "product.saved",
            product_id=entity.id,
            category=entity.category,
        )
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a product by ID.

        Returns ``True`` if the product was found and deleted,
        ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        product.delete()
        logger.info("product.deleted", product_id=id)
        return True

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        queryset = Product.objects.filter(name=name)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def find_page(self, category: Optional[str], page: int, size: int) -> Page[Product]:
        queryset = ProductFilter(
            data={"category": category or ""},
            queryset=Product.objects.order_by("category", "id"),
        ).qs
        return paginate(queryset, page, size)

    def distinct_categories(self) -> List[str]:
        """``SELECT DISTINCT category``; rows are never loaded into memory."""
        return list(
            Product.objects.order_by("category")
            .values_list("category", flat=True)
            .distinct()
        )
