"""Product model: the single entity of the catalogue.

Business rules implemented:
- Every product has a non-blank ``category`` and ``name``
  (application validation + DB check constraints).
- ``name`` is unique across all products.  The UNIQUE index is the
  final arbiter when two writers race past the service-level check.
- ``category`` is indexed: list queries filter and sort on it.
"""

from __future__ import annotations

import structlog
from django.core.exceptions import ValidationError
from django.db import models

logger = structlog.get_logger(__name__)


class Product(models.Model):
    """Catalogue product.

    The primary key is store-generated and stored in the ``product_id``
    column; it never changes after creation.
    """

    id = models.BigAutoField(primary_key=True, db_column="product_id")
    category = models.CharField(max_length=255, db_index=True)
    name = models.CharField(max_length=255, unique=True)

    class Meta:
        db_table = "products"
        ordering = ["category", "id"]
        constraints = [
            models.CheckConstraint(
                condition=~models.Q(category=""),
                name="products_category_not_blank",
            ),
            models.CheckConstraint(
                condition=~models.Q(name=""),
                name="products_name_not_blank",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        errors = {}
        for field in ("category", "name"):
            value = getattr(self, field)
            if value is None or not value.strip():
                errors[field] = f"{field.capitalize()} must not be blank."
        if errors:
            raise ValidationError(errors)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save(self, *args, **kwargs) -> None:
        is_new = self._state.adding
        super().save(*args, **kwargs)
        if is_new:
            logger.info(
                "product_created",
                product_id=self.id,
                category=self.category,
                name=self.name,
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.category} - {self.name}"
