"""Pure domain logic for the Product aggregate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.products.dtos import UpdateProductDTO
    from modules.products.models import Product


class ProductFields(BaseModel):
    """Snapshot of the mutable fields of a product."""

    model_config = ConfigDict(frozen=True)

    category: str
    name: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductFields:
        return cls(category=product.category, name=product.name)

    def apply_to(self, product: Product) -> Product:
        """Copy these values onto ``product`` (in memory, not saved)."""
        product.category = self.category
        product.name = self.name
        return product


def merge(existing: ProductFields, patch: UpdateProductDTO) -> ProductFields:
    """Overlay the non-blank fields of ``patch`` on ``existing``.

    Absent or blank patch fields keep the existing value.  Neither
    argument is modified.
    """
    updates = {}
    if patch.category is not None and patch.category.strip():
        updates["category"] = patch.category
    if patch.name is not None and patch.name.strip():
        updates["name"] = patch.name
    return existing.model_copy(update=updates)
