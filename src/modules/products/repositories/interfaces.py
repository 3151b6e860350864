"""Product repository interface.

Extends ``IRepository[Product, int]`` with the look-ups the Product
service needs: name uniqueness, locked reads, paged category listing
and distinct categories.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.core.pagination import Page
    from modules.products.models import Product


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Whether a product other than ``exclude_id`` holds ``name``."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve a product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if the
        product does not exist.
        """

    @abstractmethod
    def find_page(self, category: Optional[str], page: int, size: int) -> "Page[Product]":
        """Return one zero-based page of products sorted by category.

        ``category=None`` pages over every product.
        """

    @abstractmethod
    def distinct_categories(self) -> List[str]:
        """Return each category once, deduplicated by the database."""
