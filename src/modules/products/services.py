"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- Product names are unique (advisory check; the UNIQUE index decides races).
- Updates are partial: only non-blank supplied fields overwrite stored ones,
  and at least one field must be supplied.
- Missing products surface as ``ProductNotFound``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.domain import ProductFields, merge
from modules.products.exceptions import (
    InvalidProductData,
    ProductAlreadyExists,
    ProductNotFound,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.core.pagination import Page
    from modules.products.dtos import (
        CreateProductDTO,
        ListProductsQueryDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Create a new product after enforcing name uniqueness.

        Raises:
            ProductAlreadyExists: if the name is already taken.
        """
        log = logger.bind(name=dto.name)

        self._ensure_name_available(dto.name)

        product = Product(category=dto.category, name=dto.name)
        product = self._repo.save(product)
        log.info("product.created", product_id=product.id, category=product.category)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> Product:
        """Merge the supplied fields into an existing product.

        The row stays locked from the look-up until the transaction
        commits.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidProductData: if neither category nor name is supplied.
            ProductAlreadyExists: if the new name belongs to another product.
        """
        product = self._repo.get_for_update(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")

        log = logger.bind(product_id=id)

        if not dto.has_changes:
            log.warning("product.update_without_fields")
            raise InvalidProductData("At least one of 'category' or 'name' is required.")

        if dto.name is not None and dto.name != product.name:
            self._ensure_name_available(dto.name, exclude_id=product.id)

        merged = merge(ProductFields.from_entity(product), dto)
        merged.apply_to(product)

        product = self._repo.save(product)
        log.info("product.updated", category=product.category)
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Delete a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_for_update(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        self._repo.delete(id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=id)
        return product

    def list_products(self, query: ListProductsQueryDTO) -> Page[Product]:
        """Return one page of products sorted ascending by category."""
        page = self._repo.find_page(query.category, query.page, query.size)
        logger.info(
            "product.listed",
            category=query.category,
            page=query.page,
            size=query.size,
            total_elements=page.total_elements,
        )
        return page

    def list_categories(self) -> List[str]:
        """Return each distinct category once, sorted ascending."""
        return sorted(self._repo.distinct_categories())

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        if self._repo.exists_by_name(name, exclude_id=exclude_id):
            logger.warning("product.duplicate_name", name=name)
            raise ProductAlreadyExists(f"Product name '{name}' already registered.")
