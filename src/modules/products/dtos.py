"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).  Responses are
shaped by the DRF serializers in ``serializers.py``.

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ListProductsQueryDTO``: category filter and page window.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(v: str | None) -> str | None:
    if v is None or not v.strip():
        return None
    return v.strip()


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Both fields are required and must not be blank.  Surrounding
    whitespace is stripped.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category: str = Field(max_length=255)
    name: str = Field(max_length=255)

    @field_validator("category")
    @classmethod
    def category_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Category must not be blank.")
        return v.strip()

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Name must not be blank.")
        return v.strip()


class UpdateProductDTO(BaseModel):
    """Immutable DTO for partial product updates.

    Both fields are optional.  A blank value is treated exactly like an
    absent one, so it can never erase stored data.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category: str | None = Field(default=None, max_length=255)
    name: str | None = Field(default=None, max_length=255)

    @field_validator("category", "name")
    @classmethod
    def blank_means_absent(cls, v: str | None) -> str | None:
        return _blank_to_none(v)

    @property
    def has_changes(self) -> bool:
        return self.category is not None or self.name is not None


class ListProductsQueryDTO(BaseModel):
    """Immutable DTO for list requests.

    ``page`` is zero-based.  An absent or blank ``category`` lists every
    product.
    """

    model_config = ConfigDict(frozen=True)

    category: str | None = None
    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)

    @field_validator("category")
    @classmethod
    def blank_means_all(cls, v: str | None) -> str | None:
        return _blank_to_none(v)
