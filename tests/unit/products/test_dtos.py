"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO: required non-blank fields, whitespace stripping, immutability.
- UpdateProductDTO: optional fields, blank-as-absent, ``has_changes``.
- ListProductsQueryDTO: defaults and bounds.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from modules.products.dtos import (
    CreateProductDTO,
    ListProductsQueryDTO,
    UpdateProductDTO,
)

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateProductDTO
# ===========================================================================


class TestCreateProductDTOValid:
    def test_create_with_valid_data(self):
        dto = CreateProductDTO(category="Toys", name="Ball")
        assert dto.category == "Toys"
        assert dto.name == "Ball"

    def test_surrounding_whitespace_stripped(self):
        dto = CreateProductDTO(category="  Toys ", name=" Ball  ")
        assert dto.category == "Toys"
        assert dto.name == "Ball"


class TestCreateProductDTOValidation:
    @pytest.mark.parametrize("category", ["", "   "])
    def test_blank_category_raises(self, category):
        with pytest.raises(ValidationError, match="Category must not be blank"):
            CreateProductDTO(category=category, name="Ball")

    @pytest.mark.parametrize("name", ["", "\t"])
    def test_blank_name_raises(self, name):
        with pytest.raises(ValidationError, match="Name must not be blank"):
            CreateProductDTO(category="Toys", name=name)

    def test_missing_fields_raise(self):
        with pytest.raises(ValidationError) as excinfo:
            CreateProductDTO()
        fields = {err["loc"][0] for err in excinfo.value.errors()}
        assert fields == {"category", "name"}

    def test_non_string_name_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(category="Toys", name=42)

    def test_overlong_name_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(category="Toys", name="x" * 256)

    def test_length_is_measured_after_stripping(self):
        dto = CreateProductDTO(category="Toys", name=" " + "n" * 255 + " ")
        assert dto.name == "n" * 255


class TestCreateProductDTOFrozen:
    def test_is_immutable(self):
        dto = CreateProductDTO(category="Toys", name="Ball")
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# UpdateProductDTO
# ===========================================================================


class TestUpdateProductDTO:
    def test_all_fields_optional(self):
        dto = UpdateProductDTO()
        assert dto.category is None
        assert dto.name is None
        assert dto.has_changes is False

    def test_partial_fields(self):
        dto = UpdateProductDTO(name="BigBall")
        assert dto.name == "BigBall"
        assert dto.category is None
        assert dto.has_changes is True

    def test_blank_values_become_absent(self):
        dto = UpdateProductDTO(category="", name="   ")
        assert dto.category is None
        assert dto.name is None
        assert dto.has_changes is False

    def test_values_are_stripped(self):
        dto = UpdateProductDTO(category=" Games ")
        assert dto.category == "Games"

    def test_padded_value_at_max_length_is_accepted(self):
        dto = UpdateProductDTO(name="  " + "n" * 255)
        assert dto.name == "n" * 255

    def test_is_immutable(self):
        dto = UpdateProductDTO(name="Test")
        with pytest.raises(ValidationError):
            dto.name = "Changed"


# ===========================================================================
# ListProductsQueryDTO
# ===========================================================================


class TestListProductsQueryDTO:
    def test_defaults(self):
        dto = ListProductsQueryDTO()
        assert dto.category is None
        assert dto.page == 0
        assert dto.size == 10

    def test_blank_category_means_all(self):
        assert ListProductsQueryDTO(category=" ").category is None

    def test_negative_page_raises(self):
        with pytest.raises(ValidationError):
            ListProductsQueryDTO(page=-1)

    def test_zero_size_raises(self):
        with pytest.raises(ValidationError):
            ListProductsQueryDTO(size=0)
