"""Unit tests for the Product model.

Covers:
- Creation and store-generated integer ids.
- Table and column naming.
- Name uniqueness constraint.
- Non-blank category/name (full_clean + DB check constraints).
- Default ordering, __str__ and the creation log line.
"""

from __future__ import annotations

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, connection, transaction

from modules.products.models import Product

pytestmark = pytest.mark.unit


class TestProductCreation:
    def test_create_product_with_valid_data(self):
        p = Product.objects.create(category="Toys", name="Ball")
        p.refresh_from_db()
        assert p.category == "Toys"
        assert p.name == "Ball"

    def test_id_is_store_generated_integer(self):
        first = Product.objects.create(category="Toys", name="Ball")
        second = Product.objects.create(category="Toys", name="Kite")
        assert isinstance(first.id, int)
        assert second.id > first.id

    def test_table_and_primary_key_column(self):
        assert Product._meta.db_table == "products"
        assert Product._meta.pk.column == "product_id"
        with connection.cursor() as cursor:
            columns = {
                col.name
                for col in connection.introspection.get_table_description(
                    cursor, "products"
                )
            }
        assert columns == {"product_id", "category", "name"}


class TestNameUniqueness:
    def test_duplicate_name_rejected_by_database(self):
        Product.objects.create(category="Toys", name="Ball")
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(category="Sports", name="Ball")
        assert Product.objects.filter(name="Ball").count() == 1

    def test_full_clean_reports_duplicate_name(self):
        Product.objects.create(category="Toys", name="Ball")
        with pytest.raises(ValidationError) as excinfo:
            Product(category="Sports", name="Ball").full_clean()
        assert "name" in excinfo.value.message_dict


class TestNotBlank:
    @pytest.mark.parametrize(
        ("category", "name", "field"),
        [("", "Ball", "category"), ("Toys", "", "name"), ("  ", "Ball", "category")],
    )
    def test_full_clean_rejects_blank(self, category, name, field):
        with pytest.raises(ValidationError) as excinfo:
            Product(category=category, name=name).full_clean()
        assert field in excinfo.value.message_dict

    @pytest.mark.parametrize(("category", "name"), [("", "Ball"), ("Toys", "")])
    def test_database_rejects_empty_strings(self, category, name):
        with pytest.raises(IntegrityError), transaction.atomic():
            Product.objects.create(category=category, name=name)


class TestOrderingAndDisplay:
    def test_default_ordering_is_by_category(self):
        Product.objects.create(category="Toys", name="Ball")
        Product.objects.create(category="Books", name="Atlas")
        Product.objects.create(category="Garden", name="Shears")
        assert list(Product.objects.values_list("category", flat=True)) == [
            "Books",
            "Garden",
            "Toys",
        ]

    def test_str(self):
        assert str(Product(category="Toys", name="Ball")) == "Toys - Ball"


class TestCreationLog:
    def test_logs_on_create_only(self, caplog):
        import logging

        with caplog.at_level(logging.INFO):
            p = Product.objects.create(category="Toys", name="Ball")
            p.name = "BigBall"
            p.save()
        messages = [r.getMessage() for r in caplog.records]
        assert sum("product_created" in m for m in messages) == 1
