from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        db_column="product_id", primary_key=True, serialize=False
                    ),
                ),
                ("category", models.CharField(db_index=True, max_length=255)),
                ("name", models.CharField(max_length=255, unique=True)),
            ],
            options={
                "db_table": "products",
                "ordering": ["category", "id"],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("category", ""), _negated=True),
                        name="products_category_not_blank",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("name", ""), _negated=True),
                        name="products_name_not_blank",
                    ),
                ],
            },
        ),
    ]
