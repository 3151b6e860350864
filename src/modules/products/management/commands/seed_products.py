from __future__ import annotations

from django.core.management.base import BaseCommand
from django.db import transaction

from modules.products.models import Product

SEED_CATALOGUE: dict[str, list[str]] = {
    "Books": ["Field Guide to Birds", "Pocket Atlas", "Cookbook Classics"],
    "Electronics": ["USB-C Hub", "Noise Cancelling Headphones", "Smart Plug"],
    "Garden": ["Pruning Shears", "Watering Can"],
    "Toys": ["Ball", "Wooden Blocks", "Kite", "Puzzle 1000pc"],
}


class Command(BaseCommand):
    help = "Seed the catalogue with sample products for local development."

    def add_arguments(self, parser) -> None:
        parser.add_argument(
            "--category",
            action="append",
            dest="categories",
            help="Only seed the given category (repeatable).",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        wanted = options.get("categories") or list(SEED_CATALOGUE)
        unknown = sorted(set(wanted) - set(SEED_CATALOGUE))
        if unknown:
            self.stderr.write(self.style.WARNING(f"Unknown categories ignored: {', '.join(unknown)}"))

        self.stdout.write("Seeding products...")
        created = 0
        for category in wanted:
            for name in SEED_CATALOGUE.get(category, []):
                _, was_created = Product.objects.get_or_create(
                    name=name, defaults={"category": category}
                )
                created += int(was_created)

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products_created={created}, "
                f"products_total={Product.objects.count()}"
            )
        )
