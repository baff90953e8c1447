"""
Management command to delete the oldest products and their images
"""

from django.core.management.base import BaseCommand, CommandError

from apps.core.exceptions import InvalidLimitError
from apps.product_delete.services import ProductDeleter, resolve_limit


class Command(BaseCommand):
    help = "Permanently delete the oldest products with their featured and gallery images"

    def add_arguments(self, parser):
        parser.add_argument(
            "--limit",
            type=str,
            default=None,
            help="Number of products to delete (default: the configured limit)",
        )

    def handle(self, *args, **options):
        try:
            limit = resolve_limit(options["limit"])
        except InvalidLimitError as e:
            raise CommandError(e.message) from e

        result = ProductDeleter().delete_products(limit)

        if not result.selected_ids:
            self.stdout.write(self.style.NOTICE("No products found to delete."))
            return

        self.stdout.write(
            self.style.SUCCESS(
                f"Deleted {result.deleted_count} of {len(result.selected_ids)} products (limit {limit})."
            )
        )
        if result.deleted_ids:
            self.stdout.write(f"  Deleted: {', '.join(map(str, result.deleted_ids))}")
        if result.failed_ids:
            self.stdout.write(
                self.style.WARNING(
                    f"  Failed: {', '.join(map(str, result.failed_ids))}"
                )
            )
