"""
Management command to check system status
"""

from django.core.management.base import BaseCommand
from django.db import DatabaseError, connection

from apps.core.utils import get_catalog_stats


class Command(BaseCommand):
    help = "Check system status and catalog statistics"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("🔍 Checking Product Delete service..."))

        # Check database connection
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            self.stdout.write(self.style.SUCCESS("✅ Database connection successful"))
        except DatabaseError as e:
            self.stdout.write(self.style.ERROR(f"❌ Database connection failed: {e}"))
            return

        stats = get_catalog_stats()
        self.stdout.write(self.style.SUCCESS("📊 Catalog Statistics:"))
        self.stdout.write(f"  - Products: {stats['total_products']}")
        self.stdout.write(f"  - Attachments: {stats['total_attachments']}")
        self.stdout.write(f"  - Delete Limit: {stats['delete_limit']}")

        self.stdout.write(self.style.SUCCESS("🎉 System check completed!"))
