"""
Management command to check database connection and the CMS content tables
"""

from django.core.management.base import BaseCommand
from django.db import DatabaseError, connection

from apps.core.utils import cms_table_names, missing_cms_tables


class Command(BaseCommand):
    help = "Check database connection and the CMS content tables (Django NEVER creates them)"

    def handle(self, *args, **options):
        self.stdout.write(self.style.SUCCESS("🔍 Checking database connection..."))

        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            self.stdout.write(self.style.SUCCESS("✅ Database connection successful"))

            missing = missing_cms_tables()
        except DatabaseError as e:
            self.stdout.write(self.style.ERROR(f"❌ Database connection failed: {e}"))
            return

        for name in cms_table_names().values():
            if name in missing:
                self.stdout.write(self.style.WARNING(f"  - {name} (missing)"))
            else:
                self.stdout.write(f"  - {name}")

        if missing:
            self.stdout.write(
                self.style.WARNING(
                    "⚠️  CMS tables missing. Check CMS_TABLE_PREFIX and the database name."
                )
            )
            return

        self.stdout.write(self.style.SUCCESS("🎉 Database check completed!"))
