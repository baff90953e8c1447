"""
Management command to create admin user
"""

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = "Create admin user for the product delete settings page"

    def add_arguments(self, parser):
        parser.add_argument(
            "--username",
            type=str,
            default="admin",
            help="Admin username (default: admin)",
        )
        parser.add_argument(
            "--email",
            type=str,
            default="admin@example.com",
            help="Admin email (default: admin@example.com)",
        )
        parser.add_argument(
            "--password",
            type=str,
            required=True,
            help="Admin password",
        )

    def handle(self, *args, **options):
        User = get_user_model()
        username = options["username"]
        email = options["email"]

        # Check if user already exists
        if User.objects.filter(username=username).exists():
            self.stdout.write(self.style.WARNING(f"User {username} already exists"))
            return

        User.objects.create_superuser(
            username=username, email=email, password=options["password"]
        )

        self.stdout.write(
            self.style.SUCCESS(f"Successfully created admin user: {username}")
        )
        self.stdout.write(self.style.SUCCESS(f"Email: {email}"))
