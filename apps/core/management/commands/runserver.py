"""
Management command to run server with environment-based configuration
"""

from django.core.management.commands.runserver import Command as RunserverCommand
from django.conf import settings


class Command(RunserverCommand):
    help = "Run development server with environment-based port configuration"

    def handle(self, *args, **options):
        # Fall back to HOST/PORT settings when no address is given
        if not options.get("addrport"):
            port = getattr(settings, "PORT", 8000)
            host = getattr(settings, "HOST", "127.0.0.1")
            options["addrport"] = f"{host}:{port}"

        self.stdout.write(
            self.style.SUCCESS(
                f'Starting Product Delete service on {options["addrport"]}'
            )
        )

        super().handle(*args, **options)
