#!/usr/bin/env python
"""
Startup script for the Product Delete service
Uses environment variables for port and host configuration
"""

import os

import django
from django.core.management import execute_from_command_line

if __name__ == "__main__":
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
    django.setup()

    # Get port and host from environment
    port = os.environ.get("PORT", "8000")
    host = os.environ.get("HOST", "127.0.0.1")

    print(f"🚀 Starting Product Delete service...")
    print(f"📍 Host: {host}")
    print(f"🔌 Port: {port}")
    print(f"🌐 Settings: http://{host}:{port}/settings/product-delete/")
    print(f"🗑️  Endpoint: http://{host}:{port}/product-delete/v1/delete-products")
    print("=" * 50)

    # Start the server
    execute_from_command_line(["manage.py", "runserver", f"{host}:{port}"])
