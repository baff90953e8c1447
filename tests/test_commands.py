"""
Tests for the management commands
"""

from io import StringIO

import pytest
from django.core.management import CommandError, call_command

from apps.catalog.models import Product
from apps.product_delete.services import save_settings


def run(*args, **kwargs):
    out = StringIO()
    call_command(*args, stdout=out, **kwargs)
    return out.getvalue()


@pytest.mark.django_db
class TestDeleteProductsCommand:
    def test_no_products(self):
        assert "No products found to delete." in run("delete_products")

    def test_explicit_limit(self, products):
        ids = [p.id for p in products]

        output = run("delete_products", "--limit", "2")

        assert "Deleted 2 of 2 products (limit 2)." in output
        assert list(Product.objects.values_list("id", flat=True)) == ids[2:]

    def test_stored_limit(self, products):
        save_settings(4)

        output = run("delete_products")

        assert "(limit 4)" in output
        assert Product.objects.count() == 1

    def test_invalid_limit(self, products):
        with pytest.raises(CommandError):
            run("delete_products", "--limit", "0")

        assert Product.objects.count() == len(products)


@pytest.mark.django_db
class TestOperationalCommands:
    def test_check_system(self, products, make_attachment):
        make_attachment()

        output = run("check_system")

        assert "Products: 5" in output
        assert "Attachments: 1" in output
        assert "Delete Limit: 10" in output

    def test_check_db(self):
        output = run("check_db")

        assert "wp_posts" in output
        assert "wp_postmeta" in output
        assert "wp_term_relationships" in output
        assert "wp_term_taxonomy" in output
        assert "Database check completed" in output

    def test_create_admin_user(self, django_user_model):
        output = run("create_admin_user", "--username", "boss", "--password", "pw-123")

        assert "Successfully created admin user: boss" in output
        assert django_user_model.objects.get(username="boss").is_superuser

        assert "already exists" in run(
            "create_admin_user", "--username", "boss", "--password", "pw-123"
        )
