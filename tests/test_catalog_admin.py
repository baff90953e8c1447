"""
Tests for the product admin action
"""

import pytest
from django.urls import reverse

from apps.catalog.models import Attachment, Product

CHANGELIST = "admin:catalog_product_changelist"


@pytest.mark.django_db
class TestProductAdmin:
    def test_changelist_lists_products(self, admin_client, products):
        response = admin_client.get(reverse(CHANGELIST))

        assert response.status_code == 200
        assert "Product 1" in response.content.decode()

    def test_delete_with_images_action(self, admin_client, make_product, make_attachment):
        thumbnail = make_attachment()
        doomed = make_product(title="Doomed", thumbnail=thumbnail)
        kept = make_product(title="Kept")

        response = admin_client.post(
            reverse(CHANGELIST),
            {"action": "delete_with_images", "_selected_action": [doomed.id]},
            follow=True,
        )

        assert response.status_code == 200
        assert "Deleted 1 products." in response.content.decode()
        assert list(Product.objects.values_list("id", flat=True)) == [kept.id]
        assert not Attachment.objects.filter(pk=thumbnail.id).exists()

    def test_staff_without_superuser_cannot_delete(self, client, django_user_model, products):
        from django.contrib.auth.models import Permission

        staff = django_user_model.objects.create_user(
            username="staff", password="pw", is_staff=True
        )
        staff.user_permissions.add(Permission.objects.get(codename="view_product"))
        client.force_login(staff)

        response = client.post(
            reverse(CHANGELIST),
            {"action": "delete_with_images", "_selected_action": [products[0].id]},
            follow=True,
        )

        assert "Only superusers can delete products." in response.content.decode()
        assert Product.objects.count() == len(products)
