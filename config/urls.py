"""
URL configuration for the Product Delete service
"""

from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from django.http import HttpResponseRedirect
from django.urls import reverse


def admin_redirect(request):
    """Redirect to the product delete settings page"""
    return HttpResponseRedirect(reverse("product_delete:settings"))


urlpatterns = [
    path("", admin_redirect, name="index"),
    path("admin/", admin.site.urls),
    path("", include("apps.product_delete.urls")),
]

# Serve static and media files in development
if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
