"""
Views for the product delete app
"""

import hmac
import json

from django.conf import settings
from django.contrib import messages
from django.http import JsonResponse
from django.urls import reverse, reverse_lazy
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods
from django.views.generic import FormView

from apps.core.exceptions import InvalidLimitError
from apps.core.logging import get_logger
from apps.core.mixins import AdminRequiredMixin, PageTitleMixin

from .forms import ProductDeleteSettingsForm
from .models import ProductDeleteSettings
from .services import ProductDeleter, resolve_limit, save_settings

logger = get_logger(__name__)

TOKEN_HEADER = "X-Product-Delete-Token"


def _request_token(request):
    auth = request.headers.get("Authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[7:].strip()
    return request.headers.get(TOKEN_HEADER, "")


def _is_authorized(request) -> bool:
    """Open unless PRODUCT_DELETE_API_TOKEN is configured"""
    expected = settings.PRODUCT_DELETE_API_TOKEN
    if not expected:
        return True
    return hmac.compare_digest(
        _request_token(request).encode("utf-8"), expected.encode("utf-8")
    )


def _requested_limit(request):
    """
    Read `limit` from the query string, a form body or a JSON body
    """
    if "limit" in request.GET:
        return request.GET.get("limit")
    if "limit" in request.POST:
        return request.POST.get("limit")
    if request.content_type == "application/json" and request.body:
        data = json.loads(request.body)
        if isinstance(data, dict):
            return data.get("limit")
    return None


@csrf_exempt
@require_http_methods(["POST"])
def delete_products_api(request):
    """
    API endpoint to permanently delete the oldest products and their images
    """
    if not _is_authorized(request):
        logger.warning("Rejected delete request with bad token")
        return JsonResponse(
            {"success": False, "error": "Invalid or missing API token"}, status=403
        )

    try:
        limit = resolve_limit(_requested_limit(request))
    except ValueError:
        # Malformed JSON or a body that is not UTF-8
        return JsonResponse(
            {"success": False, "error": "Request body is not valid JSON"}, status=400
        )
    except InvalidLimitError as e:
        logger.warning("Rejected delete request", **e.to_dict())
        return JsonResponse({"success": False, "error": e.message}, status=400)

    try:
        result = ProductDeleter().delete_products(limit)
        return JsonResponse(result.to_dict())

    except Exception as e:
        logger.exception("Delete request failed", limit=limit)
        return JsonResponse({"success": False, "error": str(e)}, status=500)


class ProductDeleteSettingsView(AdminRequiredMixin, PageTitleMixin, FormView):
    """
    Settings page: delete limit form and the endpoint URL
    """

    template_name = "product_delete/settings.html"
    form_class = ProductDeleteSettingsForm
    success_url = reverse_lazy("product_delete:settings")
    page_title = "Product Delete"

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs["instance"] = ProductDeleteSettings.load()
        return kwargs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context["endpoint_url"] = self.request.build_absolute_uri(
            reverse("product_delete:delete_products")
        )
        return context

    def form_valid(self, form):
        save_settings(form.cleaned_data["limit"])
        messages.success(self.request, "Settings saved.")
        return super().form_valid(form)
