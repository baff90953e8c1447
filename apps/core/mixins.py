"""
Reusable mixins for the Product Delete admin pages
"""

from django.contrib.admin.views.decorators import staff_member_required
from django.utils import timezone
from django.utils.decorators import method_decorator


class AdminRequiredMixin:
    """
    Mixin to require staff authentication for all views
    """

    @method_decorator(staff_member_required)
    def dispatch(self, *args, **kwargs):
        return super().dispatch(*args, **kwargs)


class PageTitleMixin:
    """
    Mixin to provide a page title and common context
    """

    page_title = "Dashboard"

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "page_title": self.get_page_title(),
                "current_time": timezone.now(),
                "user": self.request.user,
            }
        )
        return context

    def get_page_title(self):
        """
        Override in subclasses to set page title
        """
        return self.page_title
