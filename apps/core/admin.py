"""
Core admin configuration
"""

from django.conf import settings
from django.contrib import admin


# Customize the admin site
admin.site.site_header = settings.ADMIN_SITE_HEADER
admin.site.site_title = settings.ADMIN_SITE_TITLE
admin.site.index_title = settings.ADMIN_INDEX_TITLE
