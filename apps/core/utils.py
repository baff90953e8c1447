"""
Utility functions for the Product Delete admin
"""

from typing import Any, Dict

from django.conf import settings
from django.db import DatabaseError, connection


def cms_table_names() -> Dict[str, str]:
    """
    Names of the CMS content tables this service reads and deletes from
    """
    from apps.catalog.models import Post, PostMeta, TermRelationship, TermTaxonomy

    return {
        "posts": Post._meta.db_table,
        "postmeta": PostMeta._meta.db_table,
        "term_relationships": TermRelationship._meta.db_table,
        "term_taxonomy": TermTaxonomy._meta.db_table,
    }


def missing_cms_tables() -> list:
    """
    Return the CMS content tables that do not exist in the database
    """
    existing = set(connection.introspection.table_names())
    return [name for name in cms_table_names().values() if name not in existing]


def get_catalog_stats() -> Dict[str, Any]:
    """
    Get product and attachment counts plus the effective delete limit
    """
    from apps.catalog.models import Attachment, Product
    from apps.product_delete.services import get_delete_limit

    try:
        stats = {
            "total_products": Product.objects.count(),
            "total_attachments": Attachment.objects.count(),
            "delete_limit": get_delete_limit(),
        }
    except DatabaseError:
        stats = {
            "total_products": 0,
            "total_attachments": 0,
            "delete_limit": settings.PRODUCT_DELETE_DEFAULT_LIMIT,
        }

    return stats
