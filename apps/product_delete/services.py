"""
Product deletion service

Selects the oldest products, removes their featured and gallery images,
then permanently deletes the product records with their variations and
term links.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.core.exceptions import SuspiciousFileOperation
from django.core.files.storage import Storage, default_storage
from django.db import DatabaseError, transaction

from apps.catalog.models import (
    ATTACHMENT_POST_TYPE,
    PRODUCT_POST_TYPE,
    VARIATION_POST_TYPE,
    Attachment,
    Post,
    PostMeta,
    Product,
    TermRelationship,
)
from apps.core.exceptions import InvalidLimitError
from apps.core.logging import get_logger

from .models import ProductDeleteSettings

logger = get_logger(__name__)

NO_PRODUCTS_MESSAGE = "No products found to delete."


def coerce_limit(value: Any) -> int:
    """
    Convert a limit to an int between 1 and PRODUCT_DELETE_MAX_LIMIT,
    raising InvalidLimitError otherwise
    """
    if isinstance(value, bool):
        raise InvalidLimitError(value)
    if isinstance(value, int):
        limit = value
    else:
        try:
            limit = int(str(value).strip())
        except (TypeError, ValueError):
            raise InvalidLimitError(value) from None
    if limit < 1:
        raise InvalidLimitError(value)
    maximum = settings.PRODUCT_DELETE_MAX_LIMIT
    if limit > maximum:
        raise InvalidLimitError(
            value, message=f"limit must not exceed {maximum}, got {value!r}"
        )
    return limit


def get_delete_limit() -> int:
    """
    Return the configured delete limit, falling back to the hard default
    """
    stored = ProductDeleteSettings.load().limit
    try:
        return coerce_limit(stored)
    except InvalidLimitError:
        logger.warning("Ignoring invalid stored delete limit", stored_limit=stored)
        return settings.PRODUCT_DELETE_DEFAULT_LIMIT


def resolve_limit(requested: Any = None) -> int:
    """
    Pick the effective limit: explicit request value, stored value, default
    """
    if requested is None or (isinstance(requested, str) and not requested.strip()):
        return get_delete_limit()
    return coerce_limit(requested)


def save_settings(limit: Any) -> ProductDeleteSettings:
    """
    Validate and persist the delete limit, creating the record on first save
    """
    record = ProductDeleteSettings.load()
    record.limit = coerce_limit(limit)
    record.full_clean()
    record.save()
    logger.info("Product delete settings saved", limit=record.limit)
    return record


@dataclass
class DeletionResult:
    """Outcome of one delete batch"""

    requested_limit: int
    selected_ids: List[int] = field(default_factory=list)
    deleted_ids: List[int] = field(default_factory=list)
    failed_ids: List[int] = field(default_factory=list)

    @property
    def deleted_count(self) -> int:
        return len(self.deleted_ids)

    def to_dict(self) -> Dict[str, Any]:
        """Response payload for the REST endpoint"""
        if not self.selected_ids:
            return {"success": True, "message": NO_PRODUCTS_MESSAGE}
        return {
            "success": True,
            "requested_limit": self.requested_limit,
            "deleted_count": self.deleted_count,
            "deleted_ids": self.deleted_ids,
            "failed_ids": self.failed_ids,
        }


class ProductDeleter:
    """
    Deletes products together with their attachments

    Each product is handled on its own; a failure never stops the batch.
    """

    def __init__(self, storage: Optional[Storage] = None):
        self.storage = storage or default_storage

    def delete_products(self, limit: int) -> DeletionResult:
        """Delete up to `limit` products, oldest first"""
        limit = coerce_limit(limit)
        return self.delete_ids(Product.objects.oldest_ids(limit), limit)

    def delete_ids(
        self, product_ids: List[int], limit: Optional[int] = None
    ) -> DeletionResult:
        """Delete the given products in order, collecting successes and failures"""
        if limit is None:
            limit = len(product_ids)
        result = DeletionResult(requested_limit=limit, selected_ids=list(product_ids))

        if not result.selected_ids:
            logger.info("No products found to delete", limit=limit)
            return result

        logger.info(
            "Deleting products", limit=limit, selected=len(result.selected_ids)
        )

        for product_id in result.selected_ids:
            try:
                deleted = self.delete_product(product_id)
            except DatabaseError:
                logger.exception("Product deletion failed", product_id=product_id)
                deleted = False

            if deleted:
                result.deleted_ids.append(product_id)
            else:
                result.failed_ids.append(product_id)

        logger.info(
            "Product deletion finished",
            limit=limit,
            deleted=result.deleted_count,
            failed=len(result.failed_ids),
        )
        return result

    def delete_product(self, product_id: int) -> bool:
        """
        Permanently delete one product, its variations and its images

        Returns False when the product row no longer exists.
        """
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            logger.warning("Product no longer exists", product_id=product_id)
            return False

        thumbnail_id = product.thumbnail_id
        if thumbnail_id:
            self.delete_attachment(thumbnail_id)

        for gallery_id in product.gallery_ids:
            self.delete_attachment(gallery_id)

        variation_ids = product.variation_ids
        post_ids = variation_ids + [product_id]

        with transaction.atomic():
            PostMeta.objects.filter(post_id__in=post_ids).delete()
            TermRelationship.objects.detach(post_ids)
            Post.objects.filter(
                pk__in=variation_ids, post_type=VARIATION_POST_TYPE
            ).delete()
            deleted, _ = Post.objects.filter(
                pk=product_id, post_type=PRODUCT_POST_TYPE
            ).delete()

        if not deleted:
            logger.warning("Product row was already removed", product_id=product_id)
        return deleted > 0

    def delete_attachment(self, attachment_id: int) -> bool:
        """
        Permanently delete an attachment row, its meta, its stored file and
        the resized copies listed in its metadata
        """
        attachment = Attachment.objects.filter(pk=attachment_id).first()
        if attachment is None:
            logger.warning("Attachment not found", attachment_id=attachment_id)
            return False

        file_path = attachment.file_path
        generated_paths = attachment.generated_file_paths
        try:
            with transaction.atomic():
                PostMeta.objects.filter(post_id=attachment_id).delete()
                TermRelationship.objects.detach([attachment_id])
                Post.objects.filter(
                    pk=attachment_id, post_type=ATTACHMENT_POST_TYPE
                ).delete()
        except DatabaseError:
            logger.exception("Attachment deletion failed", attachment_id=attachment_id)
            return False

        if file_path:
            self._delete_file(attachment_id, file_path)
        for path in generated_paths:
            self._delete_file(attachment_id, path)

        logger.debug("Attachment deleted", attachment_id=attachment_id, file=file_path)
        return True

    def _delete_file(self, attachment_id: int, file_path: str) -> None:
        try:
            if self.storage.exists(file_path):
                self.storage.delete(file_path)
            else:
                logger.warning(
                    "Attachment file missing",
                    attachment_id=attachment_id,
                    file=file_path,
                )
        except (OSError, SuspiciousFileOperation):
            logger.warning(
                "Could not remove attachment file",
                attachment_id=attachment_id,
                file=file_path,
                exc_info=True,
            )
