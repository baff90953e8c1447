"""
Catalog models for the Product Delete service
⚠️  CRITICAL: Matches the content tables owned by the CMS
Django should NEVER create these tables outside of tests - they already exist!
"""

import posixpath
from collections import Counter
from typing import Iterable, List, Optional

import phpserialize
from django.conf import settings
from django.db import models
from django.db.models import F
from django.db.models.functions import Greatest

from apps.core.logging import get_logger

logger = get_logger(__name__)

TABLE_PREFIX = settings.CMS_TABLE_PREFIX

PRODUCT_POST_TYPE = "product"
ATTACHMENT_POST_TYPE = "attachment"
VARIATION_POST_TYPE = "product_variation"

THUMBNAIL_META_KEY = "_thumbnail_id"
GALLERY_META_KEY = "_product_image_gallery"
ATTACHED_FILE_META_KEY = "_wp_attached_file"
ATTACHMENT_METADATA_META_KEY = "_wp_attachment_metadata"


def parse_attachment_id(value) -> Optional[int]:
    """Parse a stored attachment reference, returning None when unset"""
    if value is None:
        return None
    value = str(value).strip()
    if not value:
        return None
    try:
        attachment_id = int(value)
    except ValueError:
        return None
    return attachment_id if attachment_id > 0 else None


class Post(models.Model):
    """
    Generic content row, filtered by post_type into products and attachments
    """

    id = models.BigAutoField(primary_key=True, db_column="ID")
    post_type = models.CharField(max_length=20, default="post", db_index=True)
    post_title = models.TextField(blank=True, default="")
    post_status = models.CharField(max_length=20, default="publish")
    post_parent = models.BigIntegerField(default=0)
    guid = models.CharField(max_length=255, blank=True, default="")

    class Meta:
        db_table = f"{TABLE_PREFIX}posts"
        ordering = ["id"]
        verbose_name = "Post"
        verbose_name_plural = "Posts"

    def __str__(self):
        return f"{self.post_title or '(untitled)'} (#{self.id}, {self.post_type})"

    def get_meta(self, key: str) -> Optional[str]:
        """Return the first value stored under a meta key"""
        return (
            PostMeta.objects.filter(post_id=self.id, meta_key=key)
            .order_by("meta_id")
            .values_list("meta_value", flat=True)
            .first()
        )

    def set_meta(self, key: str, value) -> "PostMeta":
        """Replace every value stored under a meta key with a single value"""
        PostMeta.objects.filter(post_id=self.id, meta_key=key).delete()
        return PostMeta.objects.create(post_id=self.id, meta_key=key, meta_value=str(value))


class PostMeta(models.Model):
    """
    Key/value metadata row attached to a post
    """

    meta_id = models.BigAutoField(primary_key=True)
    post = models.ForeignKey(
        Post,
        on_delete=models.DO_NOTHING,
        db_column="post_id",
        db_constraint=False,
        related_name="meta_entries",
    )
    meta_key = models.CharField(max_length=255, null=True, blank=True, db_index=True)
    meta_value = models.TextField(null=True, blank=True)

    class Meta:
        db_table = f"{TABLE_PREFIX}postmeta"
        verbose_name = "Post meta"
        verbose_name_plural = "Post meta"

    def __str__(self):
        return f"{self.meta_key}={self.meta_value}"


class TermTaxonomy(models.Model):
    """
    A term placed in a taxonomy (product_cat, product_tag, product_type, ...)
    """

    term_taxonomy_id = models.BigAutoField(primary_key=True)
    term_id = models.BigIntegerField(default=0)
    taxonomy = models.CharField(max_length=32, db_index=True)
    description = models.TextField(blank=True, default="")
    parent = models.BigIntegerField(default=0)
    count = models.BigIntegerField(default=0)

    class Meta:
        db_table = f"{TABLE_PREFIX}term_taxonomy"
        verbose_name = "Term taxonomy"
        verbose_name_plural = "Term taxonomies"

    def __str__(self):
        return f"{self.taxonomy} #{self.term_id}"


class TermRelationshipManager(models.Manager):
    def detach(self, object_ids: Iterable[int]) -> int:
        """
        Remove every term link of the given posts and lower the term counts

        Returns the number of links removed.
        """
        links = self.filter(object_id__in=list(object_ids))
        removed = Counter(links.values_list("term_taxonomy_id", flat=True))
        if not removed:
            return 0

        links.delete()
        for term_taxonomy_id, n in removed.items():
            TermTaxonomy.objects.filter(pk=term_taxonomy_id).update(
                count=Greatest(
                    F("count") - n, 0, output_field=models.BigIntegerField()
                )
            )
        return sum(removed.values())


class TermRelationship(models.Model):
    """
    Link between a post and a term taxonomy
    """

    pk = models.CompositePrimaryKey("object_id", "term_taxonomy_id")
    object_id = models.BigIntegerField()
    term_taxonomy_id = models.BigIntegerField()
    term_order = models.IntegerField(default=0)

    objects = TermRelationshipManager()

    class Meta:
        db_table = f"{TABLE_PREFIX}term_relationships"
        verbose_name = "Term relationship"
        verbose_name_plural = "Term relationships"

    def __str__(self):
        return f"post #{self.object_id} -> term taxonomy #{self.term_taxonomy_id}"


class ProductManager(models.Manager):
    def get_queryset(self):
        return super().get_queryset().filter(post_type=PRODUCT_POST_TYPE)

    def oldest_ids(self, limit: int) -> List[int]:
        """Return up to `limit` product ids in ascending order"""
        return list(self.order_by("id").values_list("id", flat=True)[:limit])


class AttachmentManager(models.Manager):
    def get_queryset(self):
        return super().get_queryset().filter(post_type=ATTACHMENT_POST_TYPE)


class Product(Post):
    """
    E-commerce product record
    """

    objects = ProductManager()

    class Meta:
        proxy = True
        verbose_name = "Product"
        verbose_name_plural = "Products"

    def save(self, *args, **kwargs):
        self.post_type = PRODUCT_POST_TYPE
        super().save(*args, **kwargs)

    @property
    def thumbnail_id(self) -> Optional[int]:
        """Featured image attachment id"""
        return parse_attachment_id(self.get_meta(THUMBNAIL_META_KEY))

    @property
    def gallery_ids(self) -> List[int]:
        """Gallery attachment ids in stored order, skipping unusable entries"""
        raw = self.get_meta(GALLERY_META_KEY)
        if not raw:
            return []
        ids = []
        for part in raw.split(","):
            if not part.strip():
                continue
            attachment_id = parse_attachment_id(part)
            if attachment_id is None:
                logger.warning(
                    "Skipping unusable gallery entry", product_id=self.id, entry=part
                )
                continue
            ids.append(attachment_id)
        return ids

    @property
    def variation_ids(self) -> List[int]:
        """Ids of the variation posts that belong to this product"""
        return list(
            Post.objects.filter(
                post_parent=self.id, post_type=VARIATION_POST_TYPE
            ).values_list("id", flat=True)
        )


class Attachment(Post):
    """
    Media file (image) stored in the uploads directory
    """

    objects = AttachmentManager()

    class Meta:
        proxy = True
        verbose_name = "Attachment"
        verbose_name_plural = "Attachments"

    def save(self, *args, **kwargs):
        self.post_type = ATTACHMENT_POST_TYPE
        super().save(*args, **kwargs)

    @property
    def file_path(self) -> Optional[str]:
        """Path of the stored file, relative to MEDIA_ROOT"""
        return self.get_meta(ATTACHED_FILE_META_KEY) or None

    @property
    def metadata(self) -> dict:
        """Image metadata (sizes, original image), stored PHP-serialized"""
        raw = self.get_meta(ATTACHMENT_METADATA_META_KEY)
        if not raw:
            return {}
        try:
            data = phpserialize.loads(raw.encode("utf-8"), decode_strings=True)
        except ValueError:
            logger.warning("Unreadable attachment metadata", attachment_id=self.id)
            return {}
        return data if isinstance(data, dict) else {}

    @property
    def generated_file_paths(self) -> List[str]:
        """
        Resized copies and the unscaled original, relative to MEDIA_ROOT

        They live next to the main file and are stored by bare file name.
        """
        file_path = self.file_path
        if not file_path:
            return []

        metadata = self.metadata
        sizes = metadata.get("sizes")
        names = []
        if isinstance(sizes, dict):
            names = [size.get("file") for size in sizes.values() if isinstance(size, dict)]
        names.append(metadata.get("original_image"))

        directory = posixpath.dirname(file_path)
        paths = [
            posixpath.join(directory, name)
            for name in names
            if isinstance(name, str) and name
        ]
        return [path for path in dict.fromkeys(paths) if path != file_path]
