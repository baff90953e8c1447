"""
Shared fixtures for the Product Delete test suite
"""

import posixpath
from uuid import uuid4

import phpserialize
import pytest
from django.core.files.base import ContentFile
from django.core.files.storage import default_storage

from apps.catalog.models import (
    ATTACHED_FILE_META_KEY,
    ATTACHMENT_METADATA_META_KEY,
    GALLERY_META_KEY,
    THUMBNAIL_META_KEY,
    VARIATION_POST_TYPE,
    Attachment,
    Post,
    Product,
    TermRelationship,
    TermTaxonomy,
)


@pytest.fixture
def make_attachment(db):
    """
    Create an attachment row backed by a real file in MEDIA_ROOT

    `sizes` maps size names to resized file names stored next to the main
    file. They and `original_image` end up in the attachment metadata.
    """

    def _make(name="image.jpg", with_file=True, sizes=None, original_image=None):
        attachment = Attachment.objects.create(post_title=name)
        directory = f"uploads/{uuid4().hex}"
        path = f"{directory}/{name}"
        if with_file:
            path = default_storage.save(path, ContentFile(b"fake image bytes"))
        attachment.set_meta(ATTACHED_FILE_META_KEY, path)

        if sizes or original_image:
            extra_files = list((sizes or {}).values()) + [original_image]
            for file_name in filter(None, extra_files):
                default_storage.save(
                    posixpath.join(directory, file_name), ContentFile(b"resized")
                )
            metadata = {
                "file": path,
                "sizes": {
                    size: {"file": file_name, "width": 150, "height": 150}
                    for size, file_name in (sizes or {}).items()
                },
            }
            if original_image:
                metadata["original_image"] = original_image
            attachment.set_meta(
                ATTACHMENT_METADATA_META_KEY, phpserialize.dumps(metadata).decode("utf-8")
            )
        return attachment

    return _make


@pytest.fixture
def make_product(db):
    """Create a product row with optional thumbnail and gallery references"""

    def _make(title="Product", thumbnail=None, gallery=None, raw_gallery=None):
        product = Product.objects.create(post_title=title)
        if thumbnail is not None:
            product.set_meta(THUMBNAIL_META_KEY, thumbnail.id)
        if gallery:
            product.set_meta(GALLERY_META_KEY, ",".join(str(a.id) for a in gallery))
        if raw_gallery is not None:
            product.set_meta(GALLERY_META_KEY, raw_gallery)
        return product

    return _make


@pytest.fixture
def make_variation(db):
    """Create a variation post under a product, with one meta row"""

    def _make(product, title="Variation"):
        variation = Post.objects.create(
            post_type=VARIATION_POST_TYPE, post_title=title, post_parent=product.id
        )
        variation.set_meta("attribute_pa_size", "large")
        return variation

    return _make


@pytest.fixture
def product_cat(db):
    """A product category term with no posts in it yet"""
    return TermTaxonomy.objects.create(term_id=15, taxonomy="product_cat")


@pytest.fixture
def add_term(db):
    """Link a post to a term taxonomy and bump its count"""

    def _add(post, term_taxonomy):
        TermRelationship.objects.create(
            object_id=post.id, term_taxonomy_id=term_taxonomy.term_taxonomy_id
        )
        term_taxonomy.count += 1
        term_taxonomy.save(update_fields=["count"])

    return _add


@pytest.fixture
def products(make_product):
    """Five plain products in creation (ascending id) order"""
    return [make_product(title=f"Product {i}") for i in range(1, 6)]


@pytest.fixture
def page(db):
    """A non-product post that must never be touched"""
    return Post.objects.create(post_type="page", post_title="About us")
