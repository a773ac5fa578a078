"""
Dictionary Resolver.

Idempotent resolution of the shared reference data touched by many
concurrent importer workers: category tree, brands, product models,
attributes and select-attribute value dictionaries.

Every get-or-create here relies on a uniqueness constraint in the
database and an insert that falls back to a fetch when the insert
conflicts (see `get_or_create_atomic`). Two workers resolving the same
new key end up with the same row.
"""

import itertools
import logging
from typing import Any, Dict, Optional, Tuple

from django.db import IntegrityError, transaction
from django.utils.text import slugify
from slugify import slugify as transliterate_slugify

from domain.catalog.entities import BrandRef, ModelRef
from domain.shared.value_objects import AttributeType
from infrastructure.persistence.models import (
    Attribute,
    AttributeValue,
    Brand,
    Category,
    ProductModel,
)

logger = logging.getLogger(__name__)


def get_or_create_atomic(model, defaults: Optional[Dict[str, Any]] = None, **lookup) -> Tuple[Any, bool]:
    """
    Fetch a row by its unique key, inserting it when missing.

    The insert runs in a savepoint; if a concurrent transaction inserted
    the same key first, the unique constraint rejects ours and the
    committed row is fetched instead.
    """
    obj = model._default_manager.filter(**lookup).first()
    if obj is not None:
        return obj, False

    params = dict(lookup)
    params.update(defaults or {})
    try:
        with transaction.atomic():
            return model._default_manager.create(**params), True
    except IntegrityError:
        obj = model._default_manager.filter(**lookup).first()
        if obj is None:
            # Conflict on a different unique column; let the caller decide
            raise
        return obj, False


def make_slug(name: str) -> str:
    """URL-safe slug; falls back to transliteration for non-latin names."""
    slug = slugify(name)
    if not slug:
        slug = transliterate_slugify(name)
    return slug[:240]


class DictionaryResolver:
    """Resolves feed references to shared dictionary rows."""

    # -------------------------------------------------------------------------
    # Category tree
    # -------------------------------------------------------------------------

    def resolve_category_path(self, path: Optional[str]) -> Optional[Category]:
        """
        Walk a slash-delimited path root -> leaf, creating missing nodes.

        Returns the leaf node, or None when the path has no segments.
        """
        if not path:
            return None

        parent = None
        for segment in path.split('/'):
            name = segment.strip()
            if not name:
                continue
            parent, created = get_or_create_atomic(Category, name=name, parent=parent)
            if created:
                logger.info(f"Создана категория: {parent.name} (parent={parent.parent_id})")

        return parent

    # -------------------------------------------------------------------------
    # Brand / model
    # -------------------------------------------------------------------------

    def resolve_brand(self, ref: BrandRef) -> Optional[Brand]:
        if not ref.is_complete:
            return None

        brand, _ = get_or_create_atomic(
            Brand,
            external_id=ref.uid,
            defaults={
                'name': ref.name,
                'slug': make_slug(ref.name),
            },
        )
        return brand

    def resolve_model(self, ref: ModelRef) -> Optional[ProductModel]:
        if not ref.is_complete:
            return None

        model, _ = get_or_create_atomic(
            ProductModel,
            external_id=ref.uid,
            defaults={
                'name': ref.name,
                'code': ref.group_code or None,
            },
        )
        return model

    # -------------------------------------------------------------------------
    # Attributes
    # -------------------------------------------------------------------------

    def resolve_attribute(self, name: str, sample_value: str) -> Attribute:
        """
        Get or create an attribute by name.

        On creation the type is classified from `sample_value` and the
        slug is made unique with a numeric suffix. An existing attribute
        is returned as is: its type is never re-evaluated.
        """
        attribute = Attribute.objects.filter(name=name).first()
        if attribute is not None:
            return attribute

        attribute_type = AttributeType.classify(sample_value)
        base_slug = make_slug(name) or 'attribute'

        for counter in itertools.count():
            slug = base_slug if counter == 0 else f"{base_slug}-{counter}"
            if Attribute.objects.filter(slug=slug).exclude(name=name).exists():
                continue
            try:
                with transaction.atomic():
                    attribute = Attribute.objects.create(
                        name=name,
                        slug=slug,
                        type=attribute_type.value,
                        is_filterable=False,
                        sort_order=0,
                    )
            except IntegrityError:
                # Either another worker created this attribute, or it took
                # the slug for a different name
                attribute = Attribute.objects.filter(name=name).first()
                if attribute is not None:
                    return attribute
                continue

            logger.info(f"Создана характеристика: {name} ({attribute_type.value}, slug={slug})")
            return attribute

    def resolve_attribute_value(self, attribute: Attribute, raw_value: str) -> AttributeValue:
        """
        Get or create a dictionary entry of a select attribute.

        New entries are appended: sort_order is the current entry count.
        """
        if attribute.type != AttributeType.SELECT.value:
            raise ValueError(f"Attribute '{attribute.name}' is not a select attribute")

        value, _ = get_or_create_atomic(
            AttributeValue,
            attribute=attribute,
            value=raw_value,
            defaults={
                'sort_order': AttributeValue.objects.filter(attribute=attribute).count(),
            },
        )
        return value
