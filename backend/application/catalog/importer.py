"""
Product Importer.

Applies one `CatalogItemPayload` to the catalog in a single
transaction: dictionaries, product upsert, category link, barcodes,
characteristics and certificate links.
"""

import logging
from typing import Optional

from django.db import transaction

from domain.catalog.entities import CatalogItemPayload
from domain.shared.exceptions import InvalidPayloadException
from domain.shared.value_objects import build_slot
from infrastructure.persistence.models import (
    Category,
    Certificate,
    Product,
    ProductAttributeValue,
    ProductBarcode,
)

from .dictionary import DictionaryResolver

logger = logging.getLogger(__name__)


class ProductImporter:
    """Upserts a product and everything it owns from a feed item."""

    def __init__(self, resolver: Optional[DictionaryResolver] = None):
        self.resolver = resolver or DictionaryResolver()

    def import_item(self, payload: CatalogItemPayload) -> Product:
        """
        Import one feed item. Any error rolls back the whole item.

        `base_price` is left out of the upsert: it keeps its default on
        creation and is never overwritten afterwards.
        """
        if not payload.external_id:
            raise InvalidPayloadException("Catalog item has no vendor uid", field='external_id')

        with transaction.atomic():
            leaf = self.resolver.resolve_category_path(payload.category_path)
            brand = self.resolver.resolve_brand(payload.brand)
            model = self.resolver.resolve_model(payload.model)

            product, created = Product.objects.update_or_create(
                external_id=payload.external_id,
                defaults={
                    'name': payload.name,
                    'code': payload.code or None,
                    'sku': payload.sku or None,
                    'slug': payload.slug or None,
                    'url': payload.url or None,
                    'barcode': payload.barcode or None,
                    'tnved': payload.tnved or None,
                    'is_new': payload.is_new,
                    'is_marked': payload.is_marked,
                    'is_liquidation': payload.is_liquidation,
                    'for_marketplaces': payload.is_for_marketplaces,
                    'description': payload.description or None,
                    'description_html': payload.description_html,
                    'short_description': payload.short_description or None,
                    'brand': brand,
                    'model': model,
                },
            )

            if leaf is not None:
                product.categories.add(leaf)

            self._replace_barcodes(product, payload)
            self._replace_attribute_values(product, payload, leaf)
            self._sync_certificates(product, payload)

        logger.info(f"{'Создан' if created else 'Обновлён'} товар {payload.label}")
        return product

    def _replace_barcodes(self, product: Product, payload: CatalogItemPayload):
        product.barcodes.all().delete()
        ProductBarcode.objects.bulk_create([
            ProductBarcode(product=product, barcode=barcode.strip())
            for barcode in payload.barcodes
            if barcode and barcode.strip()
        ])

    def _replace_attribute_values(self, product: Product, payload: CatalogItemPayload,
                                  leaf: Optional[Category]):
        product.attribute_values.all().delete()

        for parameter in payload.parameters:
            if not parameter.is_complete:
                continue

            attribute = self.resolver.resolve_attribute(parameter.name, parameter.value)
            if leaf is not None:
                attribute.categories.add(leaf)

            value = ProductAttributeValue(product=product, attribute=attribute)
            value.set_slot(build_slot(
                attribute.attribute_type,
                parameter.value,
                lambda raw: self.resolver.resolve_attribute_value(attribute, raw).pk,
            ))
            value.save()

    def _sync_certificates(self, product: Product, payload: CatalogItemPayload):
        uids = [uid for uid in payload.certificates if uid]
        matched = list(
            Certificate.objects.filter(external_id__in=uids).values_list('pk', flat=True)
        )
        if len(matched) < len(set(uids)):
            logger.debug(f"{payload.label}: {len(set(uids)) - len(matched)} unknown certificates dropped")
        product.certificates.set(matched)
