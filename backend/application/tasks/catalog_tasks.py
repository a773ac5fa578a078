"""
Catalog Tasks.

Celery tasks of the catalog ingestion pipeline. Imports and media
downloads run on separate queues (`catalog-import`, `catalog-media`)
so a media backlog never slows product import down.
"""

from celery import shared_task
import logging

from domain.shared.exceptions import InvalidPayloadException

from .base import PipelineTask

logger = logging.getLogger(__name__)


@shared_task(
    bind=True,
    base=PipelineTask,
    max_retries=2,
    acks_late=True,
    reject_on_worker_lost=True,
    time_limit=120,
    soft_time_limit=115,
)
def import_catalog_product(self, item_data: dict, skip_media: bool = False):
    """
    Import one feed item.

    The product transaction commits before media is queued; the media
    job always sees the committed product.
    """
    from application.catalog.importer import ProductImporter
    from domain.catalog.entities import CatalogItemPayload
    from infrastructure.persistence.models import Product

    try:
        payload = CatalogItemPayload.from_dict(item_data)
        product = ProductImporter().import_item(payload)

        if not skip_media:
            product = Product.objects.get(pk=product.pk)
            download_product_media.delay(str(product.pk), item_data)

        return str(product.pk)

    except InvalidPayloadException as e:
        logger.error(f"Invalid catalog item {item_data.get('external_id')!r}: {e}")
        raise

    except Exception as e:
        logger.error(f"Error importing catalog item {item_data.get('external_id')}: {e}")
        raise self.retry(exc=e, countdown=10)


@shared_task(
    bind=True,
    base=PipelineTask,
    max_retries=1,
    acks_late=True,
    reject_on_worker_lost=True,
    time_limit=300,
    soft_time_limit=290,
)
def download_product_media(self, product_id: str, item_data: dict):
    """Rebuild product media from the feed item URLs."""
    from application.catalog.media import MediaSynchronizer

    try:
        return MediaSynchronizer().sync(product_id, item_data)
    except Exception as e:
        logger.error(f"Error downloading media for product {product_id}: {e}")
        raise self.retry(exc=e, countdown=10)
