"""
Media Synchronizer.

Rebuilds the main / additional / video media collections of a product
from the URLs of its feed item. Each URL is downloaded independently:
a broken link is logged and skipped.
"""

import logging
import mimetypes
import os
from typing import Any, Dict, Optional
from urllib.parse import urlparse

import requests
from django.conf import settings
from django.core.files.base import ContentFile

from domain.catalog.entities import CatalogItemPayload
from domain.shared.exceptions import MediaDownloadException
from domain.shared.value_objects import MediaCollection
from infrastructure.persistence.models import Media, Product

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class MediaDownloader:
    """Streams a remote file into memory with a size limit."""

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Optional[int] = None, max_bytes: Optional[int] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or settings.CATALOG_MEDIA_TIMEOUT
        self.max_bytes = max_bytes or settings.CATALOG_MEDIA_MAX_BYTES

    def download(self, url: str):
        """Return (filename, content, mime_type)."""
        with self.session.get(url, timeout=self.timeout, stream=True) as response:
            if not 200 <= response.status_code < 300:
                raise MediaDownloadException(url, f"HTTP {response.status_code}")

            buffer = bytearray()
            for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                buffer.extend(chunk)
                if len(buffer) > self.max_bytes:
                    raise MediaDownloadException(url, f"file exceeds {self.max_bytes} bytes")

            if not buffer:
                raise MediaDownloadException(url, "empty response")

            mime_type = (response.headers.get('Content-Type') or '').split(';')[0].strip()

        return self._filename(url, mime_type), bytes(buffer), mime_type

    @staticmethod
    def _filename(url: str, mime_type: str) -> str:
        name = os.path.basename(urlparse(url).path) or 'file'
        if not os.path.splitext(name)[1] and mime_type:
            name += mimetypes.guess_extension(mime_type) or ''
        return name


class MediaSynchronizer:
    """Replaces a product's feed media collections."""

    COLLECTIONS = (MediaCollection.MAIN, MediaCollection.ADDITIONAL, MediaCollection.VIDEO)

    def __init__(self, downloader: Optional[MediaDownloader] = None):
        self.downloader = downloader or MediaDownloader()

    def sync(self, product_id: Any, item_data: Dict[str, Any]) -> int:
        """
        Rebuild media for a product. Returns the number of attached files.

        A product deleted since the job was queued is not an error.
        """
        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            logger.warning(f"Media sync: товар {product_id} не найден")
            return 0

        payload = CatalogItemPayload.from_dict(item_data)
        self.clear(product)

        sources = [(MediaCollection.MAIN, [payload.image_main])]
        sources.append((MediaCollection.ADDITIONAL, payload.additional_images))
        sources.append((MediaCollection.VIDEO, payload.videos))

        attached = 0
        for collection, urls in sources:
            for order, url in enumerate(u for u in urls if u):
                if self.attach(product, collection, url, order) is not None:
                    attached += 1

        logger.info(f"Загружены медиа для {payload.label}: {attached} файлов")
        return attached

    def clear(self, product: Product):
        collections = [c.value for c in self.COLLECTIONS]
        for media in Media.objects.filter(product=product, collection__in=collections):
            media.file.delete(save=False)
            media.delete()

    def attach(self, product: Product, collection: MediaCollection, url: str, order: int) -> Optional[Media]:
        try:
            filename, content, mime_type = self.downloader.download(url)
            media = Media(
                product=product,
                collection=collection.value,
                source_url=url,
                mime_type=mime_type,
                size=len(content),
                order_column=order,
            )
            media.file.save(filename, ContentFile(content), save=False)
            media.save()
            return media
        except Exception as e:
            logger.warning(f"Ошибка загрузки {collection.value} для товара {product.external_id}: {e}")
            return None
