"""
Catalog Feed Fetcher & Decomposer.

Downloads the vendor XML export, splits it into `<item>` records and
turns each record into a `CatalogItemPayload` that is enqueued on the
catalog-import lane as soon as it is decomposed.

Feed layout::

    <export>
      <items>
        <item>
          <uid>...</uid> <code>...</code> <name>...</name> ...
          <brand_uid/> <brand_name/> <model_uid/> <model_name/> <group_code/>
          <parameters><parameter name="Цвет">Красный</parameter></parameters>
          <barcodes><barcode>...</barcode></barcodes>
          <additional_images><additional_image>URL</additional_image></additional_images>
          <product_videos><product_video>URL</product_video></product_videos>
          <certificates><certificate>UID</certificate></certificates>
        </item>
      </items>
    </export>
"""

from dataclasses import dataclass
from typing import Callable, List, Optional
import logging
import xml.etree.ElementTree as ET

import requests
from django.conf import settings

from domain.catalog.entities import BrandRef, CatalogItemPayload, ModelRef, Parameter
from domain.shared.exceptions import FeedFetchException, FeedParseException

logger = logging.getLogger(__name__)


# =============================================================================
# FETCH
# =============================================================================

class CatalogFeedFetcher:
    """HTTP client for the vendor export endpoint."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[int] = None):
        self.session = session or requests.Session()
        self.timeout = timeout or settings.CATALOG_FEED_TIMEOUT

    def fetch(self, url: str) -> bytes:
        """Download the feed document. Raises FeedFetchException on failure."""
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FeedFetchException(url, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise FeedFetchException(url, f"HTTP {response.status_code}", status_code=response.status_code)

        logger.info(f"Catalog feed downloaded: {len(response.content)} bytes")
        return response.content


# =============================================================================
# PARSE / DECOMPOSE
# =============================================================================

def parse_feed(content) -> List[ET.Element]:
    """Parse the document and return its `<item>` elements (possibly none)."""
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise FeedParseException(str(e)) from e

    items = root.findall('./items/item')
    if not items:
        items = root.findall('./item')
    return items


def _text(element: ET.Element, tag: str) -> str:
    child = element.find(tag)
    if child is None or child.text is None:
        return ''
    return child.text.strip()


def _texts(element: ET.Element, path: str) -> List[str]:
    return [
        (child.text or '').strip()
        for child in element.findall(path)
        if (child.text or '').strip()
    ]


def decompose_item(element: ET.Element) -> CatalogItemPayload:
    """Normalize one `<item>` into a payload."""
    parameters = [
        Parameter(
            name=(parameter.get('name') or '').strip(),
            value=(parameter.text or '').strip(),
        )
        for parameter in element.findall('./parameters/parameter')
    ]

    return CatalogItemPayload(
        external_id=_text(element, 'uid'),
        name=_text(element, 'name'),
        code=_text(element, 'code'),
        sku=_text(element, 'sku'),
        slug=_text(element, 'slug'),
        url=_text(element, 'url'),
        barcode=_text(element, 'barcode'),
        tnved=_text(element, 'tnved'),
        novelty=_text(element, 'novelty'),
        marked=_text(element, 'marked'),
        liquidation=_text(element, 'liquidation'),
        for_marketplaces=_text(element, 'for_marketplaces'),
        category_path=_text(element, 'category_path'),
        brand=BrandRef(
            uid=_text(element, 'brand_uid'),
            name=_text(element, 'brand_name'),
        ),
        model=ModelRef(
            uid=_text(element, 'model_uid'),
            name=_text(element, 'model_name'),
            group_code=_text(element, 'group_code'),
        ),
        group_name=_text(element, 'group_name'),
        description=_text(element, 'description'),
        description_html=_text(element, 'description_html') or None,
        short_description=_text(element, 'short_description'),
        image_main=_text(element, 'image_main'),
        parameters=parameters,
        barcodes=_texts(element, './barcodes/barcode'),
        additional_images=_texts(element, './additional_images/additional_image'),
        videos=_texts(element, './product_videos/product_video'),
        certificates=_texts(element, './certificates/certificate'),
    )


# =============================================================================
# DISPATCH
# =============================================================================

@dataclass
class DispatchSummary:
    """Result of one feed run."""

    url: str
    total: int = 0
    dispatched: int = 0
    skipped: int = 0
    skip_media: bool = False


class CatalogImportDispatcher:
    """
    Fetches the feed and enqueues one import job per item.

    Items without a vendor UID cannot be imported and are skipped.
    """

    def __init__(self, fetcher: Optional[CatalogFeedFetcher] = None):
        self.fetcher = fetcher or CatalogFeedFetcher()

    def run(
        self,
        url: Optional[str] = None,
        skip_media: bool = False,
        on_total: Optional[Callable[[int], None]] = None,
        on_dispatched: Optional[Callable[[CatalogItemPayload], None]] = None,
    ) -> DispatchSummary:
        from application.tasks.catalog_tasks import import_catalog_product

        url = url or settings.CATALOG_FEED_URL
        content = self.fetcher.fetch(url)
        items = parse_feed(content)

        summary = DispatchSummary(url=url, total=len(items), skip_media=skip_media)
        if on_total is not None:
            on_total(summary.total)

        for element in items:
            payload = decompose_item(element)
            if not payload.external_id:
                logger.warning(f"Feed item without uid skipped: {payload.name}")
                summary.skipped += 1
                continue

            import_catalog_product.delay(payload.to_dict(), skip_media)
            summary.dispatched += 1
            if on_dispatched is not None:
                on_dispatched(payload)

        logger.info(
            f"Catalog feed dispatched: {summary.dispatched}/{summary.total} items "
            f"(skipped {summary.skipped}, media {'off' if skip_media else 'on'})"
        )
        return summary
