"""
Catalog Domain - Entities.

Transient unit of work of the catalog ingestion pipeline: one
`CatalogItemPayload` per `<item>` of the vendor XML feed. It travels
through the queue as a plain dict (see `to_dict` / `from_dict`).
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional

from domain.shared.value_objects import is_feed_yes


@dataclass(frozen=True)
class BrandRef:
    """Brand reference as published by the vendor."""

    uid: str = ''
    name: str = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.uid) and bool(self.name)


@dataclass(frozen=True)
class ModelRef:
    """Product model (line) reference as published by the vendor."""

    uid: str = ''
    name: str = ''
    group_code: str = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.uid) and bool(self.name)


@dataclass(frozen=True)
class Parameter:
    """Raw characteristic pair: <parameter name="...">value</parameter>."""

    name: str = ''
    value: str = ''

    @property
    def is_complete(self) -> bool:
        return bool(self.name) and self.value != ''


@dataclass(frozen=True)
class CatalogItemPayload:
    """
    Normalized feed item.

    `external_id` (vendor UID) is the stable identity of the product;
    every other field is overwritten on each import.
    """

    external_id: str
    name: str = ''
    code: str = ''
    sku: str = ''
    slug: str = ''
    url: str = ''
    barcode: str = ''
    tnved: str = ''

    # Raw flag strings, "Да" means true
    novelty: str = ''
    marked: str = ''
    liquidation: str = ''
    for_marketplaces: str = ''

    category_path: str = ''
    brand: BrandRef = field(default_factory=BrandRef)
    model: ModelRef = field(default_factory=ModelRef)
    group_name: str = ''

    description: str = ''
    description_html: Optional[str] = None
    short_description: str = ''

    image_main: str = ''
    parameters: List[Parameter] = field(default_factory=list)
    barcodes: List[str] = field(default_factory=list)
    additional_images: List[str] = field(default_factory=list)
    videos: List[str] = field(default_factory=list)
    certificates: List[str] = field(default_factory=list)

    # -------------------------------------------------------------------------
    # Derived flags
    # -------------------------------------------------------------------------

    @property
    def is_new(self) -> bool:
        return is_feed_yes(self.novelty)

    @property
    def is_marked(self) -> bool:
        return is_feed_yes(self.marked)

    @property
    def is_liquidation(self) -> bool:
        return is_feed_yes(self.liquidation)

    @property
    def is_for_marketplaces(self) -> bool:
        return is_feed_yes(self.for_marketplaces)

    @property
    def label(self) -> str:
        """Short human label for logs."""
        return f"{self.name} [{self.code or self.external_id}]"

    # -------------------------------------------------------------------------
    # Queue serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CatalogItemPayload:
        """
        Rebuild a payload from its queued form.

        Missing keys fall back to defaults so that messages enqueued by
        an older release are still accepted.
        """
        brand = data.get('brand') or {}
        model = data.get('model') or {}

        return cls(
            external_id=str(data.get('external_id') or ''),
            name=data.get('name') or '',
            code=data.get('code') or '',
            sku=data.get('sku') or '',
            slug=data.get('slug') or '',
            url=data.get('url') or '',
            barcode=data.get('barcode') or '',
            tnved=data.get('tnved') or '',
            novelty=data.get('novelty') or '',
            marked=data.get('marked') or '',
            liquidation=data.get('liquidation') or '',
            for_marketplaces=data.get('for_marketplaces') or '',
            category_path=data.get('category_path') or '',
            brand=BrandRef(
                uid=brand.get('uid') or '',
                name=brand.get('name') or '',
            ),
            model=ModelRef(
                uid=model.get('uid') or '',
                name=model.get('name') or '',
                group_code=model.get('group_code') or '',
            ),
            group_name=data.get('group_name') or '',
            description=data.get('description') or '',
            description_html=data.get('description_html') or None,
            short_description=data.get('short_description') or '',
            image_main=data.get('image_main') or '',
            parameters=[
                Parameter(name=p.get('name') or '', value=p.get('value') or '')
                for p in data.get('parameters') or []
            ],
            barcodes=list(data.get('barcodes') or []),
            additional_images=list(data.get('additional_images') or []),
            videos=list(data.get('videos') or []),
            certificates=list(data.get('certificates') or []),
        )
