"""
Stock Service.

Regional stock of a product: the sum over the warehouses linked to the
context region, split into in-stock (primary) and preorder quantities.
"""

from typing import Dict

from django.db.models import Sum

from domain.shared.context import StorefrontContext
from domain.shared.value_objects import WarehouseLinkType
from infrastructure.persistence.models import ProductStock


class StockService:

    def _sum(self, product, context: StorefrontContext, link_type: WarehouseLinkType) -> int:
        if context is None or context.region_id is None:
            return 0

        total = ProductStock.objects.filter(
            product=product,
            warehouse__region_links__region_id=context.region_id,
            warehouse__region_links__type=link_type.value,
        ).aggregate(total=Sum('quantity'))['total']
        return max(total or 0, 0)

    def get_available_stock(self, product, context: StorefrontContext) -> int:
        return self._sum(product, context, WarehouseLinkType.PRIMARY)

    def get_preorder_stock(self, product, context: StorefrontContext) -> int:
        return self._sum(product, context, WarehouseLinkType.PREORDER)

    def get_stock(self, product, context: StorefrontContext) -> Dict[str, int]:
        """Return {'available': n, 'preorder': m}; zero when nothing applies."""
        return {
            'available': self.get_available_stock(product, context),
            'preorder': self.get_preorder_stock(product, context),
        }
