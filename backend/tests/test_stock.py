"""
Tests for regional stock lookups.
"""
from django.test import TestCase

from application.catalog.stock import StockService
from domain.shared.context import StorefrontContext
from domain.shared.value_objects import WarehouseLinkType
from tests.utils import TestDataFactory


class StockServiceTests(TestCase):

    def setUp(self):
        self.service = StockService()
        self.product = TestDataFactory.create_product()
        self.region = TestDataFactory.create_region('Москва')
        self.context = StorefrontContext(region=self.region)

    def test_sums_primary_warehouses_of_region(self):
        first = TestDataFactory.create_warehouse(self.region)
        second = TestDataFactory.create_warehouse(self.region)
        TestDataFactory.set_stock(self.product, first, 5)
        TestDataFactory.set_stock(self.product, second, 7)

        self.assertEqual(self.service.get_available_stock(self.product, self.context), 12)
        self.assertEqual(self.service.get_preorder_stock(self.product, self.context), 0)

    def test_preorder_warehouses_counted_separately(self):
        primary = TestDataFactory.create_warehouse(self.region)
        preorder = TestDataFactory.create_warehouse(self.region, WarehouseLinkType.PREORDER)
        TestDataFactory.set_stock(self.product, primary, 3)
        TestDataFactory.set_stock(self.product, preorder, 40)

        self.assertEqual(
            self.service.get_stock(self.product, self.context),
            {'available': 3, 'preorder': 40},
        )

    def test_other_regions_ignored(self):
        other_region = TestDataFactory.create_region('Казань')
        foreign = TestDataFactory.create_warehouse(other_region)
        unlinked = TestDataFactory.create_warehouse()
        TestDataFactory.set_stock(self.product, foreign, 100)
        TestDataFactory.set_stock(self.product, unlinked, 50)

        self.assertEqual(self.service.get_available_stock(self.product, self.context), 0)

    def test_product_without_stock_rows(self):
        TestDataFactory.create_warehouse(self.region)
        TestDataFactory.create_warehouse(self.region, WarehouseLinkType.PREORDER)

        self.assertEqual(
            self.service.get_stock(self.product, self.context),
            {'available': 0, 'preorder': 0},
        )

    def test_no_region_means_zero(self):
        warehouse = TestDataFactory.create_warehouse(self.region)
        TestDataFactory.set_stock(self.product, warehouse, 5)

        self.assertEqual(
            self.service.get_stock(self.product, StorefrontContext.anonymous()),
            {'available': 0, 'preorder': 0},
        )

    def test_context_from_user_region(self):
        warehouse = TestDataFactory.create_warehouse(self.region)
        TestDataFactory.set_stock(self.product, warehouse, 9)
        user = TestDataFactory.create_user(region=self.region)

        context = StorefrontContext.for_user(user)

        self.assertEqual(self.service.get_available_stock(self.product, context), 9)
