"""
Test utilities and factories for creating test data
"""
from decimal import Decimal
import random
import string

from domain.catalog.entities import BrandRef, CatalogItemPayload, ModelRef, Parameter
from domain.shared.value_objects import WarehouseLinkType
from infrastructure.persistence.models import (
    Certificate,
    Company,
    CompanyBankAccount,
    Order,
    OrderItem,
    Product,
    ProductStock,
    Region,
    RegionWarehouse,
    User,
    Warehouse,
)


FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<export>
  <items>
    <item>
      <uid>uid-001</uid>
      <code>A-001</code>
      <sku>SKU-001</sku>
      <name>Кружка керамическая</name>
      <slug>mug-ceramic</slug>
      <url>https://vendor.test/p/uid-001</url>
      <barcode>4600000000011</barcode>
      <tnved>6912002100</tnved>
      <novelty>Да</novelty>
      <marked>Нет</marked>
      <liquidation></liquidation>
      <for_marketplaces>Да</for_marketplaces>
      <category_path>Посуда / Кружки</category_path>
      <brand_uid>brand-1</brand_uid>
      <brand_name>Keramika</brand_name>
      <model_uid>model-1</model_uid>
      <model_name>Classic</model_name>
      <group_code>GRP-1</group_code>
      <group_name>Классика</group_name>
      <description>Описание</description>
      <description_html>   </description_html>
      <short_description>Кратко</short_description>
      <image_main>https://cdn.vendor.test/uid-001/main.jpg</image_main>
      <parameters>
        <parameter name="Объём">350</parameter>
        <parameter name="Материал">Керамика</parameter>
        <parameter name="Пустое"></parameter>
      </parameters>
      <barcodes>
        <barcode>4600000000011</barcode>
        <barcode>4600000000028</barcode>
      </barcodes>
      <additional_images>
        <additional_image>https://cdn.vendor.test/uid-001/1.jpg</additional_image>
      </additional_images>
      <product_videos>
        <product_video>https://cdn.vendor.test/uid-001/v.mp4</product_video>
      </product_videos>
      <certificates>
        <certificate>cert-1</certificate>
      </certificates>
    </item>
    <item>
      <uid>uid-002</uid>
      <code>A-002</code>
      <name>Тарелка</name>
      <category_path>Посуда/Тарелки</category_path>
    </item>
  </items>
</export>
"""


class TestDataFactory:
    """Factory class for creating test data"""

    __test__ = False

    @staticmethod
    def random_string(length=10):
        """Generate a random string"""
        return ''.join(random.choices(string.ascii_letters + string.digits, k=length))

    @staticmethod
    def create_user(username=None, email=None, password='testpass123', **extra):
        """Create a test user"""
        if not username:
            username = f'testuser_{TestDataFactory.random_string(6)}'
        if not email:
            email = f'{username}@test.com'
        return User.objects.create_user(
            username=username,
            email=email,
            password=password,
            **extra
        )

    @staticmethod
    def create_company(user=None, name=None, with_bank_account=False, **extra):
        """Create a test company, optionally with a primary bank account"""
        user = user or TestDataFactory.create_user()
        company = Company.objects.create(
            user=user,
            name=name or f'ООО {TestDataFactory.random_string(6)}',
            tax_id='7701234567',
            **extra
        )
        if with_bank_account:
            CompanyBankAccount.objects.create(
                company=company,
                bank_name='Тест Банк',
                bank_bik='044525225',
                account_number='40702810900000000001',
                is_primary=True,
            )
        return company

    @staticmethod
    def create_product(external_id=None, name=None, **extra):
        """Create a test product"""
        external_id = external_id or f'uid-{TestDataFactory.random_string(8)}'
        return Product.objects.create(
            external_id=external_id,
            name=name or f'Product {external_id}',
            **extra
        )

    @staticmethod
    def create_order(user=None, company=None, items=1, **extra):
        """Create a test order with N items"""
        user = user or TestDataFactory.create_user()
        order = Order.objects.create(
            user=user,
            company=company,
            total_amount=Decimal('100.00') * items,
            currency_code='RUB',
            **extra
        )
        for _ in range(items):
            OrderItem.objects.create(
                order=order,
                product=TestDataFactory.create_product(),
                quantity=1,
                price=Decimal('100.00'),
            )
        return order

    @staticmethod
    def create_certificate(external_id=None, name='Декларация'):
        """Create a certificate that import can link to"""
        return Certificate.objects.create(
            external_id=external_id or f'cert-{TestDataFactory.random_string(6)}',
            name=name,
            number=TestDataFactory.random_string(8),
        )

    @staticmethod
    def create_region(name=None):
        return Region.objects.create(name=name or f'Region {TestDataFactory.random_string(6)}')

    @staticmethod
    def create_warehouse(region=None, link_type=WarehouseLinkType.PRIMARY, name=None):
        """Create a warehouse, linking it to a region when given"""
        warehouse = Warehouse.objects.create(name=name or f'Склад {TestDataFactory.random_string(6)}')
        if region is not None:
            RegionWarehouse.objects.create(region=region, warehouse=warehouse, type=link_type.value)
        return warehouse

    @staticmethod
    def set_stock(product, warehouse, quantity):
        return ProductStock.objects.create(product=product, warehouse=warehouse, quantity=quantity)

    @staticmethod
    def build_payload(external_id='uid-100', **overrides):
        """Build a catalog item payload with sensible defaults"""
        data = dict(
            external_id=external_id,
            name='Тестовый товар',
            code='T-100',
            sku='SKU-100',
            category_path='Каталог/Раздел',
            brand=BrandRef(uid='brand-100', name='Brand'),
            model=ModelRef(uid='model-100', name='Model', group_code='G-100'),
            parameters=[Parameter(name='Цвет', value='Красный')],
            barcodes=['111', '222'],
        )
        data.update(overrides)
        return CatalogItemPayload(**data)
