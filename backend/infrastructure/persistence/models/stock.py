"""
Stock ORM Models.

Regions, the warehouses serving them and per-warehouse product stock.
"""

from django.db import models

from domain.shared.value_objects import WarehouseLinkType

from .base import BaseModel


class Region(BaseModel):
    """Регион покупателя."""

    name = models.CharField(
        max_length=200,
        unique=True,
        verbose_name="Наименование"
    )

    class Meta:
        db_table = 'regions'
        verbose_name = 'Регион'
        verbose_name_plural = 'Регионы'
        ordering = ['name']

    def __str__(self):
        return self.name


class Warehouse(BaseModel):
    """Склад."""

    name = models.CharField(
        max_length=200,
        verbose_name="Наименование"
    )
    external_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        unique=True,
        verbose_name="ID в ERP"
    )

    class Meta:
        db_table = 'warehouses'
        verbose_name = 'Склад'
        verbose_name_plural = 'Склады'
        ordering = ['name']

    def __str__(self):
        return self.name


class RegionWarehouse(models.Model):
    """Связь региона со складом: наличие или предзаказ."""

    region = models.ForeignKey(
        Region,
        on_delete=models.CASCADE,
        related_name='warehouse_links'
    )
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.CASCADE,
        related_name='region_links'
    )
    type = models.CharField(
        max_length=20,
        choices=[(t.value, t.name.title()) for t in WarehouseLinkType],
        default=WarehouseLinkType.PRIMARY.value,
        verbose_name="Тип"
    )

    class Meta:
        db_table = 'region_warehouse'
        constraints = [
            models.UniqueConstraint(
                fields=['region', 'warehouse', 'type'],
                name='uniq_region_warehouse_type',
            ),
        ]


class ProductStock(models.Model):
    """Остаток товара на складе."""

    product = models.ForeignKey(
        'persistence.Product',
        on_delete=models.CASCADE,
        related_name='stock_rows',
        verbose_name="Товар"
    )
    warehouse = models.ForeignKey(
        Warehouse,
        on_delete=models.CASCADE,
        related_name='stock_rows',
        verbose_name="Склад"
    )
    quantity = models.IntegerField(
        default=0,
        verbose_name="Количество"
    )

    class Meta:
        db_table = 'product_warehouse'
        verbose_name = 'Остаток'
        verbose_name_plural = 'Остатки'
        constraints = [
            models.UniqueConstraint(
                fields=['product', 'warehouse'],
                name='uniq_product_warehouse',
            ),
        ]
