"""
Order ORM Models.

Orders are created by the checkout flow (outside this package) and
mirrored to the ERP on every lifecycle change.
"""

from django.db import models
from django.conf import settings

from .base import BaseModel, SoftDeleteMixin, ChangeTrackingMixin, ActiveManager, AllObjectsManager


class OrderStatusChoices(models.TextChoices):
    PENDING = 'pending', 'Новый'
    CONFIRMED = 'confirmed', 'Подтверждён'
    SHIPPED = 'shipped', 'Отгружен'
    COMPLETED = 'completed', 'Выполнен'
    CANCELLED = 'cancelled', 'Отменён'


class Order(ChangeTrackingMixin, SoftDeleteMixin, BaseModel):
    """Заказ покупателя."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='orders',
        verbose_name="Покупатель"
    )
    company = models.ForeignKey(
        'persistence.Company',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='orders',
        verbose_name="Компания"
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatusChoices.choices,
        default=OrderStatusChoices.PENDING,
        db_index=True,
        verbose_name="Статус"
    )
    comment = models.TextField(
        blank=True,
        verbose_name="Комментарий"
    )
    total_amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=0,
        verbose_name="Сумма"
    )
    currency_code = models.CharField(
        max_length=3,
        blank=True,
        verbose_name="Валюта"
    )

    objects = ActiveManager()
    all_objects = AllObjectsManager()

    class Meta:
        db_table = 'orders'
        verbose_name = 'Заказ'
        verbose_name_plural = 'Заказы'
        ordering = ['-created_at']
        base_manager_name = 'all_objects'


class OrderItem(BaseModel):
    """Позиция заказа."""

    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name="Заказ"
    )
    product = models.ForeignKey(
        'persistence.Product',
        on_delete=models.PROTECT,
        related_name='order_items',
        verbose_name="Товар"
    )
    quantity = models.PositiveIntegerField(
        default=1,
        verbose_name="Количество"
    )
    price = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        verbose_name="Цена"
    )

    class Meta:
        db_table = 'order_items'
        verbose_name = 'Позиция заказа'
        verbose_name_plural = 'Позиции заказа'
