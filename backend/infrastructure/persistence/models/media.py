"""
Media ORM Models.

Files downloaded for a product, grouped in named collections
(main image, additional images, videos).
"""

from django.db import models

from domain.shared.value_objects import MediaCollection

from .base import BaseModel


def product_media_upload_to(instance, filename):
    return f"products/{instance.product_id}/{instance.collection}/{filename}"


class Media(BaseModel):
    """Медиафайл товара."""

    product = models.ForeignKey(
        'persistence.Product',
        on_delete=models.CASCADE,
        related_name='media',
        verbose_name="Товар"
    )
    collection = models.CharField(
        max_length=20,
        choices=[(c.value, c.name.title()) for c in MediaCollection],
        db_index=True,
        verbose_name="Коллекция"
    )
    file = models.FileField(
        upload_to=product_media_upload_to,
        max_length=500,
        verbose_name="Файл"
    )
    source_url = models.URLField(
        max_length=1000,
        blank=True,
        verbose_name="Источник"
    )
    mime_type = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="MIME-тип"
    )
    size = models.PositiveBigIntegerField(
        default=0,
        verbose_name="Размер (байт)"
    )
    order_column = models.PositiveIntegerField(
        default=0,
        verbose_name="Порядок"
    )

    class Meta:
        db_table = 'media'
        verbose_name = 'Медиафайл'
        verbose_name_plural = 'Медиафайлы'
        ordering = ['collection', 'order_column']

    def __str__(self):
        return self.file.name
