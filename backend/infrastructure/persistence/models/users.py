"""
User Models.

Custom user model: storefront customers and administrators, with the
identifier and status assigned by the ERP.
"""

from django.db import models
from django.contrib.auth.models import AbstractUser
from django.contrib.auth.validators import UnicodeUsernameValidator

from .base import ChangeTrackingMixin

import uuid


class UserStatusChoices(models.TextChoices):
    """Customer status as confirmed by the ERP."""

    PROCESSING = 'processing', 'На проверке'
    CONFIRMED = 'confirmed', 'Подтверждён'
    REJECTED = 'rejected', 'Отклонён'
    BLOCKED = 'blocked', 'Заблокирован'


class User(ChangeTrackingMixin, AbstractUser):
    """
    Custom User model.

    Extends Django's AbstractUser with customer profile fields and
    the ERP link (erp_id, status).
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False
    )

    username_validator = UnicodeUsernameValidator()

    username = models.CharField(
        max_length=150,
        unique=True,
        validators=[username_validator],
        verbose_name="Логин"
    )
    email = models.EmailField(
        blank=True,
        verbose_name="Email"
    )

    # Personal info
    first_name = models.CharField(
        max_length=150,
        blank=True,
        verbose_name="Имя"
    )
    last_name = models.CharField(
        max_length=150,
        blank=True,
        verbose_name="Фамилия"
    )
    middle_name = models.CharField(
        max_length=150,
        blank=True,
        verbose_name="Отчество"
    )

    # Contact info
    phone = models.CharField(
        max_length=20,
        blank=True,
        verbose_name="Телефон"
    )
    country = models.CharField(
        max_length=2,
        blank=True,
        verbose_name="Страна"
    )
    city = models.CharField(
        max_length=150,
        blank=True,
        verbose_name="Город"
    )
    is_subscribed = models.BooleanField(
        default=False,
        verbose_name="Подписка на рассылку"
    )
    comment = models.TextField(
        blank=True,
        verbose_name="Комментарий"
    )

    # ERP link
    erp_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        db_index=True,
        verbose_name="ID в ERP"
    )
    status = models.CharField(
        max_length=20,
        choices=UserStatusChoices.choices,
        default=UserStatusChoices.PROCESSING,
        verbose_name="Статус"
    )

    # Storefront preferences
    region = models.ForeignKey(
        'persistence.Region',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='users',
        verbose_name="Регион"
    )
    currency_code = models.CharField(
        max_length=3,
        blank=True,
        verbose_name="Валюта"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name="Дата обновления"
    )

    class Meta:
        db_table = 'users'
        verbose_name = 'Пользователь'
        verbose_name_plural = 'Пользователи'
        ordering = ['last_name', 'first_name']

    def __str__(self):
        return self.get_full_name() or self.username

    def get_full_name(self):
        """Return full name including middle name."""
        parts = [self.last_name, self.first_name, self.middle_name]
        return ' '.join(p for p in parts if p)

    def get_short_name(self):
        """Return first name."""
        return self.first_name or self.username
