"""
Company ORM Models.

Legal entities through which customers place orders, with their
bank accounts. Both are mirrored to the ERP.
"""

from django.db import models
from django.conf import settings

from .base import BaseModel, SoftDeleteMixin, ChangeTrackingMixin, ActiveManager, AllObjectsManager


class Company(ChangeTrackingMixin, SoftDeleteMixin, BaseModel):
    """Юридическое лицо покупателя."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='companies',
        verbose_name="Владелец"
    )

    country = models.CharField(
        max_length=2,
        blank=True,
        verbose_name="Страна"
    )
    name = models.CharField(
        max_length=300,
        verbose_name="Наименование"
    )
    legal_name = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="Полное юридическое наименование"
    )

    # Реквизиты
    tax_id = models.CharField(
        max_length=20,
        blank=True,
        db_index=True,
        verbose_name="ИНН"
    )
    registration_number = models.CharField(
        max_length=20,
        blank=True,
        verbose_name="ОГРН"
    )
    tax_code = models.CharField(
        max_length=20,
        blank=True,
        verbose_name="КПП"
    )
    okpo_code = models.CharField(
        max_length=20,
        blank=True,
        verbose_name="ОКПО"
    )

    legal_address = models.TextField(
        blank=True,
        verbose_name="Юридический адрес"
    )
    actual_address = models.TextField(
        blank=True,
        verbose_name="Фактический адрес"
    )
    phone = models.CharField(
        max_length=50,
        blank=True,
        verbose_name="Телефон"
    )
    email = models.EmailField(
        blank=True,
        verbose_name="Email"
    )

    erp_id = models.CharField(
        max_length=64,
        null=True,
        blank=True,
        db_index=True,
        verbose_name="ID в ERP"
    )

    objects = ActiveManager()
    all_objects = AllObjectsManager()

    class Meta:
        db_table = 'companies'
        verbose_name = 'Компания'
        verbose_name_plural = 'Компании'
        ordering = ['name']
        base_manager_name = 'all_objects'

    def __str__(self):
        return self.name


class CompanyBankAccount(BaseModel):
    """Банковский счёт компании."""

    company = models.ForeignKey(
        Company,
        on_delete=models.CASCADE,
        related_name='bank_accounts',
        verbose_name="Компания"
    )
    bank_name = models.CharField(
        max_length=300,
        verbose_name="Банк"
    )
    bank_bik = models.CharField(
        max_length=9,
        blank=True,
        verbose_name="БИК"
    )
    correspondent_account = models.CharField(
        max_length=20,
        blank=True,
        verbose_name="Корреспондентский счёт"
    )
    account_number = models.CharField(
        max_length=20,
        verbose_name="Расчётный счёт"
    )
    is_primary = models.BooleanField(
        default=False,
        verbose_name="Основной"
    )

    class Meta:
        db_table = 'company_bank_accounts'
        verbose_name = 'Банковский счёт'
        verbose_name_plural = 'Банковские счета'
        ordering = ['-is_primary', 'bank_name']

    def __str__(self):
        return f"{self.bank_name} {self.account_number}"
