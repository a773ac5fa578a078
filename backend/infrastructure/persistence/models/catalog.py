"""
Catalog ORM Models.

Архитектура каталога:
1. Category - Дерево категорий (name, parent)
2. Brand / ProductModel - Справочники бренда и модели (ключ - UID поставщика)
3. Attribute / AttributeValue - Характеристики и справочник их значений
4. Certificate - Сертификаты (заводятся вручную, импорт только привязывает)
5. Product - Товар (ключ - UID поставщика)
6. ProductBarcode - Штрихкоды товара
7. ProductAttributeValue - Значение характеристики товара (ровно один слот)

Every dictionary table is protected by a uniqueness constraint so that
concurrent importer workers resolve to the same row.
"""

from django.db import models
from django.db.models import Q

from domain.shared.value_objects import (
    AttributeType,
    AttributeValueSlot,
    SelectSlot,
    BooleanSlot,
    NumberSlot,
    TextSlot,
)

from .base import BaseModel, BaseModelWithHistory


class Category(BaseModel):
    """
    Узел дерева категорий.

    Identity is (name, parent). Nodes are created lazily while walking a
    category path and are never updated or deleted by import.
    """

    name = models.CharField(
        max_length=255,
        verbose_name="Наименование"
    )
    parent = models.ForeignKey(
        'self',
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='children',
        verbose_name="Родительская категория"
    )
    sort_order = models.PositiveIntegerField(
        default=0,
        verbose_name="Порядок сортировки"
    )

    class Meta:
        db_table = 'categories'
        verbose_name = 'Категория'
        verbose_name_plural = 'Категории'
        ordering = ['sort_order', 'name']
        constraints = [
            models.UniqueConstraint(
                fields=['name', 'parent'],
                name='uniq_category_name_parent',
            ),
            # NULL parents never collide in a plain unique index
            models.UniqueConstraint(
                fields=['name'],
                condition=Q(parent__isnull=True),
                name='uniq_root_category_name',
            ),
        ]

    def __str__(self):
        return self.name

    def get_ancestors(self):
        """Return ancestors from root to direct parent."""
        ancestors = []
        node = self.parent
        while node is not None:
            ancestors.append(node)
            node = node.parent
        return list(reversed(ancestors))

    @property
    def path(self):
        return '/'.join([c.name for c in self.get_ancestors()] + [self.name])


class Brand(BaseModelWithHistory):
    """Бренд. Создаётся импортом при первом появлении, далее правится вручную."""

    external_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name="UID поставщика"
    )
    name = models.CharField(
        max_length=255,
        verbose_name="Наименование"
    )
    slug = models.SlugField(
        max_length=255,
        blank=True,
        verbose_name="Slug"
    )
    description = models.TextField(
        blank=True,
        verbose_name="Описание"
    )

    class Meta:
        db_table = 'brands'
        verbose_name = 'Бренд'
        verbose_name_plural = 'Бренды'
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductModel(BaseModelWithHistory):
    """Модель (линейка) товара."""

    external_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name="UID поставщика"
    )
    name = models.CharField(
        max_length=255,
        verbose_name="Наименование"
    )
    code = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        verbose_name="Код группы"
    )

    class Meta:
        db_table = 'product_models'
        verbose_name = 'Модель товара'
        verbose_name_plural = 'Модели товаров'
        ordering = ['name']

    def __str__(self):
        return self.name


class Attribute(BaseModelWithHistory):
    """
    Характеристика товара.

    `type` is decided once, when the attribute is first created, and is
    never re-evaluated by import.
    """

    name = models.CharField(
        max_length=255,
        unique=True,
        verbose_name="Наименование"
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name="Slug"
    )
    type = models.CharField(
        max_length=20,
        choices=[(t.value, t.name.title()) for t in AttributeType],
        default=AttributeType.STRING.value,
        verbose_name="Тип"
    )
    is_filterable = models.BooleanField(
        default=False,
        verbose_name="Использовать в фильтре"
    )
    sort_order = models.PositiveIntegerField(
        default=0,
        verbose_name="Порядок сортировки"
    )
    categories = models.ManyToManyField(
        Category,
        related_name='attributes',
        blank=True,
        verbose_name="Категории"
    )

    class Meta:
        db_table = 'attributes'
        verbose_name = 'Характеристика'
        verbose_name_plural = 'Характеристики'
        ordering = ['sort_order', 'name']

    def __str__(self):
        return self.name

    @property
    def attribute_type(self):
        return AttributeType(self.type)


class AttributeValue(BaseModel):
    """Значение из справочника характеристики типа select."""

    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.CASCADE,
        related_name='values',
        verbose_name="Характеристика"
    )
    value = models.CharField(
        max_length=500,
        verbose_name="Значение"
    )
    sort_order = models.PositiveIntegerField(
        default=0,
        verbose_name="Порядок сортировки"
    )

    class Meta:
        db_table = 'attribute_values'
        verbose_name = 'Значение характеристики'
        verbose_name_plural = 'Значения характеристик'
        ordering = ['sort_order']
        constraints = [
            models.UniqueConstraint(
                fields=['attribute', 'value'],
                name='uniq_attribute_value',
            ),
        ]

    def __str__(self):
        return self.value


class Certificate(BaseModel):
    """Сертификат соответствия. Импорт только привязывает существующие."""

    external_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name="UID поставщика"
    )
    name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name="Наименование"
    )
    number = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="Номер"
    )
    valid_until = models.DateField(
        null=True,
        blank=True,
        verbose_name="Действует до"
    )

    class Meta:
        db_table = 'certificates'
        verbose_name = 'Сертификат'
        verbose_name_plural = 'Сертификаты'

    def __str__(self):
        return self.name or self.external_id


class Product(BaseModel):
    """
    Товар.

    Identity is `external_id`; all feed fields are overwritten on every
    import. `base_price` is managed outside the feed.
    """

    external_id = models.CharField(
        max_length=64,
        unique=True,
        verbose_name="UID поставщика"
    )
    name = models.CharField(
        max_length=500,
        verbose_name="Наименование"
    )
    base_price = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        default=0,
        verbose_name="Базовая цена"
    )

    code = models.CharField(max_length=100, null=True, blank=True, verbose_name="Код")
    sku = models.CharField(max_length=100, null=True, blank=True, verbose_name="Артикул")
    slug = models.SlugField(max_length=255, null=True, blank=True, unique=True, verbose_name="Slug")
    url = models.URLField(max_length=500, null=True, blank=True, verbose_name="URL у поставщика")
    barcode = models.CharField(max_length=64, null=True, blank=True, verbose_name="Основной штрихкод")
    tnved = models.CharField(max_length=20, null=True, blank=True, verbose_name="ТН ВЭД")

    # Flags
    is_new = models.BooleanField(default=False, verbose_name="Новинка")
    is_marked = models.BooleanField(default=False, verbose_name="Маркируется")
    is_liquidation = models.BooleanField(default=False, verbose_name="Ликвидация")
    for_marketplaces = models.BooleanField(default=False, verbose_name="Для маркетплейсов")

    # Descriptions
    description = models.TextField(null=True, blank=True, verbose_name="Описание")
    description_html = models.TextField(null=True, blank=True, verbose_name="Описание (HTML)")
    short_description = models.TextField(null=True, blank=True, verbose_name="Краткое описание")

    brand = models.ForeignKey(
        Brand,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name="Бренд"
    )
    model = models.ForeignKey(
        ProductModel,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name="Модель"
    )
    categories = models.ManyToManyField(
        Category,
        related_name='products',
        blank=True,
        verbose_name="Категории"
    )
    certificates = models.ManyToManyField(
        Certificate,
        related_name='products',
        blank=True,
        verbose_name="Сертификаты"
    )

    class Meta:
        db_table = 'products'
        verbose_name = 'Товар'
        verbose_name_plural = 'Товары'
        ordering = ['name']

    def __str__(self):
        return self.name


class ProductBarcode(BaseModel):
    """Штрихкод товара."""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='barcodes',
        verbose_name="Товар"
    )
    barcode = models.CharField(
        max_length=64,
        db_index=True,
        verbose_name="Штрихкод"
    )

    class Meta:
        db_table = 'product_barcodes'
        verbose_name = 'Штрихкод'
        verbose_name_plural = 'Штрихкоды'

    def __str__(self):
        return self.barcode


class ProductAttributeValue(BaseModel):
    """
    Значение характеристики товара.

    Exactly one of the four value columns is populated; which one is
    decided by the attribute type (see `AttributeValueSlot`).
    """

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='attribute_values',
        verbose_name="Товар"
    )
    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.CASCADE,
        related_name='product_values',
        verbose_name="Характеристика"
    )

    attribute_value = models.ForeignKey(
        AttributeValue,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='product_values',
        verbose_name="Значение из справочника"
    )
    boolean_value = models.BooleanField(null=True, blank=True, verbose_name="Да/Нет")
    number_value = models.FloatField(null=True, blank=True, verbose_name="Число")
    text_value = models.TextField(null=True, blank=True, verbose_name="Текст")

    class Meta:
        db_table = 'product_attribute_values'
        verbose_name = 'Значение характеристики товара'
        verbose_name_plural = 'Значения характеристик товаров'
        constraints = [
            models.CheckConstraint(
                condition=(
                    Q(attribute_value__isnull=False, boolean_value__isnull=True,
                      number_value__isnull=True, text_value__isnull=True)
                    | Q(attribute_value__isnull=True, boolean_value__isnull=False,
                        number_value__isnull=True, text_value__isnull=True)
                    | Q(attribute_value__isnull=True, boolean_value__isnull=True,
                        number_value__isnull=False, text_value__isnull=True)
                    | Q(attribute_value__isnull=True, boolean_value__isnull=True,
                        number_value__isnull=True, text_value__isnull=False)
                ),
                name='product_attribute_value_single_slot',
            ),
        ]

    def __str__(self):
        return f"{self.attribute}: {self.display_value}"

    def set_slot(self, slot: AttributeValueSlot):
        """Populate exactly the column matching the slot variant."""
        self.attribute_value_id = None
        self.boolean_value = None
        self.number_value = None
        self.text_value = None

        if isinstance(slot, SelectSlot):
            self.attribute_value_id = slot.attribute_value_id
        elif isinstance(slot, BooleanSlot):
            self.boolean_value = slot.value
        elif isinstance(slot, NumberSlot):
            self.number_value = slot.value
        elif isinstance(slot, TextSlot):
            self.text_value = slot.value
        else:
            raise TypeError(f"Unknown attribute value slot: {slot!r}")

    @property
    def slot(self) -> AttributeValueSlot:
        if self.attribute_value_id is not None:
            return SelectSlot(attribute_value_id=self.attribute_value_id)
        if self.boolean_value is not None:
            return BooleanSlot(value=self.boolean_value)
        if self.number_value is not None:
            return NumberSlot(value=self.number_value)
        return TextSlot(value=self.text_value or '')

    @property
    def display_value(self):
        slot = self.slot
        if isinstance(slot, SelectSlot):
            return self.attribute_value.value
        if isinstance(slot, BooleanSlot):
            return 'Да' if slot.value else 'Нет'
        return slot.value
