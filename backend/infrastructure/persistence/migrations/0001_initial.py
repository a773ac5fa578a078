import django.contrib.auth.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.db.models.manager
import django.utils.timezone
import infrastructure.persistence.models.media
import simple_history.models
import uuid
from django.conf import settings
from django.db import migrations, models


def _history_fields():
    return [
        ('history_id', models.AutoField(primary_key=True, serialize=False)),
        ('history_date', models.DateTimeField(db_index=True)),
        ('history_change_reason', models.CharField(max_length=100, null=True)),
        ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
        ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
    ]


def _history_options(verbose_name, verbose_name_plural):
    return {
        'verbose_name': f'historical {verbose_name}',
        'verbose_name_plural': f'historical {verbose_name_plural}',
        'ordering': ('-history_date', '-history_id'),
        'get_latest_by': ('history_date', 'history_id'),
    }


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('auth', '0012_alter_user_first_name_max_length'),
        ('contenttypes', '0002_remove_content_type_name'),
    ]

    operations = [
        # =====================================================================
        # STOCK (regions first: users reference them)
        # =====================================================================
        migrations.CreateModel(
            name='Region',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, unique=True, verbose_name='Наименование')),
            ],
            options={
                'verbose_name': 'Регион',
                'verbose_name_plural': 'Регионы',
                'db_table': 'regions',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Наименование')),
                ('external_id', models.CharField(blank=True, max_length=64, null=True, unique=True, verbose_name='ID в ERP')),
            ],
            options={
                'verbose_name': 'Склад',
                'verbose_name_plural': 'Склады',
                'db_table': 'warehouses',
                'ordering': ['name'],
            },
        ),

        # =====================================================================
        # USERS
        # =====================================================================
        migrations.CreateModel(
            name='User',
            fields=[
                ('password', models.CharField(max_length=128, verbose_name='password')),
                ('last_login', models.DateTimeField(blank=True, null=True, verbose_name='last login')),
                ('is_superuser', models.BooleanField(default=False, help_text='Designates that this user has all permissions without explicitly assigning them.', verbose_name='superuser status')),
                ('is_staff', models.BooleanField(default=False, help_text='Designates whether the user can log into this admin site.', verbose_name='staff status')),
                ('is_active', models.BooleanField(default=True, help_text='Designates whether this user should be treated as active. Unselect this instead of deleting accounts.', verbose_name='active')),
                ('date_joined', models.DateTimeField(default=django.utils.timezone.now, verbose_name='date joined')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('username', models.CharField(max_length=150, unique=True, validators=[django.contrib.auth.validators.UnicodeUsernameValidator()], verbose_name='Логин')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('first_name', models.CharField(blank=True, max_length=150, verbose_name='Имя')),
                ('last_name', models.CharField(blank=True, max_length=150, verbose_name='Фамилия')),
                ('middle_name', models.CharField(blank=True, max_length=150, verbose_name='Отчество')),
                ('phone', models.CharField(blank=True, max_length=20, verbose_name='Телефон')),
                ('country', models.CharField(blank=True, max_length=2, verbose_name='Страна')),
                ('city', models.CharField(blank=True, max_length=150, verbose_name='Город')),
                ('is_subscribed', models.BooleanField(default=False, verbose_name='Подписка на рассылку')),
                ('comment', models.TextField(blank=True, verbose_name='Комментарий')),
                ('erp_id', models.CharField(blank=True, db_index=True, max_length=64, null=True, verbose_name='ID в ERP')),
                ('status', models.CharField(choices=[('processing', 'На проверке'), ('confirmed', 'Подтверждён'), ('rejected', 'Отклонён'), ('blocked', 'Заблокирован')], default='processing', max_length=20, verbose_name='Статус')),
                ('currency_code', models.CharField(blank=True, max_length=3, verbose_name='Валюта')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('region', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='users', to='persistence.region', verbose_name='Регион')),
                ('groups', models.ManyToManyField(blank=True, help_text='The groups this user belongs to. A user will get all permissions granted to each of their groups.', related_name='user_set', related_query_name='user', to='auth.group', verbose_name='groups')),
                ('user_permissions', models.ManyToManyField(blank=True, help_text='Specific permissions for this user.', related_name='user_set', related_query_name='user', to='auth.permission', verbose_name='user permissions')),
            ],
            options={
                'verbose_name': 'Пользователь',
                'verbose_name_plural': 'Пользователи',
                'db_table': 'users',
                'ordering': ['last_name', 'first_name'],
            },
            managers=[
                ('objects', django.contrib.auth.models.UserManager()),
            ],
        ),

        # =====================================================================
        # CATALOG DICTIONARIES
        # =====================================================================
        migrations.CreateModel(
            name='Category',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('sort_order', models.PositiveIntegerField(default=0, verbose_name='Порядок сортировки')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='persistence.category', verbose_name='Родительская категория')),
            ],
            options={
                'verbose_name': 'Категория',
                'verbose_name_plural': 'Категории',
                'db_table': 'categories',
                'ordering': ['sort_order', 'name'],
                'constraints': [
                    models.UniqueConstraint(fields=('name', 'parent'), name='uniq_category_name_parent'),
                    models.UniqueConstraint(condition=models.Q(('parent__isnull', True)), fields=('name',), name='uniq_root_category_name'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Brand',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('external_id', models.CharField(max_length=64, unique=True, verbose_name='UID поставщика')),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('slug', models.SlugField(blank=True, max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
            ],
            options={
                'verbose_name': 'Бренд',
                'verbose_name_plural': 'Бренды',
                'db_table': 'brands',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductModel',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('external_id', models.CharField(max_length=64, unique=True, verbose_name='UID поставщика')),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('code', models.CharField(blank=True, max_length=100, null=True, verbose_name='Код группы')),
            ],
            options={
                'verbose_name': 'Модель товара',
                'verbose_name_plural': 'Модели товаров',
                'db_table': 'product_models',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Attribute',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, unique=True, verbose_name='Наименование')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('type', models.CharField(choices=[('select', 'Select'), ('boolean', 'Boolean'), ('number', 'Number'), ('string', 'String')], default='string', max_length=20, verbose_name='Тип')),
                ('is_filterable', models.BooleanField(default=False, verbose_name='Использовать в фильтре')),
                ('sort_order', models.PositiveIntegerField(default=0, verbose_name='Порядок сортировки')),
                ('categories', models.ManyToManyField(blank=True, related_name='attributes', to='persistence.category', verbose_name='Категории')),
            ],
            options={
                'verbose_name': 'Характеристика',
                'verbose_name_plural': 'Характеристики',
                'db_table': 'attributes',
                'ordering': ['sort_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='AttributeValue',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=500, verbose_name='Значение')),
                ('sort_order', models.PositiveIntegerField(default=0, verbose_name='Порядок сортировки')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='values', to='persistence.attribute', verbose_name='Характеристика')),
            ],
            options={
                'verbose_name': 'Значение характеристики',
                'verbose_name_plural': 'Значения характеристик',
                'db_table': 'attribute_values',
                'ordering': ['sort_order'],
                'constraints': [
                    models.UniqueConstraint(fields=('attribute', 'value'), name='uniq_attribute_value'),
                ],
            },
        ),
        migrations.CreateModel(
            name='Certificate',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('external_id', models.CharField(max_length=64, unique=True, verbose_name='UID поставщика')),
                ('name', models.CharField(blank=True, max_length=255, verbose_name='Наименование')),
                ('number', models.CharField(blank=True, max_length=100, verbose_name='Номер')),
                ('valid_until', models.DateField(blank=True, null=True, verbose_name='Действует до')),
            ],
            options={
                'verbose_name': 'Сертификат',
                'verbose_name_plural': 'Сертификаты',
                'db_table': 'certificates',
            },
        ),

        # =====================================================================
        # PRODUCTS
        # =====================================================================
        migrations.CreateModel(
            name='Product',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('external_id', models.CharField(max_length=64, unique=True, verbose_name='UID поставщика')),
                ('name', models.CharField(max_length=500, verbose_name='Наименование')),
                ('base_price', models.DecimalField(decimal_places=2, default=0, max_digits=15, verbose_name='Базовая цена')),
                ('code', models.CharField(blank=True, max_length=100, null=True, verbose_name='Код')),
                ('sku', models.CharField(blank=True, max_length=100, null=True, verbose_name='Артикул')),
                ('slug', models.SlugField(blank=True, max_length=255, null=True, unique=True, verbose_name='Slug')),
                ('url', models.URLField(blank=True, max_length=500, null=True, verbose_name='URL у поставщика')),
                ('barcode', models.CharField(blank=True, max_length=64, null=True, verbose_name='Основной штрихкод')),
                ('tnved', models.CharField(blank=True, max_length=20, null=True, verbose_name='ТН ВЭД')),
                ('is_new', models.BooleanField(default=False, verbose_name='Новинка')),
                ('is_marked', models.BooleanField(default=False, verbose_name='Маркируется')),
                ('is_liquidation', models.BooleanField(default=False, verbose_name='Ликвидация')),
                ('for_marketplaces', models.BooleanField(default=False, verbose_name='Для маркетплейсов')),
                ('description', models.TextField(blank=True, null=True, verbose_name='Описание')),
                ('description_html', models.TextField(blank=True, null=True, verbose_name='Описание (HTML)')),
                ('short_description', models.TextField(blank=True, null=True, verbose_name='Краткое описание')),
                ('brand', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='persistence.brand', verbose_name='Бренд')),
                ('model', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='persistence.productmodel', verbose_name='Модель')),
                ('categories', models.ManyToManyField(blank=True, related_name='products', to='persistence.category', verbose_name='Категории')),
                ('certificates', models.ManyToManyField(blank=True, related_name='products', to='persistence.certificate', verbose_name='Сертификаты')),
            ],
            options={
                'verbose_name': 'Товар',
                'verbose_name_plural': 'Товары',
                'db_table': 'products',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductBarcode',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('barcode', models.CharField(db_index=True, max_length=64, verbose_name='Штрихкод')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='barcodes', to='persistence.product', verbose_name='Товар')),
            ],
            options={
                'verbose_name': 'Штрихкод',
                'verbose_name_plural': 'Штрихкоды',
                'db_table': 'product_barcodes',
            },
        ),
        migrations.CreateModel(
            name='ProductAttributeValue',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('boolean_value', models.BooleanField(blank=True, null=True, verbose_name='Да/Нет')),
                ('number_value', models.FloatField(blank=True, null=True, verbose_name='Число')),
                ('text_value', models.TextField(blank=True, null=True, verbose_name='Текст')),
                ('attribute', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='product_values', to='persistence.attribute', verbose_name='Характеристика')),
                ('attribute_value', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='product_values', to='persistence.attributevalue', verbose_name='Значение из справочника')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='attribute_values', to='persistence.product', verbose_name='Товар')),
            ],
            options={
                'verbose_name': 'Значение характеристики товара',
                'verbose_name_plural': 'Значения характеристик товаров',
                'db_table': 'product_attribute_values',
                'constraints': [
                    models.CheckConstraint(
                        condition=(
                            models.Q(('attribute_value__isnull', False), ('boolean_value__isnull', True), ('number_value__isnull', True), ('text_value__isnull', True))
                            | models.Q(('attribute_value__isnull', True), ('boolean_value__isnull', False), ('number_value__isnull', True), ('text_value__isnull', True))
                            | models.Q(('attribute_value__isnull', True), ('boolean_value__isnull', True), ('number_value__isnull', False), ('text_value__isnull', True))
                            | models.Q(('attribute_value__isnull', True), ('boolean_value__isnull', True), ('number_value__isnull', True), ('text_value__isnull', False))
                        ),
                        name='product_attribute_value_single_slot',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='Media',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('collection', models.CharField(choices=[('main', 'Main'), ('additional', 'Additional'), ('video', 'Video')], db_index=True, max_length=20, verbose_name='Коллекция')),
                ('file', models.FileField(max_length=500, upload_to=infrastructure.persistence.models.media.product_media_upload_to, verbose_name='Файл')),
                ('source_url', models.URLField(blank=True, max_length=1000, verbose_name='Источник')),
                ('mime_type', models.CharField(blank=True, max_length=100, verbose_name='MIME-тип')),
                ('size', models.PositiveBigIntegerField(default=0, verbose_name='Размер (байт)')),
                ('order_column', models.PositiveIntegerField(default=0, verbose_name='Порядок')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='media', to='persistence.product', verbose_name='Товар')),
            ],
            options={
                'verbose_name': 'Медиафайл',
                'verbose_name_plural': 'Медиафайлы',
                'db_table': 'media',
                'ordering': ['collection', 'order_column'],
            },
        ),
        migrations.CreateModel(
            name='RegionWarehouse',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('type', models.CharField(choices=[('primary', 'Primary'), ('preorder', 'Preorder')], default='primary', max_length=20, verbose_name='Тип')),
                ('region', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='warehouse_links', to='persistence.region')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='region_links', to='persistence.warehouse')),
            ],
            options={
                'db_table': 'region_warehouse',
                'constraints': [
                    models.UniqueConstraint(fields=('region', 'warehouse', 'type'), name='uniq_region_warehouse_type'),
                ],
            },
        ),
        migrations.CreateModel(
            name='ProductStock',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.IntegerField(default=0, verbose_name='Количество')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_rows', to='persistence.product', verbose_name='Товар')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_rows', to='persistence.warehouse', verbose_name='Склад')),
            ],
            options={
                'verbose_name': 'Остаток',
                'verbose_name_plural': 'Остатки',
                'db_table': 'product_warehouse',
                'constraints': [
                    models.UniqueConstraint(fields=('product', 'warehouse'), name='uniq_product_warehouse'),
                ],
            },
        ),

        # =====================================================================
        # COMPANIES / ORDERS
        # =====================================================================
        migrations.CreateModel(
            name='Company',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата удаления')),
                ('country', models.CharField(blank=True, max_length=2, verbose_name='Страна')),
                ('name', models.CharField(max_length=300, verbose_name='Наименование')),
                ('legal_name', models.CharField(blank=True, max_length=500, verbose_name='Полное юридическое наименование')),
                ('tax_id', models.CharField(blank=True, db_index=True, max_length=20, verbose_name='ИНН')),
                ('registration_number', models.CharField(blank=True, max_length=20, verbose_name='ОГРН')),
                ('tax_code', models.CharField(blank=True, max_length=20, verbose_name='КПП')),
                ('okpo_code', models.CharField(blank=True, max_length=20, verbose_name='ОКПО')),
                ('legal_address', models.TextField(blank=True, verbose_name='Юридический адрес')),
                ('actual_address', models.TextField(blank=True, verbose_name='Фактический адрес')),
                ('phone', models.CharField(blank=True, max_length=50, verbose_name='Телефон')),
                ('email', models.EmailField(blank=True, max_length=254, verbose_name='Email')),
                ('erp_id', models.CharField(blank=True, db_index=True, max_length=64, null=True, verbose_name='ID в ERP')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='companies', to=settings.AUTH_USER_MODEL, verbose_name='Владелец')),
            ],
            options={
                'verbose_name': 'Компания',
                'verbose_name_plural': 'Компании',
                'db_table': 'companies',
                'ordering': ['name'],
                'base_manager_name': 'all_objects',
            },
            managers=[
                ('objects', django.db.models.manager.Manager()),
                ('all_objects', django.db.models.manager.Manager()),
            ],
        ),
        migrations.CreateModel(
            name='CompanyBankAccount',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('bank_name', models.CharField(max_length=300, verbose_name='Банк')),
                ('bank_bik', models.CharField(blank=True, max_length=9, verbose_name='БИК')),
                ('correspondent_account', models.CharField(blank=True, max_length=20, verbose_name='Корреспондентский счёт')),
                ('account_number', models.CharField(max_length=20, verbose_name='Расчётный счёт')),
                ('is_primary', models.BooleanField(default=False, verbose_name='Основной')),
                ('company', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bank_accounts', to='persistence.company', verbose_name='Компания')),
            ],
            options={
                'verbose_name': 'Банковский счёт',
                'verbose_name_plural': 'Банковские счета',
                'db_table': 'company_bank_accounts',
                'ordering': ['-is_primary', 'bank_name'],
            },
        ),
        migrations.CreateModel(
            name='Order',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='Дата удаления')),
                ('status', models.CharField(choices=[('pending', 'Новый'), ('confirmed', 'Подтверждён'), ('shipped', 'Отгружен'), ('completed', 'Выполнен'), ('cancelled', 'Отменён')], db_index=True, default='pending', max_length=20, verbose_name='Статус')),
                ('comment', models.TextField(blank=True, verbose_name='Комментарий')),
                ('total_amount', models.DecimalField(decimal_places=2, default=0, max_digits=15, verbose_name='Сумма')),
                ('currency_code', models.CharField(blank=True, max_length=3, verbose_name='Валюта')),
                ('company', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='orders', to='persistence.company', verbose_name='Компания')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to=settings.AUTH_USER_MODEL, verbose_name='Покупатель')),
            ],
            options={
                'verbose_name': 'Заказ',
                'verbose_name_plural': 'Заказы',
                'db_table': 'orders',
                'ordering': ['-created_at'],
                'base_manager_name': 'all_objects',
            },
            managers=[
                ('objects', django.db.models.manager.Manager()),
                ('all_objects', django.db.models.manager.Manager()),
            ],
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Дата обновления')),
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField(default=1, verbose_name='Количество')),
                ('price', models.DecimalField(decimal_places=2, max_digits=15, verbose_name='Цена')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='persistence.order', verbose_name='Заказ')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='order_items', to='persistence.product', verbose_name='Товар')),
            ],
            options={
                'verbose_name': 'Позиция заказа',
                'verbose_name_plural': 'Позиции заказа',
                'db_table': 'order_items',
            },
        ),

        # =====================================================================
        # QUEUE BOOKKEEPING
        # =====================================================================
        migrations.CreateModel(
            name='FailedJob',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('task_id', models.CharField(db_index=True, max_length=255, verbose_name='ID задачи')),
                ('task_name', models.CharField(db_index=True, max_length=255, verbose_name='Задача')),
                ('queue', models.CharField(blank=True, max_length=100, verbose_name='Очередь')),
                ('args', models.JSONField(blank=True, default=list, verbose_name='Аргументы')),
                ('kwargs', models.JSONField(blank=True, default=dict, verbose_name='Именованные аргументы')),
                ('exception', models.TextField(verbose_name='Исключение')),
                ('traceback', models.TextField(blank=True, verbose_name='Трассировка')),
                ('failed_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='Время')),
            ],
            options={
                'verbose_name': 'Неудачная задача',
                'verbose_name_plural': 'Неудачные задачи',
                'db_table': 'failed_jobs',
                'ordering': ['-failed_at'],
            },
        ),

        # =====================================================================
        # HISTORY
        # =====================================================================
        migrations.CreateModel(
            name='HistoricalBrand',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата обновления')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('external_id', models.CharField(db_index=True, max_length=64, verbose_name='UID поставщика')),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('slug', models.SlugField(blank=True, max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Описание')),
            ] + _history_fields(),
            options=_history_options('Бренд', 'Бренды'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalProductModel',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата обновления')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('external_id', models.CharField(db_index=True, max_length=64, verbose_name='UID поставщика')),
                ('name', models.CharField(max_length=255, verbose_name='Наименование')),
                ('code', models.CharField(blank=True, max_length=100, null=True, verbose_name='Код группы')),
            ] + _history_fields(),
            options=_history_options('Модель товара', 'Модели товаров'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalAttribute',
            fields=[
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата создания')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Дата обновления')),
                ('id', models.UUIDField(db_index=True, default=uuid.uuid4, editable=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='Наименование')),
                ('slug', models.SlugField(max_length=255, verbose_name='Slug')),
                ('type', models.CharField(choices=[('select', 'Select'), ('boolean', 'Boolean'), ('number', 'Number'), ('string', 'String')], default='string', max_length=20, verbose_name='Тип')),
                ('is_filterable', models.BooleanField(default=False, verbose_name='Использовать в фильтре')),
                ('sort_order', models.PositiveIntegerField(default=0, verbose_name='Порядок сортировки')),
            ] + _history_fields(),
            options=_history_options('Характеристика', 'Характеристики'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
