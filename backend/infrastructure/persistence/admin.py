"""
Admin registrations.

Dictionaries created by import (brands, models, attributes) are edited
here by administrators; their history is kept by simple_history.
"""

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Attribute,
    AttributeValue,
    Brand,
    Category,
    Certificate,
    Company,
    FailedJob,
    Order,
    Product,
    ProductModel,
    User,
)


@admin.register(User)
class StorefrontUserAdmin(UserAdmin):
    list_display = ['username', 'email', 'erp_id', 'status', 'region']
    list_filter = ['status', 'is_staff']
    fieldsets = UserAdmin.fieldsets + (
        ('ERP', {'fields': ('erp_id', 'status', 'region', 'currency_code')}),
    )


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['path', 'parent', 'sort_order']
    search_fields = ['name']


@admin.register(Brand)
class BrandAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'external_id']
    search_fields = ['name', 'external_id']


@admin.register(ProductModel)
class ProductModelAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'code', 'external_id']
    search_fields = ['name', 'code', 'external_id']


class AttributeValueInline(admin.TabularInline):
    model = AttributeValue
    extra = 0


@admin.register(Attribute)
class AttributeAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'type', 'is_filterable', 'sort_order']
    list_filter = ['type', 'is_filterable']
    search_fields = ['name']
    inlines = [AttributeValueInline]


@admin.register(Certificate)
class CertificateAdmin(admin.ModelAdmin):
    list_display = ['name', 'number', 'external_id', 'valid_until']


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ['name', 'code', 'sku', 'brand', 'base_price', 'is_new']
    list_filter = ['is_new', 'is_liquidation', 'for_marketplaces']
    search_fields = ['name', 'code', 'sku', 'external_id']
    raw_id_fields = ['brand', 'model']


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    list_display = ['name', 'tax_id', 'user', 'erp_id', 'deleted_at']


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'user', 'status', 'total_amount', 'created_at']
    list_filter = ['status']


@admin.register(FailedJob)
class FailedJobAdmin(admin.ModelAdmin):
    list_display = ['task_name', 'queue', 'failed_at', 'exception']
    list_filter = ['task_name', 'queue']
    readonly_fields = ['task_id', 'task_name', 'queue', 'args', 'kwargs', 'exception', 'traceback', 'failed_at']
