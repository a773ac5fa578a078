"""
ERP Snapshot Serializers.

Relation-hydrated, JSON-ready snapshots of the aggregates mirrored to
the ERP. Only read direction is used.
"""

from rest_framework import serializers

from infrastructure.persistence.models import (
    User,
    Company,
    CompanyBankAccount,
    Order,
    OrderItem,
)


class UserErpSerializer(serializers.ModelSerializer):
    """User snapshot. Password and currency preference never leave the system."""

    region = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email',
            'first_name', 'last_name', 'middle_name',
            'phone', 'country', 'city', 'comment',
            'is_subscribed', 'is_active', 'is_staff',
            'erp_id', 'status', 'region',
            'date_joined', 'updated_at',
        ]
        read_only_fields = fields


class UserReferenceSerializer(serializers.ModelSerializer):
    """Minimal user reference for nested representations."""

    class Meta:
        model = User
        fields = ['id', 'erp_id']
        read_only_fields = fields


class CompanyBankAccountErpSerializer(serializers.ModelSerializer):

    class Meta:
        model = CompanyBankAccount
        fields = [
            'id', 'bank_name', 'bank_bik', 'correspondent_account',
            'account_number', 'is_primary',
        ]
        read_only_fields = fields


class CompanyErpSerializer(serializers.ModelSerializer):
    """Company snapshot with bank accounts and the owner's ERP id."""

    bank_accounts = CompanyBankAccountErpSerializer(many=True, read_only=True)
    user = UserReferenceSerializer(read_only=True)

    class Meta:
        model = Company
        fields = [
            'id', 'user', 'country', 'name', 'legal_name',
            'tax_id', 'registration_number', 'tax_code', 'okpo_code',
            'legal_address', 'actual_address', 'phone', 'email',
            'erp_id', 'bank_accounts',
            'created_at', 'updated_at', 'deleted_at',
        ]
        read_only_fields = fields


class OrderItemErpSerializer(serializers.ModelSerializer):
    product_external_id = serializers.CharField(source='product.external_id', read_only=True)
    product_code = serializers.CharField(source='product.code', read_only=True)

    class Meta:
        model = OrderItem
        fields = ['id', 'product_external_id', 'product_code', 'quantity', 'price']
        read_only_fields = fields


class OrderErpSerializer(serializers.ModelSerializer):
    """Order snapshot with items and ERP ids of the buyer and the company."""

    items = OrderItemErpSerializer(many=True, read_only=True)
    user = UserReferenceSerializer(read_only=True)
    company_erp_id = serializers.SerializerMethodField()

    class Meta:
        model = Order
        fields = [
            'id', 'user', 'company', 'company_erp_id',
            'status', 'comment', 'total_amount', 'currency_code',
            'items', 'created_at', 'updated_at', 'deleted_at',
        ]
        read_only_fields = fields

    def get_company_erp_id(self, obj):
        return obj.company.erp_id if obj.company_id else None
