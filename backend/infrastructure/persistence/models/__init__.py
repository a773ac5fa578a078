"""
Persistence Models Package.

All Django ORM models of the storefront catalog and ERP sync.
"""

# Base mixins and managers
from .base import (
    TimeStampedMixin,
    SoftDeleteMixin,
    ChangeTrackingMixin,
    ActiveManager,
    AllObjectsManager,
)

# User models
from .users import (
    User,
    UserStatusChoices,
)

# Stock models
from .stock import (
    Region,
    Warehouse,
    RegionWarehouse,
    ProductStock,
)

# Catalog models
from .catalog import (
    Category,
    Brand,
    ProductModel,
    Attribute,
    AttributeValue,
    Certificate,
    Product,
    ProductBarcode,
    ProductAttributeValue,
)

# Media models
from .media import (
    Media,
)

# Company models
from .companies import (
    Company,
    CompanyBankAccount,
)

# Order models
from .orders import (
    Order,
    OrderItem,
    OrderStatusChoices,
)

# Queue bookkeeping
from .jobs import (
    FailedJob,
)


__all__ = [
    # Base
    'TimeStampedMixin',
    'SoftDeleteMixin',
    'ChangeTrackingMixin',
    'ActiveManager',
    'AllObjectsManager',
    # Users
    'User',
    'UserStatusChoices',
    # Stock
    'Region',
    'Warehouse',
    'RegionWarehouse',
    'ProductStock',
    # Catalog
    'Category',
    'Brand',
    'ProductModel',
    'Attribute',
    'AttributeValue',
    'Certificate',
    'Product',
    'ProductBarcode',
    'ProductAttributeValue',
    # Media
    'Media',
    # Companies
    'Company',
    'CompanyBankAccount',
    # Orders
    'Order',
    'OrderItem',
    'OrderStatusChoices',
    # Jobs
    'FailedJob',
]
