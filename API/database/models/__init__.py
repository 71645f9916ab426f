"""
Database models package.
Export all models for easy importing.
"""

# User and Authentication
from .user import (
    UserRole,
    PermissionType,
    ROLE_PERMISSIONS,
    User,
)

# Package catalog
from .package import (
    BillingCycle,
    BILLING_CYCLE_MONTHS,
    PackageStatus,
    Package,
)

# Subscribers
from .client import (
    ServiceStatus,
    PaymentStatus,
    Client,
)

# Invoices and payments
from .billing import (
    InvoiceStatus,
    PaymentMethod,
    Invoice,
    Payment,
)

# Expenses and other income
from .finance import (
    ExpenseType,
    IncomeType,
    Expense,
    Income,
)

# Settings
from .settings import CompanySettings


__all__ = [
    # User
    'UserRole',
    'PermissionType',
    'ROLE_PERMISSIONS',
    'User',

    # Package
    'BillingCycle',
    'BILLING_CYCLE_MONTHS',
    'PackageStatus',
    'Package',

    # Client
    'ServiceStatus',
    'PaymentStatus',
    'Client',

    # Billing
    'InvoiceStatus',
    'PaymentMethod',
    'Invoice',
    'Payment',

    # Finance
    'ExpenseType',
    'IncomeType',
    'Expense',
    'Income',

    # Settings
    'CompanySettings',
]
