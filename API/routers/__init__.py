from .auth import router as auth_router
from .users import router as users_router
from .packages import router as packages_router
from .clients import router as clients_router
from .invoices import router as invoices_router
from .payments import router as payments_router
from .expenses import router as expenses_router
from .incomes import router as incomes_router
from .reports import router as reports_router
from .dashboard import router as dashboard_router
from .settings import router as settings_router

__all__ = [
    'auth_router', 'users_router', 'packages_router', 'clients_router',
    'invoices_router', 'payments_router', 'expenses_router', 'incomes_router',
    'reports_router', 'dashboard_router', 'settings_router',
]
