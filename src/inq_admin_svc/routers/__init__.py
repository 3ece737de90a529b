from .auth import auth_router
from .dashboard import dashboard_router
from .contacts import contacts_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "contacts_router",
]
