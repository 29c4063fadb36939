# routers/__init__.py
from .auth import router as auth_router
from .users import router as users_router
from .properties import router as properties_router
from .tenants import router as tenants_router
from .payments import router as payments_router
from .expenses import router as expenses_router
from .maintenance import router as maintenance_router
from .dashboard import router as dashboard_router
from .audit import router as audit_router
from .health import router as health_router

all_routers = [
     auth_router,
     users_router,
     properties_router,
     tenants_router,
     payments_router,
     expenses_router,
     maintenance_router,
     dashboard_router,
     audit_router,
     health_router,
]

__all__ = ["all_routers"]
