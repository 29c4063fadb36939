# models/__init__.py
from .base import Base, generate_id, utcnow
from .user import User, UserRole
from .property import Property
from .unit import Unit, UnitStatus
from .tenant import Tenant
from .payment import Payment, PaymentMethod
from .expense import Expense, ExpenseCategory
from .maintenance import MaintenanceTicket, MaintenanceStatus
from .audit_log import AuditLog

__all__ = [
     "Base",
     "generate_id",
     "utcnow",
     "User",
     "UserRole",
     "Property",
     "Unit",
     "UnitStatus",
     "Tenant",
     "Payment",
     "PaymentMethod",
     "Expense",
     "ExpenseCategory",
     "MaintenanceTicket",
     "MaintenanceStatus",
     "AuditLog",
]
