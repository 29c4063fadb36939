# schemas/__init__.py
from .common import MessageResponse, CreatedResponse, VersionedMessageResponse, ErrorResponse
from .auth import (
     RegisterRequest,
     TeamMemberCreate,
     LoginRequest,
     UserResponse,
     TeamMemberResponse,
     LoginResponse,
)
from .property import PropertyCreate, PropertyResponse, UnitUpdate, UnitResponse
from .tenant import TenantCreate, TenantResponse, TenantBalanceResponse
from .payment import PaymentCreate, PaymentCreatedResponse, PaymentResponse
from .expense import ExpenseCreate, ExpenseResponse
from .maintenance import MaintenanceCreate, MaintenanceUpdate, MaintenanceResponse
from .dashboard import DashboardStats
from .audit import AuditLogResponse

__all__ = [
     "MessageResponse",
     "CreatedResponse",
     "VersionedMessageResponse",
     "ErrorResponse",
     "RegisterRequest",
     "TeamMemberCreate",
     "LoginRequest",
     "UserResponse",
     "TeamMemberResponse",
     "LoginResponse",
     "PropertyCreate",
     "PropertyResponse",
     "UnitUpdate",
     "UnitResponse",
     "TenantCreate",
     "TenantResponse",
     "TenantBalanceResponse",
     "PaymentCreate",
     "PaymentCreatedResponse",
     "PaymentResponse",
     "ExpenseCreate",
     "ExpenseResponse",
     "MaintenanceCreate",
     "MaintenanceUpdate",
     "MaintenanceResponse",
     "DashboardStats",
     "AuditLogResponse",
]
