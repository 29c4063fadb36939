# services/__init__.py
from .exceptions import (
     ServiceError,
     BadRequestError,
     NotFoundError,
     ConflictError,
     VersionConflictError,
)
from .audit_service import log_audit, snapshot, list_audit_logs
from .property_service import PropertyService
from .tenant_service import TenantService
from .ledger_service import (
     compute_balance,
     record_payment,
     list_payments,
     calculate_tenant_balance,
)
from .dashboard_service import compute_dashboard_stats, month_bounds

__all__ = [
     "ServiceError",
     "BadRequestError",
     "NotFoundError",
     "ConflictError",
     "VersionConflictError",
     "log_audit",
     "snapshot",
     "list_audit_logs",
     "PropertyService",
     "TenantService",
     "compute_balance",
     "record_payment",
     "list_payments",
     "calculate_tenant_balance",
     "compute_dashboard_stats",
     "month_bounds",
]
