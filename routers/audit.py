# routers/audit.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, LANDLORD_ONLY, require_roles
from schemas.audit import AuditLogResponse
from services.audit_service import list_audit_logs

router = APIRouter(prefix="/api/audit-logs", tags=["audit"])


@router.get("", response_model=List[AuditLogResponse])
def get_audit_logs(
     entity_type: Optional[str] = Query(None, description="PROPERTY, TENANT, PAYMENT, ..."),
     entity_id: Optional[str] = Query(None),
     limit: int = Query(100, ge=1, le=500),
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_ONLY)),
):
     return list_audit_logs(db, current.owner_id, entity_type, entity_id, limit)
