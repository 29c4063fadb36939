# routers/tenants.py
"""
Tenant API routes.

POST creates the tenant and occupies the chosen unit in one transaction.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, LANDLORD_OR_MANAGER, get_current_user, require_roles
from models import Tenant
from schemas.common import CreatedResponse, MessageResponse
from schemas.tenant import TenantBalanceResponse, TenantCreate, TenantResponse
from services.audit_service import log_audit, snapshot
from services.ledger_service import calculate_tenant_balance
from services.tenant_service import TenantService
from utils.logging_config import get_logger

logger = get_logger("tenants")

router = APIRouter(prefix="/api/tenants", tags=["tenants"])


def _build_tenant_response(tenant: Tenant) -> TenantResponse:
     return TenantResponse.model_validate(tenant).model_copy(
          update={
               "property_name": tenant.property.name if tenant.property is not None else None,
               "unit_number": tenant.unit.unit_number if tenant.unit is not None else None,
          }
     )


@router.get("", response_model=List[TenantResponse])
def list_tenants(
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return [_build_tenant_response(t) for t in TenantService.list_tenants(db, current.owner_id)]


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_tenant(
     body: TenantCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     tenant = TenantService.create_tenant(db, current.owner_id, body)
     log_audit(db, current.id, "CREATE", "TENANT", tenant.id, None, body.model_dump(mode="json"))
     db.commit()

     logger.info("Tenant %s added to property %s (unit %s)", tenant.id, tenant.property_id, tenant.unit_id)
     return {"id": tenant.id}


@router.get("/{tenant_id}/balance", response_model=TenantBalanceResponse)
def get_tenant_balance(
     tenant_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return calculate_tenant_balance(db, current.owner_id, tenant_id)


@router.delete("/{tenant_id}", response_model=MessageResponse)
def delete_tenant(
     tenant_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     before, tenant = TenantService.delete_tenant(db, current.owner_id, tenant_id)
     log_audit(db, current.id, "DELETE", "TENANT", tenant.id, before, snapshot(tenant))
     db.commit()
     return {"message": "Tenant removed"}
