# routers/maintenance.py
"""
Maintenance ticket API.

Any authenticated role (caretakers included) may raise and update tickets,
but only for units inside the caller's account.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from database import get_session
from dependencies import CurrentUser, get_current_user
from models import MaintenanceStatus, MaintenanceTicket, Property, Unit
from schemas.common import CreatedResponse, VersionedMessageResponse
from schemas.maintenance import MaintenanceCreate, MaintenanceResponse, MaintenanceUpdate
from services.audit_service import log_audit, snapshot
from services.exceptions import BadRequestError
from services.ownership import check_version, get_owned_tenant, get_owned_ticket, get_owned_unit
from utils.logging_config import get_logger

logger = get_logger("maintenance")

router = APIRouter(prefix="/api/maintenance", tags=["maintenance"])


def _build_ticket_response(ticket: MaintenanceTicket) -> MaintenanceResponse:
     unit = ticket.unit
     return MaintenanceResponse.model_validate(ticket).model_copy(
          update={
               "unit_number": unit.unit_number if unit is not None else None,
               "property_name": unit.property.name if unit is not None and unit.property is not None else None,
          }
     )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_ticket(
     body: MaintenanceCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     unit = get_owned_unit(db, current.owner_id, body.unit_id)
     if body.tenant_id:
          tenant = get_owned_tenant(db, current.owner_id, body.tenant_id)
          if tenant.property_id != unit.property_id:
               raise BadRequestError("Tenant does not belong to the unit's property")

     ticket = MaintenanceTicket(
          unit_id=unit.id,
          tenant_id=body.tenant_id,
          description=body.description,
          assigned_to=body.assigned_to,
          image_url=body.image_url,
     )
     db.add(ticket)
     db.flush()
     log_audit(db, current.id, "CREATE", "MAINTENANCE", ticket.id, None, body.model_dump(mode="json"))
     db.commit()

     logger.info("Maintenance ticket %s opened on unit %s", ticket.id, unit.id)
     return {"id": ticket.id}


@router.get("", response_model=List[MaintenanceResponse])
def list_tickets(
     status_filter: Optional[MaintenanceStatus] = Query(None, alias="status", description="Filter by status"),
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     query = (
          db.query(MaintenanceTicket)
          .join(Unit, MaintenanceTicket.unit_id == Unit.id)
          .join(Property, Unit.property_id == Property.id)
          .options(joinedload(MaintenanceTicket.unit).joinedload(Unit.property))
          .filter(Property.owner_id == current.owner_id, MaintenanceTicket.deleted_at.is_(None))
     )
     if status_filter is not None:
          query = query.filter(MaintenanceTicket.status == status_filter)

     tickets = query.order_by(MaintenanceTicket.created_at.desc()).all()
     return [_build_ticket_response(t) for t in tickets]


@router.get("/{ticket_id}", response_model=MaintenanceResponse)
def get_ticket(
     ticket_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return _build_ticket_response(get_owned_ticket(db, current.owner_id, ticket_id))


@router.put("/{ticket_id}", response_model=VersionedMessageResponse)
def update_ticket(
     ticket_id: str,
     body: MaintenanceUpdate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     ticket = get_owned_ticket(db, current.owner_id, ticket_id)
     check_version("maintenance", ticket, body.version)

     before = snapshot(ticket)
     if body.status is not None:
          ticket.status = body.status
     if "assigned_to" in body.model_fields_set:
          ticket.assigned_to = body.assigned_to
     ticket.bump_version()
     db.flush()
     log_audit(db, current.id, "UPDATE", "MAINTENANCE", ticket.id, before, snapshot(ticket))
     db.commit()
     return {"message": "Maintenance updated", "version": ticket.version}
