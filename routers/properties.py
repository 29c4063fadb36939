# routers/properties.py
"""
Property and unit API routes.

Every query is scoped to the caller's owner_id; another account's property
answers 404 exactly like a missing one.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

import config
from database import get_session
from dependencies import CurrentUser, LANDLORD_ONLY, LANDLORD_OR_MANAGER, get_current_user, require_roles
from models import Unit
from schemas.common import CreatedResponse, MessageResponse, VersionedMessageResponse
from schemas.property import PropertyCreate, PropertyResponse, UnitResponse, UnitUpdate
from services.audit_service import log_audit, snapshot
from services.ownership import get_owned_property
from services.property_service import PropertyService
from utils.logging_config import get_logger

logger = get_logger("properties")

router = APIRouter(tags=["properties"])


def _build_unit_response(unit: Unit) -> UnitResponse:
     occupant = unit.occupant
     return UnitResponse.model_validate(unit).model_copy(
          update={"tenant_name": occupant.full_name if occupant is not None else None}
     )


@router.get("/api/properties", response_model=List[PropertyResponse])
def list_properties(
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return PropertyService.list_properties(db, current.owner_id)


@router.get("/api/properties/{property_id}", response_model=PropertyResponse)
def get_property(
     property_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return get_owned_property(db, current.owner_id, property_id)


@router.post(
     "/api/properties",
     response_model=CreatedResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Create a property and its units",
)
def create_property(
     body: PropertyCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_ONLY)),
):
     """
     - **name**, **address**: required
     - **totalUnits**: number of units to generate ("Unit 1" .. "Unit N")
     - **currency**: defaults to the configured currency
     """
     prop = PropertyService.create_property(db, current.owner_id, body, config.DEFAULT_CURRENCY)
     log_audit(db, current.id, "CREATE", "PROPERTY", prop.id, None, body.model_dump(mode="json"))
     db.commit()

     logger.info("Property %s created with %d units", prop.id, prop.total_units)
     return {"id": prop.id}


@router.delete("/api/properties/{property_id}", response_model=MessageResponse)
def delete_property(
     property_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_ONLY)),
):
     before, prop = PropertyService.delete_property(db, current.owner_id, property_id)
     log_audit(db, current.id, "DELETE", "PROPERTY", prop.id, before, snapshot(prop))
     db.commit()
     return {"message": "Property deleted"}


@router.get("/api/properties/{property_id}/units", response_model=List[UnitResponse])
def list_units(
     property_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     units = PropertyService.list_units(db, current.owner_id, property_id)
     return [_build_unit_response(u) for u in units]


@router.put("/api/units/{unit_id}", response_model=VersionedMessageResponse)
def update_unit(
     unit_id: str,
     body: UnitUpdate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     """
     Update rent and/or status. Send the **version** you last read to have a
     concurrent edit rejected with 409 instead of silently overwritten.
     """
     before, unit = PropertyService.update_unit(db, current.owner_id, unit_id, body)
     log_audit(db, current.id, "UPDATE", "UNIT", unit.id, before, snapshot(unit))
     db.commit()
     return {"message": "Unit updated", "version": unit.version}
