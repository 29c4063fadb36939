# services/property_service.py
"""
Property Service - properties and their units.

Creating a property also creates its units ("Unit 1" .. "Unit N", rent 0,
VACANT) in the same transaction.
"""
from typing import List, Tuple

from sqlalchemy.orm import Session, selectinload

from models import Property, Unit, UnitStatus
from schemas.property import PropertyCreate, UnitUpdate
from services.audit_service import snapshot
from services.exceptions import BadRequestError
from services.ownership import check_version, get_owned_property, get_owned_unit


class PropertyService:
     """Service class for property and unit business logic."""

     @staticmethod
     def create_property(
          db: Session,
          owner_id: str,
          data: PropertyCreate,
          default_currency: str = "TZS",
     ) -> Property:
          """
          Create a property and its units.

          Args:
               db: SQLAlchemy database session
               owner_id: Account that owns the property
               data: Validated request body
               default_currency: Used when the body has no currency

          Returns:
               The flushed Property (not yet committed)
          """
          prop = Property(
               owner_id=owner_id,
               name=data.name,
               address=data.address,
               total_units=data.total_units,
               currency=(data.currency or default_currency).upper(),
               description=data.description,
          )
          db.add(prop)
          db.flush()  # Flush to get the ID without committing

          for number in range(1, data.total_units + 1):
               db.add(Unit(property_id=prop.id, unit_number=f"Unit {number}", rent_amount=0))

          db.flush()
          return prop

     @staticmethod
     def list_properties(db: Session, owner_id: str) -> List[Property]:
          return (
               db.query(Property)
               .filter(Property.owner_id == owner_id, Property.deleted_at.is_(None))
               .order_by(Property.created_at)
               .all()
          )

     @staticmethod
     def delete_property(db: Session, owner_id: str, property_id: str) -> Tuple[dict, Property]:
          """
          Soft delete a property and its units.

          Refused while any unit is still occupied or any tenant (with or
          without a unit) is still on the property.
          """
          prop = get_owned_property(db, owner_id, property_id)
          live_units = [u for u in prop.units if u.deleted_at is None]
          if any(u.status == UnitStatus.OCCUPIED for u in live_units):
               raise BadRequestError("Property still has occupied units")
          if any(t.deleted_at is None for t in prop.tenants):
               raise BadRequestError("Property still has tenants")

          before = snapshot(prop)
          prop.soft_delete()
          prop.bump_version()
          for unit in live_units:
               unit.soft_delete()
               unit.bump_version()
          db.flush()
          return before, prop

     @staticmethod
     def list_units(db: Session, owner_id: str, property_id: str) -> List[Unit]:
          get_owned_property(db, owner_id, property_id)
          return (
               db.query(Unit)
               .options(selectinload(Unit.occupant))
               .filter(Unit.property_id == property_id, Unit.deleted_at.is_(None))
               .order_by(Unit.created_at, Unit.unit_number)
               .all()
          )

     @staticmethod
     def update_unit(db: Session, owner_id: str, unit_id: str, data: UnitUpdate) -> Tuple[dict, Unit]:
          """
          Apply the supplied fields to a unit and bump its version.

          Returns:
               (snapshot before the change, updated unit)

          Raises:
               NotFoundError: unit missing or owned by another account
               BadRequestError: status moved to or from OCCUPIED
               VersionConflictError: data.version is stale
          """
          unit = get_owned_unit(db, owner_id, unit_id)
          check_version("unit", unit, data.version)

          # Occupancy follows tenant_id; only onboarding and offboarding move it
          status_changes = data.status is not None and data.status != unit.status
          if status_changes and UnitStatus.OCCUPIED in (data.status, unit.status):
               raise BadRequestError("Occupancy changes go through adding or removing a tenant")

          before = snapshot(unit)
          if data.rent_amount is not None:
               unit.rent_amount = data.rent_amount
          if data.status is not None:
               unit.status = data.status
          unit.bump_version()
          db.flush()
          return before, unit
