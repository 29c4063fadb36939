# services/tenant_service.py
"""
Tenant Service - onboarding and offboarding tenants.

Moving a tenant into a unit and marking the unit OCCUPIED happen in the
same transaction; so do the reverse steps on removal.
"""
from typing import List, Tuple

from sqlalchemy.orm import Session, joinedload

from models import Property, Tenant, Unit, UnitStatus
from schemas.tenant import TenantCreate
from services.audit_service import snapshot
from services.exceptions import BadRequestError
from services.ownership import get_owned_property, get_owned_tenant


class TenantService:
     """Service class for tenant-related business logic."""

     @staticmethod
     def create_tenant(db: Session, owner_id: str, data: TenantCreate) -> Tenant:
          """
          Insert a tenant and, when a unit is given, occupy it.

          Raises:
               NotFoundError: property not owned by the caller
               BadRequestError: unit not in the property, or already occupied
          """
          prop = get_owned_property(db, owner_id, data.property_id)

          unit = None
          if data.unit_id:
               unit = (
                    db.query(Unit)
                    .filter(
                         Unit.id == data.unit_id,
                         Unit.property_id == prop.id,
                         Unit.deleted_at.is_(None),
                    )
                    .first()
               )
               if unit is None:
                    raise BadRequestError("Unit does not belong to this property")
               if unit.status == UnitStatus.OCCUPIED or unit.tenant_id:
                    raise BadRequestError("Unit is already occupied")

          tenant = Tenant(
               property_id=prop.id,
               unit_id=unit.id if unit else None,
               full_name=data.full_name,
               phone=data.phone,
               email=data.email,
               national_id=data.national_id,
               lease_start=data.lease_start,
               lease_end=data.lease_end,
               rent_amount=data.rent_amount,
               security_deposit=data.security_deposit,
          )
          db.add(tenant)
          db.flush()

          if unit is not None:
               unit.tenant_id = tenant.id
               unit.status = UnitStatus.OCCUPIED
               unit.bump_version()
               db.flush()

          return tenant

     @staticmethod
     def list_tenants(db: Session, owner_id: str) -> List[Tenant]:
          return (
               db.query(Tenant)
               .join(Property, Tenant.property_id == Property.id)
               .options(joinedload(Tenant.property), joinedload(Tenant.unit))
               .filter(
                    Property.owner_id == owner_id,
                    Property.deleted_at.is_(None),
                    Tenant.deleted_at.is_(None),
               )
               .order_by(Tenant.created_at)
               .all()
          )

     @staticmethod
     def delete_tenant(db: Session, owner_id: str, tenant_id: str) -> Tuple[dict, Tenant]:
          """Soft delete a tenant and vacate the unit they occupied."""
          tenant = get_owned_tenant(db, owner_id, tenant_id)
          before = snapshot(tenant)

          if tenant.unit_id:
               unit = db.query(Unit).filter(Unit.id == tenant.unit_id).first()
               if unit is not None and unit.tenant_id == tenant.id:
                    unit.tenant_id = None
                    unit.status = UnitStatus.VACANT
                    unit.bump_version()

          tenant.soft_delete()
          tenant.bump_version()
          db.flush()
          return before, tenant
