# services/ownership.py
"""
Owner-scoped lookups.

Every row a request touches is reached through its property, whose owner_id
must match the caller's. A row that exists but belongs to another account
is reported exactly like a missing row.
"""
from typing import Optional

from sqlalchemy.orm import Session

from models import Expense, MaintenanceTicket, Property, Tenant, Unit
from services.exceptions import NotFoundError, VersionConflictError


def get_owned_property(db: Session, owner_id: str, property_id: str) -> Property:
     prop = (
          db.query(Property)
          .filter(
               Property.id == property_id,
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
          )
          .first()
     )
     if prop is None:
          raise NotFoundError("Property not found")
     return prop


def get_owned_unit(db: Session, owner_id: str, unit_id: str) -> Unit:
     unit = (
          db.query(Unit)
          .join(Property, Unit.property_id == Property.id)
          .filter(
               Unit.id == unit_id,
               Unit.deleted_at.is_(None),
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
          )
          .first()
     )
     if unit is None:
          raise NotFoundError("Unit not found")
     return unit


def get_owned_tenant(db: Session, owner_id: str, tenant_id: str) -> Tenant:
     tenant = (
          db.query(Tenant)
          .join(Property, Tenant.property_id == Property.id)
          .filter(
               Tenant.id == tenant_id,
               Tenant.deleted_at.is_(None),
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
          )
          .first()
     )
     if tenant is None:
          raise NotFoundError("Tenant not found")
     return tenant


def get_owned_expense(db: Session, owner_id: str, expense_id: str) -> Expense:
     expense = (
          db.query(Expense)
          .join(Property, Expense.property_id == Property.id)
          .filter(
               Expense.id == expense_id,
               Expense.deleted_at.is_(None),
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
          )
          .first()
     )
     if expense is None:
          raise NotFoundError("Expense not found")
     return expense


def get_owned_ticket(db: Session, owner_id: str, ticket_id: str) -> MaintenanceTicket:
     ticket = (
          db.query(MaintenanceTicket)
          .join(Unit, MaintenanceTicket.unit_id == Unit.id)
          .join(Property, Unit.property_id == Property.id)
          .filter(
               MaintenanceTicket.id == ticket_id,
               MaintenanceTicket.deleted_at.is_(None),
               Property.owner_id == owner_id,
               Property.deleted_at.is_(None),
          )
          .first()
     )
     if ticket is None:
          raise NotFoundError("Maintenance ticket not found")
     return ticket


def check_version(entity: str, row, expected: Optional[int]) -> None:
     """
     Optimistic concurrency check.

     expected is the version the client read; None skips the check.
     """
     if expected is not None and expected != row.version:
          raise VersionConflictError(entity, expected, row.version)
