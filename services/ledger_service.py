# services/ledger_service.py
"""
Payment Ledger Service - rent payments received from tenants.

When a payment is recorded:
1. The amount due at that moment and the amount paid are stored as given
2. balance_after_transaction = amount_due_at_time - amount_paid
   (negative means the tenant paid ahead / holds credit)
3. The record is append-only; no update/delete

A tenant's current balance is the balance_after_transaction of their most
recent payment.
"""
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from models import Payment, Property, Tenant
from schemas.payment import PaymentCreate
from services.exceptions import BadRequestError
from services.ownership import get_owned_property, get_owned_tenant, get_owned_unit

ZERO = Decimal("0")


def compute_balance(amount_due: Decimal, amount_paid: Decimal) -> Decimal:
     """Running balance after a payment, at cent precision."""
     return (Decimal(amount_due) - Decimal(amount_paid)).quantize(Decimal("0.01"))


def record_payment(db: Session, owner_id: str, created_by: str, data: PaymentCreate) -> Payment:
     """
     Append a payment to the ledger.

     property_id and unit_id default to the tenant's own; when supplied they
     must belong to the caller's account and to the tenant's property.

     Raises:
          NotFoundError: tenant, property or unit not owned by the caller
          BadRequestError: no unit can be determined for the payment, or the
               property / unit given do not match the tenant's property
     """
     tenant = get_owned_tenant(db, owner_id, data.tenant_id)

     property_id = data.property_id or tenant.property_id
     get_owned_property(db, owner_id, property_id)
     if property_id != tenant.property_id:
          raise BadRequestError("Property does not match the tenant")

     unit_id = data.unit_id or tenant.unit_id
     if not unit_id:
          raise BadRequestError("Tenant has no unit; unit_id is required")
     unit = get_owned_unit(db, owner_id, unit_id)
     if unit.property_id != property_id:
          raise BadRequestError("Unit does not belong to this property")

     payment = Payment(
          tenant_id=tenant.id,
          property_id=property_id,
          unit_id=unit_id,
          amount_paid=data.amount_paid,
          amount_due_at_time=data.amount_due_at_time,
          balance_after_transaction=compute_balance(data.amount_due_at_time, data.amount_paid),
          payment_date=data.payment_date,
          method=data.method,
          late_fee=data.late_fee,
          reference_number=data.reference_number,
          created_by=created_by,
     )
     db.add(payment)
     db.flush()
     return payment


def list_payments(db: Session, owner_id: str, property_id: Optional[str] = None) -> List[Payment]:
     """Owner-scoped payments, most recent payment_date first."""
     query = (
          db.query(Payment)
          .join(Property, Payment.property_id == Property.id)
          .options(
               joinedload(Payment.tenant),
               joinedload(Payment.property),
               joinedload(Payment.unit),
          )
          .filter(Property.owner_id == owner_id)
     )
     if property_id:
          query = query.filter(Payment.property_id == property_id)
     return query.order_by(Payment.payment_date.desc(), Payment.created_at.desc()).all()


def latest_payment(db: Session, tenant_id: str) -> Optional[Payment]:
     return (
          db.query(Payment)
          .filter(Payment.tenant_id == tenant_id)
          .order_by(Payment.payment_date.desc(), Payment.created_at.desc())
          .first()
     )


def calculate_tenant_balance(db: Session, owner_id: str, tenant_id: str) -> dict:
     """
     Summarise a tenant's position in the ledger.

     Returns:
          Dictionary with balance information
     """
     tenant: Tenant = get_owned_tenant(db, owner_id, tenant_id)
     payments = db.query(Payment).filter(Payment.tenant_id == tenant.id).all()
     last = latest_payment(db, tenant.id)

     return {
          "tenant_id": tenant.id,
          "balance": float(last.balance_after_transaction) if last else 0.0,
          "total_paid": float(sum((p.amount_paid for p in payments), ZERO)),
          "total_late_fees": float(sum((p.late_fee or ZERO for p in payments), ZERO)),
          "payments_count": len(payments),
          "last_payment_date": last.payment_date if last else None,
     }
