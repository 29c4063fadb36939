# routers/payments.py
"""
Payment ledger API.

POST /api/payments: record a payment; the balance after it is computed here
GET  /api/payments: owner-scoped ledger, newest payment_date first
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from database import get_session
from dependencies import CurrentUser, LANDLORD_OR_MANAGER, get_current_user, require_roles
from models import Payment
from schemas.payment import PaymentCreate, PaymentCreatedResponse, PaymentResponse
from services.audit_service import log_audit
from services.ledger_service import list_payments, record_payment
from utils.logging_config import get_logger

logger = get_logger("payments")

router = APIRouter(prefix="/api/payments", tags=["payments"])


def _build_payment_response(payment: Payment) -> PaymentResponse:
     return PaymentResponse.model_validate(payment).model_copy(
          update={
               "tenant_name": payment.tenant.full_name if payment.tenant is not None else None,
               "property_name": payment.property.name if payment.property is not None else None,
               "unit_number": payment.unit.unit_number if payment.unit is not None else None,
          }
     )


@router.post(
     "",
     response_model=PaymentCreatedResponse,
     status_code=status.HTTP_201_CREATED,
     summary="Record payment",
)
def create_payment(
     body: PaymentCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     """
     Record a rent payment.

     1. Validates the tenant (and property / unit, if given) belong to the caller.
     2. Computes balance_after_transaction = amount_due_at_time - amount_paid.
     3. Appends the ledger row and an audit entry in one transaction.
     """
     payment = record_payment(db, current.owner_id, current.id, body)
     log_audit(db, current.id, "CREATE", "PAYMENT", payment.id, None, body.model_dump(mode="json"))
     db.commit()

     logger.info("Payment %s recorded for tenant %s", payment.id, payment.tenant_id)
     return PaymentCreatedResponse(
          id=payment.id,
          balance_after_transaction=payment.balance_after_transaction,
     )


@router.get("", response_model=List[PaymentResponse])
def get_payments(
     property_id: Optional[str] = Query(None, description="Filter by property"),
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     return [_build_payment_response(p) for p in list_payments(db, current.owner_id, property_id)]
