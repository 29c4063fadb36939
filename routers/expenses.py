# routers/expenses.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, joinedload

from database import get_session
from dependencies import CurrentUser, LANDLORD_OR_MANAGER, get_current_user, require_roles
from models import Expense, Property
from schemas.common import CreatedResponse, MessageResponse
from schemas.expense import ExpenseCreate, ExpenseResponse
from services.audit_service import log_audit, snapshot
from services.ownership import get_owned_expense, get_owned_property

router = APIRouter(prefix="/api/expenses", tags=["expenses"])


def _build_expense_response(expense: Expense) -> ExpenseResponse:
     return ExpenseResponse.model_validate(expense).model_copy(
          update={"property_name": expense.property.name if expense.property is not None else None}
     )


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_expense(
     body: ExpenseCreate,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     prop = get_owned_property(db, current.owner_id, body.property_id)

     expense = Expense(
          property_id=prop.id,
          category=body.category,
          amount=body.amount,
          date=body.date,
          notes=body.notes,
          receipt_url=body.receipt_url,
          created_by=current.id,
     )
     db.add(expense)
     db.flush()
     log_audit(db, current.id, "CREATE", "EXPENSE", expense.id, None, body.model_dump(mode="json"))
     db.commit()
     return {"id": expense.id}


@router.get("", response_model=List[ExpenseResponse])
def list_expenses(
     property_id: Optional[str] = Query(None, description="Filter by property"),
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(get_current_user),
):
     query = (
          db.query(Expense)
          .join(Property, Expense.property_id == Property.id)
          .options(joinedload(Expense.property))
          .filter(Property.owner_id == current.owner_id, Expense.deleted_at.is_(None))
     )
     if property_id:
          query = query.filter(Expense.property_id == property_id)

     expenses = query.order_by(Expense.date.desc(), Expense.created_at.desc()).all()
     return [_build_expense_response(e) for e in expenses]


@router.delete("/{expense_id}", response_model=MessageResponse)
def delete_expense(
     expense_id: str,
     db: Session = Depends(get_session),
     current: CurrentUser = Depends(require_roles(*LANDLORD_OR_MANAGER)),
):
     expense = get_owned_expense(db, current.owner_id, expense_id)
     before = snapshot(expense)
     expense.soft_delete()
     expense.bump_version()
     db.flush()
     log_audit(db, current.id, "DELETE", "EXPENSE", expense.id, before, snapshot(expense))
     db.commit()
     return {"message": "Expense deleted"}
