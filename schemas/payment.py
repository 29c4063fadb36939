# schemas/payment.py
"""
Pydantic schemas for the payment ledger API.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, ConfigDict

from models.payment import PaymentMethod


class PaymentCreate(BaseModel):
     """Request body for POST /api/payments."""

     tenant_id: str = Field(..., min_length=1, description="Tenant who paid")
     property_id: Optional[str] = Field(None, description="Defaults to the tenant's property")
     unit_id: Optional[str] = Field(None, description="Defaults to the tenant's unit")
     amount_paid: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     amount_due_at_time: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     payment_date: date
     method: PaymentMethod = PaymentMethod.CASH
     late_fee: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)
     reference_number: Optional[str] = Field(None, max_length=100)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "tenant_id": "0c1d2e3f405142638495a6b7c8d9e0f1",
                    "amount_paid": 400000,
                    "amount_due_at_time": 450000,
                    "payment_date": "2026-10-05",
                    "method": "MOBILE_MONEY",
                    "reference_number": "TXN-12345",
               }
          }
     )


class PaymentCreatedResponse(BaseModel):
     id: str
     balance_after_transaction: float


class PaymentResponse(BaseModel):
     id: str
     tenant_id: str
     property_id: str
     unit_id: str
     amount_paid: float
     amount_due_at_time: float
     balance_after_transaction: float
     payment_date: date
     method: PaymentMethod
     late_fee: float
     reference_number: Optional[str] = None
     created_by: str
     created_at: datetime

     # Related data
     tenant_name: Optional[str] = None
     property_name: Optional[str] = None
     unit_number: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
