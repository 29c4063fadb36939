# schemas/tenant.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator


class TenantCreate(BaseModel):
     """Schema for onboarding a tenant, optionally straight into a unit."""
     property_id: str = Field(..., min_length=1)
     unit_id: Optional[str] = None
     full_name: str = Field(..., min_length=1, max_length=200)
     phone: str = Field(..., min_length=3, max_length=50)
     email: Optional[str] = Field(None, max_length=255)
     national_id: Optional[str] = Field(None, max_length=100)
     lease_start: Optional[date] = None
     lease_end: Optional[date] = None
     rent_amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
     security_deposit: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)

     @model_validator(mode="after")
     def check_lease_period(self):
          if self.lease_start and self.lease_end and self.lease_end < self.lease_start:
               raise ValueError("lease_end must not be before lease_start")
          return self

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "property_id": "4f1c0d5e0b7a4c3e9a2b8d6f1e0c9b7a",
                    "unit_id": "9a8b7c6d5e4f40312a1b0c9d8e7f6a5b",
                    "full_name": "Baraka Mushi",
                    "phone": "+255712000111",
                    "lease_start": "2026-01-01",
                    "lease_end": "2026-12-31",
                    "rent_amount": 450000,
                    "security_deposit": 900000,
               }
          }
     )


class TenantResponse(BaseModel):
     id: str
     property_id: str
     unit_id: Optional[str] = None
     full_name: str
     phone: str
     email: Optional[str] = None
     national_id: Optional[str] = None
     lease_start: Optional[date] = None
     lease_end: Optional[date] = None
     rent_amount: float
     security_deposit: float
     created_at: datetime
     updated_at: datetime
     version: int

     # Related data
     property_name: Optional[str] = None
     unit_number: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)


class TenantBalanceResponse(BaseModel):
     """Where a tenant stands according to the payment ledger."""
     tenant_id: str
     balance: float = Field(..., description="balance_after_transaction of the latest payment; negative means credit")
     total_paid: float
     total_late_fees: float
     payments_count: int
     last_payment_date: Optional[date] = None
