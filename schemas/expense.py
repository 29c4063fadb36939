# schemas/expense.py
from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from models.expense import ExpenseCategory


class ExpenseCreate(BaseModel):
     property_id: str = Field(..., min_length=1)
     category: ExpenseCategory
     amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
     date: date
     notes: Optional[str] = None
     receipt_url: Optional[str] = Field(None, max_length=500)


class ExpenseResponse(BaseModel):
     id: str
     property_id: str
     category: ExpenseCategory
     amount: float
     date: date
     notes: Optional[str] = None
     receipt_url: Optional[str] = None
     created_by: str
     created_at: datetime
     property_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
