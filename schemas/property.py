# schemas/property.py
from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from models.unit import UnitStatus


class PropertyCreate(BaseModel):
     """Schema for creating a property; units are generated from total_units."""
     name: str = Field(..., min_length=1, max_length=255)
     address: str = Field(..., min_length=1, max_length=500)
     total_units: int = Field(
          ...,
          ge=0,
          le=1000,
          validation_alias=AliasChoices("totalUnits", "total_units"),
     )
     currency: Optional[str] = Field(None, min_length=3, max_length=3, description="ISO 4217 code")
     description: Optional[str] = None

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "name": "Msasani Heights",
                    "address": "Plot 12, Msasani, Dar es Salaam",
                    "totalUnits": 4,
                    "currency": "TZS",
               }
          }
     )


class PropertyResponse(BaseModel):
     id: str
     owner_id: str
     name: str
     address: str
     total_units: int
     currency: str
     description: Optional[str] = None
     created_at: datetime
     updated_at: datetime
     version: int

     model_config = ConfigDict(from_attributes=True)


class UnitUpdate(BaseModel):
     """Fields left out are not touched."""
     rent_amount: Optional[Decimal] = Field(None, ge=0, max_digits=12, decimal_places=2)
     status: Optional[UnitStatus] = None
     version: Optional[int] = Field(None, ge=1, description="Version the client last read")


class UnitResponse(BaseModel):
     id: str
     property_id: str
     unit_number: str
     rent_amount: float
     status: UnitStatus
     tenant_id: Optional[str] = None
     tenant_name: Optional[str] = None
     created_at: datetime
     updated_at: datetime
     version: int

     model_config = ConfigDict(from_attributes=True)
