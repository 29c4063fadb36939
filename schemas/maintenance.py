# schemas/maintenance.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from models.maintenance import MaintenanceStatus


class MaintenanceCreate(BaseModel):
     unit_id: str = Field(..., min_length=1)
     tenant_id: Optional[str] = None
     description: str = Field(..., min_length=1)
     assigned_to: Optional[str] = Field(None, max_length=200)
     image_url: Optional[str] = Field(None, max_length=500)


class MaintenanceUpdate(BaseModel):
     status: Optional[MaintenanceStatus] = None
     assigned_to: Optional[str] = Field(None, max_length=200)
     version: Optional[int] = Field(None, ge=1, description="Version the client last read")


class MaintenanceResponse(BaseModel):
     id: str
     unit_id: str
     tenant_id: Optional[str] = None
     description: str
     image_url: Optional[str] = None
     status: MaintenanceStatus
     assigned_to: Optional[str] = None
     created_at: datetime
     updated_at: datetime
     version: int

     # Related data
     unit_number: Optional[str] = None
     property_name: Optional[str] = None

     model_config = ConfigDict(from_attributes=True)
