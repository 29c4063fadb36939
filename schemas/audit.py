# schemas/audit.py
from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict


class AuditLogResponse(BaseModel):
     id: str
     user_id: Optional[str] = None
     action: str
     entity_type: str
     entity_id: Optional[str] = None
     old_value: Optional[Any] = None
     new_value: Optional[Any] = None
     created_at: datetime

     model_config = ConfigDict(from_attributes=True)
