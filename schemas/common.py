# schemas/common.py
from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
     message: str


class CreatedResponse(BaseModel):
     """Returned by POST endpoints that create a row."""
     id: str


class VersionedMessageResponse(BaseModel):
     message: str
     version: int = Field(..., description="Row version after the update")


class ErrorResponse(BaseModel):
     """Body of every non-2xx response."""
     error: str
