# schemas/auth.py
"""
Pydantic schemas for registration, login and team members.

The dashboard speaks camelCase for fullName, so those fields accept
and emit the alias while the rest of the API stays snake_case.
"""
from datetime import datetime
from typing import Literal
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from models.user import UserRole


def _normalize_email(value: str) -> str:
     value = value.strip().lower()
     if "@" not in value or value.startswith("@") or value.endswith("@"):
          raise ValueError("Invalid email address")
     return value


class RegisterRequest(BaseModel):
     email: str = Field(..., max_length=255)
     password: str = Field(..., min_length=6, max_length=72)
     full_name: str = Field(
          ...,
          min_length=1,
          max_length=200,
          validation_alias=AliasChoices("fullName", "full_name"),
     )

     @field_validator("email")
     @classmethod
     def check_email(cls, value: str) -> str:
          return _normalize_email(value)

     model_config = ConfigDict(
          json_schema_extra={
               "example": {
                    "email": "amina@example.com",
                    "password": "s3cret!",
                    "fullName": "Amina Juma",
               }
          }
     )


class TeamMemberCreate(RegisterRequest):
     """A manager or caretaker added to a landlord's account."""
     role: Literal["MANAGER", "CARETAKER"]


class LoginRequest(BaseModel):
     email: str
     password: str

     @field_validator("email")
     @classmethod
     def lower_email(cls, value: str) -> str:
          return value.strip().lower()


class UserResponse(BaseModel):
     id: str
     email: str
     full_name: str = Field(
          ...,
          validation_alias=AliasChoices("fullName", "full_name"),
          serialization_alias="fullName",
     )
     role: UserRole

     model_config = ConfigDict(from_attributes=True)


class TeamMemberResponse(UserResponse):
     owner_id: str
     created_at: datetime


class LoginResponse(BaseModel):
     token: str
     user: UserResponse
