# models/user.py
import enum

from sqlalchemy import Column, String, Enum, Index
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class UserRole(str, enum.Enum):
     """Roles gating write access."""
     LANDLORD = "LANDLORD"
     MANAGER = "MANAGER"
     CARETAKER = "CARETAKER"


class User(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """
     User model - central authentication table.

     A landlord's owner_id is its own id; team members (managers,
     caretakers) carry the owner_id of the landlord who added them.
     """
     __tablename__ = "users"

     email = Column(String(255), unique=True, nullable=False, index=True)
     password = Column(String(255), nullable=False)
     full_name = Column(String(200), nullable=False)
     role = Column(
          Enum(UserRole, name="user_role", create_constraint=True),
          default=UserRole.LANDLORD,
          server_default=UserRole.LANDLORD.value,
          nullable=False,
     )
     owner_id = Column(String(32), nullable=True)  # For multi-tenant isolation

     __table_args__ = (Index("ix_users_owner_id", "owner_id"),)

     audit_entries = relationship("AuditLog", back_populates="user")

     def __repr__(self):
          return f"<User(id={self.id}, email='{self.email}', role='{self.role.value}')>"
