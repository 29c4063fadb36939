# models/property.py
from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class Property(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """
     Property model - a building or compound owned by a landlord account.
     """
     __tablename__ = "properties"

     owner_id = Column(String(32), nullable=False, index=True)
     name = Column(String(255), nullable=False)
     address = Column(String(500), nullable=False)
     total_units = Column(Integer, nullable=False)
     currency = Column(String(3), default="TZS", server_default="TZS", nullable=False)
     description = Column(Text, nullable=True)

     # Relationships
     units = relationship("Unit", back_populates="property", order_by="Unit.created_at")
     tenants = relationship("Tenant", back_populates="property")
     expenses = relationship("Expense", back_populates="property")

     def __repr__(self):
          return f"<Property(id={self.id}, name='{self.name}')>"
