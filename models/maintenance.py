# models/maintenance.py
import enum

from sqlalchemy import Column, String, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class MaintenanceStatus(str, enum.Enum):
     PENDING = "PENDING"
     IN_PROGRESS = "IN_PROGRESS"
     COMPLETED = "COMPLETED"


class MaintenanceTicket(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """
     Maintenance ticket raised against a unit.
     Maps to the 'maintenance' table.
     """
     __tablename__ = "maintenance"

     unit_id = Column(String(32), ForeignKey("units.id"), nullable=False, index=True)
     tenant_id = Column(String(32), nullable=True)
     description = Column(Text, nullable=False)
     image_url = Column(String(500), nullable=True)
     status = Column(
          Enum(MaintenanceStatus, name="maintenance_status", create_constraint=True),
          default=MaintenanceStatus.PENDING,
          server_default=MaintenanceStatus.PENDING.value,
          nullable=False,
     )
     assigned_to = Column(String(200), nullable=True)

     unit = relationship("Unit", back_populates="maintenance_tickets")

     def __repr__(self):
          return f"<MaintenanceTicket(id={self.id}, unit_id={self.unit_id}, status='{self.status.value}')>"
