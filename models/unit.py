# models/unit.py
import enum

from sqlalchemy import Column, String, Numeric, Enum, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class UnitStatus(str, enum.Enum):
     VACANT = "VACANT"
     OCCUPIED = "OCCUPIED"
     MAINTENANCE = "MAINTENANCE"


class Unit(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """
     Unit model - individual rentable unit within a property.
     tenant_id points at the current occupant, if any.
     """
     __tablename__ = "units"

     property_id = Column(String(32), ForeignKey("properties.id"), nullable=False, index=True)
     unit_number = Column(String(50), nullable=False)
     rent_amount = Column(Numeric(12, 2), default=0, nullable=False)
     status = Column(
          Enum(UnitStatus, name="unit_status", create_constraint=True),
          default=UnitStatus.VACANT,
          server_default=UnitStatus.VACANT.value,
          nullable=False,
     )
     tenant_id = Column(String(32), nullable=True)

     # Relationships
     property = relationship("Property", back_populates="units")
     occupant = relationship(
          "Tenant",
          primaryjoin="foreign(Unit.tenant_id) == Tenant.id",
          viewonly=True,
          uselist=False,
     )
     maintenance_tickets = relationship("MaintenanceTicket", back_populates="unit")

     def __repr__(self):
          return f"<Unit(id={self.id}, unit_number='{self.unit_number}', status='{self.status.value}')>"
