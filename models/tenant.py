# models/tenant.py
from sqlalchemy import Column, String, Numeric, Date, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class Tenant(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """
     Tenant model - a person renting a unit (or awaiting one) in a property.
     """
     __tablename__ = "tenants"

     property_id = Column(String(32), ForeignKey("properties.id"), nullable=False, index=True)
     unit_id = Column(String(32), nullable=True)

     # Personal info
     full_name = Column(String(200), nullable=False)
     phone = Column(String(50), nullable=False)
     email = Column(String(255), nullable=True)
     national_id = Column(String(100), nullable=True)

     # Lease
     lease_start = Column(Date, nullable=True)
     lease_end = Column(Date, nullable=True)
     rent_amount = Column(Numeric(12, 2), nullable=False)
     security_deposit = Column(Numeric(12, 2), nullable=False)

     # Relationships
     property = relationship("Property", back_populates="tenants")
     unit = relationship(
          "Unit",
          primaryjoin="foreign(Tenant.unit_id) == Unit.id",
          viewonly=True,
          uselist=False,
     )
     payments = relationship("Payment", back_populates="tenant", order_by="Payment.payment_date")

     def __repr__(self):
          return f"<Tenant(id={self.id}, name='{self.full_name}')>"
