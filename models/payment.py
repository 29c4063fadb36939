# models/payment.py
"""
Payment model - rent ledger. One row per payment received from a tenant.

balance_after_transaction is fixed at insert time from the amount due at
that moment minus the amount paid; rows are never edited afterwards.
"""
import enum

from sqlalchemy import Column, String, Numeric, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin


class PaymentMethod(str, enum.Enum):
     CASH = "CASH"
     BANK_TRANSFER = "BANK_TRANSFER"
     MOBILE_MONEY = "MOBILE_MONEY"
     CHEQUE = "CHEQUE"


class Payment(IdMixin, TimestampMixin, Base):
     """Append-only payment ledger entry."""
     __tablename__ = "payments"

     tenant_id = Column(String(32), ForeignKey("tenants.id"), nullable=False, index=True)
     property_id = Column(String(32), ForeignKey("properties.id"), nullable=False, index=True)
     unit_id = Column(String(32), ForeignKey("units.id"), nullable=False)

     amount_paid = Column(Numeric(12, 2), nullable=False)
     amount_due_at_time = Column(Numeric(12, 2), nullable=False)
     balance_after_transaction = Column(Numeric(12, 2), nullable=False)
     payment_date = Column(Date, nullable=False, index=True)
     method = Column(Enum(PaymentMethod, name="payment_method", create_constraint=True), nullable=False)
     late_fee = Column(Numeric(12, 2), default=0, server_default="0", nullable=False)
     reference_number = Column(String(100), nullable=True)
     created_by = Column(String(32), ForeignKey("users.id"), nullable=False)

     # Relationships
     tenant = relationship("Tenant", back_populates="payments")
     property = relationship("Property")
     unit = relationship("Unit")

     def __repr__(self):
          return f"<Payment(id={self.id}, tenant_id={self.tenant_id}, amount_paid={self.amount_paid})>"
