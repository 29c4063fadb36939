# models/expense.py
import enum

from sqlalchemy import Column, String, Numeric, Date, Text, Enum, ForeignKey
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, TimestampMixin, SoftDeleteMixin


class ExpenseCategory(str, enum.Enum):
     MAINTENANCE = "MAINTENANCE"
     UTILITY = "UTILITY"
     REPAIR = "REPAIR"
     VENDOR = "VENDOR"
     OTHER = "OTHER"


class Expense(IdMixin, TimestampMixin, SoftDeleteMixin, Base):
     """Money spent on a property."""
     __tablename__ = "expenses"

     property_id = Column(String(32), ForeignKey("properties.id"), nullable=False, index=True)
     category = Column(Enum(ExpenseCategory, name="expense_category", create_constraint=True), nullable=False)
     amount = Column(Numeric(12, 2), nullable=False)
     date = Column(Date, nullable=False, index=True)
     notes = Column(Text, nullable=True)
     receipt_url = Column(String(500), nullable=True)
     created_by = Column(String(32), ForeignKey("users.id"), nullable=False)

     property = relationship("Property", back_populates="expenses")

     def __repr__(self):
          return f"<Expense(id={self.id}, category='{self.category.value}', amount={self.amount})>"
