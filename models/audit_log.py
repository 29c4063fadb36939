# models/audit_log.py
"""
AuditLog model - append-only record of who changed what.

old_value / new_value hold JSON snapshots of the entity before and after
the mutation (either may be null). Rows are never updated or deleted.
"""
from sqlalchemy import Column, String, DateTime, JSON, ForeignKey, func
from sqlalchemy.orm import relationship
from .base import Base, IdMixin, utcnow


class AuditLog(IdMixin, Base):
     __tablename__ = "audit_logs"

     user_id = Column(String(32), ForeignKey("users.id"), nullable=True, index=True)
     action = Column(String(50), nullable=False)
     entity_type = Column(String(50), nullable=False, index=True)
     entity_id = Column(String(32), nullable=True)
     old_value = Column(JSON, nullable=True)
     new_value = Column(JSON, nullable=True)
     created_at = Column(DateTime, default=utcnow, server_default=func.now(), nullable=False, index=True)

     user = relationship("User", back_populates="audit_entries")

     def __repr__(self):
          return f"<AuditLog(id={self.id}, action='{self.action}', entity_type='{self.entity_type}')>"
