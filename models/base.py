# models/base.py
import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase, declared_attr
from sqlalchemy import Column, DateTime, Integer, String, func


def generate_id() -> str:
     """Opaque 32-char hex primary key."""
     return uuid.uuid4().hex


def utcnow() -> datetime:
     """Naive UTC timestamp, matching what func.now() stores."""
     return datetime.now(timezone.utc).replace(tzinfo=None)


class Base(DeclarativeBase):
     """
     Base class for all SQLAlchemy models.
     Provides common configuration and mixins.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: AuditLog -> audit_logs
          """
          import re
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'


class IdMixin:
     id = Column(String(32), primary_key=True, default=generate_id)


class TimestampMixin:
     """created_at / updated_at plus the optimistic-concurrency counter."""
     created_at = Column(DateTime, default=utcnow, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, default=utcnow, server_default=func.now(), onupdate=utcnow, nullable=False)
     version = Column(Integer, default=1, server_default="1", nullable=False)

     def bump_version(self) -> int:
          self.version = (self.version or 1) + 1
          return self.version


class SoftDeleteMixin:
     deleted_at = Column(DateTime, nullable=True)

     @property
     def is_deleted(self) -> bool:
          return self.deleted_at is not None

     def soft_delete(self) -> None:
          self.deleted_at = utcnow()
