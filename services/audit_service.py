# services/audit_service.py
"""
Audit sink - append-only log of mutations with before/after snapshots.

log_audit() only adds the row to the session; it is committed (or rolled
back) together with the change it describes.
"""
import enum
from datetime import date, datetime
from decimal import Decimal
from typing import Any, List, Optional

from sqlalchemy import inspect
from sqlalchemy.orm import Session

from models import AuditLog, User


def _json_safe(value: Any) -> Any:
     if isinstance(value, enum.Enum):
          return value.value
     if isinstance(value, Decimal):
          return float(value)
     if isinstance(value, (datetime, date)):
          return value.isoformat()
     if isinstance(value, dict):
          return {k: _json_safe(v) for k, v in value.items()}
     if isinstance(value, (list, tuple)):
          return [_json_safe(v) for v in value]
     return value


def snapshot(obj, exclude: tuple = ("password",)) -> dict:
     """Column values of an ORM row as a JSON-safe dict."""
     mapper = inspect(obj).mapper
     return {
          attr.key: _json_safe(getattr(obj, attr.key))
          for attr in mapper.column_attrs
          if attr.key not in exclude
     }


def log_audit(
     db: Session,
     user_id: Optional[str],
     action: str,
     entity_type: str,
     entity_id: Optional[str],
     old_value: Any = None,
     new_value: Any = None,
) -> AuditLog:
     entry = AuditLog(
          user_id=user_id,
          action=action,
          entity_type=entity_type,
          entity_id=entity_id,
          old_value=_json_safe(old_value),
          new_value=_json_safe(new_value),
     )
     db.add(entry)
     return entry


def list_audit_logs(
     db: Session,
     owner_id: str,
     entity_type: Optional[str] = None,
     entity_id: Optional[str] = None,
     limit: int = 100,
) -> List[AuditLog]:
     """Entries made by any user of the given account, newest first."""
     query = (
          db.query(AuditLog)
          .join(User, AuditLog.user_id == User.id)
          .filter(User.owner_id == owner_id)
     )
     if entity_type:
          query = query.filter(AuditLog.entity_type == entity_type.upper())
     if entity_id:
          query = query.filter(AuditLog.entity_id == entity_id)
     return query.order_by(AuditLog.created_at.desc()).limit(limit).all()
