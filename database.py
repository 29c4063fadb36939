# database.py
"""
SQLAlchemy database connection and session management.

This module provides:
- Database engine configuration (SQLite file by default, MS SQL Server
  via pymssql when DB_SERVER is set, or any DATABASE_URL)
- Session factory for dependency injection
- Connection utilities

Usage:
     from database import get_session, engine

     # In FastAPI routes:
     @router.get("/items")
     def get_items(db: Session = Depends(get_session)):
          return db.query(Item).all()
     """
from contextlib import contextmanager
from typing import Generator
from urllib.parse import quote_plus

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool

import config
from utils.logging_config import get_logger

logger = get_logger("database")


def build_database_url() -> str:
     """
     Resolve the connection URL.

     Order: DATABASE_URL, then DB_SERVER/DB_* (mssql+pymssql),
     then the local SQLite file at DATABASE_PATH.
     """
     if config.DATABASE_URL:
          return config.DATABASE_URL

     if config.DB_SERVER:
          safe_user = quote_plus(config.DB_USER or "")
          safe_pass = quote_plus(config.DB_PASS or "")
          return (
               f"mssql+pymssql://{safe_user}:{safe_pass}@{config.DB_SERVER}:{config.DB_PORT}/{config.DB_NAME}"
          )

     return f"sqlite:///{config.DATABASE_PATH}"


DATABASE_URL = build_database_url()
IS_SQLITE = DATABASE_URL.startswith("sqlite")


def _create_engine(url: str):
     if url.startswith("sqlite"):
          kwargs = {"connect_args": {"check_same_thread": False}, "echo": config.SQL_ECHO}
          # In-memory SQLite lives as long as its connection, so share one.
          if url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url:
               kwargs["poolclass"] = StaticPool
          return create_engine(url, **kwargs)

     return create_engine(
          url,
          poolclass=QueuePool,
          pool_size=5,
          max_overflow=10,
          pool_timeout=30,
          pool_recycle=1800,  # Recycle connections after 30 minutes
          pool_pre_ping=True,
          echo=config.SQL_ECHO,
     )


# Create SQLAlchemy engine
engine = _create_engine(DATABASE_URL)


if IS_SQLITE:
     @event.listens_for(engine, "connect")
     def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
          """SQLite ignores FOREIGN KEY clauses unless asked per connection."""
          cursor = dbapi_connection.cursor()
          cursor.execute("PRAGMA foreign_keys=ON")
          cursor.close()


# Session factory
SessionLocal = sessionmaker(
     bind=engine,
     autocommit=False,
     autoflush=False,
     expire_on_commit=False,
)


def get_session() -> Generator[Session, None, None]:
     """
     FastAPI dependency that provides a database session.

     Usage:
          @router.get("/items")
          def get_items(db: Session = Depends(get_session)):
               return db.query(Item).all()

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


@contextmanager
def get_session_context() -> Generator[Session, None, None]:
     """
     Context manager for database sessions (for use outside FastAPI routes).

     Usage:
          with get_session_context() as db:
               users = db.query(User).all()

     Yields:
          Session: SQLAlchemy database session
     """
     session = SessionLocal()
     try:
          yield session
          session.commit()
     except Exception:
          session.rollback()
          raise
     finally:
          session.close()


def init_db() -> None:
     """
     Initialize database tables.

     Creates all tables defined in the models if they don't exist.
     For production, use Alembic migrations instead.
     """
     from models import Base
     Base.metadata.create_all(bind=engine)
     logger.info("Database tables ensured (%s)", engine.url.get_backend_name())


def drop_db() -> None:
     """Drop every table known to the models. Used by the test suite."""
     from models import Base
     Base.metadata.drop_all(bind=engine)


def check_connection() -> bool:
     """
     Test database connectivity.

     Returns:
          bool: True if connection successful, False otherwise
     """
     try:
          with engine.connect() as conn:
               conn.execute(text("SELECT 1"))
          return True
     except Exception as e:
          logger.error("Database connection failed: %s", e)
          return False
