"""
Database Connection and Durable Settings Store

This module handles the SQLAlchemy connection used by the API and
provides the durable key-value store that holds the demo-mode flag.

Features:
- SQLite by default, any SQLAlchemy URL via DATABASE_URL
- Short-lived session context manager
- Key-value settings table (app_settings)
- Health checking and table creation on startup
"""

import os
import logging
from datetime import datetime
from typing import Optional, Dict, Any
from contextlib import contextmanager

from sqlalchemy import create_engine, text, Column, String, DateTime
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from core.demo_mode import DEFAULT_STATE_KEY, TRUTHY_SENTINEL, DemoStateUnavailableError

logger = logging.getLogger(__name__)

# =========================================
# Database Configuration
# =========================================

def get_database_url() -> str:
    """Get database URL from environment."""
    return os.getenv("DATABASE_URL", "sqlite:///./brewos_demo.db")


def get_demo_state_key() -> str:
    """Get the settings key that holds the demo flag."""
    return os.getenv("DEMO_STATE_KEY", DEFAULT_STATE_KEY)


def build_engine(url: str) -> Engine:
    """Create an engine with options suited to the backend."""
    echo = os.getenv("SQL_ECHO", "false").lower() == "true"

    if url.startswith("sqlite"):
        # FastAPI runs sync dependencies in a threadpool
        return create_engine(url, connect_args={"check_same_thread": False}, echo=echo)

    return create_engine(
        url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before use
        echo=echo
    )


engine = build_engine(get_database_url())

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for ORM models
Base = declarative_base()


class AppSetting(Base):
    """Durable application setting (one row per key)."""
    __tablename__ = "app_settings"

    key = Column(String(100), primary_key=True)
    value = Column(String(255), nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


# =========================================
# Session Management
# =========================================

@contextmanager
def get_db_session(session_factory=None):
    """
    Context manager for database sessions.

    Usage:
        with get_db_session() as db:
            db.execute(query)
    """
    db = (session_factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


# =========================================
# Demo Flag Store
# =========================================

class SqlDemoStateStore:
    """
    Durable demo flag backed by the app_settings table.

    The flag is a row holding the string "true"; clearing deletes the
    row. Every operation uses its own short session so the store can
    be shared between requests. SQLAlchemy errors are re-raised as
    DemoStateUnavailableError, which the controller treats as
    "inactive".
    """

    def __init__(self, session_factory=None, key: Optional[str] = None):
        self.session_factory = session_factory or SessionLocal
        self.key = key or get_demo_state_key()

    def get(self) -> bool:
        try:
            with get_db_session(self.session_factory) as db:
                setting = db.get(AppSetting, self.key)
                return setting is not None and setting.value == TRUTHY_SENTINEL
        except SQLAlchemyError as e:
            logger.error(f"Failed to read demo flag: {e}")
            raise DemoStateUnavailableError(str(e)) from e

    def set(self) -> None:
        try:
            with get_db_session(self.session_factory) as db:
                setting = db.get(AppSetting, self.key)
                if setting is None:
                    db.add(AppSetting(key=self.key, value=TRUTHY_SENTINEL))
                else:
                    setting.value = TRUTHY_SENTINEL
        except SQLAlchemyError as e:
            logger.error(f"Failed to write demo flag: {e}")
            raise DemoStateUnavailableError(str(e)) from e

    def clear(self) -> None:
        try:
            with get_db_session(self.session_factory) as db:
                setting = db.get(AppSetting, self.key)
                if setting is not None:
                    db.delete(setting)
        except SQLAlchemyError as e:
            logger.error(f"Failed to clear demo flag: {e}")
            raise DemoStateUnavailableError(str(e)) from e


# =========================================
# Utility Functions
# =========================================

def check_database_health(bind: Optional[Engine] = None) -> Dict[str, Any]:
    """
    Check database health and return status.

    Returns:
        Dictionary with health status information
    """
    bind = bind or engine
    try:
        with bind.connect() as conn:
            conn.execute(text("SELECT 1"))
            settings_table_exists = bind.dialect.has_table(conn, AppSetting.__tablename__)

        return {
            "status": "healthy",
            "connected": True,
            "backend": bind.dialect.name,
            "settings_table_exists": settings_table_exists
        }

    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        return {
            "status": "unhealthy",
            "connected": False,
            "error": str(e)
        }


def init_database(bind: Optional[Engine] = None) -> None:
    """
    Create the settings table if it doesn't exist.

    This is called on application startup to ensure
    the database schema is ready.
    """
    try:
        Base.metadata.create_all(bind=bind or engine)
        logger.info("Database tables verified")
    except SQLAlchemyError as e:
        logger.error(f"Database initialization failed: {e}")
        raise
