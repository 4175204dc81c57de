# orchestrator/database.py
"""
Database configuration.
"""

from typing import Generator
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session

from orchestrator.config.settings import get_database_config
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)

database_config = get_database_config()
DATABASE_URL = database_config["url"]

# Create engine
engine = create_engine(
    DATABASE_URL,
    echo=database_config["echo"],
    pool_pre_ping=True,
    pool_size=database_config["pool_size"],
    max_overflow=database_config["max_overflow"],
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """
    Get database session dependency.

    Yields:
        SQLAlchemy Session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    from orchestrator.models import Base
    Base.metadata.create_all(bind=engine)
    logger.info("database_tables_initialized")

    with engine.connect() as conn:
        result = conn.execute(text("SELECT version()"))
        logger.info("database_connected", version=result.fetchone()[0])
