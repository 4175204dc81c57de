# init_db.py
"""
Initialize database tables.
"""

import os
import sys

# Add the current directory to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from orchestrator.database import init_db, engine
from orchestrator.utils.logging import get_logger

logger = get_logger(__name__)

if __name__ == "__main__":
    logger.info("initializing_database")
    init_db()

    # Verify tables created
    from sqlalchemy import inspect
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    logger.info("database_initialization_complete", tables=tables)
