# check_connections.py
from sqlalchemy import create_engine, text

from orchestrator.config.settings import get_database_config

print("=" * 60)
print("CHECKING CONNECTIONS")
print("=" * 60)

# PostgreSQL
try:
    engine = create_engine(get_database_config()["url"], pool_pre_ping=True)
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    print("✅ PostgreSQL: connected")
except Exception as e:
    print(f"❌ PostgreSQL: error - {e}")

print("=" * 60)
