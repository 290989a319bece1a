"""
Database session management
"""
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from inventory.core.config import settings
from inventory.db.base import Base
import inventory.models  # noqa: F401  (registers all tables on Base.metadata)

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=False,
    connect_args=connect_args,
)

if settings.is_sqlite:
    # Deleting a row that is still referenced must fail, as it does on server databases
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def init_db() -> None:
    """Create all tables for SQLite deployments; server databases are provisioned by the operator"""
    if engine.dialect.name == "sqlite":
        Base.metadata.create_all(bind=engine)
