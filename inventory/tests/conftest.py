"""
Pytest configuration and fixtures
"""
import os

# Settings are read at import time; the app engine is never used by tests
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("APP_ENV", "local")
os.environ["TZ"] = "Asia/Kolkata"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlalchemy.engine import Engine
from inventory.main import app
from inventory.db.base import Base
from inventory.core.deps import get_db

# Import all models to ensure they're registered with Base.metadata
from inventory.models import (  # noqa: F401
    Company,
    Location,
    Department,
    Employee,
    Vendor,
    System,
    Mobile,
    Software,
    SystemSoftware,
    Request,
    RequestComment,
    AuditLog,
)


# Use in-memory SQLite for testing
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


# Enable foreign keys for SQLite
@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Test client fixture with database override"""
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def company(db):
    company = Company(code="ACME", name="Acme Industries")
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture
def other_company(db):
    company = Company(code="GLOBEX", name="Globex Corporation")
    db.add(company)
    db.commit()
    db.refresh(company)
    return company


@pytest.fixture
def location(db, company):
    location = Location(code="BLR", name="Bangalore HQ", city="Bangalore", company_id=company.id)
    db.add(location)
    db.commit()
    db.refresh(location)
    return location


@pytest.fixture
def employee(db, company, location):
    employee = Employee(
        employee_code="EMP001",
        first_name="Asha",
        last_name="Rao",
        email="asha.rao@acme.com",
        company_id=company.id,
        location_id=location.id,
    )
    db.add(employee)
    db.commit()
    db.refresh(employee)
    return employee
