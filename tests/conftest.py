"""Pytest fixtures for testing"""

import os

# Must be set before coconut_ledger.config is imported. The app's own engine
# never connects in tests because get_db is overridden below.
os.environ.setdefault("DATABASE_URL", "sqlite:///./coconut_ledger_test.db")

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from coconut_ledger.api.main import create_app
from coconut_ledger.infrastructure.database.models import Base
from coconut_ledger.infrastructure.database.session import get_db
from coconut_ledger.domain.models import Record


# In-memory test database shared by every connection
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


def _make_record(
    record_id: str,
    day: date,
    purchase_price: float,
    sold_quantity: int,
    sell_price: float,
) -> Record:
    return Record(
        id=record_id,
        date=day,
        purchase_price=purchase_price,
        sold_quantity=sold_quantity,
        sell_price=sell_price,
    )


@pytest.fixture
def sample_records() -> list[Record]:
    """
    Two January entries and one February entry.

    Profits: jan5 = 500, jan20 = 200, feb1 = 240
    """
    return [
        _make_record("jan5", date(2024, 1, 5), 10, 100, 15),
        _make_record("jan20", date(2024, 1, 20), 12, 50, 16),
        _make_record("feb1", date(2024, 2, 1), 11, 80, 14),
    ]


@pytest.fixture
def make_record():
    """Factory for Record values: make_record(id, date, purchase, qty, sell)"""
    return _make_record
