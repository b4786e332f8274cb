"""Pytest fixtures for testing"""

import pytest
from datetime import datetime
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from hitsort_dashboard.api.main import create_app
from hitsort_dashboard.infrastructure.database.models import Base
from hitsort_dashboard.infrastructure.database.session import get_db
from hitsort_dashboard.domain.models import NOT_SOLD, CardRecord, ExpenditureRecord, PaymentType


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
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


@pytest.fixture
def sample_cards() -> list[CardRecord]:
    """Card snapshot in record-store order (not sorted by card number)"""
    sold_at = datetime(2025, 3, 7, 18, 30)
    return [
        CardRecord(card_id="HS03", seller_name="Pandu", number_of_games=2, amount=80,
                   payment_type=PaymentType.UPI, date=sold_at),
        CardRecord(card_id="HS01", seller_name="Sahith", number_of_games=1, amount=40,
                   payment_type=PaymentType.CASH, date=sold_at),
        CardRecord(card_id="HS10", seller_name=NOT_SOLD, number_of_games=0, amount=0),
        CardRecord(card_id="HS02", seller_name="Sahith", number_of_games=2, amount=70,
                   payment_type=PaymentType.UPI, date=sold_at),
        CardRecord(card_id="HS04", seller_name=None, number_of_games=1, amount=0),
        CardRecord(card_id="HS05", seller_name="Manoj", number_of_games=1, amount=50,
                   payment_type=PaymentType.REFERRED),
    ]


@pytest.fixture
def sample_expenditures() -> list[ExpenditureRecord]:
    return [
        ExpenditureRecord(used_for="Stall", amount=500, used_by="Anand"),
        ExpenditureRecord(used_for="Items", amount=120, used_by="Pavan"),
        ExpenditureRecord(used_for="Prize", amount=300, used_by="Anand"),
        ExpenditureRecord(used_for="Cards", amount=200, used_by="Pavan"),
    ]
