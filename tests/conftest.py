"""Pytest fixtures for testing"""

import pytest
from datetime import date, datetime, timezone
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from float_wallet.api.main import create_app
from float_wallet.api.dependencies import get_today, utc_now
from float_wallet.infrastructure.database.models import Base
from float_wallet.infrastructure.database.session import get_db
from float_wallet.domain.models import Card


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Fixed clock: day 21 of a 31-day month
TODAY = date(2025, 1, 21)
NOW = datetime(2025, 1, 21, 12, 0, tzinfo=timezone.utc)


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
def session_factory(db: Session) -> sessionmaker:
    """Opens further sessions on the test database, for interleaving writers"""
    return TestingSessionLocal


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database and a fixed clock"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    app.dependency_overrides[utc_now] = lambda: NOW
    return TestClient(app)


@pytest.fixture
def wallet_cards() -> list[Card]:
    """Obsidian 20/10, Solaris 5/25, Quantum 15/5"""
    return [
        Card(
            id="obsidian",
            bank_name="Apex Financial",
            card_name="Obsidian Tier",
            last_four_digits="4242",
            credit_limit_cents=8_000_000,
            current_usage_cents=2_200_000,
            statement_date=20,
            due_date=10,
        ),
        Card(
            id="solaris",
            bank_name="Meridian Trust",
            card_name="Solaris",
            last_four_digits="8931",
            credit_limit_cents=15_000_000,
            current_usage_cents=6_100_000,
            statement_date=5,
            due_date=25,
        ),
        Card(
            id="quantum",
            bank_name="Nexus Bank",
            card_name="Quantum",
            last_four_digits="1121",
            credit_limit_cents=20_000_000,
            current_usage_cents=4_500_000,
            statement_date=15,
            due_date=5,
        ),
    ]


@pytest.fixture
def card_payloads(wallet_cards: list[Card]) -> list[dict]:
    """Request bodies for POST /v1/cards matching wallet_cards"""
    return [
        {
            "bank_name": card.bank_name,
            "card_name": card.card_name,
            "last_four_digits": card.last_four_digits,
            "credit_limit_cents": card.credit_limit_cents,
            "current_usage_cents": card.current_usage_cents,
            "statement_date": card.statement_date,
            "due_date": card.due_date,
        }
        for card in wallet_cards
    ]
