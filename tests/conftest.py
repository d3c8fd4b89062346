"""Shared test fixtures."""

import os

os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from datetime import date, datetime
from decimal import Decimal

from finance_api.database import Base
from finance_api.dependencies import get_db
from finance_api.main import app
from finance_api.models.transaction import Transaction
from finance_api.services.transaction_repository import TransactionRepository


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test using in-memory SQLite."""
    # Use StaticPool to ensure all connections use the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def repository(db_session):
    return TransactionRepository(db_session)


@pytest.fixture
def make_transaction(db_session):
    """Factory inserting a transaction row directly."""
    def _make(**overrides):
        values = {
            "description": "Groceries",
            "amount": Decimal("50.00"),
            "type": "expense",
            "category": "food",
            "date": date(2024, 1, 15),
        }
        values.update(overrides)
        txn = Transaction(**values)
        db_session.add(txn)
        db_session.commit()
        db_session.refresh(txn)
        return txn

    return _make


@pytest.fixture
def sample_transaction(make_transaction):
    """Create a sample expense transaction."""
    return make_transaction(
        description="Whole Foods",
        created_at=datetime(2024, 1, 15, 9, 30),
    )


@pytest.fixture
def transaction_payload():
    return {
        "description": "Salary",
        "amount": "1500.00",
        "type": "income",
        "category": "work",
        "date": "2024-02-01",
    }
