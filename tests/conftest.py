"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from finwell_gateway.api.main import create_app
from finwell_gateway.infrastructure.database.models import Base
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.domain.models import (
    Debt,
    FinancialProfile,
    Goal,
    IncomeSource,
    PayDate,
    RecurringMerchant,
    TransactionAggregate,
)


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
def sample_profile() -> FinancialProfile:
    """Young salaried profile with a credit card and two goals"""
    return FinancialProfile(
        name="Thandi",
        age=28,
        goals=[Goal("Emergency Fund", 30000), Goal("Buy a House", 120000)],
        income=[IncomeSource("salary", 20000)],
        debts=[
            Debt("Car Loan", monthly_payment=2500, interest_rate=11.5),
            Debt("Credit Card", monthly_payment=1500, interest_rate=22.0),
        ],
        transaction_aggregates=[
            TransactionAggregate("Groceries", 3000, "October"),
            TransactionAggregate("Utilities", 1200, "October"),
            TransactionAggregate("Dining Out", 800, "October"),
        ],
        recurring_merchants=[
            RecurringMerchant("Netflix", 159.99, "monthly"),
            RecurringMerchant("MTN Data Plan", 200, "weekly"),
        ],
        pay_dates=[PayDate("2026-10-25", "Salary")],
    )


@pytest.fixture
def profile_payload() -> dict:
    """Request body for POST /v1/profiles/analyze"""
    return {
        "name": "Thandi",
        "age": 28,
        "goals": [{"name": "Emergency Fund", "amount": 30000}],
        "income": {"salary": 20000},
        "debts": [{"name": "Card", "interest_rate": 20, "monthly_payment": 6000}],
        "transaction_aggregates": [
            {"category": "Groceries", "total_amount": 3000, "month": "October"},
            {"category": "Transport", "total_amount": 2000, "month": "October"},
        ],
        "recurring_merchants": [{"name": "Spotify", "amount": 59.99, "frequency": "monthly"}],
        "pay_dates": [{"date": "2026-10-25", "category": "Salary"}],
        "session_context": {},
    }
