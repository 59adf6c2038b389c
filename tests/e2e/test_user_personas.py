"""
E2E tests for user personas covering every risk tier.

Each persona is submitted through POST /v1/profiles/analyze and then read
back through the budget and debt endpoints.

User personas:
- retiree: low spending, no debt, age 65 - very_low expected
- steady_mid_career: modest spending, age 45 - low expected
- stretched_family: spending close to income - medium expected
- gig_worker: spending above income - high expected
- over_indebted: spending and debt each above income - very_high expected
- young_aggressive: low spending, age 25, aggressive growth goal - high expected
"""

import pytest
from fastapi.testclient import TestClient


def persona(name, age, income, spending, debt_payment=0, goals=None) -> dict:
    return {
        "name": name,
        "age": age,
        "goals": goals or [],
        "income": {"salary": income},
        "debts": [{"name": "Loan", "interest_rate": 12.5, "monthly_payment": debt_payment}] if debt_payment else [],
        "transaction_aggregates": [{"category": "Living", "total_amount": spending, "month": "October"}],
        "recurring_merchants": [],
        "pay_dates": [],
        "session_context": {},
    }


def analyze(client: TestClient, payload: dict) -> dict:
    response = client.post("/v1/profiles/analyze", json=payload)
    assert response.status_code == 200
    return response.json()


@pytest.mark.integration
def test_retiree_very_low(client: TestClient):
    """
    retiree: 10% spending, no debt, age 65
    Expected: base low reduced to very_low; capital preservation cannot go lower
    """
    data = analyze(
        client,
        persona("Retiree", 65, 30000, 3000, goals=[{"name": "capital preservation", "amount": 0}]),
    )

    assert data["risk_tolerance"] == "very_low"
    assert data["risk_recommendations"][0]["title"] == "Prioritize Capital Preservation"
    assert data["goal_recommendations"][0]["title"] == "Prioritize Low-Risk, Stable Investments"
    assert data["focus_debt"] is None


@pytest.mark.integration
def test_steady_mid_career_low(client: TestClient):
    data = analyze(client, persona("Steady", 45, 40000, 12000, debt_payment=4000))

    assert data["risk_tolerance"] == "low"
    assert [r["title"] for r in data["risk_recommendations"]] == [
        "Consider High-Yield Savings or CDs",
        "Explore Conservative Mutual Funds",
    ]


@pytest.mark.integration
def test_stretched_family_medium(client: TestClient):
    """
    stretched_family: spending 90% of income, small debt
    Expected: medium with no surplus after the 10% reserve
    """
    data = analyze(client, persona("Stretched", 45, 10000, 9000, debt_payment=500))

    assert data["risk_tolerance"] == "medium"
    assert data["has_surplus"] is False


@pytest.mark.integration
def test_gig_worker_high(client: TestClient):
    data = analyze(client, persona("Gig", 40, 8000, 9000, debt_payment=1000))

    assert data["risk_tolerance"] == "high"
    assert data["risk_recommendations"][0]["title"] == "Focus on Debt Reduction"
    assert data["focus_debt"]["name"] == "Loan"


@pytest.mark.integration
def test_over_indebted_very_high(client: TestClient):
    """
    over_indebted: spending and debt payments each exceed income
    Expected: very_high, and the budget leaves nothing to allocate
    """
    data = analyze(client, persona("Indebted", 45, 1000, 1500, debt_payment=1200))

    assert data["risk_tolerance"] == "very_high"
    first = data["risk_recommendations"][0]
    assert first["title"] == "Seek Professional Financial Counseling"
    assert first["confidence"] == 0.95

    budget = client.get("/v1/budget").json()
    assert budget["emergency_fund_this_month"] == 0
    assert budget["goal_savings_plan"] == []


@pytest.mark.integration
def test_young_aggressive_high(client: TestClient):
    """
    young_aggressive: 20% spending, age 25, wants aggressive growth
    Expected: base low, bumped by age then by goal to high
    """
    data = analyze(
        client,
        persona("Young", 25, 50000, 10000, goals=[{"name": "aggressive growth", "amount": 0}]),
    )

    assert data["risk_tolerance"] == "high"
    assert data["goal_recommendations"][0]["title"] == "Explore Higher-Risk Investments"

    debts = client.get("/v1/debts/strategy").json()
    assert debts["profiles"][0]["message"] == "No debts found in this profile."
