"""Unit tests for the linear cash-flow projector"""

import pytest
from finwell_gateway.domain.models import (
    Debt,
    FinancialProfile,
    Goal,
    IncomeSource,
    RecurringMerchant,
    TransactionAggregate,
)
from finwell_gateway.domain.cashflow import forecast_cash_flow, project_profile, select_profiles


@pytest.fixture
def profile() -> FinancialProfile:
    return FinancialProfile(
        id=7,
        name="Ayanda",
        age=41,
        goals=[Goal("Travel", 15000)],
        income=[
            IncomeSource("salary", 20000),
            IncomeSource("freelance", 5000),
            IncomeSource("rental", 3000),  # not a projected income source
        ],
        debts=[Debt("Car Loan", 2000)],
        transaction_aggregates=[TransactionAggregate("Groceries", 4000, "October")],
        recurring_merchants=[
            RecurringMerchant("Gym", 200, "monthly"),
            RecurringMerchant("Data", 100, "weekly"),
            RecurringMerchant("Cleaner", 50, "biweekly"),
        ],
    )


def test_project_profile_monthly_totals(profile):
    result = project_profile(profile, months=3)

    summary = result.projection[0].summary
    assert summary.income == 25000
    assert summary.expenses == 4000 + 2000 + 200 + 400 + 100
    assert summary.net_monthly == 18300
    assert all(month.summary == summary for month in result.projection)


def test_projection_is_linear(profile):
    result = project_profile(profile, months=6)

    assert len(result.projection) == 6
    for i, month in enumerate(result.projection, start=1):
        assert month.month == f"Month {i}"
        assert month.projected_balance == month.summary.net_monthly * i
        assert month.cumulative_net_flow == month.projected_balance


def test_projection_carries_profile_identity(profile):
    result = project_profile(profile)

    assert (result.user_id, result.name, result.age, result.goals) == (7, "Ayanda", 41, ["Travel"])
    assert len(result.projection) == 6


def test_projection_negative_net():
    profile = FinancialProfile(
        name="Short",
        income=[IncomeSource("salary", 1000)],
        transaction_aggregates=[TransactionAggregate("Rent", 1500, "October")],
    )

    result = project_profile(profile, months=2)

    assert [m.projected_balance for m in result.projection] == [-500, -1000]


def test_projection_rejects_non_positive_months(profile):
    with pytest.raises(ValueError):
        project_profile(profile, months=0)


def test_select_profiles_filters_by_id(profile):
    other = FinancialProfile(name="Other", id=8)

    assert select_profiles([profile, other], [8]) == [other]
    assert select_profiles([profile, other], None) == [profile, other]
    assert select_profiles([profile, other], []) == [profile, other]
    assert select_profiles([profile, other], [99]) == []


def test_forecast_cash_flow_many_profiles(profile):
    other = FinancialProfile(name="Empty", id=8)

    results = forecast_cash_flow([profile, other], months=2)

    assert [r.name for r in results] == ["Ayanda", "Empty"]
    assert results[1].projection[1].projected_balance == 0
