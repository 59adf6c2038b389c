"""Unit tests for the budget waterfall allocator and pay-date prediction"""

import pytest
from datetime import date
from finwell_gateway.domain.models import (
    Debt,
    FinancialProfile,
    Goal,
    IncomeSource,
    PayDate,
    RecurringMerchant,
    TransactionAggregate,
)
from finwell_gateway.domain.budget import (
    allocate_budget,
    build_budget_report,
    predict_pay_dates,
    top_spending_categories,
)

TODAY = date(2026, 11, 15)


def make_profile(income, spend=0.0, debt=0.0, goals=None) -> FinancialProfile:
    return FinancialProfile(
        name="Test",
        income=[IncomeSource("salary", income)],
        transaction_aggregates=[TransactionAggregate("Groceries", spend, "November")] if spend else [],
        debts=[Debt("Loan", debt)] if debt else [],
        goals=goals or [],
    )


def test_allocate_budget_waterfall():
    """
    income 10000, essentials 3000, buffer 1500 -> surplus 5500
    emergency target 9000 + goals 25000 = need 34000 -> ratio 5500/34000
    """
    profile = make_profile(10000, spend=2000, debt=1000, goals=[Goal("House", 20000), Goal("Travel", 5000)])

    plan = allocate_budget(profile, TODAY)

    assert plan.essential_spending == 3000
    assert plan.safety_buffer == pytest.approx(1500)
    assert plan.allocatable_surplus == pytest.approx(5500)
    assert plan.emergency_fund_target == 9000
    assert plan.emergency_fund_this_month == 1455.88

    house, travel = plan.goal_savings_plan
    assert (house.name, house.target, house.save_this_month, house.estimated_months) == ("House", 20000, 3235.29, 7)
    assert (travel.save_this_month, travel.estimated_months) == (808.82, 7)

    # Whole surplus is distributed, leaving only rounding dust
    assert plan.final_remaining == pytest.approx(0.01, abs=0.01)


def test_allocate_budget_no_surplus():
    profile = make_profile(1000, spend=900, goals=[Goal("House", 20000)])

    plan = allocate_budget(profile, TODAY)

    assert plan.allocatable_surplus < 0
    assert plan.emergency_fund_this_month == 0
    assert plan.goal_savings_plan == []


def test_allocate_budget_nothing_to_save_for():
    """No essentials and no goals: combined need is 0"""
    plan = allocate_budget(make_profile(10000), TODAY)

    assert plan.emergency_fund_target == 0
    assert plan.emergency_fund_this_month == 0
    assert plan.goal_savings_plan == []


def test_allocate_budget_never_exceeds_need():
    """A surplus far above the need funds each target exactly once"""
    profile = make_profile(100000, spend=1000, goals=[Goal("Car", 500)])

    plan = allocate_budget(profile, TODAY)

    assert plan.emergency_fund_this_month == 3000
    assert plan.goal_savings_plan[0].save_this_month == 500
    assert plan.goal_savings_plan[0].estimated_months == 1
    total_saved = plan.emergency_fund_this_month + plan.total_goal_savings
    assert total_saved <= plan.emergency_fund_target + 500


def test_allocate_budget_zero_goal_amount():
    profile = make_profile(10000, spend=1000, goals=[Goal("Someday", 0)])

    plan = allocate_budget(profile, TODAY)

    assert plan.goal_savings_plan[0].save_this_month == 0
    assert plan.goal_savings_plan[0].estimated_months == 0


def test_forecast_is_flat_over_three_months():
    plan = allocate_budget(make_profile(10000, spend=2000, debt=1000), TODAY)

    assert [f.month for f in plan.forecast] == ["November 2026", "December 2026", "January 2027"]
    assert all(f.income == 10000 and f.burn == 3000 and f.net == 7000 for f in plan.forecast)


def test_predict_pay_dates_salary_this_month():
    today = date(2026, 10, 19)
    pay_dates = [
        PayDate("2026-10-25", "Salary"),
        PayDate("2026-10-31", "monthly salary"),
        PayDate("2026-11-10", "Freelance"),
        PayDate("2026-10-05", "Bonus"),
    ]

    predicted = predict_pay_dates(pay_dates, today)

    assert predicted[0].predicted_next == date(2026, 11, 25)
    assert predicted[1].predicted_next == date(2026, 11, 30)  # clamped to month end
    assert predicted[2].predicted_next is None
    assert predicted[3].predicted_next is None
    assert predicted[2].date == date(2026, 11, 10)


def test_top_spending_categories_limit_and_order():
    aggregates = [
        TransactionAggregate(category, amount, "October")
        for category, amount in [("A", 100), ("B", 500), ("C", 300), ("D", 500), ("E", 50), ("F", 700)]
    ]

    top = top_spending_categories(aggregates)

    assert [t.category for t in top] == ["F", "B", "D", "C", "A"]


def test_build_budget_report(sample_profile):
    report = build_budget_report(sample_profile, date(2026, 10, 19))

    assert report.name == "Thandi"
    assert report.plan.essential_spending == 9000
    assert report.recurring_merchants[0] == RecurringMerchant("MTN Data Plan", 200, "weekly")
    assert report.top_categories[0].category == "Groceries"
    assert report.pay_dates[0].predicted_next == date(2026, 11, 25)
