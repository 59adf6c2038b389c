"""Budget waterfall allocator - distributes monthly surplus across buffer, emergency fund and goals"""

import math
import re
from datetime import date
from typing import List

from finwell_gateway.domain.models import (
    AllocationPlan,
    BudgetReport,
    FinancialProfile,
    ForecastMonth,
    GoalSavings,
    PayDate,
    PredictedPayDate,
    RecurringMerchant,
    TransactionAggregate,
)
from finwell_gateway.domain.totals import debts_total, income_total, transactions_total
from finwell_gateway.utils.date_utils import add_months, future_month_label
from finwell_gateway.utils.number_utils import round_money

SAFETY_BUFFER_RATE = 0.15
EMERGENCY_FUND_MONTHS = 3
FORECAST_MONTHS = 3
TOP_CATEGORY_COUNT = 5

_SALARY_PATTERN = re.compile(r"salary", re.IGNORECASE)


def allocate_budget(profile: FinancialProfile, today: date | None = None) -> AllocationPlan:
    """
    Waterfall allocation for one month.

    Steps:
    1. Essentials = tracked transactions + minimum debt payments
    2. Reserve a 15% safety buffer off total income
    3. Emergency fund target = 3 months of essentials
    4. Split what is left proportionally between the emergency fund and
       goals, never funding any of them beyond its own target
    5. Flat 3-month forecast: every month repeats this month's figures

    With no surplus (or nothing to save for) the emergency fund contribution
    is 0 and the goal plan is empty.
    """
    total_income = income_total(profile)
    essential_spending = transactions_total(profile) + debts_total(profile)
    remaining = total_income - essential_spending

    safety_buffer = total_income * SAFETY_BUFFER_RATE
    allocatable_surplus = remaining - safety_buffer

    emergency_fund_target = essential_spending * EMERGENCY_FUND_MONTHS
    combined_need = emergency_fund_target + sum(g.amount for g in profile.goals)

    emergency_fund_this_month = 0.0
    goal_savings_plan: List[GoalSavings] = []

    if allocatable_surplus > 0 and combined_need > 0:
        available_ratio = allocatable_surplus / combined_need

        emergency_fund_this_month = round_money(
            min(emergency_fund_target, emergency_fund_target * available_ratio)
        )

        for goal in profile.goals:
            this_month = min(goal.amount, goal.amount * available_ratio)
            goal_savings_plan.append(
                GoalSavings(
                    name=goal.name,
                    target=goal.amount,
                    save_this_month=round_money(this_month),
                    estimated_months=math.ceil(goal.amount / (this_month or 1)),
                )
            )

    # Flat forecast: no compounding, no carried balance
    net = total_income - essential_spending
    forecast = [
        ForecastMonth(
            month=future_month_label(offset, today),
            income=total_income,
            burn=essential_spending,
            net=net,
        )
        for offset in range(FORECAST_MONTHS)
    ]

    return AllocationPlan(
        total_income=total_income,
        essential_spending=essential_spending,
        safety_buffer=safety_buffer,
        allocatable_surplus=allocatable_surplus,
        emergency_fund_target=emergency_fund_target,
        emergency_fund_this_month=emergency_fund_this_month,
        goal_savings_plan=goal_savings_plan,
        forecast=forecast,
    )


def predict_pay_dates(pay_dates: List[PayDate], today: date | None = None) -> List[PredictedPayDate]:
    """
    Salary paid this calendar month is predicted to recur on the same day
    next month; every other pay date is reported as-is.
    """
    today = today or date.today()
    predicted = []
    for pay in pay_dates:
        paid_on = date.fromisoformat(pay.date[:10])
        is_this_month = paid_on.month == today.month and paid_on.year == today.year
        next_date = None
        if is_this_month and _SALARY_PATTERN.search(pay.category):
            next_date = add_months(paid_on, 1)
        predicted.append(PredictedPayDate(category=pay.category, date=paid_on, predicted_next=next_date))
    return predicted


def top_spending_categories(
    aggregates: List[TransactionAggregate], limit: int = TOP_CATEGORY_COUNT
) -> List[TransactionAggregate]:
    """Largest categories first; equal totals keep their input order"""
    return sorted(aggregates, key=lambda t: t.total_amount, reverse=True)[:limit]


def sorted_recurring_merchants(merchants: List[RecurringMerchant]) -> List[RecurringMerchant]:
    return sorted(merchants, key=lambda m: m.amount, reverse=True)


def build_budget_report(profile: FinancialProfile, today: date | None = None) -> BudgetReport:
    """Main entry point for budget analysis of a single stored profile"""
    return BudgetReport(
        profile_id=profile.id,
        name=profile.name,
        plan=allocate_budget(profile, today),
        pay_dates=predict_pay_dates(profile.pay_dates, today),
        top_categories=top_spending_categories(profile.transaction_aggregates),
        recurring_merchants=sorted_recurring_merchants(profile.recurring_merchants),
    )
