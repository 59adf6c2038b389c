"""Linear multi-month cash-flow projection"""

from typing import Iterable, List, Optional

from finwell_gateway.domain.models import (
    FinancialProfile,
    Projection,
    ProjectionMonth,
    ProjectionSummary,
)
from finwell_gateway.domain.totals import (
    debts_total,
    named_income_total,
    recurring_monthly_total,
    transactions_total,
)

DEFAULT_PROJECTION_MONTHS = 6


def project_profile(profile: FinancialProfile, months: int = DEFAULT_PROJECTION_MONTHS) -> Projection:
    """
    Project net cash flow for `months` months.

    Monthly expenses are tracked transactions + debt payments + recurring
    charges normalized to monthly. The model is linear: month i reports
    net_monthly * i for both the projected balance and the cumulative flow.
    There is no starting balance and no compounding.
    """
    if months < 1:
        raise ValueError("months must be a positive integer")

    total_income = named_income_total(profile)
    total_monthly_expenses = (
        transactions_total(profile)
        + debts_total(profile)
        + recurring_monthly_total(profile.recurring_merchants)
    )
    net_monthly = total_income - total_monthly_expenses
    summary = ProjectionSummary(income=total_income, expenses=total_monthly_expenses, net_monthly=net_monthly)

    projection = [
        ProjectionMonth(
            month=f"Month {i}",
            projected_balance=net_monthly * i,
            cumulative_net_flow=net_monthly * i,
            summary=summary,
        )
        for i in range(1, months + 1)
    ]

    return Projection(
        user_id=profile.id,
        name=profile.name,
        age=profile.age,
        goals=profile.goal_names,
        projection=projection,
    )


def select_profiles(
    profiles: Iterable[FinancialProfile], user_ids: Optional[List[int]] = None
) -> List[FinancialProfile]:
    """Keep profiles whose id is in user_ids; no ids (or an empty list) keeps all"""
    if not user_ids:
        return list(profiles)
    wanted = set(user_ids)
    return [p for p in profiles if p.id in wanted]


def forecast_cash_flow(
    profiles: Iterable[FinancialProfile],
    months: int = DEFAULT_PROJECTION_MONTHS,
    user_ids: Optional[List[int]] = None,
) -> List[Projection]:
    """Main entry point: project every selected profile"""
    return [project_profile(p, months) for p in select_profiles(profiles, user_ids)]
