"""GET /v1/budget - budget waterfall and cash-flow outlook for the latest profile"""

import time
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finwell_gateway.api.v1.schemas import (
    BudgetResponse,
    CategoryTotalSchema,
    ForecastMonthSchema,
    GoalSavingsSchema,
    PayDatePredictionSchema,
    RecurringMerchantSchema,
)
from finwell_gateway.api.dependencies import get_request_id
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.infrastructure.database.repositories import ProfileRepository
from finwell_gateway.domain.budget import build_budget_report
from finwell_gateway.domain.exceptions import ProfileNotFoundError
from finwell_gateway.infrastructure.observability.logging import log_operation
from finwell_gateway.utils.number_utils import round_money

router = APIRouter()


@router.get("/budget", response_model=BudgetResponse)
def get_budget(request: Request, db: Session = Depends(get_db)):
    """
    Allocate this month's surplus for the most recently saved profile.

    Returns:
        Essentials, 15% buffer, emergency fund and goal contributions,
        a flat 3-month forecast, pay dates, top categories and recurring charges
    """
    start_time = time.time()

    record = ProfileRepository(db).find_most_recent()
    if not record:
        raise ProfileNotFoundError("No financial profile saved")

    report = build_budget_report(ProfileRepository.to_domain(record))
    plan = report.plan

    log_operation(get_request_id(request), "budget", 1, (time.time() - start_time) * 1000)

    return BudgetResponse(
        profile_id=report.profile_id,
        name=report.name,
        total_income=round_money(plan.total_income),
        essential_spending=round_money(plan.essential_spending),
        safety_buffer=round_money(plan.safety_buffer),
        emergency_fund_target=round_money(plan.emergency_fund_target),
        emergency_fund_this_month=plan.emergency_fund_this_month,
        goal_savings_plan=[
            GoalSavingsSchema(
                name=g.name,
                target=g.target,
                save_this_month=g.save_this_month,
                estimated_months=g.estimated_months,
            )
            for g in plan.goal_savings_plan
        ],
        total_goal_savings=round_money(plan.total_goal_savings),
        final_remaining=round_money(plan.final_remaining),
        forecast=[
            ForecastMonthSchema(
                month=f.month,
                income=round_money(f.income),
                burn=round_money(f.burn),
                net=round_money(f.net),
            )
            for f in plan.forecast
        ],
        pay_dates=[
            PayDatePredictionSchema(category=p.category, date=p.date, predicted_next=p.predicted_next)
            for p in report.pay_dates
        ],
        top_categories=[
            CategoryTotalSchema(category=t.category, total_amount=round_money(t.total_amount))
            for t in report.top_categories
        ],
        recurring_merchants=[
            RecurringMerchantSchema(name=m.name, amount=round_money(m.amount), frequency=m.frequency)
            for m in report.recurring_merchants
        ],
    )
