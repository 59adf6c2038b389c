"""GET /v1/expenses - expense categorization across saved profiles"""

import time
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finwell_gateway.api.v1.schemas import ExpensesResponse, ExpenseSummarySchema
from finwell_gateway.api.dependencies import get_request_id
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.infrastructure.database.repositories import ProfileRepository
from finwell_gateway.domain.expenses import categorize_expenses
from finwell_gateway.infrastructure.observability.logging import log_operation

router = APIRouter()


@router.get("/expenses", response_model=ExpensesResponse)
def get_expense_analysis(request: Request, db: Session = Depends(get_db)):
    """Top spending categories, savings potential and suggestions per profile"""
    start_time = time.time()

    records = ProfileRepository(db).list_profiles()
    summaries = [categorize_expenses(ProfileRepository.to_domain(r)) for r in records]

    log_operation(get_request_id(request), "expenses", len(records), (time.time() - start_time) * 1000)

    return ExpensesResponse(
        profiles=[ExpenseSummarySchema.model_validate(s, from_attributes=True) for s in summaries]
    )
