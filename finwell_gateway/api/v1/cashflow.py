"""POST /v1/cashflow/forecast - linear cash-flow projection for saved profiles"""

import time
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from finwell_gateway.api.v1.schemas import CashFlowRequest, CashFlowResponse, ProjectionSchema
from finwell_gateway.api.dependencies import get_request_id
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.infrastructure.database.repositories import ProfileRepository
from finwell_gateway.domain.cashflow import forecast_cash_flow
from finwell_gateway.infrastructure.observability.logging import log_operation

router = APIRouter()


@router.post("/cashflow/forecast", response_model=CashFlowResponse)
def post_cash_flow_forecast(
    request_body: CashFlowRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Project monthly net flow for all saved profiles, or only those in user_ids.

    Unknown ids are ignored; an empty selection returns an empty list.
    """
    start_time = time.time()

    records = ProfileRepository(db).list_profiles()
    projections = forecast_cash_flow(
        [ProfileRepository.to_domain(r) for r in records],
        months=request_body.months,
        user_ids=request_body.user_ids,
    )

    log_operation(get_request_id(request), "cashflow", len(projections), (time.time() - start_time) * 1000)

    return CashFlowResponse(
        months=request_body.months,
        users=[ProjectionSchema.model_validate(p, from_attributes=True) for p in projections],
    )
