"""GET /v1/debts/strategy - debt repayment order for every saved profile"""

import time
from typing import Literal, Optional
from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session

from finwell_gateway.api.v1.schemas import DebtStrategyResponse, DebtStrategySchema
from finwell_gateway.api.dependencies import get_request_id
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.infrastructure.database.repositories import ProfileRepository
from finwell_gateway.domain.debts import AVALANCHE, build_debt_strategy
from finwell_gateway.infrastructure.observability.logging import log_operation

router = APIRouter()


@router.get("/debts/strategy", response_model=DebtStrategyResponse)
def get_debt_strategy(
    request: Request,
    strategy: Optional[Literal["avalanche", "snowball"]] = Query(
        None, description="avalanche (highest rate first, default) or snowball (smallest payment first)"
    ),
    db: Session = Depends(get_db),
):
    """
    Recommend a repayment order per profile.

    Profiles without debts are reported with a "no debts" message instead of an order.
    """
    start_time = time.time()
    strategy = strategy or AVALANCHE

    records = ProfileRepository(db).list_profiles()
    results = []
    for record in records:
        profile = ProfileRepository.to_domain(record)
        results.append(build_debt_strategy(profile.name, profile.debts, strategy))

    log_operation(get_request_id(request), "debt_strategy", len(records), (time.time() - start_time) * 1000)

    return DebtStrategyResponse(
        strategy=strategy,
        profiles=[DebtStrategySchema.model_validate(r, from_attributes=True) for r in results],
    )
