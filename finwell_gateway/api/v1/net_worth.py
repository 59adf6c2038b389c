"""POST /v1/net-worth - assets minus liabilities"""

from fastapi import APIRouter

from finwell_gateway.api.v1.schemas import NetWorthRequest, NetWorthResponse
from finwell_gateway.domain.net_worth import calculate_net_worth

router = APIRouter()


@router.post("/net-worth", response_model=NetWorthResponse)
def post_net_worth(request_body: NetWorthRequest):
    summary = calculate_net_worth(
        [asset.value for asset in request_body.assets],
        [liability.value for liability in request_body.liabilities],
    )
    return NetWorthResponse.model_validate(summary, from_attributes=True)
