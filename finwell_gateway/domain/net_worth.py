"""Net worth calculation"""

from typing import Iterable

from finwell_gateway.domain.models import NetWorthSummary


def calculate_net_worth(asset_values: Iterable[float], liability_values: Iterable[float]) -> NetWorthSummary:
    """Assets minus liabilities, classified as positive, negative or balanced"""
    total_assets = sum(asset_values)
    total_liabilities = sum(liability_values)
    net_worth = total_assets - total_liabilities

    if net_worth > 0:
        status = "positive"
    elif net_worth < 0:
        status = "negative"
    else:
        status = "balanced"

    return NetWorthSummary(
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        net_worth=net_worth,
        status=status,
    )
