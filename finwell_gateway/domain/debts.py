"""Debt repayment ordering (avalanche / snowball)"""

from typing import List, Optional

from finwell_gateway.domain.models import Debt, DebtStrategy

AVALANCHE = "avalanche"
SNOWBALL = "snowball"
STRATEGIES = (AVALANCHE, SNOWBALL)

NO_DEBTS_MESSAGE = "No debts found in this profile."


def rank_debts(debts: List[Debt], strategy: Optional[str] = None) -> List[Debt]:
    """
    Order debts for repayment.

    - avalanche (default): highest interest rate first
    - snowball: smallest monthly payment first. This orders by payment size,
      not outstanding balance, since profiles carry no balances.

    Python's sort is stable, so ties keep their original order.
    """
    strategy = strategy or AVALANCHE
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown repayment strategy: {strategy}")

    if strategy == AVALANCHE:
        return sorted(debts, key=lambda d: d.interest_rate or 0, reverse=True)
    return sorted(debts, key=lambda d: d.monthly_payment or 0)


def build_debt_strategy(user: str, debts: List[Debt], strategy: Optional[str] = None) -> DebtStrategy:
    """Repayment order plus total monthly payments (in original order) for one profile"""
    strategy = strategy or AVALANCHE

    if not debts:
        return DebtStrategy(
            user=user,
            strategy=strategy,
            recommended_order=[],
            total_monthly_payments=0.0,
            message=NO_DEBTS_MESSAGE,
        )

    ordered = rank_debts(debts, strategy)
    return DebtStrategy(
        user=user,
        strategy=strategy,
        recommended_order=[d.name for d in ordered],
        total_monthly_payments=sum(d.monthly_payment or 0 for d in debts),
    )


def highest_interest_debt(debts: List[Debt]) -> Optional[Debt]:
    """Debt with the highest interest rate; first one wins ties, None if no debts"""
    focus: Optional[Debt] = None
    for debt in debts:
        if focus is None or debt.interest_rate > focus.interest_rate:
            focus = debt
    return focus
