"""Risk tolerance classifier - maps monthly totals, age and goals to a risk tier"""

from typing import List, Optional

from finwell_gateway.domain.models import RiskLevel

AGGRESSIVE_GROWTH_GOAL = "aggressive growth"
CAPITAL_PRESERVATION_GOAL = "capital preservation"


def base_risk_level(income: float, expenses: float, debts: float) -> RiskLevel:
    """
    Base tier from expenses and debt payments relative to income.

    Branches overlap, so the order below is part of the rule:
    the first matching branch wins.
    """
    if expenses > income and debts > income:
        return RiskLevel.VERY_HIGH
    elif (expenses > income) != (debts > income):
        return RiskLevel.HIGH
    elif 0.8 * income <= expenses <= income and debts <= 0.5 * income:
        return RiskLevel.MEDIUM
    elif expenses <= 0.5 * income and 0.5 * income <= debts <= income:
        return RiskLevel.MEDIUM
    elif expenses <= 0.5 * income and debts <= 0.5 * income:
        return RiskLevel.LOW
    elif expenses < income and debts < income:
        return RiskLevel.LOW
    else:
        return RiskLevel.MEDIUM


def adjust_for_age(level: RiskLevel, age: Optional[int]) -> RiskLevel:
    """Under 35 bumps one tier, 60 and over reduces one tier"""
    if age is None:
        return level
    if age < 35:
        return level.bump()
    if age >= 60:
        return level.reduce()
    return level


def adjust_for_goals(level: RiskLevel, goals: Optional[List[str]]) -> RiskLevel:
    """
    Apply goal-driven adjustments in sequence.

    Labels are matched exactly (case-sensitive). Both adjustments may fire,
    in which case they cancel out unless the first one hit a clamp.
    """
    if not goals:
        return level
    if AGGRESSIVE_GROWTH_GOAL in goals:
        level = level.bump()
    if CAPITAL_PRESERVATION_GOAL in goals:
        level = level.reduce()
    return level


def classify_risk_tolerance(
    income_total: float,
    expenses_total: float,
    debts_total: float,
    age: Optional[int] = None,
    goals: Optional[List[str]] = None,
) -> RiskLevel:
    """
    Main entry point: base tier, then age adjustment, then goal adjustment.
    """
    level = base_risk_level(income_total, expenses_total, debts_total)
    level = adjust_for_age(level, age)
    return adjust_for_goals(level, goals)
