"""Risk-based recommendations - fixed advice per risk tier with ratio-driven confidence"""

from typing import List, Tuple

from finwell_gateway.domain.models import Recommendation, RiskLevel
from finwell_gateway.utils.number_utils import safe_ratio


def confidence_by_condition(condition: bool, high: float = 0.9, low: float = 0.75) -> float:
    return high if condition else low


def confidence_by_tier(factor: float, thresholds: Tuple[float, float]) -> float:
    """0.6 below the first threshold, 0.75 below the second, 0.9 otherwise"""
    if factor < thresholds[0]:
        return 0.6
    if factor < thresholds[1]:
        return 0.75
    return 0.9


def risk_recommendations(
    risk_level: RiskLevel,
    income_total: float,
    expenses_total: float,
    debts_total: float,
) -> List[Recommendation]:
    """
    Advice for a risk tier.

    Titles and explanations are fixed per tier; only confidence depends on the
    expense ratio, debt ratio and monthly surplus. Every tier yields 2-3 items.
    """
    expense_ratio = safe_ratio(expenses_total, income_total)
    debt_ratio = safe_ratio(debts_total, income_total)
    savings_surplus = income_total - expenses_total

    if risk_level == RiskLevel.VERY_LOW:
        return [
            Recommendation(
                title="Prioritize Capital Preservation",
                explanation="Focus on stable, low-risk investments such as government bonds or insured savings.",
                confidence=confidence_by_condition(expense_ratio < 0.5 and debt_ratio < 0.2),
            ),
            Recommendation(
                title="Maintain a Robust Emergency Fund",
                explanation="Keep a 6+ month emergency fund to safeguard against financial shocks.",
                confidence=confidence_by_condition(savings_surplus > 5000),
            ),
        ]

    if risk_level == RiskLevel.LOW:
        return [
            Recommendation(
                title="Consider High-Yield Savings or CDs",
                explanation="Low risk means you can safely grow savings with minimal exposure to market volatility.",
                confidence=confidence_by_condition(savings_surplus > 3000),
            ),
            Recommendation(
                title="Explore Conservative Mutual Funds",
                explanation="Balanced funds or bond-heavy mutual funds can offer modest growth with limited risk.",
                confidence=confidence_by_tier(debt_ratio, (0.1, 0.25)),
            ),
        ]

    if risk_level == RiskLevel.MEDIUM:
        return [
            Recommendation(
                title="Build a Balanced Portfolio",
                explanation="Mix stocks, bonds, and cash to balance growth potential with risk mitigation.",
                confidence=confidence_by_condition(expense_ratio <= 0.7 and debt_ratio <= 0.4),
            ),
            Recommendation(
                title="Establish an Emergency Fund",
                explanation="Aim for 3-6 months of expenses saved to cushion against unexpected costs.",
                confidence=confidence_by_condition(savings_surplus > 3000),
            ),
            Recommendation(
                title="Review Budget and Debt Strategy",
                explanation="Optimizing spending and paying off high-interest debt can improve your financial health.",
                confidence=confidence_by_condition(debt_ratio > 0.25 or expense_ratio > 0.6),
            ),
        ]

    if risk_level == RiskLevel.HIGH:
        return [
            Recommendation(
                title="Focus on Debt Reduction",
                explanation="High risk indicates liabilities are a major concern, so prioritize paying these down aggressively.",
                confidence=confidence_by_tier(debt_ratio, (0.3, 0.5)),
            ),
            Recommendation(
                title="Limit Exposure to Volatile Investments",
                explanation="Avoid high-risk investments until your financial position stabilizes.",
                confidence=confidence_by_condition(debt_ratio > 0.4 or savings_surplus < 2000),
            ),
            Recommendation(
                title="Create and Follow a Strict Budget",
                explanation="Tracking expenses closely can help free up resources to reduce debt and expenses.",
                confidence=confidence_by_condition(expense_ratio > 0.6),
            ),
        ]

    # very_high: counseling is always the strongest recommendation
    return [
        Recommendation(
            title="Seek Professional Financial Counseling",
            explanation="With very high financial risk, expert advice is critical to develop a sustainable plan.",
            confidence=0.95,
        ),
        Recommendation(
            title="Immediately Reduce Expenses and Debt",
            explanation="Urgent action is needed to stabilize your financial situation and avoid worsening debt.",
            confidence=confidence_by_condition(expense_ratio > 0.8 or debt_ratio > 0.6),
        ),
        Recommendation(
            title="Avoid New Debt or Risky Investments",
            explanation="Focus on stopping the accumulation of debt and preserving what you have.",
            confidence=confidence_by_condition(debt_ratio > 0.5),
        ),
    ]
