"""Goal-based recommendations - advice keyed by recognized goal labels"""

from typing import List, Optional

from finwell_gateway.domain.models import Recommendation
from finwell_gateway.utils.number_utils import safe_ratio

RECOGNIZED_GOALS = frozenset(
    {
        "buy a house",
        "retirement",
        "emergency fund",
        "education",
        "save for children's education",
        "aggressive growth",
        "capital preservation",
        "start a business",
        "travel",
        "early retirement",
    }
)


def _recommend_for_goal(
    goal: str,
    income_total: float,
    expenses_total: float,
    savings_surplus: float,
    debt_ratio: float,
    age: Optional[int],
) -> List[Recommendation]:
    recs: List[Recommendation] = []

    if goal == "buy a house":
        recs.append(
            Recommendation(
                title="Start Saving for a Down Payment",
                explanation=(
                    "Open a dedicated savings account for your home fund. "
                    "Aim to save at least 10-20% of your target home price."
                ),
                confidence=0.9 if savings_surplus > 5000 else 0.75,
            )
        )
        if debt_ratio > 0.3:
            recs.append(
                Recommendation(
                    title="Reduce Debt-to-Income Ratio",
                    explanation="Lenders prefer lower debt ratios. Pay off existing debts to improve mortgage eligibility.",
                    confidence=0.85,
                )
            )

    elif goal == "retirement":
        recs.append(
            Recommendation(
                title="Contribute to a Retirement Account",
                explanation="Use IRAs or 401(k)s to build tax-advantaged retirement savings.",
                confidence=0.95 if age is not None and age >= 50 else 0.9,
            )
        )
        if savings_surplus > 10000:
            recs.append(
                Recommendation(
                    title="Automate Monthly Retirement Contributions",
                    explanation="Set automatic transfers to steadily grow your retirement savings.",
                    confidence=0.85,
                )
            )

    elif goal == "emergency fund":
        recs.append(
            Recommendation(
                title="Build a 3-6 Month Emergency Fund",
                explanation="Ensure you can cover essential expenses in case of job loss or emergencies.",
                confidence=0.95,
            )
        )
        if expenses_total > 0.6 * income_total:
            recs.append(
                Recommendation(
                    title="Adjust Expenses to Increase Savings",
                    explanation="Consider cutting unnecessary costs to build your emergency fund faster.",
                    confidence=0.8,
                )
            )

    elif goal in ("education", "save for children's education"):
        recs.append(
            Recommendation(
                title="Start a Dedicated Education Fund",
                explanation="Look into 529 plans or education savings accounts to prepare for school fees.",
                confidence=0.9,
            )
        )
        if savings_surplus < 5000:
            recs.append(
                Recommendation(
                    title="Set Small, Recurring Contributions",
                    explanation="Even small monthly contributions to an education fund can add up over time.",
                    confidence=0.75,
                )
            )

    elif goal == "aggressive growth":
        recs.append(
            Recommendation(
                title="Explore Higher-Risk Investments",
                explanation=(
                    "Consider diversified stock portfolios, growth ETFs, "
                    "or even startup investing (based on your risk profile)."
                ),
                confidence=0.85 if debt_ratio < 0.3 else 0.7,
            )
        )

    elif goal == "capital preservation":
        recs.append(
            Recommendation(
                title="Prioritize Low-Risk, Stable Investments",
                explanation="Look at treasury bonds, CDs, or money market accounts to preserve capital.",
                confidence=0.9,
            )
        )

    elif goal == "start a business":
        recs.append(
            Recommendation(
                title="Create a Business Savings Fund",
                explanation="Set aside capital for startup costs before quitting your job or seeking outside funding.",
                confidence=0.85 if savings_surplus > 8000 else 0.7,
            )
        )
        recs.append(
            Recommendation(
                title="Draft a Lean Business Plan",
                explanation="Outlining clear milestones and cash flow needs helps reduce risk.",
                confidence=0.8,
            )
        )

    elif goal == "travel":
        recs.append(
            Recommendation(
                title="Set Up a Travel Budget",
                explanation="Plan out how much you want to spend and save monthly toward that goal.",
                confidence=0.85,
            )
        )
        if savings_surplus < 1000:
            recs.append(
                Recommendation(
                    title="Consider a Delayed Timeline",
                    explanation="With limited savings, pushing your travel goal back can help you avoid debt.",
                    confidence=0.75,
                )
            )

    elif goal == "early retirement":
        recs.append(
            Recommendation(
                title="Maximize Retirement Contributions Now",
                explanation="Early retirement requires front-loading your investments aggressively.",
                confidence=0.9 if age is not None and age < 40 and savings_surplus > 15000 else 0.75,
            )
        )
        recs.append(
            Recommendation(
                title="Track FIRE (Financial Independence, Retire Early) Metrics",
                explanation="Calculate your savings rate, withdrawal rate, and target 'FI number' to stay on track.",
                confidence=0.85,
            )
        )

    return recs


def goal_recommendations(
    goals: List[str],
    income_total: float,
    expenses_total: float,
    debts_total: float,
    age: Optional[int] = None,
) -> List[Recommendation]:
    """
    Advice for each stated goal, in input order.

    Labels are lower-cased before matching. Unrecognized labels are skipped
    without error, and a repeated goal repeats its advice.
    """
    savings_surplus = income_total - expenses_total
    debt_ratio = safe_ratio(debts_total, income_total)

    recs: List[Recommendation] = []
    for goal in goals:
        key = goal.lower()
        if key not in RECOGNIZED_GOALS:
            continue
        recs.extend(
            _recommend_for_goal(
                key,
                income_total,
                expenses_total,
                savings_surplus,
                debt_ratio,
                age,
            )
        )
    return recs
