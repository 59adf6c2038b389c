"""Expense categorization and savings suggestions"""

from typing import List

from finwell_gateway.domain.budget import top_spending_categories
from finwell_gateway.domain.models import ExpenseSummary, FinancialProfile, TransactionAggregate
from finwell_gateway.domain.totals import named_income_total, transactions_total

TOP_EXPENSE_CATEGORIES = 3
UTILITIES_THRESHOLD = 2500
DINING_OUT_THRESHOLD = 1000


def _find_category(aggregates: List[TransactionAggregate], category: str) -> TransactionAggregate | None:
    """First aggregate whose category matches, ignoring case"""
    for aggregate in aggregates:
        if aggregate.category.lower() == category:
            return aggregate
    return None


def categorize_expenses(profile: FinancialProfile) -> ExpenseSummary:
    """
    Summarize spending for one profile and suggest where to save.

    Income here counts only salary, freelance and consulting.
    """
    total_income = named_income_total(profile)
    total_expenses = transactions_total(profile)
    savings_potential = total_income - total_expenses
    top_categories = top_spending_categories(profile.transaction_aggregates, TOP_EXPENSE_CATEGORIES)

    suggestions: List[str] = []
    if savings_potential > 0:
        target = f'"{profile.goals[0].name}"' if profile.goals else "your savings goals"
        suggestions.append(
            f"You're saving about R{savings_potential:,.2f} per month. "
            f"Consider allocating it toward {target}."
        )
    else:
        focus = f'"{top_categories[0].category}"' if top_categories else "discretionary spending"
        suggestions.append(
            f"You're overspending by R{abs(savings_potential):,.2f}. "
            f"Review discretionary categories like {focus}."
        )

    utilities = _find_category(profile.transaction_aggregates, "utilities")
    if utilities and utilities.total_amount > UTILITIES_THRESHOLD:
        suggestions.append("Your utility costs are quite high. Consider optimizing energy or data plans.")

    dining_out = _find_category(profile.transaction_aggregates, "dining out")
    if dining_out and dining_out.total_amount > DINING_OUT_THRESHOLD:
        suggestions.append("Dining out expenses are significant. Try meal prepping to save.")

    return ExpenseSummary(
        user=profile.name,
        total_monthly_income=total_income,
        total_expenses=total_expenses,
        savings_potential=savings_potential,
        top_categories=top_categories,
        suggestions=suggestions,
    )
