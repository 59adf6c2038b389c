"""Monthly totals derived from a profile snapshot"""

from typing import List

from finwell_gateway.domain.models import FinancialProfile, RecurringMerchant, Totals

# Income sources counted by the cash-flow and expense views
NAMED_INCOME_SOURCES = ("salary", "freelance", "consulting")

# Multipliers normalizing recurring charges to a monthly amount
FREQUENCY_TO_MONTHLY = {
    "monthly": 1,
    "weekly": 4,
    "biweekly": 2,
}


def income_total(profile: FinancialProfile) -> float:
    """Sum over every income source, whatever its label"""
    return sum(src.amount for src in profile.income)


def named_income_total(profile: FinancialProfile) -> float:
    """Sum of salary, freelance and consulting only; other labels are ignored"""
    return sum(profile.income_amount(label) for label in NAMED_INCOME_SOURCES)


def transactions_total(profile: FinancialProfile) -> float:
    return sum(t.total_amount for t in profile.transaction_aggregates)


def declared_expenses_total(profile: FinancialProfile) -> float:
    """Fixed + variable expenses as declared by a generated profile"""
    return sum(e.amount for e in profile.fixed_expenses + profile.variable_expenses)


def debts_total(profile: FinancialProfile) -> float:
    return sum(d.monthly_payment for d in profile.debts)


def recurring_monthly_total(merchants: List[RecurringMerchant]) -> float:
    """Recurring charges normalized to monthly (weekly x4, biweekly x2)"""
    return sum(m.amount * FREQUENCY_TO_MONTHLY.get(m.frequency, 1) for m in merchants)


def compute_totals(profile: FinancialProfile) -> Totals:
    """Totals for a submitted or stored profile (expenses from transactions)"""
    return Totals(
        income_total=income_total(profile),
        expenses_total=transactions_total(profile),
        debts_total=debts_total(profile),
    )


def compute_generated_totals(profile: FinancialProfile) -> Totals:
    """Totals for a generated profile (expenses from its declared fixed/variable lists)"""
    return Totals(
        income_total=income_total(profile),
        expenses_total=declared_expenses_total(profile),
        debts_total=debts_total(profile),
    )
