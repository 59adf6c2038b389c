"""Domain models - pure Python dataclasses representing financial entities"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Dict, List, Optional

from finwell_gateway.utils.number_utils import coalesce


class RiskLevel(str, Enum):
    """Five-level risk tolerance, ordered from lowest to highest"""

    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    VERY_HIGH = "very_high"

    @property
    def rank(self) -> int:
        return _RISK_ORDER.index(self)

    def bump(self) -> "RiskLevel":
        """One tier up, clamped at very_high"""
        return _RISK_ORDER[min(self.rank + 1, len(_RISK_ORDER) - 1)]

    def reduce(self) -> "RiskLevel":
        """One tier down, clamped at very_low"""
        return _RISK_ORDER[max(self.rank - 1, 0)]


_RISK_ORDER = [
    RiskLevel.VERY_LOW,
    RiskLevel.LOW,
    RiskLevel.MEDIUM,
    RiskLevel.HIGH,
    RiskLevel.VERY_HIGH,
]


@dataclass
class Goal:
    """Savings goal with a target amount"""

    name: str
    amount: float


@dataclass
class IncomeSource:
    """Single income stream; labels are free-form (salary, rental, ...)"""

    label: str
    amount: float


@dataclass
class Debt:
    """Debt obligation with its minimum monthly payment"""

    name: str
    monthly_payment: float
    interest_rate: float = 0.0


@dataclass
class TransactionAggregate:
    """Spending total for one category in one month"""

    category: str
    total_amount: float
    month: str


@dataclass
class RecurringMerchant:
    """Subscription-style charge"""

    name: str
    amount: float
    frequency: str  # "monthly" | "weekly" | "biweekly"


@dataclass
class PayDate:
    date: str
    category: str


@dataclass
class ExpenseItem:
    """Declared fixed or variable expense (generated profiles only)"""

    name: str
    amount: float


@dataclass
class FinancialProfile:
    """Immutable snapshot of one person's finances"""

    name: str
    age: Optional[int] = None
    goals: List[Goal] = field(default_factory=list)
    income: List[IncomeSource] = field(default_factory=list)
    debts: List[Debt] = field(default_factory=list)
    transaction_aggregates: List[TransactionAggregate] = field(default_factory=list)
    recurring_merchants: List[RecurringMerchant] = field(default_factory=list)
    pay_dates: List[PayDate] = field(default_factory=list)
    fixed_expenses: List[ExpenseItem] = field(default_factory=list)
    variable_expenses: List[ExpenseItem] = field(default_factory=list)
    session_context: Dict[str, Any] = field(default_factory=dict)
    id: Optional[int] = None
    created_at: Optional[str] = None

    @property
    def goal_names(self) -> List[str]:
        return [g.name for g in self.goals]

    def income_amount(self, label: str) -> float:
        """Sum of income recorded under an exact label, 0 when absent"""
        return sum(src.amount for src in self.income if src.label == label)

    @classmethod
    def from_document(
        cls,
        doc: Dict[str, Any],
        profile_id: Optional[int] = None,
        created_at: Optional[str] = None,
    ) -> "FinancialProfile":
        """
        Build a profile from a stored or submitted JSON document.

        Missing collections resolve to empty lists and missing numbers to 0,
        so every downstream computation sees a complete snapshot.
        """
        expenses = doc.get("expenses") or {}
        return cls(
            name=doc.get("name") or "",
            age=doc.get("age"),
            goals=[
                Goal(name=g["name"], amount=coalesce(g.get("amount")))
                for g in doc.get("goals") or []
            ],
            income=[
                IncomeSource(label=label, amount=coalesce(amount))
                for label, amount in (doc.get("income") or {}).items()
            ],
            debts=[
                Debt(
                    name=d["name"],
                    monthly_payment=coalesce(d.get("monthly_payment")),
                    interest_rate=coalesce(d.get("interest_rate")),
                )
                for d in doc.get("debts") or []
            ],
            transaction_aggregates=[
                TransactionAggregate(
                    category=t["category"],
                    total_amount=coalesce(t.get("total_amount")),
                    month=t.get("month") or "",
                )
                for t in doc.get("transaction_aggregates") or []
            ],
            recurring_merchants=[
                RecurringMerchant(
                    name=m["name"],
                    amount=coalesce(m.get("amount")),
                    frequency=m.get("frequency") or "monthly",
                )
                for m in doc.get("recurring_merchants") or []
            ],
            pay_dates=[
                PayDate(date=p["date"], category=p["category"])
                for p in doc.get("pay_dates") or []
            ],
            fixed_expenses=[
                ExpenseItem(name=e.get("name") or "", amount=coalesce(e.get("amount")))
                for e in expenses.get("fixed") or []
            ],
            variable_expenses=[
                ExpenseItem(name=e.get("name") or "", amount=coalesce(e.get("amount")))
                for e in expenses.get("variable") or []
            ],
            session_context=doc.get("session_context") or {},
            id=profile_id,
            created_at=created_at,
        )

    def to_document(self) -> Dict[str, Any]:
        """Serialize back to the JSON document shape used for storage"""
        doc: Dict[str, Any] = {
            "name": self.name,
            "age": self.age,
            "goals": [{"name": g.name, "amount": g.amount} for g in self.goals],
            "income": {src.label: src.amount for src in self.income},
            "debts": [
                {
                    "name": d.name,
                    "interest_rate": d.interest_rate,
                    "monthly_payment": d.monthly_payment,
                }
                for d in self.debts
            ],
            "transaction_aggregates": [
                {"category": t.category, "total_amount": t.total_amount, "month": t.month}
                for t in self.transaction_aggregates
            ],
            "recurring_merchants": [
                {"name": m.name, "amount": m.amount, "frequency": m.frequency}
                for m in self.recurring_merchants
            ],
            "pay_dates": [{"date": p.date, "category": p.category} for p in self.pay_dates],
            "session_context": self.session_context,
        }
        if self.fixed_expenses or self.variable_expenses:
            doc["expenses"] = {
                "fixed": [{"name": e.name, "amount": e.amount} for e in self.fixed_expenses],
                "variable": [{"name": e.name, "amount": e.amount} for e in self.variable_expenses],
            }
        return doc


@dataclass
class Totals:
    """Aggregate monthly figures derived from a profile"""

    income_total: float
    expenses_total: float
    debts_total: float


@dataclass
class Recommendation:
    """Advisory item; confidence is informational only"""

    title: str
    explanation: str
    confidence: float


@dataclass
class GoalSavings:
    name: str
    target: float
    save_this_month: float
    estimated_months: int


@dataclass
class ForecastMonth:
    month: str
    income: float
    burn: float
    net: float


@dataclass
class AllocationPlan:
    """Output of the budget waterfall for one month"""

    total_income: float
    essential_spending: float
    safety_buffer: float
    allocatable_surplus: float
    emergency_fund_target: float
    emergency_fund_this_month: float
    goal_savings_plan: List[GoalSavings]
    forecast: List[ForecastMonth]

    @property
    def total_goal_savings(self) -> float:
        return sum(g.save_this_month for g in self.goal_savings_plan)

    @property
    def final_remaining(self) -> float:
        """Income left after essentials, emergency fund, goals and buffer"""
        allocated = (
            self.essential_spending
            + self.emergency_fund_this_month
            + self.total_goal_savings
            + self.safety_buffer
        )
        return self.total_income - allocated


@dataclass
class PredictedPayDate:
    category: str
    date: date
    predicted_next: Optional[date] = None


@dataclass
class BudgetReport:
    """Allocation plan plus the supporting detail shown alongside it"""

    profile_id: Optional[int]
    name: str
    plan: AllocationPlan
    pay_dates: List[PredictedPayDate]
    top_categories: List[TransactionAggregate]
    recurring_merchants: List[RecurringMerchant]


@dataclass
class ProjectionSummary:
    """Monthly figures every projected month is built from"""

    income: float
    expenses: float
    net_monthly: float


@dataclass
class ProjectionMonth:
    month: str
    projected_balance: float
    cumulative_net_flow: float
    summary: ProjectionSummary


@dataclass
class Projection:
    """Linear cash-flow projection for one profile"""

    user_id: Optional[int]
    name: str
    age: Optional[int]
    goals: List[str]
    projection: List[ProjectionMonth]


@dataclass
class DebtStrategy:
    """Repayment order for one profile; empty order means no debts"""

    user: str
    strategy: str
    recommended_order: List[str]
    total_monthly_payments: float
    message: Optional[str] = None


@dataclass
class ExpenseSummary:
    user: str
    total_monthly_income: float
    total_expenses: float
    savings_potential: float
    top_categories: List[TransactionAggregate]
    suggestions: List[str]


@dataclass
class NetWorthSummary:
    total_assets: float
    total_liabilities: float
    net_worth: float
    status: str  # "positive" | "negative" | "balanced"


@dataclass
class AnalysisReport:
    """Risk classification and advice for one profile"""

    profile_id: Optional[int]
    created_at: Optional[str]
    name: str
    income_total: float
    reserved_amount: float
    usable_income: float
    expenses_total: float
    debts_total: float
    leftover: float
    risk_tolerance: RiskLevel
    risk_recommendations: List[Recommendation]
    goal_recommendations: List[Recommendation]
    focus_debt: Optional[Debt] = None

    @property
    def has_surplus(self) -> bool:
        return self.leftover > 0
