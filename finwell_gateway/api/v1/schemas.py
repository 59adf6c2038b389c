"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
import datetime
from typing import Any, Dict, List, Literal, Optional

from finwell_gateway.domain.models import FinancialProfile


# --- Profile input -----------------------------------------------------------


class GoalSchema(BaseModel):
    name: str
    amount: float


class DebtSchema(BaseModel):
    name: str
    interest_rate: float = Field(0, ge=0)
    monthly_payment: float


class TransactionAggregateSchema(BaseModel):
    category: str
    total_amount: float
    month: str


class RecurringMerchantSchema(BaseModel):
    name: str
    amount: float
    frequency: Literal["monthly", "weekly", "biweekly"]


class PayDateSchema(BaseModel):
    date: datetime.date
    category: str


class ProfileRequest(BaseModel):
    """Request body for POST /v1/profiles/analyze"""

    name: str = Field(..., min_length=1)
    age: int
    goals: List[GoalSchema]
    income: Dict[str, float] = Field(..., description="Income by free-form source label")
    debts: List[DebtSchema]
    transaction_aggregates: List[TransactionAggregateSchema]
    recurring_merchants: List[RecurringMerchantSchema]
    pay_dates: List[PayDateSchema]
    session_context: Optional[Dict[str, Any]] = None

    def to_domain(self) -> FinancialProfile:
        return FinancialProfile.from_document(self.model_dump(mode="json"))


class ExpenseItemSchema(BaseModel):
    name: str = ""
    amount: float


class DeclaredExpensesSchema(BaseModel):
    fixed: List[ExpenseItemSchema] = []
    variable: List[ExpenseItemSchema] = []


class GeneratedProfilePayload(BaseModel):
    """Shape a generated profile must have before it is analyzed or stored"""

    name: str = Field(..., min_length=1)
    age: int
    goals: List[GoalSchema] = []
    income: Dict[str, float] = {}
    expenses: DeclaredExpensesSchema
    debts: List[DebtSchema] = []
    transaction_aggregates: List[TransactionAggregateSchema] = []
    recurring_merchants: List[RecurringMerchantSchema] = []
    pay_dates: List[PayDateSchema] = []
    session_context: Optional[Dict[str, Any]] = None

    def to_domain(self) -> FinancialProfile:
        return FinancialProfile.from_document(self.model_dump(mode="json"))


class ValueItemSchema(BaseModel):
    name: str
    value: float


class NetWorthRequest(BaseModel):
    """Request body for POST /v1/net-worth"""

    assets: List[ValueItemSchema] = []
    liabilities: List[ValueItemSchema] = []


class CashFlowRequest(BaseModel):
    """Request body for POST /v1/cashflow/forecast"""

    user_ids: Optional[List[int]] = Field(None, description="Profiles to include; all when omitted")
    months: int = Field(6, gt=0)


# --- Responses ---------------------------------------------------------------


class RecommendationSchema(BaseModel):
    title: str
    explanation: str
    confidence: float


class FocusDebtSchema(BaseModel):
    name: str
    interest_rate: float
    monthly_payment: float


class AnalysisResponse(BaseModel):
    """Response for profile analysis (submitted or generated)"""

    profile_id: int
    created_at: str
    name: str
    income_total: float
    reserved_amount: float
    usable_income: float
    expenses_total: float
    debts_total: float
    leftover: float
    has_surplus: bool
    risk_tolerance: str
    risk_recommendations: List[RecommendationSchema]
    goal_recommendations: List[RecommendationSchema]
    focus_debt: Optional[FocusDebtSchema] = None


class GoalSavingsSchema(BaseModel):
    name: str
    target: float
    save_this_month: float
    estimated_months: int


class ForecastMonthSchema(BaseModel):
    month: str
    income: float
    burn: float
    net: float


class PayDatePredictionSchema(BaseModel):
    category: str
    date: datetime.date
    predicted_next: Optional[datetime.date] = None


class CategoryTotalSchema(BaseModel):
    category: str
    total_amount: float


class BudgetResponse(BaseModel):
    """Response for GET /v1/budget"""

    profile_id: int
    name: str
    total_income: float
    essential_spending: float
    safety_buffer: float
    emergency_fund_target: float
    emergency_fund_this_month: float
    goal_savings_plan: List[GoalSavingsSchema]
    total_goal_savings: float
    final_remaining: float
    forecast: List[ForecastMonthSchema]
    pay_dates: List[PayDatePredictionSchema]
    top_categories: List[CategoryTotalSchema]
    recurring_merchants: List[RecurringMerchantSchema]


class ExpenseSummarySchema(BaseModel):
    user: str
    total_monthly_income: float
    total_expenses: float
    savings_potential: float
    top_categories: List[CategoryTotalSchema]
    suggestions: List[str]


class ExpensesResponse(BaseModel):
    """Response for GET /v1/expenses"""

    profiles: List[ExpenseSummarySchema]


class DebtStrategySchema(BaseModel):
    user: str
    strategy: str
    recommended_order: List[str]
    total_monthly_payments: float
    message: Optional[str] = None


class DebtStrategyResponse(BaseModel):
    """Response for GET /v1/debts/strategy"""

    strategy: str
    profiles: List[DebtStrategySchema]


class NetWorthResponse(BaseModel):
    total_assets: float
    total_liabilities: float
    net_worth: float
    status: str


class ProjectionSummarySchema(BaseModel):
    income: float
    expenses: float
    net_monthly: float


class ProjectionMonthSchema(BaseModel):
    month: str
    projected_balance: float
    cumulative_net_flow: float
    summary: ProjectionSummarySchema


class ProjectionSchema(BaseModel):
    user_id: Optional[int]
    name: str
    age: Optional[int]
    goals: List[str]
    projection: List[ProjectionMonthSchema]


class CashFlowResponse(BaseModel):
    """Response for POST /v1/cashflow/forecast"""

    months: int
    users: List[ProjectionSchema]
