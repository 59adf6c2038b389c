"""Profile analysis - composes risk classification and both recommenders into one report"""

from finwell_gateway.domain.debts import highest_interest_debt
from finwell_gateway.domain.goals import goal_recommendations
from finwell_gateway.domain.models import AnalysisReport, FinancialProfile, Totals
from finwell_gateway.domain.recommendations import risk_recommendations
from finwell_gateway.domain.risk import classify_risk_tolerance
from finwell_gateway.domain.totals import compute_generated_totals, compute_totals

RESERVE_RATE = 0.10


def build_analysis_report(profile: FinancialProfile, totals: Totals) -> AnalysisReport:
    """
    Classify risk and collect advice for a profile with precomputed totals.

    10% of income is held back before judging surplus. Goal advice is
    generated without the age input; age only affects the risk tier.
    """
    reserved_amount = totals.income_total * RESERVE_RATE
    usable_income = totals.income_total - reserved_amount
    leftover = usable_income - (totals.expenses_total + totals.debts_total)

    risk_tolerance = classify_risk_tolerance(
        totals.income_total,
        totals.expenses_total,
        totals.debts_total,
        profile.age,
        profile.goal_names,
    )

    return AnalysisReport(
        profile_id=profile.id,
        created_at=profile.created_at,
        name=profile.name,
        income_total=totals.income_total,
        reserved_amount=reserved_amount,
        usable_income=usable_income,
        expenses_total=totals.expenses_total,
        debts_total=totals.debts_total,
        leftover=leftover,
        risk_tolerance=risk_tolerance,
        risk_recommendations=risk_recommendations(
            risk_tolerance, totals.income_total, totals.expenses_total, totals.debts_total
        ),
        goal_recommendations=goal_recommendations(
            profile.goal_names, totals.income_total, totals.expenses_total, totals.debts_total
        ),
        focus_debt=highest_interest_debt(profile.debts),
    )


def analyze_profile(profile: FinancialProfile) -> AnalysisReport:
    """Analyze a submitted or stored profile (expenses from transaction aggregates)"""
    return build_analysis_report(profile, compute_totals(profile))


def analyze_generated_profile(profile: FinancialProfile) -> AnalysisReport:
    """Analyze a generated profile (expenses from its declared fixed/variable lists)"""
    return build_analysis_report(profile, compute_generated_totals(profile))
