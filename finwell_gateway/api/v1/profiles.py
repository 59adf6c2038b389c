"""POST /v1/profiles/analyze and /v1/profiles/random - risk classification and advice"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from finwell_gateway.api.v1.schemas import (
    AnalysisResponse,
    FocusDebtSchema,
    GeneratedProfilePayload,
    ProfileRequest,
    RecommendationSchema,
)
from finwell_gateway.api.dependencies import get_generator_client, get_request_id
from finwell_gateway.infrastructure.database.session import get_db
from finwell_gateway.infrastructure.database.repositories import ProfileRepository
from finwell_gateway.infrastructure.clients.generator import ProfileGeneratorClient
from finwell_gateway.domain.analysis import analyze_generated_profile, analyze_profile
from finwell_gateway.domain.exceptions import ProfileGenerationError, ProfileNotFoundError
from finwell_gateway.domain.models import AnalysisReport
from finwell_gateway.infrastructure.observability.metrics import generation_failures_counter, record_analysis
from finwell_gateway.infrastructure.observability.logging import log_analysis

router = APIRouter()

GENERATION_FAILED_DETAIL = "Failed to generate financial profile data."


def to_analysis_response(report: AnalysisReport) -> AnalysisResponse:
    focus = report.focus_debt
    return AnalysisResponse(
        profile_id=report.profile_id,
        created_at=report.created_at,
        name=report.name,
        income_total=report.income_total,
        reserved_amount=report.reserved_amount,
        usable_income=report.usable_income,
        expenses_total=report.expenses_total,
        debts_total=report.debts_total,
        leftover=report.leftover,
        has_surplus=report.has_surplus,
        risk_tolerance=report.risk_tolerance.value,
        risk_recommendations=[
            RecommendationSchema(title=r.title, explanation=r.explanation, confidence=r.confidence)
            for r in report.risk_recommendations
        ],
        goal_recommendations=[
            RecommendationSchema(title=r.title, explanation=r.explanation, confidence=r.confidence)
            for r in report.goal_recommendations
        ],
        focus_debt=(
            FocusDebtSchema(
                name=focus.name,
                interest_rate=focus.interest_rate,
                monthly_payment=focus.monthly_payment,
            )
            if focus
            else None
        ),
    )


def _log_report(request_id: str, report: AnalysisReport, start_time: float) -> None:
    duration_ms = (time.time() - start_time) * 1000
    log_analysis(
        request_id,
        report.profile_id,
        report.risk_tolerance.value,
        len(report.risk_recommendations) + len(report.goal_recommendations),
        duration_ms,
    )


@router.post("/profiles/analyze", response_model=AnalysisResponse)
def analyze_submitted_profile(
    request_body: ProfileRequest,
    request: Request,
    db: Session = Depends(get_db),
):
    """
    Save a submitted profile and classify its risk tolerance.

    Flow:
    1. Persist the profile (id and created_at assigned on insert)
    2. Compute totals, 10% reserve and leftover
    3. Classify risk and generate risk- and goal-based advice
    4. Return the report
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        profile = request_body.to_domain()

        repo = ProfileRepository(db)
        record = repo.create_profile(profile, source="submitted")
        report = analyze_profile(ProfileRepository.to_domain(record))

        db.commit()

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_analysis(report.risk_tolerance.value, "submitted")
    _log_report(request_id, report, start_time)
    return to_analysis_response(report)


@router.post("/profiles/random", response_model=AnalysisResponse)
async def analyze_random_profile(
    request: Request,
    db: Session = Depends(get_db),
    generator: ProfileGeneratorClient = Depends(get_generator_client),
):
    """
    Generate a sample profile upstream, analyze it and save it.

    Expenses come from the generated fixed/variable lists rather than
    transaction aggregates. Nothing is saved when generation fails.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        document = await generator.generate_profile()
        profile = GeneratedProfilePayload.model_validate(document).to_domain()
    except (ProfileGenerationError, ValidationError) as e:
        generation_failures_counter.inc()
        logging.warning(f"Profile generation failed: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_DETAIL)

    try:
        repo = ProfileRepository(db)
        record = repo.create_profile(profile, source="generated")
        report = analyze_generated_profile(ProfileRepository.to_domain(record))

        db.commit()

    except Exception as e:
        db.rollback()
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_analysis(report.risk_tolerance.value, "generated")
    _log_report(request_id, report, start_time)
    return to_analysis_response(report)


@router.delete("/profiles/{profile_id}", status_code=204)
def delete_profile(profile_id: int, db: Session = Depends(get_db)):
    """Remove a saved profile; its id is never handed out again"""
    if not ProfileRepository(db).delete_profile(profile_id):
        raise ProfileNotFoundError("Profile not found")
    db.commit()
