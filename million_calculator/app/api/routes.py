"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict, List, Optional

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from million_calculator.core.calculator import evaluate, select_rates
from million_calculator.core.constants import INVESTOR_CAPITAL_THRESHOLD, MILLION_TARGET, RATE_TABLE
from million_calculator.log import get_logger
from million_calculator.presentation.formatting import format_amount, format_years, json_years
from million_calculator.presentation.narrative import render_narrative
from million_calculator.schemas.calculation import (
    CalculationRequest,
    CalculationResponse,
    DisplayBlock,
    RatesResponse,
)
from million_calculator.schemas.health import HealthResponse
from million_calculator.storage import LeadRecord, StorageError

logger = get_logger(__name__)

LEAD_NOT_SAVED_WARNING = (
    "Não foi possível salvar sua simulação agora, mas o resultado abaixo continua válido."
)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    # inputs may be NaN/Infinity, which strict JSON cannot carry
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.UNPROCESSABLE_ENTITY


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    return jsonify(HealthResponse(status="ok").model_dump())


@api_bp.get("/rates")
def rates() -> Any:
    """Expose the rate policy so the frontend can show its assumptions."""
    response = RatesResponse(
        target=MILLION_TARGET,
        investorThreshold=INVESTOR_CAPITAL_THRESHOLD,
        profiles=RATE_TABLE,
    )
    return jsonify(response.model_dump(mode="json"))


@api_bp.post("/calculate")
def calculate() -> Any:
    """Project years to the first million and pick the result narrative."""
    raw_payload: Dict[str, Any] = request.get_json(force=True, silent=False)
    payload = CalculationRequest.model_validate(raw_payload)

    result = evaluate(
        name=payload.name,
        starting_capital=payload.starting_capital,
        monthly_contribution=payload.monthly_contribution,
        profile=payload.profile,
    )
    logger.info(
        "calculated profile=%s scenario=%s years_real=%s years_optimized=%s",
        payload.profile.value,
        result.tier.value,
        format_years(result.baseline_years),
        format_years(result.optimized_years),
    )

    # persistence must never change the computed result
    lead_id: Optional[str] = None
    warnings: List[str] = []
    store = current_app.extensions.get("lead_store")
    if store is not None:
        try:
            lead_id = store.save(LeadRecord.from_result(payload, result))
        except StorageError as exc:
            logger.warning("lead not saved: %s", exc)
            warnings.append(LEAD_NOT_SAVED_WARNING)

    response = CalculationResponse(
        name=result.name,
        scenario=result.tier,
        yearsReal=json_years(result.baseline_years),
        yearsOptimized=json_years(result.optimized_years),
        rates=select_rates(payload.profile),
        display=DisplayBlock(
            currentInvestment=format_amount(payload.starting_capital),
            monthlyInvestment=format_amount(payload.monthly_contribution),
            yearsReal=format_years(result.baseline_years),
            yearsOptimized=format_years(result.optimized_years),
            narrative=render_narrative(result),
        ),
        leadId=lead_id,
        warnings=warnings,
    )
    return jsonify(response.model_dump(mode="json"))
