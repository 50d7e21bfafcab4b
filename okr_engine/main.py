"""FastAPI application for the OKR engine: progress, status and priority endpoints."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from okr_engine.config.settings import Settings
from okr_engine.hooks.audit_hooks import log_calculation
from okr_engine.priority import (
    PriorityValidationError,
    calculate_bulk_priorities,
    calculate_initiative_status,
    calculate_priority,
    can_cancel_initiative,
    can_close_initiative,
    can_edit_initiative,
    initiative_status_info,
    status_change_reason,
    priority_color_class,
    priority_label,
)
from okr_engine.progress import (
    calculate_progress,
    describe_calculation_method,
    get_all_formulas,
    validate_configuration,
)
from okr_engine.status import (
    assess_status,
    calculate_cycle_status,
    calculate_objective_status,
    cycle_status_color,
    cycle_status_text,
    objective_status_color,
    objective_status_label,
    status_color,
    status_label,
)

settings = Settings()

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.api_title, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

MetricField = Optional[Union[str, float]]


class ProgressRequest(BaseModel):
    current_value: MetricField = None
    target_value: MetricField = None
    key_result_type: str
    base_value: MetricField = None


class ConfigValidationRequest(BaseModel):
    target_value: MetricField = None
    key_result_type: str
    base_value: MetricField = None


class StatusRequest(BaseModel):
    progress_percentage: float
    start_date: datetime
    end_date: datetime
    now: Optional[datetime] = None


class ObjectiveStatusRequest(BaseModel):
    key_results: list[ProgressRequest] = Field(default_factory=list)
    start_date: datetime
    end_date: datetime
    now: Optional[datetime] = None
    manual_status: Optional[str] = None


class CycleStatusRequest(BaseModel):
    start_date: datetime
    end_date: datetime
    today: Optional[datetime] = None


class PriorityRequest(BaseModel):
    impact_score: float
    effort_score: float
    confidence_score: float


class BulkPriorityItem(PriorityRequest):
    id: str


class BulkPriorityRequest(BaseModel):
    items: list[BulkPriorityItem]


class TaskRecord(BaseModel):
    status: Optional[str] = None


class SuccessMetricRecord(BaseModel):
    achievement: MetricField = None


class InitiativeStatusRequest(BaseModel):
    current_status: Optional[str] = None
    tasks: list[TaskRecord] = Field(default_factory=list)
    success_metrics: list[SuccessMetricRecord] = Field(default_factory=list)


@app.exception_handler(PriorityValidationError)
async def priority_validation_handler(request: Request, exc: PriorityValidationError):
    logger.warning("Rejected priority input on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"error": str(exc)})


@app.post("/api/progress")
async def progress(body: ProgressRequest):
    """Calculate progress for a single key result."""
    result = calculate_progress(
        body.current_value, body.target_value, body.key_result_type, body.base_value
    )
    log_calculation("progress", body.model_dump(), result)
    return result.to_dict()


@app.post("/api/progress/validate")
async def progress_validate(body: ConfigValidationRequest):
    """Pre-flight check of a key result's target/base configuration."""
    result = validate_configuration(body.target_value, body.key_result_type, body.base_value)
    log_calculation("progress_validate", body.model_dump(), result)
    return result.to_dict()


@app.get("/api/progress/methods")
async def progress_methods():
    """All registered key result types with their labels and formulas."""
    return [
        {
            "key_result_type": formula.key_result_type,
            "label": formula.label,
            "description": formula.description,
            "binary": formula.binary,
        }
        for formula in get_all_formulas().values()
    ]


@app.get("/api/progress/methods/{key_result_type}")
async def progress_method(key_result_type: str):
    return {
        "key_result_type": key_result_type,
        "description": describe_calculation_method(key_result_type),
    }


@app.post("/api/status")
async def key_result_status(body: StatusRequest):
    """Classify a key result's progress against its timeline."""
    assessment = assess_status(
        body.progress_percentage, body.start_date, body.end_date, body.now
    )
    log_calculation("status", body.model_dump(mode="json"), assessment)
    return {
        **assessment.to_dict(),
        "color": status_color(assessment.status),
        "label": status_label(assessment.status),
    }


@app.post("/api/objectives/status")
async def objective_status(body: ObjectiveStatusRequest):
    """Roll key results up into an objective status."""
    key_results = [
        calculate_progress(kr.current_value, kr.target_value, kr.key_result_type, kr.base_value)
        for kr in body.key_results
    ]
    result = calculate_objective_status(
        key_results,
        body.start_date,
        body.end_date,
        now=body.now,
        manual_status=body.manual_status,
    )
    log_calculation("objective_status", body.model_dump(mode="json"), result)
    return {
        **result.to_dict(),
        "color": objective_status_color(result.status),
        "label": objective_status_label(result.status),
    }


@app.post("/api/cycles/status")
async def cycle_status(body: CycleStatusRequest):
    result = calculate_cycle_status(body.start_date, body.end_date, body.today)
    log_calculation("cycle_status", body.model_dump(mode="json"), result)
    return {
        "status": result.value,
        "text": cycle_status_text(result),
        "color": cycle_status_color(result),
    }


@app.post("/api/priority")
async def priority(body: PriorityRequest):
    """Score a single initiative."""
    result = calculate_priority(
        impact_score=body.impact_score,
        effort_score=body.effort_score,
        confidence_score=body.confidence_score,
    )
    log_calculation("priority", body.model_dump(), result)
    return {
        **result.to_dict(),
        "color_class": priority_color_class(result.priority_level),
        "label": priority_label(result.priority_level),
    }


@app.post("/api/priority/bulk")
async def priority_bulk(body: BulkPriorityRequest):
    """Score many initiatives; the first invalid item rejects the request."""
    results = calculate_bulk_priorities(item.model_dump() for item in body.items)
    log_calculation("priority_bulk", {"count": len(body.items)}, len(results))
    return [r.to_dict() for r in results]


@app.post("/api/initiatives/status")
async def initiative_status(body: InitiativeStatusRequest):
    """Derive an initiative's status from task and success-metric activity."""
    tasks = [t.model_dump() for t in body.tasks]
    metrics = [m.model_dump() for m in body.success_metrics]
    new_status = calculate_initiative_status(body.current_status, tasks, metrics)
    log_calculation("initiative_status", body.model_dump(), new_status)
    return {
        **initiative_status_info(new_status).to_dict(),
        "changed": new_status.value != body.current_status,
        "reason": status_change_reason(body.current_status, new_status, tasks, metrics),
        "can_edit": can_edit_initiative(new_status),
        "can_close": can_close_initiative(new_status),
        "can_cancel": can_cancel_initiative(new_status),
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}
