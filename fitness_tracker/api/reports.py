"""
Training Reports API endpoints.
"""
from datetime import timedelta

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from fitness_tracker.core.config import settings
from fitness_tracker.core.logging import get_logger
from fitness_tracker.services.calories import (
    MissingParameterError,
    UnknownActivityError,
    build_calculator,
)

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class ReportRequest(BaseModel):
    """One completed training session."""
    activity_type: str = Field(..., description="running, walking or swimming")
    training_type: str | None = Field(None, description="Display label, defaults to activity_type")
    action: int = Field(..., ge=0, description="Steps or strokes")
    duration_min: float = Field(..., ge=0, description="Duration in minutes")
    weight: float = Field(..., description="Body weight in kg")
    len_step: float | None = Field(None, description="Metres per repetition")
    height: float | None = Field(None, description="Height in cm (walking)")
    length_pool: int | None = Field(None, description="Pool length in metres (swimming)")
    count_pool: int | None = Field(None, description="Pool crossings (swimming)")
    locale: str | None = Field(None, description="Report labels: en or ru")


class ReportResponse(BaseModel):
    """Computed training report."""
    training_type: str
    duration_min: float
    distance: float
    speed: float
    calories: float
    text: str


# ========================================
# API Endpoints
# ========================================

@router.post("", response_model=ReportResponse)
async def create_report(request: ReportRequest):
    """
    Compute distance, speed and calories for a training session.
    """
    try:
        calculator = build_calculator(
            activity_type=request.activity_type,
            training_type=request.training_type or request.activity_type,
            action=request.action,
            duration=timedelta(minutes=request.duration_min),
            weight=request.weight,
            len_step=request.len_step,
            height=request.height,
            length_pool=request.length_pool,
            count_pool=request.count_pool,
        )
    except (UnknownActivityError, MissingParameterError) as e:
        logger.warning("Rejected report request", activity_type=request.activity_type, error=str(e))
        raise HTTPException(status_code=422, detail=str(e))
    
    info = calculator.training_info()
    
    logger.info(
        "Report computed",
        activity_type=calculator.activity_type,
        calories=info.calories,
    )
    
    return ReportResponse(
        training_type=info.training_type,
        duration_min=info.duration_minutes,
        distance=info.distance,
        speed=info.speed,
        calories=info.calories,
        text=info.to_text(request.locale or settings.REPORT_LOCALE),
    )
