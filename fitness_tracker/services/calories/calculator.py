"""
Training Calculator - Entry point for building and reading training reports.

Orchestrates:
- Calculator selection based on activity type
- Report assembly through the selected calculator
- Text rendering of the report
"""
from datetime import timedelta
from typing import Dict, Optional, Type

from fitness_tracker.core.config import settings
from fitness_tracker.core.constants import LEN_STEP, SWIMMING_LEN_STEP
from fitness_tracker.core.logging import get_logger
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories.strategies import (
    CaloriesCalculator,
    Running,
    Swimming,
    Walking,
)

logger = get_logger(__name__)


class UnknownActivityError(ValueError):
    """Raised when no calculator exists for an activity type."""


class MissingParameterError(ValueError):
    """Raised when an activity-specific parameter was not supplied."""


# Calculator registry
_CALCULATORS: Dict[str, Type[CaloriesCalculator]] = {
    "running": Running,
    "walking": Walking,
    "swimming": Swimming,
}

# Default repetition length per activity, metres
_DEFAULT_LEN_STEP: Dict[str, float] = {
    "running": LEN_STEP,
    "walking": LEN_STEP,
    "swimming": SWIMMING_LEN_STEP,
}


def supported_activities() -> list[str]:
    """Activity types that have a calculator."""
    return list(_CALCULATORS)


def build_calculator(
    activity_type: str,
    training_type: str,
    action: int,
    duration: timedelta,
    weight: float,
    len_step: Optional[float] = None,
    height: Optional[float] = None,
    length_pool: Optional[int] = None,
    count_pool: Optional[int] = None,
) -> CaloriesCalculator:
    """
    Build the calculator for an activity type.
    
    Args:
        activity_type: running, walking or swimming
        training_type: Display label for the report
        action: Steps or strokes
        duration: Training duration
        weight: Body weight in kg
        len_step: Metres per repetition (activity default if None)
        height: Walker height in cm (walking only)
        length_pool: Pool length in metres (swimming only)
        count_pool: Number of pool crossings (swimming only)
        
    Returns:
        Calculator instance
        
    Raises:
        UnknownActivityError: If activity_type is not supported
        MissingParameterError: If an activity-specific value is missing
    """
    key = activity_type.lower()
    calculator_class = _CALCULATORS.get(key)
    
    if not calculator_class:
        raise UnknownActivityError(f"Unsupported activity type: {activity_type}")
    
    training = Training(
        training_type=training_type,
        action=action,
        len_step=_DEFAULT_LEN_STEP[key] if len_step is None else len_step,
        duration=duration,
        weight=weight,
    )
    
    if calculator_class is Walking:
        if height is None:
            raise MissingParameterError("Walking requires height")
        return Walking(training=training, height=height)
    
    if calculator_class is Swimming:
        if length_pool is None or count_pool is None:
            raise MissingParameterError("Swimming requires length_pool and count_pool")
        return Swimming(training=training, length_pool=length_pool, count_pool=count_pool)
    
    return calculator_class(training=training)


def read_data(training: CaloriesCalculator, locale: Optional[str] = None) -> str:
    """
    Build and render the report for a training.
    
    Args:
        training: Any activity calculator
        locale: Label set (defaults to REPORT_LOCALE setting)
        
    Returns:
        Formatted report text
    """
    info = training.training_info()
    
    logger.debug(
        "Training report built",
        activity_type=training.activity_type,
        distance=info.distance,
        speed=info.speed,
        calories=info.calories,
    )
    
    return info.to_text(locale or settings.REPORT_LOCALE)
