"""
Walking Calculator - Calorie estimation for walking.

Walking calories depend on the walker's height, which is the
quantity guarded against zero here (not the duration).
"""
from dataclasses import dataclass

from fitness_tracker.core.constants import (
    CALORIES_SPEED_HEIGHT_MULTIPLIER,
    CALORIES_WEIGHT_MULTIPLIER,
    CM_IN_M,
    KMH_IN_MSEC,
    MIN_IN_HOURS,
)
from fitness_tracker.core.logging import get_logger, log_division_by_zero
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories.strategies.base import CaloriesCalculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class Walking(CaloriesCalculator):
    """Walking session with the walker's height in cm."""
    training: Training
    height: float
    
    activity_type = "walking"
    
    def calories(self) -> float:
        """
        Calories burned while walking.
        
        Formula:
        (0.035 * weight_kg + (speed_m_s ** 2 / height_m) * 0.029 * weight_kg)
        * duration_h * min_in_hour
        """
        speed_m_s = self.mean_speed() * KMH_IN_MSEC
        
        if self.height == 0:
            log_division_by_zero(logger, self.training.training_type, "height")
            return 0.0
        
        weight = self.training.weight
        return (
            (
                CALORIES_WEIGHT_MULTIPLIER * weight
                + (speed_m_s ** 2 / (self.height / CM_IN_M))
                * CALORIES_SPEED_HEIGHT_MULTIPLIER
                * weight
            )
            * self.training.duration_hours
            * MIN_IN_HOURS
        )
