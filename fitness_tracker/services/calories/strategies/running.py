"""
Running Calculator - Calorie estimation for running.
"""
from dataclasses import dataclass

from fitness_tracker.core.constants import (
    CALORIES_MEAN_SPEED_MULTIPLIER,
    CALORIES_MEAN_SPEED_SHIFT,
    M_IN_KM,
    MIN_IN_HOURS,
)
from fitness_tracker.core.logging import get_logger, log_division_by_zero
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories.strategies.base import CaloriesCalculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class Running(CaloriesCalculator):
    """Running uses the generic distance and mean speed."""
    training: Training
    
    activity_type = "running"
    
    def calories(self) -> float:
        """
        Calories burned while running.
        
        Formula:
        (18 * mean_speed_kmh + 1.79) * weight_kg / m_in_km * duration_h * min_in_hour
        """
        hours = self.training.duration_hours
        if hours == 0:
            log_division_by_zero(logger, self.training.training_type, "duration")
            return 0.0
        
        return (
            (CALORIES_MEAN_SPEED_MULTIPLIER * self.mean_speed() + CALORIES_MEAN_SPEED_SHIFT)
            * self.training.weight
            / M_IN_KM
            * hours
            * MIN_IN_HOURS
        )
