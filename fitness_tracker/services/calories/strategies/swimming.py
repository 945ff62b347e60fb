"""
Swimming Calculator - Pool-based speed and calorie estimation.

Distance keeps the generic stroke-based formula while mean speed is
derived from pool length and crossings. The two are intentionally not
reconciled.
"""
from dataclasses import dataclass

from fitness_tracker.core.constants import (
    M_IN_KM,
    SWIMMING_CALORIES_MEAN_SPEED_SHIFT,
    SWIMMING_CALORIES_WEIGHT_MULTIPLIER,
)
from fitness_tracker.core.logging import get_logger, log_division_by_zero
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories.strategies.base import CaloriesCalculator

logger = get_logger(__name__)


@dataclass(frozen=True)
class Swimming(CaloriesCalculator):
    """Pool swimming session."""
    training: Training
    length_pool: int  # metres
    count_pool: int  # pool crossings
    
    activity_type = "swimming"
    
    def mean_speed(self) -> float:
        """
        Mean swimming speed, km/h.
        
        Formula: pool_length * crossings / m_in_km / duration_h
        """
        hours = self.training.duration_hours
        if hours == 0:
            log_division_by_zero(logger, self.training.training_type, "duration")
            return 0.0
        
        return self.length_pool * self.count_pool / M_IN_KM / hours
    
    def calories(self) -> float:
        """
        Calories burned while swimming.
        
        Formula: (mean_speed_kmh + 1.1) * 2 * weight_kg * duration_h
        
        Zero duration needs no guard of its own: mean speed is 0.0 and
        the product collapses to 0.0.
        """
        return (
            (self.mean_speed() + SWIMMING_CALORIES_MEAN_SPEED_SHIFT)
            * SWIMMING_CALORIES_WEIGHT_MULTIPLIER
            * self.training.weight
            * self.training.duration_hours
        )
