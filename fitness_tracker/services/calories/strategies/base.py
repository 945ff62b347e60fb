"""
Base Calculator - Abstract interface for activity-specific calculations.
"""
from abc import ABC, abstractmethod

from fitness_tracker.core.constants import M_IN_KM
from fitness_tracker.core.logging import get_logger, log_division_by_zero
from fitness_tracker.models.report import InfoMessage
from fitness_tracker.models.training import Training

logger = get_logger(__name__)


class CaloriesCalculator(ABC):
    """
    Abstract base class for activity-specific training metrics.
    
    Every subclass holds a ``training`` with the shared session fields.
    Distance and mean speed have generic implementations here; calories
    are always activity-specific. Report assembly goes through ``self``
    so every override is picked up.
    """
    
    activity_type: str = "unknown"
    training: Training
    
    def distance(self) -> float:
        """
        Distance covered, km.
        
        Formula: repetitions * step_length / metres_in_km
        """
        return self.training.action * self.training.len_step / M_IN_KM
    
    def mean_speed(self) -> float:
        """
        Mean speed, km/h.
        
        Returns 0.0 with a division-by-zero notice when duration is zero.
        """
        hours = self.training.duration_hours
        if hours == 0:
            log_division_by_zero(logger, self.training.training_type, "duration")
            return 0.0
        
        return self.distance() / hours
    
    @abstractmethod
    def calories(self) -> float:
        """
        Energy spent during the training, kcal.
        
        Returns:
            Calories, or 0.0 when the formula would divide by zero
        """
        pass
    
    def training_info(self) -> InfoMessage:
        """
        Assemble the training report.
        
        Returns:
            InfoMessage with distance, speed and calories for this activity
        """
        return InfoMessage(
            training_type=self.training.training_type,
            duration=self.training.duration,
            distance=self.distance(),
            speed=self.mean_speed(),
            calories=self.calories(),
        )
