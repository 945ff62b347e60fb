"""
Training session data model.
"""
from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class Training:
    """
    Raw parameters shared by every kind of training.
    
    Activity calculators hold one of these rather than extending it.
    """
    training_type: str  # display label
    action: int  # repetitions: steps, or strokes when swimming
    len_step: float  # metres per repetition
    duration: timedelta
    weight: float  # kg
    
    @property
    def duration_hours(self) -> float:
        """Duration as fractional hours."""
        return self.duration.total_seconds() / 3600
