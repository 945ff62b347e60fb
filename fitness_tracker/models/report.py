"""
Training report model and its text rendering.
"""
from dataclasses import dataclass
from datetime import timedelta
from decimal import Decimal
from typing import Dict, Optional


# Field labels per locale. Order and number formatting never vary.
REPORT_LABELS: Dict[str, Dict[str, str]] = {
    "en": {
        "training_type": "Activity type",
        "duration": "Duration",
        "minutes": "min",
        "distance": "Distance",
        "km": "km.",
        "speed": "Avg. speed",
        "kmh": "km/h",
        "calories": "Calories burned",
    },
    "ru": {
        "training_type": "Тип тренировки",
        "duration": "Длительность",
        "minutes": "мин",
        "distance": "Дистанция",
        "km": "км.",
        "speed": "Ср. скорость",
        "kmh": "км/ч",
        "calories": "Потрачено ккал",
    },
}

DEFAULT_LOCALE = "en"


def format_minutes(minutes: float) -> str:
    """
    Render minutes in shortest form.
    
    Whole values print without a fraction. Values from 1e6 up, or below
    1e-4, switch to exponent form with the shortest significant digits.
    
    Examples: 90.0 -> "90", 1.5 -> "1.5", 1e6 -> "1e+06"
    """
    if minutes != 0 and not (1e-4 <= abs(minutes) < 1e6):
        digits = Decimal(repr(minutes)).normalize().as_tuple().digits
        return f"{minutes:.{len(digits) - 1}e}"
    if minutes.is_integer():
        return str(int(minutes))
    return repr(minutes)


@dataclass(frozen=True)
class InfoMessage:
    """Summary of one completed training."""
    training_type: str
    duration: timedelta
    distance: float  # km
    speed: float  # km/h
    calories: float  # kcal
    
    @property
    def duration_minutes(self) -> float:
        return self.duration.total_seconds() / 60
    
    def to_text(self, locale: Optional[str] = None) -> str:
        """
        Render the fixed five-line report.
        
        Args:
            locale: Label set to use (en, ru). Unknown locales fall back to en.
            
        Returns:
            Report text ending with a newline
        """
        labels = REPORT_LABELS.get(locale or DEFAULT_LOCALE, REPORT_LABELS[DEFAULT_LOCALE])
        return (
            f"{labels['training_type']}: {self.training_type}\n"
            f"{labels['duration']}: {format_minutes(self.duration_minutes)} {labels['minutes']}\n"
            f"{labels['distance']}: {self.distance:.2f} {labels['km']}\n"
            f"{labels['speed']}: {self.speed:.2f} {labels['kmh']}\n"
            f"{labels['calories']}: {self.calories:.2f}\n"
        )
    
    def __str__(self) -> str:
        return self.to_text()
