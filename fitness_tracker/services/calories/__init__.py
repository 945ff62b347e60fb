"""
Calories module - Training metrics and report generation.

This module provides:
- Activity calculators for running, walking and swimming
- A factory that selects the calculator by activity type
- The report reader that renders a training summary
"""
from fitness_tracker.services.calories.calculator import (
    MissingParameterError,
    UnknownActivityError,
    build_calculator,
    read_data,
    supported_activities,
)
from fitness_tracker.services.calories.strategies import (
    CaloriesCalculator,
    Running,
    Swimming,
    Walking,
)

__all__ = [
    # Calculators
    "CaloriesCalculator",
    "Running",
    "Walking",
    "Swimming",
    # Factory
    "build_calculator",
    "supported_activities",
    # Reader
    "read_data",
    # Errors
    "UnknownActivityError",
    "MissingParameterError",
]
