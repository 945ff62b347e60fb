"""
Services module - Application business logic layer.

Modules:
- calories: Activity calculators and training reports
"""
from fitness_tracker.services.calories import build_calculator, read_data

__all__ = [
    "build_calculator",
    "read_data",
]
