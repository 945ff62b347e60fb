"""
Activity-specific calculators.

Each calculator implements distance, mean speed, calories and
report assembly for one kind of training.
"""
from fitness_tracker.services.calories.strategies.base import CaloriesCalculator
from fitness_tracker.services.calories.strategies.running import Running
from fitness_tracker.services.calories.strategies.swimming import Swimming
from fitness_tracker.services.calories.strategies.walking import Walking

__all__ = [
    "CaloriesCalculator",
    "Running",
    "Swimming",
    "Walking",
]
