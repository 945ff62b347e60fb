"""
Fitness Tracker - training distance, speed and calorie reports.
"""
__version__ = "1.0.0"
