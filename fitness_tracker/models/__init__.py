from fitness_tracker.models.training import Training
from fitness_tracker.models.report import InfoMessage, REPORT_LABELS

__all__ = [
    "Training",
    "InfoMessage",
    "REPORT_LABELS",
]
