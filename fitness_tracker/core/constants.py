"""
Shared constants for training calculations.
"""

# Unit conversion
M_IN_KM = 1000  # metres in a kilometre
MIN_IN_HOURS = 60  # minutes in an hour
CM_IN_M = 100  # centimetres in a metre
KMH_IN_MSEC = 0.278  # km/h -> m/s

# Default step length for running and walking, metres
LEN_STEP = 0.65

# Running
CALORIES_MEAN_SPEED_MULTIPLIER = 18
CALORIES_MEAN_SPEED_SHIFT = 1.79

# Walking
CALORIES_WEIGHT_MULTIPLIER = 0.035
CALORIES_SPEED_HEIGHT_MULTIPLIER = 0.029

# Swimming
SWIMMING_LEN_STEP = 1.38  # length of one stroke, metres
SWIMMING_CALORIES_MEAN_SPEED_SHIFT = 1.1
SWIMMING_CALORIES_WEIGHT_MULTIPLIER = 2
