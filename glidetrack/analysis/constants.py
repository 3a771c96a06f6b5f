"""
Analysis Constants
"""

from ..config import Settings

# Circling detection
TURN_RATE_THRESHOLD: float = Settings.TURN_RATE_THRESHOLD_DEG_S  # deg/s, faster = thermal turn

# Wind drift outlier trimming
MAX_AVERAGE_DEVIATION_DRIFT_BEARING: float = Settings.MAX_DRIFT_BEARING_DEVIATION_DEG  # degrees
MAX_AVERAGE_DEVIATION_DRIFT_DISTANCE: float = Settings.MAX_DRIFT_DISTANCE_DEVIATION_M  # meters

# Straight phase segmentation
THRESHOLD_TIME: int = Settings.STRAIGHT_PHASE_THRESHOLD_SECONDS  # seconds
THRESHOLD_ANGLE: float = Settings.STRAIGHT_PHASE_THRESHOLD_ANGLE_DEG  # degrees

# Circles a thermal needs before a drift vector can be measured
MIN_CIRCLES_FOR_WIND: int = 2
