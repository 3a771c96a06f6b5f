"""
Analysis Result Models
Circling turns, thermals and straight phases produced by the analysis stages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from ..tracking.fix import Fix
from ..utils import distance_between, format_duration, round_half_up


class FlightMode(Enum):
    """States of the circling detector."""

    CRUISING = "cruising"
    TURNING_LEFT = "left"
    TURNING_RIGHT = "right"


class CheckTwiceRule(Enum):
    """Whether a centering correction waited one full circle after the last."""

    FOLLOWED = "followed"
    NOT_FOLLOWED = "not_followed"
    NOT_APPLICABLE = "not_applicable"


@dataclass(eq=False)
class CirclingTurn:
    """
    One completed 360 degree turn.

    The start and end fixes are references into the flight's fix sequence;
    the turn does not own them.
    """

    start_fix: Fix
    turn_direction: FlightMode
    start_course: float
    end_fix: Optional[Fix] = None
    duration: int = 0  # seconds
    included_in_thermal: bool = False
    centering_correction: bool = False
    check_twice_rule: CheckTwiceRule = CheckTwiceRule.NOT_APPLICABLE

    # Filled in by the wind drift analysis
    drift_bearing: Optional[float] = None
    drift_distance: Optional[float] = None
    correction_bearing: Optional[float] = None
    correction_distance: Optional[float] = None

    @property
    def timestamp(self) -> datetime:
        """Time the turn started."""
        return self.start_fix.timestamp

    @property
    def start_latitude(self) -> float:
        return self.start_fix.latitude

    @property
    def start_longitude(self) -> float:
        return self.start_fix.longitude

    @property
    def end_timestamp(self) -> datetime:
        return self.end_fix.timestamp

    def complete(self, end_fix: Fix) -> None:
        """Close the turn at the fix where it crossed its start course."""
        self.end_fix = end_fix
        self.duration = end_fix.seconds_since(self.start_fix)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_time": self.timestamp.isoformat(),
            "duration_s": self.duration,
            "direction": self.turn_direction.value,
            "start_course": self.start_course,
            "start_lat": self.start_latitude,
            "start_lon": self.start_longitude,
            "drift_bearing": self.drift_bearing,
            "drift_distance_m": self.drift_distance,
            "correction_bearing": self.correction_bearing,
            "correction_distance_m": self.correction_distance,
            "centering_correction": self.centering_correction,
            "check_twice_rule": self.check_twice_rule.value,
        }

    def __str__(self) -> str:
        return f"Duration (s) = [{self.duration:02d}]"


@dataclass(eq=False)
class Thermal:
    """
    A run of temporally adjacent circling turns.

    Start and end points are cached when the thermal is built; build a new
    thermal rather than changing the circles of an existing one.
    """

    circles: List[CirclingTurn]
    start_point: Fix = field(init=False)
    end_point: Fix = field(init=False)

    def __post_init__(self) -> None:
        if not self.circles:
            raise ValueError("A thermal needs at least one circle")
        self.start_point = self.circles[0].start_fix
        self.end_point = self.circles[-1].end_fix

    @property
    def circle_count(self) -> int:
        return len(self.circles)

    @property
    def total_duration_seconds(self) -> int:
        return sum(c.duration for c in self.circles)

    @property
    def average_circle_duration(self) -> int:
        """Mean circle duration in whole seconds (halves round up)."""
        return round_half_up(self.total_duration_seconds / self.circle_count)

    @property
    def total_duration(self) -> str:
        """Total duration formatted as M:SS (H:MM:SS past the hour)."""
        return format_duration(self.total_duration_seconds)

    @property
    def turn_direction(self) -> FlightMode:
        return self.circles[0].turn_direction

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_time": self.start_point.timestamp.isoformat(),
            "start_lat": self.start_point.latitude,
            "start_lon": self.start_point.longitude,
            "circle_count": self.circle_count,
            "total_duration_s": self.total_duration_seconds,
            "total_duration": self.total_duration,
            "average_circle_duration_s": self.average_circle_duration,
            "direction": self.turn_direction.value,
        }

    def __str__(self) -> str:
        return (
            f"Thermal: circles = [{self.circle_count}], "
            f"duration = [{self.total_duration}], "
            f"average circle = [{self.average_circle_duration}s]"
        )


@dataclass(eq=False)
class StraightPhase:
    """A glide segment between two fixes, measured end to end."""

    start_point: Fix
    end_point: Fix
    distance: float = field(init=False)  # meters
    ground_speed: float = 0.0  # meters per second

    def __post_init__(self) -> None:
        self.distance = distance_between(self.start_point, self.end_point)

    @property
    def duration_seconds(self) -> int:
        return self.end_point.seconds_since(self.start_point)

    def calculate_speed(self) -> float:
        """Set and return ground speed; zero when no time elapsed."""
        duration = self.duration_seconds
        self.ground_speed = self.distance / duration if duration > 0 else 0.0
        return self.ground_speed

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start_time": self.start_point.timestamp.isoformat(),
            "end_time": self.end_point.timestamp.isoformat(),
            "duration_s": self.duration_seconds,
            "distance_m": self.distance,
            "ground_speed_ms": self.ground_speed,
        }
