"""
Wind Drift Estimation
Estimates circle drift inside each thermal and the correction the pilot
(or turbulence) applied to every circle on top of that drift.

The start points of successive circles in one climb are where the glider
came round to the same heading again, so the displacement between them
approximates how far the wind carried the thermal in one circle.

Algorithm:
1. Measure the drift vector (bearing, distance) between consecutive circle
   start points and average the vectors
2. Walk the samples once more and drop any that deviate from the running
   average by more than the bearing or distance tolerance, updating the
   average after each drop (a single pass, not iterated to convergence)
3. For each circle, project the previous start point along the trimmed
   average drift. The vector from that expected point to the actual start
   point is the circle's correction vector
"""

from dataclasses import dataclass
from math import atan2, cos, degrees, radians, sin
from typing import List, Tuple

from ..flight import Flight
from ..utils import bearing, bearing_between, bearing_delta, destination_from, distance, distance_between
from .constants import (
    MAX_AVERAGE_DEVIATION_DRIFT_BEARING,
    MAX_AVERAGE_DEVIATION_DRIFT_DISTANCE,
    MIN_CIRCLES_FOR_WIND,
)
from .exceptions import AnalysisFailure, PreconditionsFailed
from .models import CirclingTurn
from .stage import AnalysisStage, require_fixes, require_not_run
from .thermals import ThermalAnalysis


@dataclass(frozen=True)
class DriftTrend:
    """Trimmed average drift of one run of circles."""

    bearing: float  # degrees
    distance: float  # meters per circle
    samples: int  # drift vectors left after trimming
    trimmed: int  # drift vectors dropped as outliers


class _DriftAverage:
    """
    Running average of drift vectors that supports removing samples.

    Bearings are averaged as unit vectors so that drift to either side of
    north averages to north rather than south.
    """

    def __init__(self) -> None:
        self.sum_sin = 0.0
        self.sum_cos = 0.0
        self.sum_distance = 0.0
        self.count = 0

    def add(self, bearing_deg: float, distance_m: float) -> None:
        self.sum_sin += sin(radians(bearing_deg))
        self.sum_cos += cos(radians(bearing_deg))
        self.sum_distance += distance_m
        self.count += 1

    def remove(self, bearing_deg: float, distance_m: float) -> None:
        self.sum_sin -= sin(radians(bearing_deg))
        self.sum_cos -= cos(radians(bearing_deg))
        self.sum_distance -= distance_m
        self.count -= 1

    def mean(self) -> Tuple[float, float]:
        """
        Returns:
            Tuple of (bearing in degrees 0-360, distance in meters)

        Raises:
            AnalysisFailure: If no samples are left to average
        """
        if self.count <= 0:
            raise AnalysisFailure("Cannot average circle drift: no drift samples left")
        mean_bearing = (degrees(atan2(self.sum_sin, self.sum_cos)) + 360) % 360
        return mean_bearing, self.sum_distance / self.count


def calculate_correction_vectors(
    circles: List[CirclingTurn],
    max_bearing_deviation: float = MAX_AVERAGE_DEVIATION_DRIFT_BEARING,
    max_distance_deviation: float = MAX_AVERAGE_DEVIATION_DRIFT_DISTANCE,
) -> DriftTrend:
    """
    Set drift and correction vectors on a run of circles.

    The first circle of the run has no predecessor and keeps None for all
    four vector fields. Nothing is written to the circles unless the whole
    calculation succeeds.

    Args:
        circles: Time-ordered circles (at least two)
        max_bearing_deviation: Outlier tolerance for drift bearing (degrees)
        max_distance_deviation: Outlier tolerance for drift distance (meters)

    Returns:
        The trimmed average drift

    Raises:
        AnalysisFailure: If fewer than two circles are given, or trimming
            leaves nothing to average
    """
    if len(circles) < MIN_CIRCLES_FOR_WIND:
        raise AnalysisFailure(
            f"Drift needs at least {MIN_CIRCLES_FOR_WIND} circles, got {len(circles)}"
        )

    pairs = list(zip(circles, circles[1:]))

    # Pass 1: raw drift vectors between consecutive start points
    drifts: List[Tuple[float, float]] = []
    average = _DriftAverage()
    for previous, circle in pairs:
        drift = (
            bearing_between(previous.start_fix, circle.start_fix),
            distance_between(previous.start_fix, circle.start_fix),
        )
        drifts.append(drift)
        average.add(*drift)

    mean_bearing, mean_distance = average.mean()

    # Pass 2: trim outliers against the running average
    trimmed = 0
    for drift_bearing, drift_distance in drifts:
        if (
            abs(bearing_delta(mean_bearing, drift_bearing)) > max_bearing_deviation
            or abs(drift_distance - mean_distance) > max_distance_deviation
        ):
            average.remove(drift_bearing, drift_distance)
            trimmed += 1
            mean_bearing, mean_distance = average.mean()

    # Pass 3: where the trend says each circle should have started
    corrections: List[Tuple[float, float]] = []
    for previous, circle in pairs:
        expected_lat, expected_lon = destination_from(
            previous.start_fix, mean_bearing, mean_distance
        )
        actual = circle.start_fix
        corrections.append(
            (
                bearing(expected_lat, expected_lon, actual.lat_radians, actual.lon_radians),
                distance(expected_lat, expected_lon, actual.lat_radians, actual.lon_radians),
            )
        )

    for (_, circle), drift, correction in zip(pairs, drifts, corrections):
        circle.drift_bearing, circle.drift_distance = drift
        circle.correction_bearing, circle.correction_distance = correction

    return DriftTrend(mean_bearing, mean_distance, average.count, trimmed)


class WindAnalysis(AnalysisStage):
    """
    Runs the drift estimation over the circles of every thermal.

    Thermals of a single circle have no drift to measure and are skipped.
    Circles whose correction exceeds the distance tolerance are flagged as
    centering corrections.
    """

    name = "wind"

    def __init__(
        self,
        max_bearing_deviation: float = MAX_AVERAGE_DEVIATION_DRIFT_BEARING,
        max_distance_deviation: float = MAX_AVERAGE_DEVIATION_DRIFT_DISTANCE,
    ) -> None:
        """
        Initialize wind drift analysis.

        Args:
            max_bearing_deviation: Drift bearing outlier tolerance (degrees)
            max_distance_deviation: Drift distance outlier tolerance (meters)
        """
        self.max_bearing_deviation = max_bearing_deviation
        self.max_distance_deviation = max_distance_deviation

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        trends: List[DriftTrend] = []
        try:
            for thermal in flight.thermals:
                if thermal.circle_count < MIN_CIRCLES_FOR_WIND:
                    continue
                trends.append(
                    calculate_correction_vectors(
                        thermal.circles,
                        self.max_bearing_deviation,
                        self.max_distance_deviation,
                    )
                )
        except AnalysisFailure:
            # Undo vectors already written for earlier thermals
            self.reset(flight)
            raise

        for thermal in flight.thermals:
            for circle in thermal.circles[1:]:
                circle.centering_correction = (
                    circle.correction_distance is not None
                    and circle.correction_distance > self.max_distance_deviation
                )

        flight.wind_drifts = trends
        flight.is_wind_analysis_complete = True
        return flight

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_wind_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

        if not ThermalAnalysis().has_been_run(flight):
            raise PreconditionsFailed(
                "Thermal analysis must be completed before wind analysis"
            )
        if flight.thermals is None:
            raise PreconditionsFailed("Thermals list is not initialised")

    def reset(self, flight: Flight) -> None:
        for circle in flight.circles or []:
            circle.drift_bearing = None
            circle.drift_distance = None
            circle.correction_bearing = None
            circle.correction_distance = None
            circle.centering_correction = False
        flight.wind_drifts = None
        flight.is_wind_analysis_complete = False
