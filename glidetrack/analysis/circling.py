"""
Circling Detection
Finds full-circle turns in a flight from the turn rate between fixes.

The detector is a three-state machine (cruising, turning left, turning
right) stepped once per fix that has a turn rate, sweeping the course
change since the last fix it stepped on:

1. Cruising: a turn rate beyond the threshold starts a turn in that
   direction, remembering the fix and the course it started on
2. Turning: dropping below the threshold abandons the turn, and a rate
   beyond the threshold the other way starts a fresh turn the other way
3. Turning: otherwise, once the course swings past the start course in the
   direction of the turn, a full circle is complete. It is recorded and
   the next circle starts at the same fix, on the same start course

Turns that never come round to their start course (S-turns, turn points,
abandoned thermals) are dropped without ever being recorded.
"""

from typing import List, Optional, Tuple

from ..flight import Flight
from ..tracking.fix import Fix
from ..utils import bearing_delta
from .constants import TURN_RATE_THRESHOLD
from .exceptions import AnalysisFailure
from .models import CirclingTurn, FlightMode
from .stage import AnalysisStage, require_fixes, require_not_run


def course_crossed(
    previous_course: float, course: float, start_course: float, direction: FlightMode
) -> bool:
    """
    Check whether a course change swept past the start course.

    The sweep runs from previous_course to course along the shortest arc,
    and only counts when it goes the same way as the turn.

    Args:
        previous_course: Course at the previous fix (degrees)
        course: Course at the current fix (degrees)
        start_course: Course the turn started on (degrees)
        direction: TURNING_LEFT or TURNING_RIGHT

    Returns:
        True if start_course lies within the sweep (end inclusive)

    Example:
        >>> course_crossed(350, 10, 5, FlightMode.TURNING_RIGHT)
        True
        >>> course_crossed(10, 350, 5, FlightMode.TURNING_RIGHT)
        False
    """
    turned = bearing_delta(previous_course, course)

    if direction is FlightMode.TURNING_LEFT:
        turned = -turned
        to_start = (previous_course - start_course) % 360
    else:
        to_start = (start_course - previous_course) % 360

    return turned > 0 and 0 < to_start <= turned


class CirclesAnalysis(AnalysisStage):
    """
    Detects completed circling turns.

    Configuration:
        turn_rate_threshold: Turn rate (deg/s) above which the glider is
            considered to be circling (default: 4)
    """

    name = "circling"

    def __init__(self, turn_rate_threshold: float = TURN_RATE_THRESHOLD) -> None:
        """
        Initialize circling detector.

        Args:
            turn_rate_threshold: Thermal turn threshold in degrees per second
        """
        self.turn_rate_threshold = turn_rate_threshold

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        circles = self.analyse_circling(flight.fixes)

        flight.circles = circles
        flight.is_circling_analysis_complete = True
        return flight

    def analyse_circling(self, fixes: List[Fix]) -> List[CirclingTurn]:
        """
        Find every full-circle turn in a resolved fix sequence.

        Args:
            fixes: Fixes with track course and turn rate derived

        Returns:
            Completed turns in time order (empty if none were found)

        Raises:
            AnalysisFailure: If the state machine reaches an unknown mode
        """
        circles: List[CirclingTurn] = []
        mode = FlightMode.CRUISING
        circle: Optional[CirclingTurn] = None

        previous = None
        for fix in fixes:
            # A same-second fix has no turn rate and is not stepped on. The
            # next sweep starts from the last fix that was, so no course
            # change is lost
            if previous is not None and fix.turn_rate is not None:
                mode, circle = self._step(mode, circle, previous, fix, circles)
                previous = fix
            elif previous is None or previous.track_course is None:
                previous = fix

        return circles

    def _step(
        self,
        mode: FlightMode,
        circle: Optional[CirclingTurn],
        previous: Fix,
        fix: Fix,
        circles: List[CirclingTurn],
    ) -> Tuple[FlightMode, Optional[CirclingTurn]]:
        """Advance the state machine by one fix."""
        rate = fix.turn_rate
        threshold = self.turn_rate_threshold

        if mode is FlightMode.CRUISING:
            if rate > threshold:
                return FlightMode.TURNING_RIGHT, self._start_turn(fix, FlightMode.TURNING_RIGHT)
            if rate < -threshold:
                return FlightMode.TURNING_LEFT, self._start_turn(fix, FlightMode.TURNING_LEFT)
            return mode, None

        elif mode in (FlightMode.TURNING_LEFT, FlightMode.TURNING_RIGHT):
            if abs(rate) < threshold:
                # Turning too slowly to still call this a thermal turn
                return FlightMode.CRUISING, None

            if mode is FlightMode.TURNING_LEFT and rate > threshold:
                return FlightMode.TURNING_RIGHT, self._start_turn(fix, FlightMode.TURNING_RIGHT)
            if mode is FlightMode.TURNING_RIGHT and rate < -threshold:
                return FlightMode.TURNING_LEFT, self._start_turn(fix, FlightMode.TURNING_LEFT)

            if course_crossed(previous.track_course, fix.track_course, circle.start_course, mode):
                circle.complete(fix)
                circles.append(circle)
                # The next circle carries on from the closing fix
                circle = CirclingTurn(
                    start_fix=fix, turn_direction=mode, start_course=circle.start_course
                )

            return mode, circle

        else:
            raise AnalysisFailure(f"Unexpected flight mode indicator [{mode}]")

    @staticmethod
    def _start_turn(fix: Fix, direction: FlightMode) -> CirclingTurn:
        return CirclingTurn(start_fix=fix, turn_direction=direction, start_course=fix.track_course)

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_circling_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

    def reset(self, flight: Flight) -> None:
        flight.circles = None
        flight.is_circling_analysis_complete = False
