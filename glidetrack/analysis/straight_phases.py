"""
Straight Phase Detection
Splits the flight outside thermals into straight glides.

The glides run from takeoff to the first thermal, between consecutive
thermals, and from the last thermal to the end of the flight. Each glide is
then cut wherever the glider turned sharply without going full circle
(turn points, thermal search patterns): anywhere the course changed by more
than the threshold angle within the threshold time.
"""

from typing import List, Tuple

from ..flight import Flight
from ..tracking.fix import Fix
from ..utils import bearing_delta
from .constants import THRESHOLD_ANGLE, THRESHOLD_TIME
from .exceptions import AnalysisFailure, PreconditionsFailed
from .models import StraightPhase
from .stage import AnalysisStage, require_fixes, require_not_run
from .thermals import ThermalAnalysis


class StraightPhasesAnalysis(AnalysisStage):
    """
    Finds straight phases and their ground speeds.

    Configuration:
        threshold_time: Span of the sliding window in seconds (default: 10)
        threshold_angle: Course change in degrees that counts as a sharp
            turn within the window (default: 45)
    """

    name = "straight phases"

    def __init__(
        self,
        threshold_time: int = THRESHOLD_TIME,
        threshold_angle: float = THRESHOLD_ANGLE,
    ) -> None:
        self.threshold_time = threshold_time
        self.threshold_angle = threshold_angle

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        phases: List[StraightPhase] = []
        if len(flight.fixes) >= 2:
            for start_index, end_index in self._glide_ranges(flight):
                if end_index > start_index:
                    phases.extend(self.split_into_sections(flight.fixes, start_index, end_index))

        for phase in phases:
            phase.calculate_speed()

        flight.straight_phases = phases
        flight.is_straight_phases_analysis_complete = True
        return flight

    def _glide_ranges(self, flight: Flight) -> List[Tuple[int, int]]:
        """Fix index ranges outside the thermals, in time order."""
        last_index = len(flight.fixes) - 1

        if not flight.thermals:
            return [(0, last_index)]

        # Takeoff roll is always straight: start with the first fix
        ranges = [(0, self._index_of(flight, flight.thermals[0].start_point))]

        for t1, t2 in zip(flight.thermals, flight.thermals[1:]):
            ranges.append(
                (self._index_of(flight, t1.end_point), self._index_of(flight, t2.start_point))
            )

        # Final glide after the last thermal
        ranges.append((self._index_of(flight, flight.thermals[-1].end_point), last_index))
        return ranges

    @staticmethod
    def _index_of(flight: Flight, fix: Fix) -> int:
        index = fix.index
        if not 0 <= index < len(flight.fixes) or flight.fixes[index] is not fix:
            raise AnalysisFailure("Straight phase endpoint was not found among flight's fixes")
        return index

    def split_into_sections(
        self, fixes: List[Fix], start_index: int, end_index: int
    ) -> List[StraightPhase]:
        """
        Cut one glide at every sharp turn that did not go full circle.

        A tail index trails the head so the two stay about threshold_time
        apart, whatever the recorder's sampling interval. When the course
        into the head differs from the course into the tail by more than
        threshold_angle, the glide is cut at the head, unless the piece
        before the cut would be threshold_time or shorter. The cut happens
        once per sustained turn.

        Args:
            fixes: The flight's resolved fixes
            start_index: Index of the glide's first fix
            end_index: Index of the glide's last fix

        Returns:
            Straight phases covering the glide, in time order
        """
        sections: List[StraightPhase] = []
        segment_start = start_index
        tail = start_index
        continued_turn = False

        head = tail + 1
        while head <= end_index:
            p_head = fixes[head]

            if p_head.seconds_since(fixes[tail]) > self.threshold_time:
                # Bring up the tail until head and tail are near the threshold time apart
                while p_head.seconds_since(fixes[tail]) > self.threshold_time:
                    tail += 1

                change = abs(bearing_delta(fixes[tail].track_course, p_head.track_course))
                if change > self.threshold_angle:
                    if not continued_turn:
                        continued_turn = True

                        # Avoid degenerately short straight phases
                        if (
                            fixes[tail].seconds_since(fixes[segment_start]) > self.threshold_time
                            and head < end_index
                        ):
                            sections.append(StraightPhase(fixes[segment_start], p_head))
                            segment_start = head
                            tail = head
                else:
                    continued_turn = False

            head += 1

        sections.append(StraightPhase(fixes[segment_start], fixes[end_index]))
        return sections

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_straight_phases_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

        if not ThermalAnalysis().has_been_run(flight):
            raise PreconditionsFailed(
                "Thermal analysis must be completed before straight phase analysis"
            )
        if flight.thermals is None:
            raise PreconditionsFailed("Thermals list is not initialised")

    def reset(self, flight: Flight) -> None:
        flight.straight_phases = None
        flight.is_straight_phases_analysis_complete = False
