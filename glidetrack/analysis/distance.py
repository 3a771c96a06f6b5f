"""
Ground Track Distance
"""

from ..flight import Flight
from ..utils import distance_between
from .stage import AnalysisStage, require_fixes, require_not_run


class DistanceAnalysis(AnalysisStage):
    """Total distance flown over ground, summed fix to fix."""

    name = "distance"

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        total = 0.0
        previous = None
        for fix in flight.fixes:
            if previous is not None:
                total += distance_between(previous, fix)
            previous = fix

        flight.total_distance = total
        flight.is_distance_analysis_complete = True
        return flight

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_distance_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

    def reset(self, flight: Flight) -> None:
        flight.total_distance = None
        flight.is_distance_analysis_complete = False
