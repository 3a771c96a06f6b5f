"""
Thermal Detection
Groups circles that follow each other without a gap into thermals.
"""

from datetime import timedelta
from typing import List

from ..flight import Flight
from .circling import CirclesAnalysis
from .exceptions import PreconditionsFailed
from .models import CirclingTurn, Thermal
from .stage import AnalysisStage, require_fixes, require_not_run


def circles_adjacent(c1: CirclingTurn, c2: CirclingTurn) -> bool:
    """
    Whether c2 starts exactly when c1 ends.

    Durations are whole seconds and the comparison is exact, with no
    tolerance.
    """
    return c1.timestamp + timedelta(seconds=c1.duration) == c2.timestamp


class ThermalAnalysis(AnalysisStage):
    """
    Identifies which circles fit together into thermals.

    Every circle ends up in exactly one thermal; a circle with no adjacent
    neighbour forms a thermal of its own.
    """

    name = "thermal"

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        thermals = self.calculate_thermals(flight.circles)

        flight.thermals = thermals
        flight.is_thermal_analysis_complete = True
        return flight

    def calculate_thermals(self, circles: List[CirclingTurn]) -> List[Thermal]:
        """
        Split a time-ordered circle list into runs of adjacent circles.

        Args:
            circles: Output of the circling analysis

        Returns:
            Thermals in time order
        """
        thermals: List[Thermal] = []
        run: List[CirclingTurn] = []

        for circle in circles:
            if run and not circles_adjacent(run[-1], circle):
                thermals.append(self._build_thermal(run))
                run = []
            run.append(circle)

        if run:
            thermals.append(self._build_thermal(run))

        return thermals

    @staticmethod
    def _build_thermal(circles: List[CirclingTurn]) -> Thermal:
        for circle in circles:
            circle.included_in_thermal = True
        return Thermal(list(circles))

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_thermal_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

        if not CirclesAnalysis().has_been_run(flight):
            raise PreconditionsFailed(
                "Circling analysis must be completed before thermal analysis"
            )
        if flight.circles is None:
            raise PreconditionsFailed("Circles list is not initialised")

    def reset(self, flight: Flight) -> None:
        for circle in flight.circles or []:
            circle.included_in_thermal = False
        flight.thermals = None
        flight.is_thermal_analysis_complete = False
