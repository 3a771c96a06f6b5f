"""
Flight Aggregate
Holds the fixes of one flight and the results of every analysis stage.
"""

from dataclasses import dataclass
from typing import List, Optional

from .tracking.fix import Fix, resolve_track


@dataclass(frozen=True)
class FlightSummary:
    """Display projection of a flight that hides the analysis state."""

    flight_id: int
    total_distance: float  # meters


class Flight:
    """
    Everything known about one flight: the raw fixes plus the output of
    each analysis stage.

    Each stage owns its fields and its completion flag. A field is None
    until the stage that owns it has completed.
    """

    def __init__(
        self,
        fixes: Optional[List[Fix]] = None,
        flight_id: int = 0,
        name: Optional[str] = None,
        pilot_name: Optional[str] = None,
    ) -> None:
        """
        Initialize a flight ready for analysis.

        Args:
            fixes: Fixes in recording order (course and turn rate are derived here)
            flight_id: Identifier used in the summary projection
            name: Optional label, e.g. the IGC file name
            pilot_name: Optional pilot name
        """
        self.id = flight_id
        self.name = name
        self.pilot_name = pilot_name
        self.fixes: List[Fix] = resolve_track(list(fixes) if fixes else [])

        self.is_distance_analysis_complete = False
        self.total_distance: Optional[float] = None

        self.is_circling_analysis_complete = False
        self.circles = None

        self.is_thermal_analysis_complete = False
        self.thermals = None

        self.is_wind_analysis_complete = False
        self.wind_drifts = None

        self.is_straight_phases_analysis_complete = False
        self.straight_phases = None

        self.is_check_twice_analysis_complete = False

    @property
    def duration(self) -> int:
        """Seconds between the first and last fix."""
        if len(self.fixes) < 2:
            return 0
        return self.fixes[-1].seconds_since(self.fixes[0])

    def get_summary(self) -> FlightSummary:
        """Create the summary projection of this flight."""
        return FlightSummary(self.id, self.total_distance or 0.0)

    def __repr__(self) -> str:
        return f"Flight(id={self.id}, fixes={len(self.fixes)}, name={self.name!r})"
