"""
Track Point Model
A single GPS fix plus the course and turn rate derived from its predecessor.
"""

from dataclasses import dataclass
from datetime import datetime
from math import radians, degrees
from typing import List, Optional

from ..utils import bearing_between, bearing_delta


@dataclass(eq=False)
class Fix:
    """
    One GPS sample from a flight recorder.

    Coordinates are kept in radians so the geodesy helpers never convert
    them again. Fixes compare by identity: two samples at the same place and
    time are still different fixes.
    """

    timestamp: datetime
    lat_radians: float
    lon_radians: float
    pressure_altitude: int = 0  # meters
    gnss_altitude: int = 0  # meters
    index: int = -1  # position in the flight's fix sequence
    track_course: Optional[float] = None  # degrees, bearing flown into this fix
    turn_rate: Optional[float] = None  # degrees per second, positive = right

    @classmethod
    def from_degrees(
        cls,
        timestamp: datetime,
        latitude: float,
        longitude: float,
        pressure_altitude: int = 0,
        gnss_altitude: int = 0,
    ) -> "Fix":
        """Create a fix from coordinates in decimal degrees."""
        return cls(
            timestamp=timestamp,
            lat_radians=radians(latitude),
            lon_radians=radians(longitude),
            pressure_altitude=pressure_altitude,
            gnss_altitude=gnss_altitude,
        )

    @property
    def latitude(self) -> float:
        """Latitude in degrees."""
        return degrees(self.lat_radians)

    @property
    def longitude(self) -> float:
        """Longitude in degrees."""
        return degrees(self.lon_radians)

    def seconds_since(self, other: "Fix") -> int:
        """Whole seconds elapsed from another fix to this one."""
        return int((self.timestamp - other.timestamp).total_seconds())

    def resolve(self, previous: "Fix") -> None:
        """
        Derive track course and turn rate against the previous fix.

        Computed once; later calls leave the values untouched. The turn rate
        stays None when the previous fix has no course yet or when no time
        has elapsed between the two fixes.

        Args:
            previous: The fix immediately before this one
        """
        if self.track_course is not None:
            return

        self.track_course = bearing_between(previous, self)

        elapsed = self.seconds_since(previous)
        if previous.track_course is None or elapsed <= 0:
            return

        self.turn_rate = bearing_delta(previous.track_course, self.track_course) / elapsed

    def __repr__(self) -> str:
        return (
            f"Fix({self.timestamp:%H:%M:%S}, {self.latitude:.5f}, "
            f"{self.longitude:.5f}, course={self.track_course})"
        )


def resolve_track(fixes: List[Fix]) -> List[Fix]:
    """
    Assign indices and derive course/turn rate for an ordered fix sequence.

    Values derived for an earlier sequence are discarded first, so the first
    fix of a sub-track has no course again.

    Args:
        fixes: Fixes in recording order

    Returns:
        The same list, resolved in place
    """
    previous = None
    for i, fix in enumerate(fixes):
        fix.index = i
        fix.track_course = None
        fix.turn_rate = None
        if previous is not None:
            fix.resolve(previous)
        previous = fix

    return fixes
