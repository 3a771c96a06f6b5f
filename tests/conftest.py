"""
Shared fixtures: a synthetic one-fix-per-second track builder and IGC samples.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.tracking.fix import Fix
from glidetrack.utils import destination_point


class TrackBuilder:
    """
    Lays out fixes one second apart at constant ground speed.

    Each step flies the given course for one second, so the track course of
    the new fix equals that course and the turn rate is the course change
    per step.
    """

    def __init__(
        self,
        latitude=-33.9,
        longitude=18.9,
        start=datetime(2024, 6, 1, 12, 0, 0),
        speed=25.0,
        course=0.0,
    ):
        self.speed = speed
        self.course = course
        self.fixes = [Fix.from_degrees(start, latitude, longitude)]

    def step(self, course):
        last = self.fixes[-1]
        lat, lon = destination_point(last.lat_radians, last.lon_radians, course, self.speed)
        self.fixes.append(Fix(last.timestamp + timedelta(seconds=1), lat, lon))
        self.course = course % 360
        return self

    def straight(self, seconds, course=None):
        if course is not None:
            self.course = course
        for _ in range(seconds):
            self.step(self.course)
        return self

    def turn(self, rate, seconds):
        for _ in range(seconds):
            self.step(self.course + rate)
        return self

    def courses(self, courses):
        for course in courses:
            self.step(course)
        return self

    def circles(self, durations, direction="right"):
        """
        Fly full circles taking exactly the given number of seconds each.

        The rate of every circle is picked so the start course is crossed
        half a step before the closing fix.
        """
        sign = 1 if direction == "right" else -1
        excess = 0.0
        for n, duration in enumerate(durations):
            rate = (360.0 - excess) / (duration - 0.5)
            if n == 0:
                # Fix the circle starts on
                self.step(self.course + sign * rate)
            for _ in range(duration):
                self.step(self.course + sign * rate)
            excess = rate / 2
        return self

    def build(self):
        return list(self.fixes)


@pytest.fixture
def track_builder():
    """Factory for synthetic tracks."""
    return TrackBuilder


@pytest.fixture
def thermal_track():
    """Straight, one right-hand thermal of four circles, straight."""
    return TrackBuilder().straight(60).circles([32, 24, 32, 28]).straight(60).build()


@pytest.fixture
def s_turn_records():
    """Weaving flight that never completes a circle."""
    return [
        "B1109303308755S01911128EA016190171900308",
        "B1109343308702S01911090EA016310173200309",
        "B1109383308653S01911048EA016440174100308",
        "B1109423308633S01910983EA016480174500309",
        "B1109463308656S01910920EA016440174200309",
        "B1109503308709S01910895EA016450174400309",
        "B1109543308763S01910919EA016540175200309",
        "B1109583308800S01910973EA016570175800309",
        "B1110023308849S01911007EA016660176900309",
        "B1110063308901S01910995EA016840178700308",
        "B1110103308929S01910941EA016900179400309",
        "B1110143308914S01910879EA016920179500309",
        "B1110183308865S01910851EA016910179300309",
        "B1110223308810S01910877EA016860178800308",
        "B1110263308782S01910943EA016860178700307",
        "B1110303308788S01911014EA016880178900309",
        "B1110343308821S01911072EA016930179500309",
    ]


@pytest.fixture
def octagon_records():
    """Eight legs flown N, NE, E, SE, S, SW, W, NW."""
    return [
        "B1106503311122S01912340EA0144601541Start",
        "B1106523311022S01912340EA0144601541N",
        "B1106543310922S01912470EA0144601541NE",
        "B1106563310922S01912570EA0144601541E",
        "B1106583311038S01912670EA0144601541SE",
        "B1107003311138S01912670EA0144601541S",
        "B1107023311238S01912550EA0144601541SW",
        "B1107043311238S01912450EA0144601541W",
        "B1107043311138S01912368EA0144601541NW",
    ]
