"""
Tests for straight phase detection.
"""

import pytest
import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.flight import Flight
from glidetrack.tracking.fix import Fix
from glidetrack.analysis.circling import CirclesAnalysis
from glidetrack.analysis.thermals import ThermalAnalysis
from glidetrack.analysis.straight_phases import StraightPhasesAnalysis
from glidetrack.analysis.exceptions import AnalysisFailure, PreconditionsFailed
from glidetrack.analysis.models import StraightPhase


def prepared_flight(fixes):
    """Flight with circling and thermal analysis done."""
    flight = CirclesAnalysis().perform_analysis(Flight(fixes))
    return ThermalAnalysis().perform_analysis(flight)


@pytest.fixture
def dogleg_track(track_builder):
    """30 s north, a 90 degree turn over 12 s, then east."""
    return (
        track_builder()
        .straight(30)
        .courses([7.5 * j for j in range(1, 13)])
        .straight(30)
        .build()
    )


class TestSplitIntoSections:
    """Tests for StraightPhasesAnalysis.split_into_sections."""

    def test_sharp_turn_splits(self, dogleg_track):
        """Course change over 45 degrees within 10 s cuts the glide."""
        fixes = Flight(dogleg_track).fixes
        sections = StraightPhasesAnalysis().split_into_sections(fixes, 0, len(fixes) - 1)

        assert len(sections) == 2
        assert sections[0].start_point is fixes[0]
        # Cut once the course is more than 45 degrees off, six or seven fixes into the turn
        assert sections[0].end_point.index in (36, 37)
        assert sections[1].start_point is sections[0].end_point
        assert sections[1].end_point is fixes[-1]

    def test_turn_near_segment_start_does_not_split(self, track_builder):
        """A sharp turn too soon after the glide began is not cut off."""
        fixes = Flight(
            track_builder().straight(5).courses([30, 60, 90]).straight(30).build()
        ).fixes
        sections = StraightPhasesAnalysis().split_into_sections(fixes, 0, len(fixes) - 1)

        assert len(sections) == 1

    def test_gentle_turn_does_not_split(self, track_builder):
        fixes = Flight(track_builder().straight(30).turn(3, 30).straight(30).build()).fixes
        sections = StraightPhasesAnalysis().split_into_sections(fixes, 0, len(fixes) - 1)

        assert len(sections) == 1

    def test_larger_angle_threshold(self, dogleg_track):
        fixes = Flight(dogleg_track).fixes
        analysis = StraightPhasesAnalysis(threshold_angle=100.0)

        assert len(analysis.split_into_sections(fixes, 0, len(fixes) - 1)) == 1

    def test_two_sharp_turns(self, track_builder):
        fixes = Flight(
            track_builder()
            .straight(30)
            .courses([30, 60, 90])
            .straight(30)
            .courses([120, 150, 180])
            .straight(30)
            .build()
        ).fixes
        sections = StraightPhasesAnalysis().split_into_sections(fixes, 0, len(fixes) - 1)

        assert len(sections) == 3


class TestStraightPhasesAnalysis:
    """Tests for StraightPhasesAnalysis class."""

    def test_no_thermals_one_glide(self, dogleg_track):
        flight = StraightPhasesAnalysis().perform_analysis(prepared_flight(dogleg_track))

        assert flight.thermals == []
        assert len(flight.straight_phases) == 2
        assert flight.is_straight_phases_analysis_complete

    def test_glides_around_thermal(self, thermal_track):
        """Glide in, glide out, nothing inside the thermal."""
        flight = StraightPhasesAnalysis().perform_analysis(prepared_flight(thermal_track))
        thermal = flight.thermals[0]

        assert len(flight.straight_phases) == 2
        before, after = flight.straight_phases
        assert before.start_point is flight.fixes[0]
        assert before.end_point is thermal.start_point
        assert after.start_point is thermal.end_point
        assert after.end_point is flight.fixes[-1]

    def test_ground_speed(self, thermal_track):
        """Straight flight at 25 m/s is measured as 25 m/s."""
        flight = StraightPhasesAnalysis().perform_analysis(prepared_flight(thermal_track))
        before, after = flight.straight_phases

        assert before.duration_seconds == 61
        assert before.ground_speed == pytest.approx(25.0, abs=0.1)
        assert after.duration_seconds == 60
        assert after.ground_speed == pytest.approx(25.0, abs=0.01)

    def test_fewer_than_two_fixes(self, track_builder):
        for fixes in ([], track_builder().build()):
            flight = StraightPhasesAnalysis().perform_analysis(prepared_flight(fixes))
            assert flight.straight_phases == []

    def test_zero_duration_phase_speed(self):
        fix = Fix.from_degrees(datetime(2024, 6, 1, 12, 0, 0), -33.9, 18.9)
        phase = StraightPhase(fix, fix)
        assert phase.calculate_speed() == 0.0

    def test_foreign_endpoint_fails(self, thermal_track, track_builder):
        """Thermal endpoints must be fixes of this flight."""
        flight = prepared_flight(thermal_track)
        stranger = track_builder(latitude=-34.0).straight(3).build()[2]
        stranger.index = 3
        flight.thermals[0].start_point = stranger

        with pytest.raises(AnalysisFailure):
            StraightPhasesAnalysis().perform_analysis(flight)
        assert flight.straight_phases is None

    def test_requires_thermals(self, thermal_track):
        flight = CirclesAnalysis().perform_analysis(Flight(thermal_track))
        with pytest.raises(PreconditionsFailed):
            StraightPhasesAnalysis().perform_analysis(flight)

    def test_reset(self, thermal_track):
        analysis = StraightPhasesAnalysis()
        flight = analysis.perform_analysis(prepared_flight(thermal_track))
        analysis.reset(flight)

        assert flight.straight_phases is None
        assert not analysis.has_been_run(flight)
