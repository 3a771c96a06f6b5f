"""
Tests for the check-twice audit.
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.flight import Flight
from glidetrack.analysis.circling import CirclesAnalysis
from glidetrack.analysis.check_twice import CheckTwiceAnalysis, check_twice_rule
from glidetrack.analysis.exceptions import PreconditionsFailed
from glidetrack.analysis.models import CheckTwiceRule, CirclingTurn, FlightMode
from glidetrack.tracking.fix import Fix


def circles_with_corrections(flags):
    fix = Fix.from_degrees(None, -33.9, 18.9)
    circles = []
    for flag in flags:
        circle = CirclingTurn(start_fix=fix, turn_direction=FlightMode.TURNING_LEFT, start_course=0.0)
        circle.centering_correction = flag
        circles.append(circle)
    return circles


class TestCheckTwiceRule:
    """Tests for check_twice_rule function."""

    def test_verdicts(self):
        circles = check_twice_rule(circles_with_corrections([False, True, True, False, True]))

        assert [c.check_twice_rule for c in circles] == [
            CheckTwiceRule.NOT_APPLICABLE,
            CheckTwiceRule.FOLLOWED,
            CheckTwiceRule.NOT_FOLLOWED,
            CheckTwiceRule.NOT_APPLICABLE,
            CheckTwiceRule.FOLLOWED,
        ]

    def test_correction_on_first_circle(self):
        """The first circle of the flight has no full circle to judge by."""
        circles = check_twice_rule(circles_with_corrections([True]))
        assert circles[0].check_twice_rule is CheckTwiceRule.NOT_FOLLOWED

    def test_no_circles(self):
        assert check_twice_rule([]) == []


class TestCheckTwiceAnalysis:
    """Tests for CheckTwiceAnalysis class."""

    def test_runs_after_circling(self, thermal_track):
        flight = CirclesAnalysis().perform_analysis(Flight(thermal_track))
        flight = CheckTwiceAnalysis().perform_analysis(flight)

        assert flight.is_check_twice_analysis_complete
        assert all(c.check_twice_rule is CheckTwiceRule.NOT_APPLICABLE for c in flight.circles)

    def test_requires_circling(self, thermal_track):
        with pytest.raises(PreconditionsFailed):
            CheckTwiceAnalysis().perform_analysis(Flight(thermal_track))

    def test_reset(self, thermal_track):
        analysis = CheckTwiceAnalysis()
        flight = CirclesAnalysis().perform_analysis(Flight(thermal_track))
        flight.circles[1].centering_correction = True
        analysis.perform_analysis(flight)
        assert flight.circles[1].check_twice_rule is CheckTwiceRule.FOLLOWED

        analysis.reset(flight)
        assert flight.circles[1].check_twice_rule is CheckTwiceRule.NOT_APPLICABLE
        assert not analysis.has_been_run(flight)
