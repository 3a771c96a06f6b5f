"""
Check-Twice Rule

When centering a thermal, a pilot should fly one full circle after a
correction before judging whether to correct again. A correction made on
the circle straight after another correction breaks the rule.
"""

from typing import List

from ..flight import Flight
from .circling import CirclesAnalysis
from .exceptions import PreconditionsFailed
from .models import CheckTwiceRule, CirclingTurn
from .stage import AnalysisStage, require_fixes, require_not_run


def check_twice_rule(circles: List[CirclingTurn]) -> List[CirclingTurn]:
    """
    Mark each circle with its check-twice verdict.

    A circle without a centering correction is NOT_APPLICABLE. A circle
    with one is FOLLOWED if the previous circle had none, NOT_FOLLOWED
    otherwise. The first circle counts as following a correction.

    Args:
        circles: Time-ordered circles with centering_correction set

    Returns:
        The same circles, updated in place
    """
    previous_correction = True
    for circle in circles:
        if circle.centering_correction:
            circle.check_twice_rule = (
                CheckTwiceRule.NOT_FOLLOWED if previous_correction else CheckTwiceRule.FOLLOWED
            )
        else:
            circle.check_twice_rule = CheckTwiceRule.NOT_APPLICABLE
        previous_correction = circle.centering_correction

    return circles


class CheckTwiceAnalysis(AnalysisStage):
    """
    Optional audit of centering corrections.

    Not part of the default pipeline. Run it after the wind analysis, which
    is what flags centering corrections, or after setting the flags by
    other means.
    """

    name = "check twice"

    def perform_analysis(self, flight: Flight) -> Flight:
        self.check_preconditions(flight)

        check_twice_rule(flight.circles)

        flight.is_check_twice_analysis_complete = True
        return flight

    def has_been_run(self, flight: Flight) -> bool:
        return flight.is_check_twice_analysis_complete

    def check_preconditions(self, flight: Flight) -> None:
        require_fixes(flight)
        require_not_run(self, flight)

        if not CirclesAnalysis().has_been_run(flight):
            raise PreconditionsFailed(
                "Circling analysis must be completed before the check-twice audit"
            )
        if flight.circles is None:
            raise PreconditionsFailed("Circles list is not initialised")

    def reset(self, flight: Flight) -> None:
        for circle in flight.circles or []:
            circle.check_twice_rule = CheckTwiceRule.NOT_APPLICABLE
        flight.is_check_twice_analysis_complete = False
