"""
Analysis Stage Interface

Every analysis over a Flight implements the same small interface so the
analyzer can run them in a fixed order and refuse to run one whose inputs
are not ready yet.
"""

from abc import ABC, abstractmethod

from ..flight import Flight
from .exceptions import PreconditionsFailed


class AnalysisStage(ABC):
    """
    One step of the flight analysis pipeline.

    A stage reads the fields written by earlier stages and writes only its
    own. ``perform_analysis`` must call ``check_preconditions`` before it
    touches the flight, and must assign its results only once they are
    complete, so a failing stage leaves the flight as it found it.
    """

    name: str = "analysis"

    @abstractmethod
    def perform_analysis(self, flight: Flight) -> Flight:
        """Run the stage and return the same flight with its fields set."""

    @abstractmethod
    def has_been_run(self, flight: Flight) -> bool:
        """Whether the stage's completion flag is set on the flight."""

    @abstractmethod
    def check_preconditions(self, flight: Flight) -> None:
        """
        Verify the flight is ready for this stage.

        Raises:
            PreconditionsFailed: If required input is missing or the stage
                has already been run on this flight
        """

    @abstractmethod
    def reset(self, flight: Flight) -> None:
        """Clear the stage's fields and completion flag so it can run again."""


def require_fixes(flight: Flight) -> None:
    """Shared precondition: the flight has an initialised fix list."""
    if flight is None:
        raise PreconditionsFailed("No flight given")
    if flight.fixes is None:
        raise PreconditionsFailed("Fix list is not initialised")


def require_not_run(stage: AnalysisStage, flight: Flight) -> None:
    """Shared precondition: the stage has not completed on this flight yet."""
    if stage.has_been_run(flight):
        raise PreconditionsFailed(
            f"{stage.name} analysis has already been run on this flight"
        )
