"""
Main Flight Analyzer
Coordinates all analysis stages.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..config import Config
from ..flight import Flight
from ..tracking.fix import Fix
from ..utils import format_distance, format_duration, format_speed
from .check_twice import CheckTwiceAnalysis
from .circling import CirclesAnalysis
from .distance import DistanceAnalysis
from .exceptions import AnalysisFailure
from .reporter import ReportGenerator
from .stage import AnalysisStage
from .straight_phases import StraightPhasesAnalysis
from .thermals import ThermalAnalysis
from .wind_drift import WindAnalysis


class FlightAnalyzer:
    """
    Main analyzer running every stage over a flight, in dependency order:
    distance, circling, thermals, wind drift, straight phases (and the
    optional check-twice audit).

    Stages already completed on the flight are skipped, so a partly
    analysed flight can be handed back in to finish the job.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        check_twice: bool = False,
        verbose: bool = False,
    ):
        """
        Initialize flight analyzer.

        Args:
            config: Runtime configuration (default: built-in defaults)
            check_twice: Also run the check-twice audit after wind analysis
            verbose: Print progress for every stage
        """
        self.config = config or Config()
        self.verbose = verbose
        self.reporter = ReportGenerator()

        # Initialize stages
        self.stages: List[AnalysisStage] = [
            DistanceAnalysis(),
            CirclesAnalysis(self.config.turn_rate_threshold),
            ThermalAnalysis(),
            WindAnalysis(
                self.config.max_drift_bearing_deviation,
                self.config.max_drift_distance_deviation,
            ),
        ]
        if check_twice:
            self.stages.append(CheckTwiceAnalysis())
        self.stages.append(
            StraightPhasesAnalysis(
                self.config.straight_phase_threshold_seconds,
                self.config.straight_phase_threshold_angle,
            )
        )

    def run(self, flight: Flight) -> Flight:
        """
        Run all outstanding stages on a flight.

        Args:
            flight: Flight to analyse

        Returns:
            The same flight with every stage's fields set

        Raises:
            PreconditionsFailed: If a stage's input is missing
            AnalysisFailure: If a stage hits an internal inconsistency
        """
        for stage in self.stages:
            if stage.has_been_run(flight):
                self._log(f"   ⏭️  {stage.name} analysis already complete")
                continue

            stage.check_preconditions(flight)
            flight = stage.perform_analysis(flight)

            if not stage.has_been_run(flight):
                raise AnalysisFailure(f"{stage.name} analysis did not mark itself complete")
            self._log(f"   ✅ {stage.name} analysis complete")

        return flight

    def analyze_all(
        self,
        flight: Flight,
        output_path: Optional[str] = None,
        format: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Run complete analysis suite.

        Args:
            flight: Flight to analyse
            output_path: Optional path to save report
            format: Report format ('json' or 'txt', default from config)

        Returns:
            Complete analysis results
        """
        self._log("\n" + "=" * 70)
        self._log("🔬 GLIDETRACK FLIGHT ANALYSIS")
        self._log("=" * 70)
        self._log(f"\n📂 {flight.name or 'flight'}: {len(flight.fixes)} fixes")

        flight = self.run(flight)
        results = self.build_results(flight)

        self._log(
            f"\n📊 {format_distance(flight.total_distance)} over "
            f"{format_duration(flight.duration)}, {len(flight.circles)} circles "
            f"in {len(flight.thermals)} thermals, "
            f"{len(flight.straight_phases)} straight phases"
        )

        # Generate report
        if output_path:
            self.reporter.generate_report(
                results, output_path, format or self.config.report_format
            )
            self._log(f"\n💾 Report saved to: {output_path}")

        return results

    def build_results(self, flight: Flight) -> Dict[str, Any]:
        """
        Project an analysed flight onto plain, JSON-serialisable data.

        Args:
            flight: Flight with all default stages complete

        Returns:
            Dictionary with metadata, summary, circles, thermals,
            wind drift and straight phases
        """
        summary = flight.get_summary()
        phases = flight.straight_phases or []
        glide_distance = sum(p.distance for p in phases)
        glide_time = sum(p.duration_seconds for p in phases)

        return {
            "metadata": {
                "analysis_date": datetime.now().isoformat(),
                "flight": flight.name,
                "pilot": flight.pilot_name,
                "fixes": len(flight.fixes),
            },
            "summary": {
                "flight_id": summary.flight_id,
                "total_distance_m": summary.total_distance,
                "duration_s": flight.duration,
                "duration": format_duration(flight.duration),
                "circle_count": len(flight.circles or []),
                "thermal_count": len(flight.thermals or []),
                "straight_phase_count": len(phases),
                "average_glide_speed": format_speed(
                    glide_distance / glide_time if glide_time > 0 else 0.0
                ),
            },
            "circles": [c.to_dict() for c in flight.circles or []],
            "thermals": [t.to_dict() for t in flight.thermals or []],
            "wind_drift": [
                {
                    "bearing": trend.bearing,
                    "distance_m": trend.distance,
                    "samples": trend.samples,
                    "trimmed": trend.trimmed,
                }
                for trend in flight.wind_drifts or []
            ],
            "straight_phases": [p.to_dict() for p in phases],
        }

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)


def analyze_flight(flight: Flight, config: Optional[Config] = None) -> Flight:
    """Run the default pipeline over an existing Flight."""
    return FlightAnalyzer(config).run(flight)


def analyze(fixes: List[Fix], config: Optional[Config] = None) -> Flight:
    """
    Analyse an ordered fix sequence.

    Zero or one fix gives a flight with empty results rather than an error.

    Args:
        fixes: Fixes in recording order, timestamps non-decreasing
        config: Runtime configuration (default: built-in defaults)

    Returns:
        Fully analysed Flight

    Example:
        >>> flight = analyze(FlightReader('flight.igc').read_fixes())
        >>> print(f"{len(flight.thermals)} thermals")
    """
    return analyze_flight(Flight(fixes), config)
