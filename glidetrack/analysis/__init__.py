"""
GlideTrack Analysis Component

Batch analysis of a glider flight: ground distance, circling, thermals,
circle drift and straight glides.

Main Classes:
    - FlightAnalyzer: Runs every stage in dependency order
    - DistanceAnalysis: Ground track distance
    - CirclesAnalysis: Full-circle turn detection
    - ThermalAnalysis: Adjacent circles grouped into thermals
    - WindAnalysis: Circle drift and correction vectors
    - StraightPhasesAnalysis: Glides between thermals, split at sharp turns
    - CheckTwiceAnalysis: Optional centering-correction audit
    - ReportGenerator: Report export

Example:
    >>> from glidetrack.analysis import analyze
    >>> flight = analyze(fixes)
    >>> for thermal in flight.thermals:
    ...     print(thermal)
"""

# Main analysis components
from .analyzer import FlightAnalyzer, analyze, analyze_flight
from .stage import AnalysisStage
from .distance import DistanceAnalysis
from .circling import CirclesAnalysis
from .thermals import ThermalAnalysis
from .wind_drift import WindAnalysis, DriftTrend, calculate_correction_vectors
from .straight_phases import StraightPhasesAnalysis
from .check_twice import CheckTwiceAnalysis, check_twice_rule
from .reporter import ReportGenerator

# Models and errors
from .models import CirclingTurn, Thermal, StraightPhase, FlightMode, CheckTwiceRule
from .exceptions import AnalysisException, AnalysisFailure, PreconditionsFailed

# Utilities
from . import constants

__all__ = [
    # Main classes
    'FlightAnalyzer',
    'AnalysisStage',
    'DistanceAnalysis',
    'CirclesAnalysis',
    'ThermalAnalysis',
    'WindAnalysis',
    'StraightPhasesAnalysis',
    'CheckTwiceAnalysis',
    'ReportGenerator',

    # Functions
    'analyze',
    'analyze_flight',
    'calculate_correction_vectors',
    'check_twice_rule',

    # Models
    'CirclingTurn',
    'Thermal',
    'StraightPhase',
    'DriftTrend',
    'FlightMode',
    'CheckTwiceRule',

    # Errors
    'AnalysisException',
    'AnalysisFailure',
    'PreconditionsFailed',

    # Modules
    'constants',
]
