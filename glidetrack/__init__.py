"""
GlideTrack - Glider Flight Track Analysis

Batch analysis of recorded glider flights: reads IGC logger files, finds
circling turns and thermals, measures circle drift and splits the glides
between thermals into straight phases.

Components:
    - tracking: IGC parsing and the fix model
    - analysis: Analysis stages, pipeline and reports
    - visualization: Interactive map generation

Example:
    >>> from glidetrack.tracking import load_flight
    >>> from glidetrack.analysis import FlightAnalyzer
    >>> flight = load_flight('flight.igc')
    >>> results = FlightAnalyzer(verbose=True).analyze_all(flight, 'report.json')
"""

# Component imports for easy access
from . import tracking
from . import analysis
from . import visualization
from . import utils
from . import config
from .flight import Flight, FlightSummary

GLIDETRACK_VERSION = "v0.1.0"

__version__ = GLIDETRACK_VERSION
__author__ = "GlideTrack Project"
__license__ = "MIT"

__all__ = [
    "tracking",
    "analysis",
    "visualization",
    "utils",
    "config",
    "Flight",
    "FlightSummary",
]
