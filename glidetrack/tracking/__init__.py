"""
GlideTrack Tracking Component

Flight recorder input: position fixes and the IGC reader.

Main Classes:
    - Fix: One GPS sample with derived track course and turn rate
    - FlightReader: IGC file reader

Example:
    >>> from glidetrack.tracking import FlightReader
    >>> fixes = FlightReader('flight.igc').read_fixes()
    >>> print(f"{len(fixes)} fixes")
"""

# Core tracking components
from .fix import Fix, resolve_track
from .reader import FlightReader, load_flight, parse_b_record, parse_lines

# Utilities
from . import constants

__all__ = [
    # Main classes
    "Fix",
    "FlightReader",
    # Functions
    "resolve_track",
    "load_flight",
    "parse_b_record",
    "parse_lines",
    # Modules
    "constants",
]
