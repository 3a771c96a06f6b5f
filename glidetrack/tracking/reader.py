"""
GlideTrack Flight Reader
Reads position fixes from IGC flight recorder files.
"""

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import List, Optional, Union

from ..utils import validate_coordinates
from .constants import (
    B_RECORD_PATTERN,
    DATE_RECORD_PATTERN,
    DEFAULT_FLIGHT_DATE,
    IGC_FILE_ENCODING,
    MIDNIGHT_ROLLOVER_GAP,
)
from .fix import Fix


def _coordinate(degrees: str, minutes: str, thousandths: str, hemisphere: str) -> float:
    """Convert an IGC DDMMmmm field to signed decimal degrees."""
    value = int(degrees) + (int(minutes) + int(thousandths) / 1000.0) / 60.0
    if hemisphere in ("S", "W"):
        value = -value
    return value


def parse_b_record(line: str, flight_date: Optional[date] = None) -> Optional[Fix]:
    """
    Parse an IGC B record into a Fix.

    Args:
        line: Raw record line, e.g. 'B1109303308755S01911128EA016190171900308'
        flight_date: Date to attach to the time of day (default: 2000-01-01)

    Returns:
        Fix, or None if the line is not a well-formed B record

    Example:
        >>> fix = parse_b_record('B1109303308755S01911128EA016190171900308')
        >>> round(fix.latitude, 5), round(fix.longitude, 5)
        (-33.14592, 19.18547)
    """
    match = B_RECORD_PATTERN.match(line.strip())
    if match is None:
        return None

    (
        hours, minutes, seconds,
        lat_deg, lat_min, lat_min_dec, lat_sign,
        lon_deg, lon_min, lon_min_dec, lon_sign,
        _validity, press_alt, gnss_alt,
    ) = match.groups()

    day = flight_date or DEFAULT_FLIGHT_DATE
    try:
        timestamp = datetime(
            day.year, day.month, day.day, int(hours), int(minutes), int(seconds)
        )
    except ValueError:
        return None

    latitude = _coordinate(lat_deg, lat_min, lat_min_dec, lat_sign)
    longitude = _coordinate(lon_deg, lon_min, lon_min_dec, lon_sign)
    if not validate_coordinates(latitude, longitude):
        return None

    return Fix.from_degrees(
        timestamp,
        latitude,
        longitude,
        pressure_altitude=int(press_alt),
        gnss_altitude=int(gnss_alt),
    )


def parse_date_record(line: str) -> Optional[date]:
    """Parse an HFDTE header into a date, or None."""
    match = DATE_RECORD_PATTERN.match(line.strip())
    if match is None:
        return None

    day, month, year = (int(g) for g in match.groups())
    try:
        return date(2000 + year if year < 80 else 1900 + year, month, day)
    except ValueError:
        return None


def parse_lines(lines) -> List[Fix]:
    """
    Parse IGC records into an ordered list of fixes.

    Malformed B records are skipped. When the time of day wraps past
    midnight, following fixes move to the next day so timestamps never
    decrease. A record that steps back less than that is out of order and
    is skipped.

    Args:
        lines: Iterable of IGC record lines

    Returns:
        List of fixes in file order
    """
    flight_date = None
    day_offset = timedelta(0)
    fixes: List[Fix] = []

    for line in lines:
        if line.startswith("H"):
            flight_date = parse_date_record(line) or flight_date
            continue

        if not line.startswith("B"):
            continue

        fix = parse_b_record(line, flight_date)
        if fix is None:
            continue

        fix.timestamp += day_offset
        if fixes and fix.timestamp < fixes[-1].timestamp:
            if fixes[-1].timestamp - fix.timestamp < MIDNIGHT_ROLLOVER_GAP:
                continue
            day_offset += timedelta(days=1)
            fix.timestamp += timedelta(days=1)

        fixes.append(fix)

    return fixes


class FlightReader:
    """Reads IGC files produced by flight recorders."""

    def __init__(self, igc_path: Union[str, Path]):
        """
        Initialize reader.

        Args:
            igc_path: Path to IGC file
        """
        self.igc_path = Path(igc_path)

    def read_fixes(self) -> List[Fix]:
        """
        Read all B record fixes from the file.

        Returns:
            Fixes in file order (empty list if the file has none)

        Raises:
            FileNotFoundError: If the file does not exist
        """
        with open(self.igc_path, "r", encoding=IGC_FILE_ENCODING) as f:
            return parse_lines(f)

    def load_flight(self):
        """Read the file and wrap its fixes in a Flight ready for analysis."""
        from ..flight import Flight

        return Flight(self.read_fixes(), name=self.igc_path.stem)


def load_flight(igc_path: Union[str, Path]):
    """
    Load an IGC file as a Flight.

    Example:
        >>> flight = load_flight('2017-08-15-cape-town.igc')
        >>> analyze_flight(flight)
    """
    return FlightReader(igc_path).load_flight()
