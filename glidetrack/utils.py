"""
GlideTrack Utility Functions
Spherical-earth geodesy and formatting helpers shared by all analyses.

Angles are degrees at the interface. Positions are passed in radians, since
fixes convert their coordinates once when they are created.
"""

from math import radians, sin, cos, sqrt, atan2, asin, degrees, floor
from .config import Constants


def bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate initial great-circle bearing from point 1 to point 2.

    Args:
        lat1, lon1: Start point (radians)
        lat2, lon2: End point (radians)

    Returns:
        Bearing in degrees (0-360, where 0=North, 90=East, 180=South, 270=West)
    """
    dlon = lon2 - lon1

    x = sin(dlon) * cos(lat2)
    y = cos(lat1) * sin(lat2) - sin(lat1) * cos(lat2) * cos(dlon)

    return (degrees(atan2(x, y)) + 360) % 360


def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate great circle distance between two points using Haversine formula.

    Args:
        lat1, lon1: First point (radians)
        lat2, lon2: Second point (radians)

    Returns:
        Distance in meters

    Example:
        >>> round(distance(radians(49.3508), radians(8.1364), radians(49.4), radians(8.2)))
        7234
    """
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))

    return Constants.EARTH_RADIUS_M * c


def destination_point(
    lat: float, lon: float, bearing_deg: float, distance_m: float
) -> tuple[float, float]:
    """
    Solve the direct geodesic problem on the sphere.

    Args:
        lat, lon: Origin (radians)
        bearing_deg: Initial bearing in degrees
        distance_m: Distance to travel in meters

    Returns:
        Tuple of (latitude, longitude) in radians
    """
    brng = radians(bearing_deg)
    angular = distance_m / Constants.EARTH_RADIUS_M

    lat2 = asin(sin(lat) * cos(angular) + cos(lat) * sin(angular) * cos(brng))
    lon2 = lon + atan2(
        sin(brng) * sin(angular) * cos(lat),
        cos(angular) - sin(lat) * sin(lat2),
    )

    return lat2, lon2


def bearing_delta(course_from: float, course_to: float) -> float:
    """
    Signed change of course, in the range (-180, 180].

    Positive values are turns to the right (clockwise).

    Example:
        >>> bearing_delta(350, 10)
        20
        >>> bearing_delta(10, 350)
        -20
    """
    delta = (course_to - course_from) % 360
    if delta > 180:
        delta -= 360
    return delta


def bearing_between(fix1, fix2) -> float:
    """Bearing in degrees from one fix to another."""
    return bearing(fix1.lat_radians, fix1.lon_radians, fix2.lat_radians, fix2.lon_radians)


def distance_between(fix1, fix2) -> float:
    """Distance in meters between two fixes."""
    return distance(fix1.lat_radians, fix1.lon_radians, fix2.lat_radians, fix2.lon_radians)


def destination_from(fix, bearing_deg: float, distance_m: float) -> tuple[float, float]:
    """Position (radians) reached from a fix along a bearing."""
    return destination_point(fix.lat_radians, fix.lon_radians, bearing_deg, distance_m)


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero for positive values."""
    return int(floor(value + 0.5))


def format_duration(seconds: int) -> str:
    """
    Format duration as a clock string.

    Hours are omitted when zero, seconds are always two digits.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string

    Example:
        >>> format_duration(536)
        '8:56'
        >>> format_duration(3665)
        '1:01:05'
    """
    if seconds is None or seconds < 0:
        return "N/A"

    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_distance(distance_m: float) -> str:
    """
    Format a distance in kilometers.

    Example:
        >>> format_distance(12345)
        '12.35 km'
    """
    if distance_m is None:
        return "N/A"
    return f"{distance_m / 1000:.2f} km"


def format_speed(velocity_ms: float, unit: str = "kmh") -> str:
    """
    Format speed in various units.

    Args:
        velocity_ms: Velocity in meters per second
        unit: Output unit ('kmh', 'ms', 'knots')

    Returns:
        Formatted speed string

    Example:
        >>> format_speed(25, 'kmh')
        '90.0 km/h'
    """
    if velocity_ms is None:
        return "N/A"

    if unit == "kmh":
        return f"{velocity_ms * Constants.MS_TO_KMH:.1f} km/h"
    elif unit == "knots":
        return f"{velocity_ms * Constants.MS_TO_KNOTS:.1f} knots"
    else:  # ms
        return f"{velocity_ms:.1f} m/s"


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Validate latitude and longitude coordinates in degrees.

    Example:
        >>> validate_coordinates(49.3508, 8.1364)
        True
        >>> validate_coordinates(100, 200)
        False
    """
    return -90 <= lat <= 90 and -180 <= lon <= 180
