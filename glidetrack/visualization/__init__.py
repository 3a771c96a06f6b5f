"""
GlideTrack Visualization Component

Interactive maps of an analysed flight.

Main Classes:
    - MapGenerator: Folium map with track, thermals and straight phases

Example:
    >>> from glidetrack.visualization import MapGenerator
    >>> generator = MapGenerator.for_flight(flight)
    >>> generator.add_track(flight.fixes)
    >>> generator.add_thermals(flight.thermals)
    >>> generator.add_straight_phases(flight.straight_phases)
    >>> generator.save('flight_map.html')

Map Styles:
    - OpenStreetMap (default)
    - CartoDB.Positron
    - CartoDB.DarkMatter
"""

# Main visualization components
from .map_generator import MapGenerator

# Utilities
from . import constants

__all__ = [
    # Main classes
    "MapGenerator",
    # Modules
    "constants",
]
