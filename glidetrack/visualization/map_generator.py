"""
Map Generator
Creates interactive Folium maps of an analysed flight.

The raw track is drawn thin and grey, thermals as circle markers colored by
turn direction, straight phases as thick lines colored by ground speed.
"""

import folium
from typing import List

from ..analysis.models import FlightMode, StraightPhase, Thermal
from ..config import Constants, Settings, Colors
from ..flight import Flight
from ..tracking.fix import Fix
from ..utils import format_distance, format_speed
from .constants import (
    MAP_ATTRIBUTION,
    MAP_TILE_URLS,
    STRAIGHT_PHASE_OPACITY,
)


class MapGenerator:
    """
    Generates interactive flight maps using Folium.

    Supports visualization of:
    - Flight track (all fixes)
    - Thermals (one marker per thermal)
    - Straight phases (speed colored segments)
    """

    def __init__(
        self,
        center_lat: float,
        center_lon: float,
        zoom: int = Settings.DEFAULT_ZOOM,
        style: str = Settings.DEFAULT_MAP_STYLE,
    ):
        """
        Initialize map generator.

        Args:
            center_lat: Center latitude in degrees
            center_lon: Center longitude in degrees
            zoom: Initial zoom level (default: 12)
            style: Map style/theme (default: OpenStreetMap)
        """
        self.center_lat = center_lat
        self.center_lon = center_lon
        self.zoom = zoom
        self.style = style

        # Create base map
        self.map = self._create_base_map()

    @classmethod
    def for_flight(cls, flight: Flight, style: str = Settings.DEFAULT_MAP_STYLE) -> "MapGenerator":
        """
        Create a map centered on a flight's fixes.

        Raises:
            ValueError: If the flight has no fixes
        """
        if not flight.fixes:
            raise ValueError("Cannot center a map on a flight without fixes")

        lat = sum(f.latitude for f in flight.fixes) / len(flight.fixes)
        lon = sum(f.longitude for f in flight.fixes) / len(flight.fixes)
        return cls(lat, lon, style=style)

    def _create_base_map(self) -> folium.Map:
        """Create base Folium map."""

        if self.style in MAP_TILE_URLS:
            tiles = MAP_TILE_URLS[self.style]
        else:
            tiles = self.style

        return folium.Map(
            location=[self.center_lat, self.center_lon],
            zoom_start=self.zoom,
            tiles=tiles,
            attr=MAP_ATTRIBUTION,
        )

    def add_track(self, fixes: List[Fix]):
        """
        Add the raw flight track to the map.

        Args:
            fixes: Fixes in recording order
        """
        coords = [[f.latitude, f.longitude] for f in fixes]
        if len(coords) < 2:
            return

        folium.PolyLine(
            coords,
            color=Colors.TRACK_COLOR,
            weight=Settings.TRACK_WEIGHT,
            opacity=Settings.TRACK_OPACITY,
            tooltip="Flight track",
        ).add_to(self.map)

        folium.Marker(
            coords[0],
            popup=f"Takeoff {fixes[0].timestamp:%H:%M:%S}",
            tooltip="Takeoff",
            icon=folium.Icon(color="green", icon="plane", prefix="fa"),
        ).add_to(self.map)

        folium.Marker(
            coords[-1],
            popup=f"Landing {fixes[-1].timestamp:%H:%M:%S}",
            tooltip="Landing",
            icon=folium.Icon(color="red", icon="flag", prefix="fa"),
        ).add_to(self.map)

    def add_thermals(self, thermals: List[Thermal]):
        """
        Add one marker per thermal, at the thermal's entry point.

        Args:
            thermals: Thermals from the thermal analysis
        """
        for rank, thermal in enumerate(thermals or [], 1):
            color = (
                Colors.THERMAL_LEFT_COLOR
                if thermal.turn_direction == FlightMode.TURNING_LEFT
                else Colors.THERMAL_RIGHT_COLOR
            )

            folium.CircleMarker(
                location=[thermal.start_point.latitude, thermal.start_point.longitude],
                radius=Settings.THERMAL_MARKER_RADIUS,
                color=color,
                fill=True,
                fill_color=color,
                fill_opacity=Settings.THERMAL_MARKER_FILL_OPACITY,
                popup=self._create_thermal_popup(thermal, rank),
                tooltip=f"Thermal #{rank} ({thermal.circle_count} circles)",
            ).add_to(self.map)

    def _create_thermal_popup(self, thermal: Thermal, rank: int) -> str:
        """
        Create HTML popup for a thermal marker.

        Args:
            thermal: Thermal to describe
            rank: Position of the thermal in the flight

        Returns:
            HTML string for popup
        """
        html = f"""
        <div style='font-family: Arial; min-width: 180px;'>
            <h4 style='margin: 0 0 10px 0;'>Thermal #{rank}</h4>
            <table style='width: 100%; border-collapse: collapse;'>
                <tr><td><b>Entered:</b></td><td>{thermal.start_point.timestamp:%H:%M:%S}</td></tr>
                <tr><td><b>Circles:</b></td><td>{thermal.circle_count}</td></tr>
                <tr><td><b>Duration:</b></td><td>{thermal.total_duration}</td></tr>
                <tr><td><b>Avg circle:</b></td><td>{thermal.average_circle_duration} s</td></tr>
                <tr><td><b>Direction:</b></td><td>{thermal.turn_direction.value}</td></tr>
            </table>
        </div>
        """
        return html

    def add_straight_phases(self, phases: List[StraightPhase]):
        """
        Add straight phases as lines colored by ground speed.

        Args:
            phases: Straight phases from the straight phase analysis
        """
        for phase in phases or []:
            start, end = phase.start_point, phase.end_point

            folium.PolyLine(
                locations=[[start.latitude, start.longitude], [end.latitude, end.longitude]],
                color=self._get_speed_color(phase.ground_speed),
                weight=Settings.STRAIGHT_PHASE_WEIGHT,
                opacity=STRAIGHT_PHASE_OPACITY,
                tooltip=(
                    f"{format_distance(phase.distance)} at "
                    f"{format_speed(phase.ground_speed)}"
                ),
            ).add_to(self.map)

    def _get_speed_color(self, ground_speed_ms: float) -> str:
        """
        Get color based on ground speed.

        Args:
            ground_speed_ms: Ground speed in m/s

        Returns:
            Color hex code
        """
        speed_kmh = ground_speed_ms * Constants.MS_TO_KMH
        for upper_bound, color in Colors.SPEED_COLORS:
            if speed_kmh < upper_bound:
                return color
        return Colors.SPEED_COLORS[-1][1]

    def save(self, filename: str):
        """
        Save map to HTML file.

        Args:
            filename: Output filename (should end in .html)
        """
        self.map.save(filename)

        # Modify HTML file to include title
        with open(filename, "r", encoding="utf-8") as f:
            html_content = f.read()
        insert = "<head>\n    <title>GlideTrack Map</title>"
        html_content = html_content.replace("<head>", insert, 1)
        with open(filename, "w", encoding="utf-8") as f:
            f.write(html_content)

        print(f"✅ Map saved to: {filename}")
