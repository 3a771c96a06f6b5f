"""
Tests for map generator.
"""

import pytest
import sys
import tempfile
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from glidetrack.config import Colors
from glidetrack.flight import Flight
from glidetrack.analysis import analyze
from glidetrack.visualization.map_generator import MapGenerator


@pytest.fixture
def analysed_flight(thermal_track):
    return analyze(thermal_track)


class TestMapGenerator:
    """Tests for MapGenerator class."""

    def test_init(self):
        """Test map generator initialization."""
        gen = MapGenerator(-33.9, 18.9)
        assert gen.center_lat == -33.9
        assert gen.center_lon == 18.9
        assert gen.map is not None

    def test_custom_style(self):
        """Test custom map style."""
        gen = MapGenerator(-33.9, 18.9, style="CartoDB.Positron")
        assert gen.style == "CartoDB.Positron"

    def test_for_flight(self, analysed_flight):
        """Map is centered among the fixes."""
        gen = MapGenerator.for_flight(analysed_flight)
        lats = [f.latitude for f in analysed_flight.fixes]

        assert min(lats) <= gen.center_lat <= max(lats)

    def test_for_empty_flight(self):
        with pytest.raises(ValueError):
            MapGenerator.for_flight(Flight([]))

    def test_add_layers(self, analysed_flight):
        """Test adding track, thermals and straight phases."""
        gen = MapGenerator.for_flight(analysed_flight)

        gen.add_track(analysed_flight.fixes)
        gen.add_thermals(analysed_flight.thermals)
        gen.add_straight_phases(analysed_flight.straight_phases)
        # Should not raise exception

    def test_add_empty_layers(self):
        gen = MapGenerator(-33.9, 18.9)

        gen.add_track([])
        gen.add_thermals(None)
        gen.add_straight_phases([])
        # Should not raise exception

    def test_speed_color(self):
        """Test ground speed color classes."""
        gen = MapGenerator(-33.9, 18.9)

        assert gen._get_speed_color(10) == Colors.SPEED_COLORS[0][1]  # 36 km/h
        assert gen._get_speed_color(30) == Colors.SPEED_COLORS[2][1]  # 108 km/h
        assert gen._get_speed_color(100) == Colors.SPEED_COLORS[-1][1]

    def test_save_map(self, analysed_flight):
        """Test saving map to file."""
        gen = MapGenerator.for_flight(analysed_flight)
        gen.add_thermals(analysed_flight.thermals)

        # Create temp file
        with tempfile.NamedTemporaryFile(suffix=".html", delete=False) as f:
            temp_path = f.name

        try:
            gen.save(temp_path)
            html = Path(temp_path).read_text(encoding="utf-8")
            assert "<title>GlideTrack Map</title>" in html
            assert "Thermal #1" in html
        finally:
            Path(temp_path).unlink(missing_ok=True)
