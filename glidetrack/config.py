"""
GlideTrack Configuration Management

This module provides configuration management for the GlideTrack flight
analysis system. It includes physical constants, analysis settings,
visualization options, and runtime configuration loaded from YAML files.
"""

import os
from typing import Any, Dict, Optional

import yaml

# =============================================================================
# Physical Constants
# =============================================================================


class Constants:
    """Physical constants representing real-world measurements."""

    EARTH_RADIUS_M: float = 6371000.0  # Mean earth radius (spherical model)
    MS_TO_KMH: float = 3.6  # Velocity conversion: m/s to km/h
    MS_TO_KNOTS: float = 1.94384  # Velocity conversion: m/s to knots


# =============================================================================
# Analysis Settings
# =============================================================================


class Settings:
    """Configurable settings for flight analysis algorithms."""

    # --- Circling Detection ---
    TURN_RATE_THRESHOLD_DEG_S: float = 4.0  # Faster than this is a thermal turn

    # --- Wind Drift ---
    MAX_DRIFT_BEARING_DEVIATION_DEG: float = 5.0  # Outlier trim, bearing (deg)
    MAX_DRIFT_DISTANCE_DEVIATION_M: float = 10.0  # Outlier trim, distance (m)

    # --- Straight Phases ---
    STRAIGHT_PHASE_THRESHOLD_SECONDS: int = 10  # Sliding window span
    STRAIGHT_PHASE_THRESHOLD_ANGLE_DEG: float = 45.0  # Sharp turn angle

    # --- Output ---
    DEFAULT_REPORT_FORMAT: str = "json"

    # --- Visualization ---
    DEFAULT_MAP_STYLE: str = "OpenStreetMap"  # Base map tile style
    DEFAULT_ZOOM: int = 12  # Initial map zoom level
    TRACK_WEIGHT: int = 2  # Track line thickness
    TRACK_OPACITY: float = 0.6  # Track transparency (0-1)
    STRAIGHT_PHASE_WEIGHT: int = 4  # Straight phase line thickness
    THERMAL_MARKER_RADIUS: int = 8  # Thermal marker size (pixels)
    THERMAL_MARKER_FILL_OPACITY: float = 0.6  # Marker fill transparency (0-1)


# =============================================================================
# Color Schemes
# =============================================================================


class Colors:
    """Color definitions for visualizations."""

    # Ground speed classes for straight phases (km/h upper bound, color)
    SPEED_COLORS = [
        (60, "#3498db"),  # Blue: slow
        (90, "#2ecc71"),  # Green
        (120, "#f5e663"),  # Yellow
        (150, "#ff7a18"),  # Orange
        (float("inf"), "#e74c3c"),  # Red: fast
    ]

    TRACK_COLOR: str = "#7f8c8d"  # Raw track (grey)
    THERMAL_LEFT_COLOR: str = "#7c3aed"  # Left-hand circling (purple)
    THERMAL_RIGHT_COLOR: str = "#ff2fd2"  # Right-hand circling (magenta)


# =============================================================================
# Runtime Configuration
# =============================================================================


class Config:
    """
    Runtime configuration manager for GlideTrack.

    Loads settings from YAML files or uses sensible defaults.
    Provides property-based access to analysis thresholds.

    Example:
        >>> config = Config('glidetrack.yaml')
        >>> print(f"Circling above {config.turn_rate_threshold} deg/s")
    """

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize configuration.

        Args:
            config_path: Path to YAML configuration file. If None or missing,
                        uses default configuration.
        """
        self.config_path = config_path
        self._config: Dict[str, Any] = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """
        Load configuration from YAML file or return defaults.

        Returns:
            Configuration dictionary
        """
        if self.config_path is None or not os.path.exists(self.config_path):
            return self._get_default_config()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            print(f"Warning: Could not load config file: {e}")
            return self._get_default_config()

        if not self._validate_config(config):
            print("Warning: Invalid config structure, using defaults")
            return self._get_default_config()

        # Fill in anything the file leaves out
        merged = self._get_default_config()
        for section, values in config.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section].update(values)
            else:
                merged[section] = values
        return merged

    def _validate_config(self, config: Any) -> bool:
        """
        Validate configuration structure and value types.

        Args:
            config: Parsed YAML content

        Returns:
            True if valid, False otherwise
        """
        try:
            assert isinstance(config, dict)

            # Required: analysis section with numeric, positive thresholds
            assert "analysis" in config
            analysis = config["analysis"]
            assert isinstance(analysis, dict)
            for key, value in analysis.items():
                assert isinstance(value, (float, int)), key
                assert value > 0, key

            output = config.get("output", {})
            assert isinstance(output, dict)
            if "report_format" in output:
                assert output["report_format"] in ("json", "txt")

            return True
        except (AssertionError, KeyError, TypeError):
            return False

    def _get_default_config(self) -> Dict[str, Any]:
        """
        Get default configuration.

        Returns:
            Default configuration dictionary
        """
        return {
            "analysis": {
                "turn_rate_threshold": Settings.TURN_RATE_THRESHOLD_DEG_S,
                "max_drift_bearing_deviation": Settings.MAX_DRIFT_BEARING_DEVIATION_DEG,
                "max_drift_distance_deviation": Settings.MAX_DRIFT_DISTANCE_DEVIATION_M,
                "straight_phase_threshold_seconds": Settings.STRAIGHT_PHASE_THRESHOLD_SECONDS,
                "straight_phase_threshold_angle": Settings.STRAIGHT_PHASE_THRESHOLD_ANGLE_DEG,
            },
            "output": {
                "report_format": Settings.DEFAULT_REPORT_FORMAT,
                "map_style": Settings.DEFAULT_MAP_STYLE,
            },
        }

    def save_config(self, path: Optional[str] = None) -> None:
        """
        Save current configuration to YAML file.

        Args:
            path: Where to write (default: the file it was loaded from)

        Raises:
            ValueError: If neither path nor config_path is set
        """
        target = path or self.config_path
        if target is None:
            raise ValueError("Cannot save config: no config_path specified")

        with open(target, "w", encoding="utf-8") as f:
            yaml.dump(self._config, f, default_flow_style=False)

    # --- Property Accessors ---

    @property
    def turn_rate_threshold(self) -> float:
        """Get circling turn rate threshold in degrees per second."""
        return float(self._config["analysis"]["turn_rate_threshold"])

    @property
    def max_drift_bearing_deviation(self) -> float:
        """Get drift bearing outlier tolerance in degrees."""
        return float(self._config["analysis"]["max_drift_bearing_deviation"])

    @property
    def max_drift_distance_deviation(self) -> float:
        """Get drift distance outlier tolerance in meters."""
        return float(self._config["analysis"]["max_drift_distance_deviation"])

    @property
    def straight_phase_threshold_seconds(self) -> int:
        """Get straight phase window span in seconds."""
        return int(self._config["analysis"]["straight_phase_threshold_seconds"])

    @property
    def straight_phase_threshold_angle(self) -> float:
        """Get straight phase sharp turn angle in degrees."""
        return float(self._config["analysis"]["straight_phase_threshold_angle"])

    @property
    def report_format(self) -> str:
        """Get default report format."""
        return self._config["output"].get("report_format", Settings.DEFAULT_REPORT_FORMAT)

    @property
    def map_style(self) -> str:
        """Get map tile style."""
        return self._config["output"].get("map_style", Settings.DEFAULT_MAP_STYLE)

    # --- Generic Accessors ---

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.

        Args:
            key: Dot-separated key path (e.g., 'analysis.turn_rate_threshold')
            default: Default value if key not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get('analysis.turn_rate_threshold', 4)
            4.0
        """
        keys = key.split(".")
        value = self._config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Override one setting using dot notation.

        Only settings the defaults know about can be changed, and the
        configuration must still validate afterwards.

        Args:
            key: Dot-separated key path (e.g., 'analysis.turn_rate_threshold')
            value: New value

        Raises:
            ValueError: If the key is unknown or the value is rejected

        Example:
            >>> config.set('analysis.turn_rate_threshold', 5)
        """
        section, _, name = key.partition(".")
        if name not in self._get_default_config().get(section, {}):
            raise ValueError(f"Unknown setting: {key}")

        updated = {s: dict(v) if isinstance(v, dict) else v for s, v in self._config.items()}
        updated[section][name] = value
        if not self._validate_config(updated):
            raise ValueError(f"Invalid value for {key}: {value!r}")

        self._config = updated
