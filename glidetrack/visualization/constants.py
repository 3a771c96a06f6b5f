"""
Visualization Constants
"""

# Map configuration
MAP_TILE_URLS = {
    "CartoDB.DarkMatter": "https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
    "CartoDB.Positron": "https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
    "OpenStreetMap": "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
}
MAP_ATTRIBUTION = "GlideTrack Flight Analysis"

# Straight phase line style
STRAIGHT_PHASE_OPACITY = 0.9
