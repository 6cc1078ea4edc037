"""
Configuration and constants for the route map screen
"""

# Default values
DEFAULT_CENTER = [37.7749, -122.4194]  # San Francisco
DEFAULT_SPAN = 0.1
SELECTION_SPAN = 0.02
MIN_QUERY_LENGTH = 2

# API URLs
PHOTON_BASE_URL = "https://photon.komoot.io"
OSRM_BASE_URL = "https://router.project-osrm.org"
OSM_TILE_URL = "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png"
OSM_ATTRIBUTION = "&copy; OpenStreetMap contributors"
OSM_MAX_ZOOM = 19

# Request settings
ROUTING_PROFILE = "driving"
REQUEST_TIMEOUT = 10  # seconds
USER_AGENT = "RouteMapScreen/1.0"

# Map styling
START_MARKER_COLOR = "blue"
DESTINATION_MARKER_COLOR = "red"
ROUTE_COLOR = "blue"
ROUTE_WEIGHT = 10
MAP_HEIGHT = 500

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
