"""
Routing providers: OSRM
"""

import requests

from config import OSRM_BASE_URL, ROUTING_PROFILE, REQUEST_TIMEOUT, USER_AGENT
from errors import NetworkFailure, MalformedResponse, EmptyResult
from models import Coordinate, RouteResult


class RoutingProvider:
    """Base class for routing providers"""

    name = "base"

    def get_route(self, start: Coordinate, end: Coordinate) -> RouteResult:
        raise NotImplementedError


class OSRMProvider(RoutingProvider):
    """OSRM routing provider (public demo server by default)"""

    name = "OSRM"

    def __init__(self, base_url: str = OSRM_BASE_URL, profile: str = ROUTING_PROFILE, session=None):
        self.base_url = base_url.rstrip("/")
        self.profile = profile
        self.session = session or requests

    def build_url(self, start: Coordinate, end: Coordinate) -> str:
        """Route URL; OSRM wants lon,lat pairs separated by ';'"""
        return f"{self.base_url}/route/v1/{self.profile}/{start.to_lon_lat()};{end.to_lon_lat()}"

    def get_route(self, start: Coordinate, end: Coordinate) -> RouteResult:
        """
        Fetch the full-geometry route between two points

        Args:
            start: Start coordinate
            end: Destination coordinate

        Returns:
            Route polyline in (lat, lon) order

        Raises:
            NetworkFailure, MalformedResponse or EmptyResult
        """
        params = {
            "overview": "full",
            "geometries": "geojson"
        }
        headers = {"User-Agent": USER_AGENT}

        try:
            response = self.session.get(
                self.build_url(start, end), params=params, headers=headers, timeout=REQUEST_TIMEOUT
            )
        except requests.RequestException as e:
            raise NetworkFailure(f"Routing request failed: {e}") from e

        # OSRM answers 400 with a JSON body for NoRoute and similar codes
        if response.status_code not in (200, 400):
            raise NetworkFailure(f"Routing provider returned HTTP {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise MalformedResponse("Routing response is not JSON") from e

        return self.parse_route(data)

    def parse_route(self, data: dict) -> RouteResult:
        """Parse an OSRM response into a polyline"""

        if not isinstance(data, dict):
            raise MalformedResponse(f"Expected a JSON object, got {type(data).__name__}")

        routes = data.get("routes")
        if not routes:
            raise EmptyResult(f"No route found ({data.get('code', 'no code')}: {data.get('message', '')})")

        try:
            coordinates = routes[0]["geometry"]["coordinates"]
            # GeoJSON order is [lon, lat]
            return tuple(Coordinate.from_lon_lat(coord) for coord in coordinates)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise MalformedResponse("Unusable route geometry") from e
