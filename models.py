"""
Data models for the route map screen
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence, Tuple

from config import DEFAULT_CENTER, DEFAULT_SPAN


@dataclass(frozen=True)
class Coordinate:
    """A point on the map in consumer (latitude, longitude) order"""
    latitude: float
    longitude: float

    @classmethod
    def from_lon_lat(cls, pair: Sequence[float]) -> "Coordinate":
        """Build a coordinate from a provider [lon, lat] pair"""
        return cls(latitude=float(pair[1]), longitude=float(pair[0]))

    def to_lon_lat(self) -> str:
        return f"{self.longitude},{self.latitude}"

    def as_list(self) -> list:
        return [self.latitude, self.longitude]


@dataclass(frozen=True)
class PlaceSuggestion:
    """A geocoding candidate shown in the suggestion list"""
    id: str
    name: str
    coordinate: Coordinate


# Ordered polyline, empty when no route has been fetched
RouteResult = Tuple[Coordinate, ...]


class SearchRole(Enum):
    """Which search field receives suggestion selections"""
    START = "start"
    DESTINATION = "destination"


@dataclass(frozen=True)
class MapRegion:
    """Visible map area: a center and a span in degrees"""
    center: Coordinate
    latitude_delta: float = DEFAULT_SPAN
    longitude_delta: float = DEFAULT_SPAN

    @property
    def zoom(self) -> int:
        # Leaflet zoom z shows roughly 360 / 2**z degrees of longitude
        span = max(self.latitude_delta, self.longitude_delta)
        return max(0, int(round(math.log2(360.0 / span))))


def default_region() -> MapRegion:
    return MapRegion(center=Coordinate(DEFAULT_CENTER[0], DEFAULT_CENTER[1]))


@dataclass(frozen=True)
class ScreenState:
    """Everything the map screen shows; replaced on every transition"""
    start_query: str = ""
    destination_query: str = ""
    start_marker: Optional[Coordinate] = None
    destination_marker: Optional[Coordinate] = None
    suggestions: Tuple[PlaceSuggestion, ...] = ()
    active_role: Optional[SearchRole] = None
    route: RouteResult = ()
    region: MapRegion = field(default_factory=default_region)
    suggestion_token: int = 0
    route_token: int = 0
