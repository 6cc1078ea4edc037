"""
Helper functions for the route map screen
"""

import math
import gpxpy
import gpxpy.gpx
from typing import Sequence

from models import Coordinate

EARTH_RADIUS_KM = 6371


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Great-circle distance between two coordinates (Haversine formula)

    Args:
        a: First coordinate
        b: Second coordinate

    Returns:
        Distance in kilometres, rounded to two decimals
    """
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return round(EARTH_RADIUS_KM * c, 2)


def validate_coordinates(lat: float, lon: float) -> bool:
    """
    Check that a latitude/longitude pair is in range

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        True if the coordinates are valid
    """
    return -90 <= lat <= 90 and -180 <= lon <= 180


def create_gpx(route: Sequence[Coordinate], name: str = "Route") -> str:
    """
    Build a GPX file from a fetched route

    Args:
        route: Route polyline
        name: Track name

    Returns:
        GPX as a string
    """
    gpx = gpxpy.gpx.GPX()

    gpx.creator = "Route map screen"
    if len(route) > 1:
        gpx.description = f"Driving route, {distance_km(route[0], route[-1]):.2f} km straight-line"

    gpx_track = gpxpy.gpx.GPXTrack()
    gpx_track.name = name
    gpx_track.type = "driving"
    gpx.tracks.append(gpx_track)

    gpx_segment = gpxpy.gpx.GPXTrackSegment()
    gpx_track.segments.append(gpx_segment)

    for point in route:
        gpx_segment.points.append(
            gpxpy.gpx.GPXTrackPoint(point.latitude, point.longitude)
        )

    return gpx.to_xml()
