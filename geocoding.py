"""
Geocoding functions for turning search text into place suggestions
"""

import logging
import requests
from typing import List, Optional

from config import PHOTON_BASE_URL, MIN_QUERY_LENGTH, REQUEST_TIMEOUT, USER_AGENT
from errors import MapScreenError, NetworkFailure, MalformedResponse
from models import Coordinate, PlaceSuggestion
from utils import validate_coordinates

logger = logging.getLogger(__name__)


def parse_suggestions(data: dict) -> List[PlaceSuggestion]:
    """
    Parse a Photon GeoJSON response into suggestions

    Args:
        data: Decoded JSON body

    Returns:
        Suggestions in provider order, empty if there are no features.
        Features without a usable point are skipped.
    """
    if not isinstance(data, dict):
        raise MalformedResponse(f"Expected a JSON object, got {type(data).__name__}")

    features = data.get("features") or []
    if not isinstance(features, list):
        raise MalformedResponse("'features' is not a list")

    suggestions = []
    for feature in features:
        try:
            properties = feature.get("properties") or {}
            coordinates = feature["geometry"]["coordinates"]
            coordinate = Coordinate.from_lon_lat(coordinates)  # lon, lat -> lat, lon
            osm_id = properties.get("osm_id")
            name = properties.get("name") or properties.get("street") or ""
        except (AttributeError, KeyError, IndexError, TypeError, ValueError):
            logger.warning("Skipping unusable feature in geocoding response: %r", feature)
            continue

        if not validate_coordinates(coordinate.latitude, coordinate.longitude):
            logger.warning("Skipping feature with out-of-range coordinates: %r", coordinates)
            continue

        suggestions.append(PlaceSuggestion(
            id="" if osm_id is None else str(osm_id),
            name=name,
            coordinate=coordinate
        ))

    return suggestions


def _request_features(query: str, session=None) -> dict:
    """Call the Photon autocomplete endpoint and return the decoded body"""
    http = session or requests
    url = f"{PHOTON_BASE_URL}/api/"
    params = {"q": query}
    headers = {"User-Agent": USER_AGENT}

    try:
        response = http.get(url, params=params, headers=headers, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        raise NetworkFailure(f"Geocoding request failed: {e}") from e

    if response.status_code != 200:
        raise NetworkFailure(f"Geocoding provider returned HTTP {response.status_code}")

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponse("Geocoding response is not JSON") from e


def fetch_suggestions(query: str, session=None) -> Optional[List[PlaceSuggestion]]:
    """
    Fetch place suggestions for a search query

    Args:
        query: Text typed into a search field
        session: Object with a requests-compatible get(), defaults to requests

    Returns:
        Suggestions, or None when the query is too short or the fetch failed,
        in which case the current list should be kept
    """
    if len(query) < MIN_QUERY_LENGTH:
        return None

    try:
        suggestions = parse_suggestions(_request_features(query, session))
    except MapScreenError as e:
        logger.error("Error fetching location suggestions: %s", e)
        return None

    logger.info("Geocoding %r returned %d suggestions", query, len(suggestions))
    return suggestions
