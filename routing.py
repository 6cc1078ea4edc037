"""
Main routing module that calls the configured provider
"""

import logging
from typing import Optional

from errors import MapScreenError
from models import Coordinate, RouteResult
from routing_providers import OSRMProvider, RoutingProvider

logger = logging.getLogger(__name__)


def fetch_route(
    start: Coordinate,
    end: Coordinate,
    provider: Optional[RoutingProvider] = None
) -> RouteResult:
    """
    Fetch a driving route between two points

    Args:
        start: Start coordinate
        end: Destination coordinate
        provider: Routing provider, OSRM if not given

    Returns:
        Route polyline, or an empty tuple if the fetch failed
    """
    provider = provider or OSRMProvider()

    try:
        route = provider.get_route(start, end)
    except MapScreenError as e:
        logger.error("Error fetching route: %s", e)
        return ()

    logger.info("%s returned a route with %d points", provider.name, len(route))
    return route
