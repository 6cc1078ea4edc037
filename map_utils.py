"""
Map functions for visualisation
"""

import folium

from config import (
    OSM_TILE_URL,
    OSM_ATTRIBUTION,
    OSM_MAX_ZOOM,
    START_MARKER_COLOR,
    DESTINATION_MARKER_COLOR,
    ROUTE_COLOR,
    ROUTE_WEIGHT
)
from models import ScreenState


def create_map(state: ScreenState) -> folium.Map:
    """
    Build the Folium map with markers and route

    Args:
        state: Current screen state

    Returns:
        Folium Map object
    """
    m = folium.Map(
        location=state.region.center.as_list(),
        zoom_start=state.region.zoom,
        tiles=None,
        control_scale=True
    )

    folium.TileLayer(
        tiles=OSM_TILE_URL,
        attr=OSM_ATTRIBUTION,
        name="OpenStreetMap",
        max_zoom=OSM_MAX_ZOOM
    ).add_to(m)

    if state.start_marker:
        folium.Marker(
            state.start_marker.as_list(),
            tooltip="Start Location",
            popup=state.start_query or None,
            icon=folium.Icon(color=START_MARKER_COLOR)
        ).add_to(m)

    if state.destination_marker:
        folium.Marker(
            state.destination_marker.as_list(),
            tooltip="Destination",
            popup=state.destination_query or None,
            icon=folium.Icon(color=DESTINATION_MARKER_COLOR)
        ).add_to(m)

    if state.route:
        folium.PolyLine(
            [p.as_list() for p in state.route],
            color=ROUTE_COLOR,
            weight=ROUTE_WEIGHT,
            opacity=0.8
        ).add_to(m)

    return m
