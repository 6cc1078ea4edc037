"""
Main Streamlit application for the route map screen
"""

import logging
import streamlit as st
from streamlit_folium import st_folium

from config import LOG_LEVEL, LOG_FORMAT, MAP_HEIGHT
from geocoding import fetch_suggestions
from map_utils import create_map
from models import PlaceSuggestion, ScreenState, SearchRole
from routing import fetch_route
from state import (
    apply_route,
    apply_suggestions,
    begin_route_request,
    begin_suggestion_query,
    can_fetch_route,
    select_suggestion
)
from utils import create_gpx, distance_km

logger = logging.getLogger(__name__)

# Widget keys for the two search fields
QUERY_KEYS = {
    SearchRole.START: "start_query",
    SearchRole.DESTINATION: "destination_query"
}


def configure_logging():
    """Send application logs to the console"""
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


def init_session_state():
    """Initialise session state"""
    if "screen" not in st.session_state:
        st.session_state.screen = ScreenState()
    for key in QUERY_KEYS.values():
        if key not in st.session_state:
            st.session_state[key] = ""


def on_query_change(role: SearchRole):
    """Search field edited: store the text and look up suggestions"""
    text = st.session_state[QUERY_KEYS[role]]
    screen, token = begin_suggestion_query(st.session_state.screen, role, text)
    st.session_state.screen = screen

    suggestions = fetch_suggestions(text)
    if suggestions is not None:
        st.session_state.screen = apply_suggestions(st.session_state.screen, token, suggestions)


def on_suggestion_click(place: PlaceSuggestion):
    """Suggestion picked: place the marker for the active field"""
    screen = st.session_state.screen
    role = SearchRole.START if screen.active_role is SearchRole.START else SearchRole.DESTINATION
    st.session_state.screen = select_suggestion(screen, place, role)
    st.session_state[QUERY_KEYS[role]] = place.name


def on_fetch_route():
    """Fetch route button"""
    screen = st.session_state.screen
    if not can_fetch_route(screen):
        logger.info("Route requested before both places were selected")
        return

    screen, token = begin_route_request(screen)
    st.session_state.screen = screen
    route = fetch_route(screen.start_marker, screen.destination_marker)
    st.session_state.screen = apply_route(st.session_state.screen, token, route)


def render_search():
    """Search fields and the suggestion list"""
    col_start, col_dest = st.columns(2)
    with col_start:
        st.text_input(
            "Start Location",
            placeholder="Start Location",
            key=QUERY_KEYS[SearchRole.START],
            on_change=on_query_change,
            args=(SearchRole.START,),
            label_visibility="collapsed"
        )
    with col_dest:
        st.text_input(
            "Destination",
            placeholder="Destination",
            key=QUERY_KEYS[SearchRole.DESTINATION],
            on_change=on_query_change,
            args=(SearchRole.DESTINATION,),
            label_visibility="collapsed"
        )

    screen = st.session_state.screen
    if screen.suggestions:
        with st.container(height=200):
            for index, place in enumerate(screen.suggestions):
                st.button(
                    place.name or "(unnamed place)",
                    key=f"suggestion-{place.id}-{index}",
                    on_click=on_suggestion_click,
                    args=(place,),
                    use_container_width=True
                )


def main():
    """Main function for the Streamlit app"""
    st.set_page_config(
        page_title="Route Map",
        page_icon="🗺️",
        layout="wide"
    )

    configure_logging()
    init_session_state()

    render_search()

    screen = st.session_state.screen
    col1, col2 = st.columns([3, 1])

    with col1:
        st_folium(
            create_map(screen),
            key="map",
            width=None,
            height=MAP_HEIGHT,
            center=screen.region.center.as_list(),
            zoom=screen.region.zoom,
            returned_objects=[]
        )

    with col2:
        st.button(
            "Fetch route",
            key="fetch_route",
            type="primary",
            on_click=on_fetch_route,
            disabled=not can_fetch_route(screen),
            use_container_width=True
        )

        if screen.start_marker and screen.destination_marker:
            st.metric(
                "Distance",
                f"{distance_km(screen.start_marker, screen.destination_marker):.2f} km",
                help="Straight-line distance between the two markers"
            )

        if screen.route:
            st.download_button(
                label="Download GPX",
                data=create_gpx(screen.route, f"{screen.start_query} - {screen.destination_query}"),
                file_name="route.gpx",
                mime="application/gpx+xml",
                use_container_width=True
            )


if __name__ == "__main__":
    main()
