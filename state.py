"""
Screen state transitions

Every function takes the current ScreenState and returns a new one. The
screen keeps the only reference in st.session_state.
"""

import logging
from dataclasses import replace
from typing import Sequence, Tuple

from config import SELECTION_SPAN
from models import MapRegion, PlaceSuggestion, RouteResult, ScreenState, SearchRole

logger = logging.getLogger(__name__)


def begin_suggestion_query(state: ScreenState, role: SearchRole, text: str) -> Tuple[ScreenState, int]:
    """
    Record new search text for a field and take a suggestion token

    Args:
        state: Current state
        role: Field that was edited
        text: New field content

    Returns:
        (new state, token to hand back to apply_suggestions)
    """
    token = state.suggestion_token + 1
    if role is SearchRole.START:
        state = replace(state, start_query=text)
    else:
        state = replace(state, destination_query=text)
    return replace(state, active_role=role, suggestion_token=token), token


def apply_suggestions(
    state: ScreenState,
    token: int,
    suggestions: Sequence[PlaceSuggestion]
) -> ScreenState:
    """Replace the suggestion list unless a newer query has been issued"""
    if token != state.suggestion_token:
        logger.debug("Dropping suggestions for superseded query %d (current %d)", token, state.suggestion_token)
        return state
    return replace(state, suggestions=tuple(suggestions))


def select_suggestion(state: ScreenState, place: PlaceSuggestion, role: SearchRole) -> ScreenState:
    """
    Apply a picked suggestion to one search field

    Clears the suggestion list, sets the query text and marker for the role
    and moves the map to the place. Outstanding route requests are
    invalidated since one of their endpoints just changed.
    """
    region = MapRegion(
        center=place.coordinate,
        latitude_delta=SELECTION_SPAN,
        longitude_delta=SELECTION_SPAN
    )
    if role is SearchRole.START:
        state = replace(state, start_query=place.name, start_marker=place.coordinate)
    else:
        state = replace(state, destination_query=place.name, destination_marker=place.coordinate)

    return replace(
        state,
        suggestions=(),
        region=region,
        route_token=state.route_token + 1
    )


def can_fetch_route(state: ScreenState) -> bool:
    """A route needs both markers, not just text in both fields"""
    return state.start_marker is not None and state.destination_marker is not None


def begin_route_request(state: ScreenState) -> Tuple[ScreenState, int]:
    token = state.route_token + 1
    return replace(state, route_token=token), token


def apply_route(state: ScreenState, token: int, route: RouteResult) -> ScreenState:
    """
    Store a fetched route

    Empty results leave the current polyline in place, as do results for
    requests that were superseded by a newer request or a new selection.
    """
    if token != state.route_token:
        logger.debug("Dropping route for superseded request %d (current %d)", token, state.route_token)
        return state
    if not route:
        return state
    return replace(state, route=tuple(route))
