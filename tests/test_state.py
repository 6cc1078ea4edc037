"""Tests for screen state transitions."""

from config import SELECTION_SPAN
from models import Coordinate, PlaceSuggestion, ScreenState, SearchRole
from state import (
    apply_route,
    apply_suggestions,
    begin_route_request,
    begin_suggestion_query,
    can_fetch_route,
    select_suggestion,
)

PARIS = PlaceSuggestion(id="1", name="Paris", coordinate=Coordinate(48.85, 2.35))
LYON = PlaceSuggestion(id="2", name="Lyon", coordinate=Coordinate(45.76, 4.84))
ROUTE = (Coordinate(48.85, 2.35), Coordinate(45.76, 4.84))


class TestSuggestions:
    def test_query_sets_text_and_role(self):
        state, token = begin_suggestion_query(ScreenState(), SearchRole.DESTINATION, "Ly")
        assert state.destination_query == "Ly"
        assert state.start_query == ""
        assert state.active_role is SearchRole.DESTINATION
        assert token == state.suggestion_token

    def test_current_token_applies(self):
        state, token = begin_suggestion_query(ScreenState(), SearchRole.START, "Pa")
        state = apply_suggestions(state, token, [PARIS])
        assert state.suggestions == (PARIS,)

    def test_superseded_response_dropped(self):
        state, old = begin_suggestion_query(ScreenState(), SearchRole.START, "Pa")
        state, new = begin_suggestion_query(state, SearchRole.START, "Par")
        state = apply_suggestions(state, new, [PARIS])
        state = apply_suggestions(state, old, [LYON])
        assert state.suggestions == (PARIS,)


class TestSelectSuggestion:
    def test_start_role_sets_only_start(self):
        state = ScreenState(destination_marker=LYON.coordinate, suggestions=(PARIS, LYON))
        state = select_suggestion(state, PARIS, SearchRole.START)

        assert state.start_marker == PARIS.coordinate
        assert state.start_query == "Paris"
        assert state.destination_marker == LYON.coordinate
        assert state.suggestions == ()

    def test_destination_role_sets_only_destination(self):
        state = ScreenState(start_marker=PARIS.coordinate)
        state = select_suggestion(state, LYON, SearchRole.DESTINATION)

        assert state.destination_marker == LYON.coordinate
        assert state.destination_query == "Lyon"
        assert state.start_marker == PARIS.coordinate

    def test_recenters_map(self):
        state = select_suggestion(ScreenState(), PARIS, SearchRole.START)
        assert state.region.center == PARIS.coordinate
        assert state.region.latitude_delta == SELECTION_SPAN

    def test_does_not_fetch_route(self):
        state = ScreenState(start_marker=PARIS.coordinate)
        state = select_suggestion(state, LYON, SearchRole.DESTINATION)
        assert state.route == ()


class TestRoute:
    def test_requires_both_markers(self):
        assert not can_fetch_route(ScreenState(start_query="Paris", destination_query="Lyon"))
        assert not can_fetch_route(ScreenState(start_marker=PARIS.coordinate))
        assert can_fetch_route(ScreenState(start_marker=PARIS.coordinate, destination_marker=LYON.coordinate))

    def test_route_applied(self):
        state, token = begin_route_request(ScreenState())
        assert apply_route(state, token, ROUTE).route == ROUTE

    def test_empty_route_keeps_previous(self):
        state, token = begin_route_request(ScreenState(route=ROUTE))
        assert apply_route(state, token, ()).route == ROUTE

    def test_selection_invalidates_pending_route(self):
        state, token = begin_route_request(ScreenState(start_marker=PARIS.coordinate))
        state = select_suggestion(state, LYON, SearchRole.DESTINATION)
        assert apply_route(state, token, ROUTE).route == ()

    def test_original_state_untouched(self):
        original = ScreenState()
        begin_suggestion_query(original, SearchRole.START, "Paris")
        select_suggestion(original, PARIS, SearchRole.START)
        assert original == ScreenState()
