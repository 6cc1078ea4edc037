"""
Shared test fixtures.

HTTP is replaced by a MagicMock session whose get() returns a stub
response, so no test talks to Photon or OSRM.
"""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def make_response():
    """Factory for stub responses with a status code and a JSON body."""
    def _make(payload=None, status_code=200, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response
    return _make


@pytest.fixture
def session():
    """Session stub; set session.get.return_value or side_effect per test."""
    return MagicMock()


@pytest.fixture
def paris_payload():
    return {
        "features": [
            {
                "properties": {"name": "Paris", "osm_id": 1},
                "geometry": {"coordinates": [2.35, 48.85]},
            }
        ]
    }
