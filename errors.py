"""
Errors raised by the geocoding and routing providers
"""


class MapScreenError(Exception):
    """Base class for provider errors caught at the fetch boundary"""


class NetworkFailure(MapScreenError):
    """The request could not be sent or did not return a successful status"""


class MalformedResponse(MapScreenError):
    """The provider answered with a payload we cannot interpret"""


class EmptyResult(MapScreenError):
    """The provider answered correctly but with nothing usable"""
