"""BucketList - saved map places with encrypted storage and nearby encyclopedia lookups."""

from .location import Coordinate, Location
from .nearby import Failed, Loaded, Loading, NearbyPlacesFetcher
from .page import Page
from .places import Places
from .store import LocationStore

__all__ = [
    'Coordinate',
    'Failed',
    'Loaded',
    'Loading',
    'Location',
    'LocationStore',
    'NearbyPlacesFetcher',
    'Page',
    'Places',
]
