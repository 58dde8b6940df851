"""Places facade - the surface a map front end talks to."""

from pathlib import Path
from typing import List, Optional, Union

import httpx

from .location import Coordinate, Location
from .nearby import FetchResult, NearbyPlacesFetcher
from .protection import FileProtection
from .store import LoadResult, LocationStore


class Places:
    """Hold the saved places for one session and look up what is nearby.

    The store stays locked (and empty) until authenticate() is given the key,
    mirroring an unlock gate in front of the map.
    """

    def __init__(
        self,
        save_path: Path,
        key: Optional[Union[str, bytes]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.protection = FileProtection()
        self.store = LocationStore(save_path, self.protection, autoload=False)
        self.fetcher = NearbyPlacesFetcher(client)
        if key is not None:
            self.authenticate(key)

    @property
    def is_unlocked(self) -> bool:
        return self.protection.is_unlocked

    def authenticate(self, key: Union[str, bytes]) -> LoadResult:
        """Unlock with key and load the saved places.

        Raises:
            ProtectionError: key is malformed
        """
        self.protection.unlock(key)
        return self.store.initialize()

    def lock(self) -> None:
        self.protection.lock()
        self.store.unload()

    def current_locations(self) -> List[Location]:
        return self.store.locations

    def add_location(self, coordinate: Coordinate) -> Optional[Location]:
        """Drop a pin, or return None while locked."""
        if not self.is_unlocked:
            return None
        return self.store.add(coordinate)

    def set_selected(self, location: Optional[Location]) -> None:
        # selecting while locked only clears
        self.store.select(location if self.is_unlocked else None)

    def update_selected(self, new_location: Location) -> bool:
        if not self.is_unlocked:
            return False
        return self.store.update(new_location)

    def find(self, key: str) -> Optional[Location]:
        return self.store.find(key)

    async def fetch_nearby(self, coordinate: Coordinate) -> FetchResult:
        return await self.fetcher.fetch(coordinate)
