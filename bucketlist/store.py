"""Storage handler for saved places - one encrypted JSON file holds the whole list."""

import json
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ValidationError

from .location import Coordinate, Location
from .protection import FileProtection, ProtectionError


class LoadResult(BaseModel):
    """Outcome of reading the saved places file."""
    ok: bool
    count: int = 0
    error: Optional[str] = None


class SaveResult(BaseModel):
    """Outcome of writing the saved places file."""
    ok: bool
    path: Path
    error: Optional[str] = None


class LocationStore:
    """Own the list of saved places and keep it on disk.

    The in-memory list is authoritative for the session. Loading and saving
    never raise: failures fall back locally and are reported through
    LoadResult and SaveResult instead.
    """

    def __init__(self, save_path: Path, protection: FileProtection, autoload: bool = True):
        """Initialize the store.

        Args:
            save_path: File holding the encrypted list
            protection: Key holder used to seal and open the file
            autoload: Read the file right away
        """
        self.save_path = Path(save_path)
        self.protection = protection
        self._locations: List[Location] = []
        self.selected: Optional[Location] = None
        self.last_load: Optional[LoadResult] = None
        self.last_save: Optional[SaveResult] = None
        if autoload:
            self.initialize()

    @property
    def locations(self) -> List[Location]:
        """Saved places in insertion order (a copy)."""
        return list(self._locations)

    def initialize(self) -> LoadResult:
        """Load the saved list, falling back to an empty one on any failure."""
        try:
            raw = self.protection.read(self.save_path)
            items = json.loads(raw.decode("utf-8"))
            if not isinstance(items, list):
                raise ValueError(f"expected a list of places, got {type(items).__name__}")
            self._locations = [Location.model_validate(item) for item in items]
            self.last_load = LoadResult(ok=True, count=len(self._locations))
            print(f"Loaded {len(self._locations)} places from {self.save_path}")
        except FileNotFoundError:
            self._locations = []
            self.last_load = LoadResult(ok=True, count=0)
            print(f"No saved places found at {self.save_path}")
        except (OSError, ProtectionError, ValueError, ValidationError) as e:
            # json and unicode decode errors are ValueErrors too
            self._locations = []
            self.last_load = LoadResult(ok=False, error=str(e))
            print(f"Unable to load saved places: {e}")
        return self.last_load

    def unload(self) -> None:
        """Forget the in-memory list and selection without touching the file."""
        self._locations = []
        self.selected = None

    def add(self, coordinate: Coordinate) -> Location:
        """Drop a new pin at coordinate and save."""
        location = Location.new(coordinate)
        self._locations.append(location)
        self.persist()
        return location

    def select(self, location: Optional[Location]) -> None:
        self.selected = location

    def update(self, location: Location) -> bool:
        """Replace the selected place with location.

        Returns:
            True if the selected place was found and replaced, False otherwise
        """
        if self.selected is None:
            return False

        for index, existing in enumerate(self._locations):
            if existing.id == self.selected.id:
                self._locations[index] = location
                self.selected = location
                self.persist()
                return True
        return False

    def find(self, key: str) -> Optional[Location]:
        """Find a place by full id or unique id prefix."""
        key = key.strip().lower()
        if not key:
            return None
        matches = [loc for loc in self._locations if str(loc.id).startswith(key)]
        return matches[0] if len(matches) == 1 else None

    def persist(self) -> SaveResult:
        """Write the full list to disk, reporting rather than raising on failure."""
        try:
            items = [loc.model_dump(mode="json") for loc in self._locations]
            data = json.dumps(items, ensure_ascii=False).encode("utf-8")
            self.protection.write(self.save_path, data)
            self.last_save = SaveResult(ok=True, path=self.save_path)
        except (OSError, ProtectionError, ValueError) as e:
            print(f"Unable to save data: {e}.")
            self.last_save = SaveResult(ok=False, path=self.save_path, error=str(e))
        return self.last_save
