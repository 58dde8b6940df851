"""Small persisted key-value settings, kept apart from the places store."""

import json
from pathlib import Path
from typing import Any

from .config import MapStyle
from .protection import atomic_write_bytes

MAP_STYLE_KEY = "mapStyle"


class SettingsStore:
    """JSON file of simple preferences such as the map style."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._values: dict = {}
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            self._values = {}
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._values = data if isinstance(data, dict) else {}
        except (OSError, ValueError) as e:
            print(f"Error loading settings: {e}")
            self._values = {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        data = json.dumps(self._values, ensure_ascii=False, indent=2).encode("utf-8")
        atomic_write_bytes(self.path, data, mode=0o644)

    @property
    def map_style(self) -> MapStyle:
        try:
            return MapStyle(self.get(MAP_STYLE_KEY, MapStyle.STANDARD.value))
        except ValueError:
            return MapStyle.STANDARD

    @map_style.setter
    def map_style(self, style: MapStyle) -> None:
        self.set(MAP_STYLE_KEY, MapStyle(style).value)
