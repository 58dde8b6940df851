"""
Tests for the settings store.
"""

import json

from bucketlist.config import MapStyle
from bucketlist.settings import SettingsStore


def test_defaults_to_standard(tmp_path):
    settings = SettingsStore(tmp_path / "settings.json")
    assert settings.map_style == MapStyle.STANDARD
    assert settings.get("missing", "fallback") == "fallback"


def test_map_style_persists(tmp_path):
    path = tmp_path / "settings.json"
    SettingsStore(path).map_style = MapStyle.SATELLITE

    assert SettingsStore(path).map_style == MapStyle.SATELLITE
    assert json.loads(path.read_text(encoding="utf-8")) == {"mapStyle": "satellite"}


def test_unknown_style_falls_back(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"mapStyle": "watercolor"}), encoding="utf-8")
    assert SettingsStore(path).map_style == MapStyle.STANDARD


def test_corrupted_file_starts_empty(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{oops", encoding="utf-8")

    settings = SettingsStore(path)
    assert settings.get("mapStyle") is None

    settings.set("zoom", 4)
    assert SettingsStore(path).get("zoom") == 4
