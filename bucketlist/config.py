"""Global configuration and defaults for the BucketList places core."""

import os
from enum import Enum
from pathlib import Path


class MapStyle(Enum):
    """Map style remembered between sessions."""
    STANDARD = "standard"
    HYBRID = "hybrid"
    SATELLITE = "satellite"


# Storage settings
data_dir: Path = Path(os.environ.get("BUCKETLIST_HOME", "~/.bucketlist")).expanduser()
SAVE_FILENAME: str = "SavedPlaces"
KEY_FILENAME: str = "SavedPlaces.key"
SETTINGS_FILENAME: str = "settings.json"
KEY_ENV_VAR: str = "BUCKETLIST_KEY"

# Location defaults
DEFAULT_NAME: str = "New Location"
DEFAULT_DESCRIPTION: str = ""

# Geosearch API settings
api_url: str = "https://en.wikipedia.org/w/api.php"
search_radius: int = 10000
result_limit: int = 50
thumbnail_size: int = 500
request_timeout: float = 30.0
user_agent: str = "BucketList/1.0 (places core)"
NO_DESCRIPTION: str = "No description available"

# Batch lookup settings
max_concurrent: int = 8


def save_path() -> Path:
    return data_dir / SAVE_FILENAME


def key_path() -> Path:
    return data_dir / KEY_FILENAME


def settings_path() -> Path:
    return data_dir / SETTINGS_FILENAME
