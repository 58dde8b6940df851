"""
Pytest configuration and shared fixtures for all tests.
"""

import json
import sys
from pathlib import Path

import httpx
import pytest

# Add the project root to sys.path so we can import bucketlist without installing
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from bucketlist.protection import FileProtection, generate_key  # noqa: E402
from bucketlist.store import LocationStore  # noqa: E402


@pytest.fixture
def key():
    return generate_key()


@pytest.fixture
def protection(key):
    return FileProtection(key)


@pytest.fixture
def save_path(tmp_path):
    return tmp_path / "SavedPlaces"


@pytest.fixture
def store(save_path, protection):
    return LocationStore(save_path, protection)


def geosearch_response(pages: dict) -> dict:
    """Build a geosearch response body from {pageid: page fields}."""
    return {
        "batchcomplete": "",
        "query": {
            "pages": {
                str(pageid): {"pageid": pageid, "ns": 0, "index": i, **fields}
                for i, (pageid, fields) in enumerate(pages.items())
            }
        },
    }


@pytest.fixture
def geosearch():
    return geosearch_response


@pytest.fixture
def make_client():
    """Return a factory for AsyncClients answering every request with handler."""
    def factory(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def json_client(make_client):
    """Client that always answers with the given JSON body."""
    def factory(body, status_code: int = 200):
        def handler(request):
            content = body if isinstance(body, (bytes, str)) else json.dumps(body)
            return httpx.Response(status_code, content=content)
        return make_client(handler)

    return factory
