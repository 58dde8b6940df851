"""Nearby places lookup against the Wikipedia geosearch API."""

import asyncio
import math
import time
from typing import Annotated, Dict, List, Literal, Optional, Union
from uuid import UUID

import httpx
from pydantic import BaseModel, Field, ValidationError
from tqdm.asyncio import tqdm

from . import config
from .location import Coordinate, Location
from .page import GeoSearchResult, Page


class Loading(BaseModel):
    status: Literal["loading"] = "loading"


class Loaded(BaseModel):
    status: Literal["loaded"] = "loaded"
    pages: List[Page] = Field(default_factory=list)


class Failed(BaseModel):
    status: Literal["failed"] = "failed"
    error: str = ""


# Exactly one of the three states, told apart by "status"
FetchResult = Annotated[Union[Loading, Loaded, Failed], Field(discriminator="status")]


class FetchStats(BaseModel):
    """Track batch lookup statistics."""
    loaded: int = 0
    failed: int = 0
    pages: int = 0

    def print_summary(self, elapsed_time: float) -> None:
        print(f"\n{'='*70}")
        print("NEARBY SUMMARY")
        print(f"{'='*70}")
        print(f"Loaded: {self.loaded} | Failed: {self.failed} | Pages: {self.pages}")
        print(f"Elapsed: {elapsed_time:.1f}s")
        print(f"{'='*70}")


def build_url(coordinate: Coordinate) -> httpx.URL:
    """Build the geosearch request URL for coordinate.

    Raises:
        ValueError: coordinate is not finite or the URL cannot be built
    """
    if not (math.isfinite(coordinate.latitude) and math.isfinite(coordinate.longitude)):
        raise ValueError(f"Coordinate is not finite: {coordinate}")

    params = {
        "ggscoord": f"{coordinate.latitude}|{coordinate.longitude}",
        "action": "query",
        "prop": "coordinates|pageimages|pageterms",
        "colimit": config.result_limit,
        "piprop": "thumbnail",
        "pithumbsize": config.thumbnail_size,
        "pilimit": config.result_limit,
        "wbptterms": "description",
        "generator": "geosearch",
        "ggsradius": config.search_radius,
        "ggslimit": config.result_limit,
        "format": "json",
    }
    try:
        return httpx.URL(config.api_url, params=params)
    except httpx.InvalidURL as e:
        raise ValueError(f"Bad URL: {config.api_url}: {e}") from e


class NearbyPlacesFetcher:
    """Fetch and rank encyclopedia pages near a coordinate.

    Each call starts in Loading and ends in Loaded or Failed. Nothing is
    cached and nothing carries over between calls; two overlapping calls
    race independently and the caller decides which result to keep.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self._client = client
        self.state: FetchResult = Loading()

    async def fetch(self, coordinate: Coordinate) -> FetchResult:
        self.state = Loading()
        result = await self._fetch(coordinate)
        self.state = result
        return result

    async def _fetch(self, coordinate: Coordinate) -> FetchResult:
        try:
            url = build_url(coordinate)
        except ValueError as e:
            print(f"Unable to build request: {e}")
            return Failed(error=str(e))

        try:
            if self._client is not None:
                content = await self._get(self._client, url)
            else:
                async with httpx.AsyncClient(timeout=config.request_timeout) as client:
                    content = await self._get(client, url)
            items = GeoSearchResult.model_validate_json(content)
        except (httpx.HTTPError, ValidationError) as e:
            return Failed(error=str(e))

        return Loaded(pages=sorted(items.query.pages.values()))

    @staticmethod
    async def _get(client: httpx.AsyncClient, url: httpx.URL) -> bytes:
        response = await client.get(url, headers={"User-Agent": config.user_agent})
        response.raise_for_status()
        return response.content


async def _fetch_and_update(
    fetcher: NearbyPlacesFetcher,
    location: Location,
    semaphore: asyncio.Semaphore,
    stats: FetchStats,
    results: Dict[UUID, FetchResult],
    progress_bar,
) -> None:
    """Fetch nearby pages for one location and update progress."""
    async with semaphore:
        result = await fetcher.fetch(location.coordinate)
    if isinstance(result, Loaded):
        stats.loaded += 1
        stats.pages += len(result.pages)
    else:
        stats.failed += 1
    results[location.id] = result
    progress_bar.update(1)


async def fetch_all(
    locations: List[Location],
    max_concurrent: Optional[int] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> tuple[Dict[UUID, FetchResult], FetchStats]:
    """Fetch nearby pages for every location concurrently."""
    semaphore = asyncio.Semaphore(max_concurrent or config.max_concurrent)
    stats = FetchStats()
    results: Dict[UUID, FetchResult] = {}
    if not locations:
        return results, stats

    start_time = time.time()
    with tqdm(total=len(locations), desc="Fetching", unit="place") as progress_bar:

        async def run(shared: httpx.AsyncClient) -> None:
            await asyncio.gather(
                *[
                    _fetch_and_update(NearbyPlacesFetcher(shared), loc, semaphore, stats, results, progress_bar)
                    for loc in locations
                ]
            )

        if client is not None:
            await run(client)
        else:
            async with httpx.AsyncClient(timeout=config.request_timeout) as shared:
                await run(shared)

    stats.print_summary(time.time() - start_time)
    return results, stats
