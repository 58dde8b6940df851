"""Models for geosearch results."""

from functools import total_ordering
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from . import config


@total_ordering
class Page(BaseModel):
    """A nearby encyclopedia entry, ordered by title."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    pageid: int
    title: str
    terms: Optional[Dict[str, List[str]]] = None

    @property
    def description(self) -> str:
        # terms may be missing, may lack a description key, or may hold an empty list
        descriptions = (self.terms or {}).get("description") or []
        return descriptions[0] if descriptions else config.NO_DESCRIPTION

    def __lt__(self, other: "Page") -> bool:
        if not isinstance(other, Page):
            return NotImplemented
        return self.title < other.title


class Query(BaseModel):
    model_config = ConfigDict(extra="ignore")

    pages: Dict[int, Page]


class GeoSearchResult(BaseModel):
    """Top-level envelope of a geosearch response."""
    model_config = ConfigDict(extra="ignore")

    query: Query
