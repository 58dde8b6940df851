"""Data models for saved places."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from . import config


class Coordinate(BaseModel):
    """A geographic point in decimal degrees."""
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)

    def __str__(self) -> str:
        return f"{self.latitude:.5f}, {self.longitude:.5f}"


class Location(BaseModel):
    """Model for a single pin dropped on the map.

    Two locations are equal when their ids match, whatever their name or
    description say. Latitude and longitude cannot change once created.
    """
    model_config = ConfigDict(extra="ignore")

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(default=config.DEFAULT_NAME)
    description: str = Field(default=config.DEFAULT_DESCRIPTION)
    latitude: float = Field(frozen=True)
    longitude: float = Field(frozen=True)

    @classmethod
    def new(cls, coordinate: Coordinate) -> "Location":
        """Create a freshly identified location with the default name."""
        return cls(
            id=uuid4(),
            name=config.DEFAULT_NAME,
            description=config.DEFAULT_DESCRIPTION,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        )

    @classmethod
    def example(cls) -> "Location":
        return cls(
            name="Buckingham Palace",
            description="Lit by over 40,000 lightbulbs.",
            latitude=51.501,
            longitude=-0.141,
        )

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    def edited(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        reissue_id: bool = False,
    ) -> "Location":
        """Return a copy with the given fields changed.

        The id is kept unless reissue_id is set, so references held elsewhere
        keep pointing at the same place after an edit.
        """
        changes = {}
        if name is not None:
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        if reissue_id:
            changes["id"] = uuid4()
        return self.model_copy(update=changes)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
