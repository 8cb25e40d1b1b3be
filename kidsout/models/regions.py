from __future__ import annotations
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from kidsout.models.base import BaseAttributes, Resource, ResourceView


class Coordinates(BaseModel):
    model_config = ConfigDict(extra="allow")
    latitude: float | None = None
    longitude: float | None = None


class Viewport(BaseModel):
    model_config = ConfigDict(extra="allow")
    lower_left: Coordinates | None = None
    upper_right: Coordinates | None = None


class SearchLocation(BaseModel):
    """Map centre and viewport used when searching inside a region."""
    model_config = ConfigDict(extra="allow")
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    viewport: Viewport | None = None


class RegionAttributes(BaseAttributes):
    name: str | None = None
    country_code: str | None = None
    currency_code: str | None = None
    timezone: str | None = None
    search_location: SearchLocation | None = None
    default_place_id: int | None = None


class Region(Resource[RegionAttributes]):
    type: Literal["regions"] = "regions"


class PlaceAttributes(BaseAttributes):
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    city_id: int | None = None
    region_id: int | None = None
    country_code: str | None = None


class Place(Resource[PlaceAttributes]):
    type: Literal["places"] = "places"


class RegionModel(ResourceView[Region]):

    @property
    def attributes(self) -> RegionAttributes:
        return self.data.attributes

    @property
    def default_place(self) -> Optional[Place]:
        """The region's default place, if the response included it."""
        return self._related("default_place", "places")  # type: ignore[return-value]

    @property
    def search_location(self) -> Optional[SearchLocation]:
        return self.data.attributes.search_location
