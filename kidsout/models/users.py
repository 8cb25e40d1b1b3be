from __future__ import annotations
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict

from kidsout.models.base import BaseAttributes, Resource, ResourceView


class UserAttributes(BaseAttributes):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    account_type: str | None = None  # sitter, parent or visitor
    gender: str | None = None
    birthday: str | None = None
    rate: str | float | None = None
    rate_currency: str | None = None
    experience_years: int | float | None = None
    work_online: bool | None = None
    babies: bool | None = None
    special_needs: bool | None = None
    about: str | None = None
    education_and_experience: str | None = None
    motivation: str | None = None
    additional_info: str | None = None
    city_id: int | None = None
    region_id: int | None = None
    place_id: int | None = None
    timezone: str | None = None
    # sitter statistics
    age: int | None = None
    kidsout_score: float | None = None
    kidsout_school: bool | None = None
    return_rate: float | None = None
    views_count: int | None = None
    invitations_count: int | None = None
    reviews_count: int | None = None
    positive_reviews_count: int | None = None
    negative_reviews_count: int | None = None
    neutral_reviews_count: int | None = None
    response_time: float | None = None  # seconds


class User(Resource[UserAttributes]):
    type: Literal["users"] = "users"


# Sitters are users returned by /search
Sitter = User


class AvatarVariant(BaseModel):
    model_config = ConfigDict(extra="allow")
    url: str | None = None
    width: int | None = None
    height: int | None = None


class AvatarAttributes(BaseAttributes):
    url: str | None = None
    variants: dict[str, AvatarVariant] | None = None


class Avatar(Resource[AvatarAttributes]):
    type: Literal["avatars"] = "avatars"


class InaccurateLocationAttributes(BaseAttributes):
    latitude: float | None = None
    longitude: float | None = None


class InaccurateLocation(Resource[InaccurateLocationAttributes]):
    type: Literal["inaccurate_locations"] = "inaccurate_locations"


class MetaTagAttributes(BaseAttributes):
    title: str | None = None
    description: str | None = None
    keywords: str | None = None


class MetaTag(Resource[MetaTagAttributes]):
    type: Literal["meta_tags"] = "meta_tags"


class SitterModel(ResourceView[User]):
    """Sitter with its avatar, approximate location and meta tags from `included`."""

    @property
    def attributes(self) -> UserAttributes:
        return self.data.attributes

    @property
    def avatar(self) -> Optional[Avatar]:
        return self._related("avatars", "avatars")  # type: ignore[return-value]

    @property
    def inaccurate_location(self) -> Optional[InaccurateLocation]:
        return self._related("inaccurate_location", "inaccurate_locations")  # type: ignore[return-value]

    @property
    def meta_tags(self) -> Optional[MetaTag]:
        return self._related("meta_tags", "meta_tags")  # type: ignore[return-value]
