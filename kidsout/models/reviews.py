from __future__ import annotations
from typing import Any, Literal

from kidsout.models.base import BaseAttributes, Resource, ResourceView


class ReviewAttributes(BaseAttributes):
    rate: int | None = None  # -1, 0 or 1
    body: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    request_id: int | None = None
    author_id: int | None = None
    target_id: int | None = None
    can_be_edited: bool | None = None
    qa: Any | None = None
    author_name: str | None = None
    author_avatar_url: str | None = None


class Review(Resource[ReviewAttributes]):
    type: Literal["reviews"] = "reviews"


class ReviewModel(ResourceView[Review]):
    """Plain view: reviews expose no relationships."""

    @property
    def attributes(self) -> ReviewAttributes:
        return self.data.attributes

    @classmethod
    def from_list_response(cls, resp) -> list["ReviewModel"]:
        return [cls(item) for item in resp.data]
