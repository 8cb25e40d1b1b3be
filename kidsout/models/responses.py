from __future__ import annotations

import logging
from typing import Annotated, Any, Generic, Optional, TypeVar, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
    model_validator,
)

from kidsout.models.base import BaseAttributes, ListMeta, Resource, find_duplicate_identities
from kidsout.models.currencies import Currency, CurrencyRate
from kidsout.models.news import NewsItem
from kidsout.models.perks import Perk
from kidsout.models.regions import Place, Region
from kidsout.models.reviews import Review
from kidsout.models.users import Avatar, InaccurateLocation, MetaTag, User

logger = logging.getLogger(__name__)

DataT = TypeVar("DataT", bound=BaseModel)

_KNOWN_TYPES = frozenset(
    {
        "users",
        "avatars",
        "inaccurate_locations",
        "meta_tags",
        "regions",
        "places",
        "perks",
        "currencies",
        "currency_rates",
        "reviews",
    }
)


def _included_tag(value: Any) -> str:
    if isinstance(value, dict):
        type_ = value.get("type")
    else:
        type_ = getattr(value, "type", None)
    return type_ if type_ in _KNOWN_TYPES else "unknown"


_generic_resource = TypeAdapter(Resource[BaseAttributes])


def _keep_as_generic_on_mismatch(value: Any, handler: ValidatorFunctionWrapHandler) -> Any:
    try:
        return handler(value)
    except ValidationError as exc:
        if not isinstance(value, dict):
            raise
        logger.warning(
            "Included %s resource %s does not match its model, keeping it as a generic resource: %s",
            value.get("type"),
            value.get("id"),
            exc,
        )
        return _generic_resource.validate_python(value)


# Unknown types, and known types whose attributes do not fit their model,
# decode as generic resources
IncludedResource = Annotated[
    Union[
        Annotated[User, Tag("users")],
        Annotated[Avatar, Tag("avatars")],
        Annotated[InaccurateLocation, Tag("inaccurate_locations")],
        Annotated[MetaTag, Tag("meta_tags")],
        Annotated[Region, Tag("regions")],
        Annotated[Place, Tag("places")],
        Annotated[Perk, Tag("perks")],
        Annotated[Currency, Tag("currencies")],
        Annotated[CurrencyRate, Tag("currency_rates")],
        Annotated[Review, Tag("reviews")],
        Annotated[Resource[BaseAttributes], Tag("unknown")],
    ],
    Discriminator(_included_tag),
    WrapValidator(_keep_as_generic_on_mismatch),
]


class ListResponse(BaseModel, Generic[DataT]):
    """
    Paginated collection.
    `included` is one flat pool shared by every element of `data`.
    """
    model_config = ConfigDict(extra="allow")
    data: list[DataT]
    included: Optional[list[IncludedResource]] = None
    meta: ListMeta

    @model_validator(mode="after")
    def _warn_on_duplicate_identities(self) -> "ListResponse":
        primary = [item for item in self.data if isinstance(item, Resource)]
        duplicates = find_duplicate_identities([*primary, *(self.included or [])])
        if duplicates:
            logger.warning(
                "Response contains duplicate resource identities %s; relationships resolve to the first occurrence",
                duplicates,
            )
        return self


class CurrencyRatesResponse(ListResponse[CurrencyRate]):
    # /currencies/rates is not paginated
    meta: Optional[ListMeta] = None


NewsResponse = ListResponse[NewsItem]
