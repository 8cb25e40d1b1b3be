"""Python client for the Kidsout sitter-booking API."""

from kidsout.client import KidsoutClient
from kidsout.config import Settings, get_settings
from kidsout.errors import KidsoutApiError, KidsoutError, KidsoutValidationError
from kidsout.models.base import Resource, ResourceView, resolve_related
from kidsout.models.currencies import CurrencyRateModel
from kidsout.models.regions import Place, RegionModel, SearchLocation
from kidsout.models.responses import ListResponse
from kidsout.models.reviews import ReviewModel
from kidsout.models.users import Avatar, InaccurateLocation, MetaTag, SitterModel
from kidsout.search import NewsParams, ReviewsParams, SearchSittersParams

__version__ = "0.1.0"

__all__ = [
    "KidsoutClient",
    "Settings",
    "get_settings",
    "KidsoutError",
    "KidsoutApiError",
    "KidsoutValidationError",
    "Resource",
    "ResourceView",
    "resolve_related",
    "ListResponse",
    "SitterModel",
    "RegionModel",
    "ReviewModel",
    "CurrencyRateModel",
    "Avatar",
    "InaccurateLocation",
    "MetaTag",
    "Place",
    "SearchLocation",
    "SearchSittersParams",
    "ReviewsParams",
    "NewsParams",
]
