from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from kidsout.config import get_settings
from kidsout.errors import KidsoutApiError
from kidsout.models.currencies import Currency, CurrencyRateModel
from kidsout.models.perks import Perk
from kidsout.models.regions import Region, RegionModel
from kidsout.models.responses import CurrencyRatesResponse, ListResponse, NewsResponse
from kidsout.models.reviews import Review, ReviewModel
from kidsout.models.users import Sitter, SitterModel
from kidsout.search import NewsParams, ReviewsParams, SearchSittersParams, build_params

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _error_message(response: requests.Response | None) -> str | None:
    """Pull the API's own error text out of a failed response, if it sent one."""
    if response is None:
        return None
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message") or body.get("error")
        if isinstance(message, str):
            return message
    return None


class KidsoutClient:
    """
    HTTP client for the Kidsout API.

    - Sends `Authorization: Bearer <api_key>` when an API key is configured
    - Validates query parameters before any request goes out
    - Decodes every response into the pydantic models of `kidsout.models`
    - Wraps transport failures in KidsoutApiError
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.base_url).rstrip("/")
        self.api_key = api_key if api_key is not None else settings.api_key
        self.timeout = timeout if timeout is not None else settings.timeout
        self.headers: dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            self.headers["Authorization"] = f"Bearer {self.api_key}"
        self._owns_session = session is None
        self._session = session or requests.Session()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "KidsoutClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Endpoints
    # ------------------------------------------------------------------
    def search_sitters(
        self,
        params: SearchSittersParams | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> ListResponse[Sitter]:
        """
        Search for sitters.
        Corresponds to: GET /search
        """
        query = build_params(SearchSittersParams, params, **kwargs).to_query()
        return self._get_json("/search", ListResponse[Sitter], query)

    def get_regions(self) -> ListResponse[Region]:
        """
        List available regions.
        Corresponds to: GET /regions
        """
        return self._get_json("/regions", ListResponse[Region])

    def get_currencies(self) -> ListResponse[Currency]:
        """
        List available currencies.
        Corresponds to: GET /currencies
        """
        return self._get_json("/currencies", ListResponse[Currency])

    def get_perks(self) -> ListResponse[Perk]:
        """
        List available perks.
        Corresponds to: GET /perks
        """
        return self._get_json("/perks", ListResponse[Perk])

    def get_reviews(
        self,
        params: ReviewsParams | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> ListResponse[Review]:
        """
        Reviews filtered by `user_id` or `token`.
        Corresponds to: GET /reviews
        """
        query = build_params(ReviewsParams, params, **kwargs).to_query()
        return self._get_json("/reviews", ListResponse[Review], query)

    def get_news(
        self,
        params: NewsParams | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> NewsResponse:
        """
        Corresponds to: GET /news
        """
        query = build_params(NewsParams, params, **kwargs).to_query()
        return self._get_json("/news", NewsResponse, query)

    def get_currency_rates(self, base: Optional[str] = None) -> CurrencyRatesResponse:
        """
        Exchange rates, optionally relative to the `base` currency code.
        Corresponds to: GET /currencies/rates
        """
        query = {"base": base} if base else None
        return self._get_json("/currencies/rates", CurrencyRatesResponse, query)

    # ------------------------------------------------------------------
    # View helpers
    # ------------------------------------------------------------------
    def search_sitter_models(
        self,
        params: SearchSittersParams | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[SitterModel]:
        return SitterModel.from_list_response(self.search_sitters(params, **kwargs))

    def get_region_models(self) -> list[RegionModel]:
        return RegionModel.from_list_response(self.get_regions())

    def get_review_models(
        self,
        params: ReviewsParams | Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> list[ReviewModel]:
        return ReviewModel.from_list_response(self.get_reviews(params, **kwargs))

    def get_currency_rate_models(self, base: Optional[str] = None) -> list[CurrencyRateModel]:
        return CurrencyRateModel.from_list_response(self.get_currency_rates(base))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_json(
        self,
        path: str,
        model: type[ModelT],
        params: Optional[Mapping[str, Any]] = None,
    ) -> ModelT:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", path, params)
        try:
            response = self._session.get(url, params=params, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = _error_message(exc.response) or str(exc)
            logger.warning("GET %s failed with status %s: %s", path, status, message)
            raise KidsoutApiError(message, status, exc) from exc
        except requests.RequestException as exc:
            logger.warning("GET %s failed: %s", path, exc)
            raise KidsoutApiError(f"Request to {path} failed: {exc}", None, exc) from exc

        try:
            return model.model_validate_json(response.text)
        except ValidationError as exc:
            logger.warning("GET %s returned an unexpected body: %s", path, exc)
            raise KidsoutApiError(
                f"Unexpected response body from {path}", response.status_code, exc
            ) from exc
