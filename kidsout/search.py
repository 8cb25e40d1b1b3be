"""
Query parameter models for the list endpoints.

Each model checks its values before a request is issued and flattens
itself into the query-string layout the API expects: comma-joined lists,
`fields[<type>]` sparse fieldsets and `bbox[<corner>][<axis>]` boxes.
"""
from __future__ import annotations

import re
from typing import Any, Mapping, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt, ValidationError

from kidsout.errors import KidsoutValidationError

DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^(?:[01]\d|2[0-3]):[0-5]\d$")

MAX_PER_PAGE = 1000
MAX_RATE = 10_000_000

ALLOWED_SORTS = (
    "experience",
    "-experience",
    "rate",
    "-rate",
    "age",
    "-age",
    "distance",
    "-return_rate",
    "-kidsout_score",
)

ParamsT = TypeVar("ParamsT", bound="PageParams")


def _format_value(value: Any) -> Any:
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class PageParams(BaseModel):
    model_config = ConfigDict(extra="forbid")

    page: Optional[StrictInt] = None
    per_page: Optional[StrictInt] = None

    def validation_issues(self) -> list[str]:
        issues: list[str] = []
        if self.page is not None and self.page < 1:
            issues.append("page must be an integer >= 1")
        if self.per_page is not None and not 1 <= self.per_page <= MAX_PER_PAGE:
            issues.append(f"per_page must be an integer between 1 and {MAX_PER_PAGE}")
        return issues

    def to_query(self) -> dict[str, Any]:
        return {name: _format_value(value) for name, value in self.model_dump(exclude_none=True).items()}


class BBoxCorner(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None


class BBox(BaseModel):
    """Bounding box given by its bottom-left and top-right corners."""
    bl: Optional[BBoxCorner] = None
    tr: Optional[BBoxCorner] = None


class SearchSittersParams(PageParams):
    date: Optional[str] = None  # YYYY-MM-DD
    start: Optional[str] = None  # HH:MM
    end: Optional[str] = None  # HH:MM
    kids: Optional[StrictInt] = None
    babies: Optional[bool] = None
    kidsout_school: Optional[bool] = None
    special_needs: Optional[bool] = None
    perks: Optional[list[int]] = None
    min_rate: Optional[Union[StrictInt, StrictFloat]] = None
    max_rate: Optional[Union[StrictInt, StrictFloat]] = None
    rate_currency: Optional[str] = None
    sort: Optional[str] = None
    include: Optional[list[str]] = None
    fields: Optional[dict[str, list[str]]] = None
    online: Optional[bool] = None
    region_id: Optional[StrictInt] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance: Optional[float] = None
    bbox: Optional[BBox] = None

    def validation_issues(self) -> list[str]:
        issues: list[str] = []
        if self.date is not None and not DATE_RE.match(self.date):
            issues.append("Invalid date format; expected YYYY-MM-DD")
        if self.start is not None and not TIME_RE.match(self.start):
            issues.append("Invalid start time; expected HH:MM")
        if self.end is not None and not TIME_RE.match(self.end):
            issues.append("Invalid end time; expected HH:MM")
        issues.extend(super().validation_issues())
        for name in ("min_rate", "max_rate"):
            value = getattr(self, name)
            if value is not None and not 0 <= value <= MAX_RATE:
                issues.append(f"{name} must be between 0 and {MAX_RATE}")
        if self.min_rate is not None and self.max_rate is not None and self.min_rate > self.max_rate:
            issues.append("min_rate cannot be greater than max_rate")
        if self.sort is not None and self.sort not in ALLOWED_SORTS:
            issues.append(f"sort must be one of {', '.join(ALLOWED_SORTS)}")
        if self.distance is not None and self.bbox is not None:
            issues.append("distance and bbox are mutually exclusive")
        if self.bbox is not None:
            issues.extend(self._bbox_issues(self.bbox))
        return issues

    @staticmethod
    def _bbox_issues(bbox: BBox) -> list[str]:
        if bbox.bl is None or bbox.tr is None:
            return ["bbox must include both bl and tr objects"]
        issues = []
        for corner in ("bl", "tr"):
            point = getattr(bbox, corner)
            if point.lat is None or point.lon is None:
                issues.append(f"bbox.{corner} must include lat and lon")
        return issues

    def to_query(self) -> dict[str, Any]:
        query: dict[str, Any] = {
            name: _format_value(value)
            for name, value in self.model_dump(
                exclude_none=True, exclude={"include", "fields", "bbox", "perks"}
            ).items()
        }
        if self.include:
            query["include"] = ",".join(self.include)
        if self.perks:
            query["perks"] = ",".join(str(perk) for perk in self.perks)
        for resource, names in (self.fields or {}).items():
            query[f"fields[{resource}]"] = ",".join(names or [])
        if self.bbox is not None:
            for corner in ("bl", "tr"):
                point = getattr(self.bbox, corner)
                if point is None:
                    continue
                for axis in ("lat", "lon"):
                    value = getattr(point, axis)
                    if value is not None:
                        query[f"bbox[{corner}][{axis}]"] = value
        return query


class ReviewsParams(PageParams):
    """Filters for /reviews. The API expects `user_id` or `token`."""
    token: Optional[str] = None
    user_id: Optional[int] = None
    before: Optional[int] = None


class NewsParams(PageParams):
    before: Optional[int] = None  # unix timestamp


def _describe(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {error['msg']}" if location else error["msg"]


def build_params(
    model: type[ParamsT],
    params: ParamsT | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> ParamsT:
    """
    Build and check a parameter model from a model instance, a mapping and/or
    keyword overrides. Raises KidsoutValidationError listing every issue found.
    """
    if params is None:
        data: dict[str, Any] = {}
    elif isinstance(params, BaseModel):
        data = params.model_dump(exclude_unset=True)
    else:
        data = dict(params)
    data.update(overrides)

    try:
        built = model.model_validate(data)
    except ValidationError as exc:
        issues = [_describe(error) for error in exc.errors()]
        raise KidsoutValidationError(_summarize(issues), issues) from exc

    issues = built.validation_issues()
    if issues:
        raise KidsoutValidationError(_summarize(issues), issues)
    return built


def _summarize(issues: list[str]) -> str:
    if len(issues) == 1:
        return issues[0]
    return f"{len(issues)} invalid parameters: {'; '.join(issues)}"
