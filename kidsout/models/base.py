from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Generic, Iterable, Optional, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from kidsout.models.responses import ListResponse


class Links(BaseModel):
    self: str | dict[str, str] | None = None
    related: str | dict[str, str] | None = None


class RelationshipData(BaseModel):
    """Resource identifier object: a `(type, id)` pointer into the included pool."""
    model_config = ConfigDict(coerce_numbers_to_str=True)
    type: str
    id: str


class Relationship(BaseModel):
    """Minimal JSON API relationship object."""
    links: Optional[Links] = None
    data: Optional[RelationshipData | list[RelationshipData]] = None
    meta: Optional[dict[str, Any]] = None


AttrT = TypeVar("AttrT", bound="BaseAttributes")
ResT = TypeVar("ResT", bound="Resource")


class BaseAttributes(BaseModel):
    """
    Open attribute bag.
    Known fields are declared on subclasses, anything else the API sends
    is kept in `model_extra` and comes back out of `model_dump()`.
    """
    model_config = ConfigDict(extra="allow")


class Resource(BaseModel, Generic[AttrT]):
    """
    Generic JSON API resource.
    Subclasses fix `type` with Literal
    and override `attributes` with a concrete class.
    """
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)
    type: str
    id: str
    attributes: AttrT
    links: Links | None = None
    relationships: dict[str, Relationship] | None = None


class ListMeta(BaseModel):
    model_config = ConfigDict(extra="allow")
    current_page: int
    total: int
    total_pages: int


def resolve_related(
    primary: Resource,
    relationship_name: str,
    expected_type: str,
    pool: Sequence[Resource],
) -> Resource | None:
    """
    Find the resource a relationship of `primary` points to inside `pool`.

    To-many relationships surface only their first identifier. A missing
    relationship, an empty to-many, a reference of another type than
    `expected_type` and a reference absent from the pool all give None.
    The object returned is the one held by `pool`, never a copy.
    """
    relationship = (primary.relationships or {}).get(relationship_name)
    if relationship is None or relationship.data is None:
        return None

    ref = relationship.data
    if isinstance(ref, list):
        if not ref:
            return None
        ref = ref[0]

    if not ref.id or ref.type != expected_type:
        return None

    for candidate in pool:
        if candidate.id == ref.id and candidate.type == ref.type:
            return candidate
    return None


def find_duplicate_identities(resources: Iterable[Resource]) -> list[tuple[str, str]]:
    """Return the `(type, id)` pairs occurring more than once."""
    counts = Counter((res.type, res.id) for res in resources)
    return [key for key, count in counts.items() if count > 1]


_EMPTY_POOL: tuple[Resource, ...] = ()


class ResourceView(Generic[ResT]):
    """
    Read-only wrapper pairing one resource with the included pool of the
    response it came from.

    The pool is held by reference. Views built by `from_list_response`
    all point at the same pool object.
    """

    __slots__ = ("_data", "_included", "_resolved")

    def __init__(self, data: ResT, included: Sequence[Resource] | None = None) -> None:
        object.__setattr__(self, "_data", data)
        object.__setattr__(self, "_included", _EMPTY_POOL if included is None else included)
        object.__setattr__(self, "_resolved", {})

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"

    @property
    def data(self) -> ResT:
        return self._data

    @property
    def included(self) -> Sequence[Resource]:
        return self._included

    @property
    def id(self) -> str:
        """Unique identifier of the resource"""
        return self._data.id

    @property
    def attributes(self) -> Any:
        """Attributes object for the resource"""
        return self._data.attributes

    def _related(self, relationship_name: str, expected_type: str) -> Resource | None:
        key = (relationship_name, expected_type)
        if key not in self._resolved:
            self._resolved[key] = resolve_related(self._data, relationship_name, expected_type, self._included)
        return self._resolved[key]

    @classmethod
    def from_list_response(cls, resp: ListResponse) -> list["ResourceView"]:
        """Wrap every element of `resp.data`, in order, around the shared pool."""
        pool = resp.included if resp.included is not None else _EMPTY_POOL
        return [cls(item, pool) for item in resp.data]
