"""Tests for relationship resolution against the included pool."""

import pytest

from kidsout.models.base import BaseAttributes, Resource, ResourceView, resolve_related
from kidsout.models.responses import ListResponse
from kidsout.models.users import Avatar, User


def make_resource(id_, type_, relationships=None, **attributes):
    payload = {"id": id_, "type": type_, "attributes": attributes}
    if relationships is not None:
        payload["relationships"] = relationships
    return Resource[BaseAttributes].model_validate(payload)


@pytest.fixture
def pool():
    return [
        make_resource("123", "avatars", url="https://x/a.png"),
        make_resource("456", "avatars", url="https://x/b.png"),
        make_resource("123", "places", address="Same id, other type"),
    ]


def test_to_one_reference_resolves_by_id_and_type(pool):
    primary = make_resource("1", "regions", {"default_place": {"data": {"id": "123", "type": "places"}}})

    found = resolve_related(primary, "default_place", "places", pool)

    assert found is pool[2]


def test_returns_the_pool_object_not_a_copy(pool):
    primary = make_resource("1", "users", {"avatars": {"data": {"id": "456", "type": "avatars"}}})

    assert resolve_related(primary, "avatars", "avatars", pool) is pool[1]


def test_to_many_reference_surfaces_only_first_item(pool):
    primary = make_resource(
        "1",
        "users",
        {"avatars": {"data": [{"id": "456", "type": "avatars"}, {"id": "123", "type": "avatars"}]}},
    )

    assert resolve_related(primary, "avatars", "avatars", pool) is pool[1]


def test_empty_to_many_is_absent(pool):
    primary = make_resource("1", "users", {"avatars": {"data": []}})

    assert resolve_related(primary, "avatars", "avatars", pool) is None


def test_type_guard_rejects_mismatched_reference(pool):
    """A reference of another type is ignored even when that resource is in the pool."""
    primary = make_resource("1", "users", {"avatars": {"data": {"id": "123", "type": "places"}}})

    assert resolve_related(primary, "avatars", "avatars", pool) is None


@pytest.mark.parametrize(
    "relationships",
    [
        None,
        {},
        {"meta_tags": {"data": {"id": "1", "type": "meta_tags"}}},
        {"avatars": {"links": {"related": "/users/1/avatars"}}},
        {"avatars": {"data": None}},
    ],
    ids=["no-relationships", "empty-relationships", "other-name", "no-data", "null-data"],
)
def test_missing_relationship_is_absent(pool, relationships):
    primary = make_resource("1", "users", relationships)

    assert resolve_related(primary, "avatars", "avatars", pool) is None


def test_reference_missing_from_pool_is_absent(pool):
    primary = make_resource("1", "users", {"avatars": {"data": {"id": "999", "type": "avatars"}}})

    assert resolve_related(primary, "avatars", "avatars", pool) is None


def test_empty_pool(pool):
    primary = make_resource("1", "users", {"avatars": {"data": {"id": "123", "type": "avatars"}}})

    assert resolve_related(primary, "avatars", "avatars", []) is None


def test_duplicate_identities_resolve_to_first_occurrence():
    first = make_resource("1", "avatars", url="first")
    second = make_resource("1", "avatars", url="second")
    primary = make_resource("u", "users", {"avatars": {"data": {"id": "1", "type": "avatars"}}})

    assert resolve_related(primary, "avatars", "avatars", [first, second]) is first


def test_numeric_ids_are_compared_as_strings():
    pool = [make_resource(42, "avatars")]
    primary = make_resource("u", "users", {"avatars": {"data": {"id": 42, "type": "avatars"}}})

    assert resolve_related(primary, "avatars", "avatars", pool) is pool[0]


class TestResourceView:
    def test_exposes_id_and_attributes(self):
        resource = make_resource("r1", "reviews", body="Great sitter!")
        view = ResourceView(resource)

        assert view.id == "r1"
        assert view.attributes.model_extra == {"body": "Great sitter!"}
        assert view.data is resource
        assert view.included == ()

    def test_holds_pool_by_reference(self, pool):
        view = ResourceView(make_resource("1", "users"), pool)

        assert view.included is pool

    def test_is_read_only(self):
        view = ResourceView(make_resource("1", "users"))

        with pytest.raises(AttributeError):
            view.foo = "bar"
        with pytest.raises(AttributeError):
            del view.data

    def test_resolution_is_memoized_per_view(self, pool):
        primary = make_resource("1", "users", {"avatars": {"data": {"id": "123", "type": "avatars"}}})
        view = ResourceView(primary, pool)

        first = view._related("avatars", "avatars")
        pool.clear()

        assert view._related("avatars", "avatars") is first

    def test_from_list_response_preserves_order(self):
        resp = ListResponse[User].model_validate(
            {
                "data": [
                    {"id": "A", "type": "users", "attributes": {}},
                    {"id": "B", "type": "users", "attributes": {}},
                    {"id": "C", "type": "users", "attributes": {}},
                ],
                "meta": {"current_page": 1, "total": 3, "total_pages": 1},
            }
        )

        views = ResourceView.from_list_response(resp)

        assert [view.id for view in views] == ["A", "B", "C"]
        assert [view.data for view in views] == resp.data
        assert all(view.included == () for view in views)

    def test_from_list_response_shares_one_pool(self):
        resp = ListResponse[User].model_validate(
            {
                "data": [
                    {
                        "id": "A",
                        "type": "users",
                        "attributes": {},
                        "relationships": {"avatars": {"data": [{"id": "9", "type": "avatars"}]}},
                    },
                    {
                        "id": "B",
                        "type": "users",
                        "attributes": {},
                        "relationships": {"avatars": {"data": {"id": "9", "type": "avatars"}}},
                    },
                ],
                "included": [{"id": "9", "type": "avatars", "attributes": {"url": "https://x/9.png"}}],
                "meta": {"current_page": 1, "total": 2, "total_pages": 1},
            }
        )

        first, second = ResourceView.from_list_response(resp)

        assert first.included is resp.included
        assert second.included is resp.included
        assert isinstance(resp.included[0], Avatar)
        assert first._related("avatars", "avatars") is second._related("avatars", "avatars")

    def test_from_list_response_on_empty_envelope(self):
        resp = ListResponse[User].model_validate(
            {"data": [], "included": [], "meta": {"current_page": 1, "total": 0, "total_pages": 0}}
        )

        assert ResourceView.from_list_response(resp) == []
