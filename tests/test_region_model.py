from kidsout.models.regions import Place, Region, RegionModel, SearchLocation
from kidsout.models.responses import ListResponse

REGION = {"id": "1", "type": "regions", "attributes": {"name": "Testville"}}
REGION_WITH_REL = {
    **REGION,
    "relationships": {"default_place": {"data": {"id": "p1", "type": "places"}}},
}
PLACE = {"id": "p1", "type": "places", "attributes": {"address": "123 Test St"}}
OTHER_PLACE = {"id": "p2", "type": "places", "attributes": {"address": "456 Other Rd"}}
SEARCH_LOCATION = {
    "address": "Test address",
    "latitude": 1,
    "longitude": 2,
    "viewport": {
        "lower_left": {"latitude": 0, "longitude": 0},
        "upper_right": {"latitude": 3, "longitude": 4},
    },
}


def test_default_place_absent_when_none_included():
    model = RegionModel(Region.model_validate(REGION), [])

    assert model.default_place is None


def test_default_place_absent_when_pool_lacks_it():
    other = Place.model_validate(OTHER_PLACE)
    model = RegionModel(Region.model_validate(REGION_WITH_REL), [other])

    assert model.default_place is None


def test_default_place_resolved():
    place = Place.model_validate(PLACE)
    model = RegionModel(Region.model_validate(REGION_WITH_REL), [place, Place.model_validate(OTHER_PLACE)])

    assert model.default_place is place


def test_from_list_response_wraps_data_and_included():
    resp = ListResponse[Region].model_validate(
        {
            "data": [REGION_WITH_REL],
            "included": [PLACE],
            "meta": {"current_page": 1, "total": 1, "total_pages": 1},
        }
    )

    models = RegionModel.from_list_response(resp)

    assert len(models) == 1
    assert isinstance(models[0], RegionModel)
    assert models[0].default_place.attributes.address == "123 Test St"


def test_search_location_read_from_attributes():
    region = Region.model_validate({**REGION, "attributes": {"name": "Testville", "search_location": SEARCH_LOCATION}})
    model = RegionModel(region, [Place.model_validate(PLACE)])

    assert model.search_location == SearchLocation.model_validate(SEARCH_LOCATION)
    assert model.search_location.viewport.upper_right.longitude == 4


def test_search_location_absent():
    assert RegionModel(Region.model_validate(REGION)).search_location is None


def test_decoded_regions_response(regions_payload):
    moscow, spb = RegionModel.from_list_response(ListResponse[Region].model_validate(regions_payload))

    assert moscow.default_place.attributes.address == "Red Square"
    assert moscow.search_location.address == "Moscow, Russia"
    assert spb.default_place is None
    assert spb.search_location is None
