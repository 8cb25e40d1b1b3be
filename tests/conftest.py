import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

from kidsout.client import KidsoutClient
from kidsout.config import get_settings

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def make_response(payload=None, status: int = 200, text: str | None = None) -> MagicMock:
    """Build a stand-in for requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    response.text = text if text is not None else json.dumps(payload)
    if payload is None and text is not None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    if status >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status} Client Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep tests independent from the caller's KIDSOUT_* environment."""
    for name in ("KIDSOUT_BASE_URL", "KIDSOUT_API_KEY", "KIDSOUT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session):
    return KidsoutClient("https://api.example.test/api/v2", session=session)


@pytest.fixture
def fake_response():
    return make_response


@pytest.fixture
def sitters_payload():
    return load_fixture("search_sitters.json")


@pytest.fixture
def regions_payload():
    return load_fixture("regions.json")


@pytest.fixture
def currency_rates_payload():
    return load_fixture("currency_rates.json")
