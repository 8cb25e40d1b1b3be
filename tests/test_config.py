from kidsout.config import DEFAULT_BASE_URL, Settings, get_settings


def test_defaults():
    settings = Settings()

    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.api_key is None
    assert settings.timeout == 10.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KIDSOUT_API_KEY", "secret")
    monkeypatch.setenv("KIDSOUT_TIMEOUT", "3")

    settings = Settings()

    assert settings.api_key == "secret"
    assert settings.timeout == 3.0


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
