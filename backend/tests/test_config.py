from weatherpro.config import Settings, get_settings


ENV_KEYS = (
    "OPENWEATHER_API_KEY",
    "OPENWEATHER_BASE_URL",
    "OPENWEATHER_GEO_URL",
    "WEATHER_UNITS",
    "REQUEST_TIMEOUT_SECONDS",
    "FORECAST_MAX_DAYS",
    "HOURLY_SLOT_COUNT",
    "LOG_LEVEL",
    "FRONTEND_ORIGINS",
)


def test_get_settings_defaults(monkeypatch) -> None:
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.openweather_api_key == ""
    assert settings.openweather_base_url == Settings.openweather_base_url
    assert settings.units == "metric"
    assert settings.forecast_max_days == 7
    assert settings.hourly_slot_count == 16
    assert settings.log_level == "INFO"
    assert settings.frontend_origins == Settings.frontend_origins


def test_get_settings_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("OPENWEATHER_API_KEY", " secret ")
    monkeypatch.setenv("OPENWEATHER_BASE_URL", "https://proxy.local/owm/")
    monkeypatch.setenv("WEATHER_UNITS", "Imperial")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "4.5")
    monkeypatch.setenv("HOURLY_SLOT_COUNT", "8")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("FRONTEND_ORIGINS", "https://a.example, https://b.example")

    settings = get_settings()

    assert settings.openweather_api_key == "secret"
    assert settings.openweather_base_url == "https://proxy.local/owm"
    assert settings.units == "imperial"
    assert settings.request_timeout_seconds == 4.5
    assert settings.hourly_slot_count == 8
    assert settings.log_level == "DEBUG"
    assert settings.frontend_origins == ("https://a.example", "https://b.example")


def test_get_settings_falls_back_on_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("WEATHER_UNITS", "kelvinish")
    monkeypatch.setenv("REQUEST_TIMEOUT_SECONDS", "soon")
    monkeypatch.setenv("FORECAST_MAX_DAYS", "30")
    monkeypatch.setenv("HOURLY_SLOT_COUNT", "abc")
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    settings = get_settings()

    assert settings.units == "metric"
    assert settings.request_timeout_seconds == 10.0
    assert settings.forecast_max_days == 7
    assert settings.hourly_slot_count == 16
    assert settings.log_level == "INFO"
