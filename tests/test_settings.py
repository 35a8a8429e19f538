from homeventure.settings import Settings, get_settings, reset_settings_cache


def test_defaults():
    s = get_settings()
    assert s.knock_data_path is None
    assert s.serper_api_key is None
    assert s.gemini_api_key is None
    assert s.user_agent == "HomeVenture/1.0"
    assert s.http_timeout_s == 15.0
    assert s.enrich_model == "gemini-2.0-flash"
    assert s.address_model == "gemini-2.0-flash-lite"
    assert s.log_level == "INFO"


def test_env_overrides(set_env):
    set_env(
        KNOCK_DATA_PATH=":memory:",
        SERPER_API_KEY=" s-key ",
        HOMEVENTURE_HTTP_TIMEOUT="2.5",
        HOMEVENTURE_ENRICH_MODEL="gemini-pro",
        HOMEVENTURE_LOG_LEVEL="debug",
    )
    s = get_settings()
    assert s.knock_data_path == ":memory:"
    assert s.serper_api_key == "s-key"
    assert s.http_timeout_s == 2.5
    assert s.enrich_model == "gemini-pro"
    assert s.log_level == "DEBUG"


def test_blank_and_invalid_values_fall_back(set_env):
    set_env(
        GEMINI_API_KEY="   ",
        HOMEVENTURE_HTTP_TIMEOUT="soon",
        HOMEVENTURE_HTTP_USER_AGENT="",
    )
    s = get_settings()
    assert s.gemini_api_key is None
    assert s.http_timeout_s == 15.0
    assert s.user_agent == "HomeVenture/1.0"

    set_env(HOMEVENTURE_HTTP_TIMEOUT="-1")
    assert get_settings().http_timeout_s == 15.0


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("SERPER_API_KEY", "later")
    assert get_settings() is first
    assert get_settings().serper_api_key is None

    reset_settings_cache()
    assert get_settings().serper_api_key == "later"
    assert isinstance(get_settings(), Settings)
