# tests/test_config.py
from estate_http_api.config import Settings, get_settings, set_settings


def test_environment_prefix_is_applied(monkeypatch) -> None:
    monkeypatch.setenv("ESTATE_SIGNATURE_VALIDITY_YEARS", "3")
    monkeypatch.setenv("ESTATE_DEBUG", "true")

    cfg = Settings()

    assert cfg.SIGNATURE_VALIDITY_YEARS == 3
    assert cfg.DEBUG is True


def test_api_root_is_normalized() -> None:
    assert Settings(API_PREFIX="/api").api_root == "/api"
    assert Settings(API_PREFIX="api/").api_root == "/api"
    assert Settings(API_PREFIX="/").api_root == ""
    assert Settings(API_PREFIX="").api_root == ""


def test_cors_origin_list() -> None:
    assert Settings(CORS_ORIGINS="*").cors_origin_list == ["*"]
    assert Settings(CORS_ORIGINS="http://a.test, http://b.test").cors_origin_list == [
        "http://a.test",
        "http://b.test",
    ]


def test_set_settings_replaces_singleton() -> None:
    original = get_settings()
    replacement = Settings(APP_NAME="estate-test")
    try:
        set_settings(replacement)
        assert get_settings() is replacement
    finally:
        set_settings(original)
