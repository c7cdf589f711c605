# File: tests/test_config.py

from app.core.config import Settings
from app.services.mail_service import build_confirmation_url


def test_cors_origins_from_comma_separated_string():
    settings = Settings(backend_cors_origins="http://a.test, http://b.test")
    assert settings.backend_cors_origins == ["http://a.test", "http://b.test"]


def test_confirmation_url_includes_prefix():
    settings = Settings(public_base_url="https://money.example.com/", api_prefix="/api")
    url = build_confirmation_url(settings, "abc")
    assert url == "https://money.example.com/api/auth/confirm-email?token=abc"


def test_token_lifetime_is_seven_days():
    assert Settings().access_token_expire_minutes == 7 * 24 * 60
