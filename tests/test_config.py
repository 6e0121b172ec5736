"""
Settings tests.
"""
import pytest
from pydantic import ValidationError

from employee_api.config import Settings


def test_defaults(monkeypatch):
    for name in ("MONGO_URI", "PORT", "API_PREFIX", "PHONE_REGION", "EXPOSE_ERROR_DETAILS"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.PORT == 3000
    assert settings.API_PREFIX == "/api/employee/v1"
    assert settings.PHONE_REGION == "IN"
    assert settings.EXPOSE_ERROR_DETAILS is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017/staff")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("EXPOSE_ERROR_DETAILS", "false")

    settings = Settings(_env_file=None)

    assert settings.MONGO_URI == "mongodb://db:27017/staff"
    assert settings.PORT == 8080
    assert settings.EXPOSE_ERROR_DETAILS is False


def test_cors_origins_list():
    assert Settings(CORS_ORIGINS="*").cors_origins_list() == ["*"]
    assert Settings(CORS_ORIGINS="").cors_origins_list() == ["*"]
    assert Settings(CORS_ORIGINS="https://a.example, https://b.example").cors_origins_list() == [
        "https://a.example",
        "https://b.example",
    ]


def test_log_format_is_validated():
    assert Settings(LOG_FORMAT="JSON").LOG_FORMAT == "json"
    with pytest.raises(ValidationError):
        Settings(LOG_FORMAT="xml")


def test_phone_region_is_normalized():
    assert Settings(PHONE_REGION=" in ").PHONE_REGION == "IN"
