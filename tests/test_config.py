# tests/test_config.py
"""
Unit tests for settings loading.
"""
import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError

from app.core.config import Settings, get_settings, settings


def make_settings(**env):
    """Build Settings from a controlled environment, ignoring any .env file."""
    with patch.dict(os.environ, env, clear=True):
        return Settings(_env_file=None)


class TestSettings:
    """Test defaults, overrides and validation."""

    def test_defaults(self):
        s = make_settings(APIKEY="k")
        assert s.PORT == 9001
        assert str(s.SERVICE).rstrip("/") == "https://api.zpaynow.com"
        assert s.PRODUCTS == {1: 200, 2: 1000}
        assert s.UPSTREAM_TIMEOUT is None
        assert s.LOG_LEVEL == "INFO"

    def test_apikey_required(self):
        with pytest.raises(ValidationError):
            make_settings()

    def test_environment_overrides(self):
        s = make_settings(
            APIKEY="secret",
            PORT="8080",
            SERVICE="http://localhost:3000",
            UPSTREAM_TIMEOUT="2.5",
        )
        assert s.APIKEY == "secret"
        assert s.PORT == 8080
        assert str(s.SERVICE).startswith("http://localhost:3000")
        assert s.UPSTREAM_TIMEOUT == 2.5

    def test_products_from_json(self):
        """PRODUCTS is read as a JSON object with integer keys."""
        s = make_settings(APIKEY="k", PRODUCTS='{"1": 300, "9": 50}')
        assert s.PRODUCTS == {1: 300, 9: 50}

    def test_products_reject_non_positive_price(self):
        with pytest.raises(ValidationError):
            make_settings(APIKEY="k", PRODUCTS='{"1": 0}')
        with pytest.raises(ValidationError):
            make_settings(APIKEY="k", PRODUCTS='{"1": -200}')

    def test_service_must_be_url(self):
        with pytest.raises(ValidationError):
            make_settings(APIKEY="k", SERVICE="not a url")

    def test_settings_are_frozen(self):
        s = make_settings(APIKEY="k")
        with pytest.raises(ValidationError):
            s.APIKEY = "other"

    def test_module_settings_cached(self):
        assert get_settings() is get_settings()
        assert settings.APIKEY == "test-key"
