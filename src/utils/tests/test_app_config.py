"""
Unit tests for AppConfig cache time resolution.
"""

from unittest.mock import MagicMock, PropertyMock

import pytest

from utils.app_config import DEFAULT_CACHE_TIME, AppConfig

pytestmark = pytest.mark.unit


@pytest.fixture
def param():
    mock_param = MagicMock()
    type(mock_param).value = PropertyMock(return_value=1800)
    return mock_param


class TestGetCacheSeconds:
    def test_env_var_wins(self, monkeypatch, param):
        monkeypatch.setenv("CACHE_TIME", "600")

        assert AppConfig(param).get_cache_seconds() == 600

    def test_falls_back_to_param(self, monkeypatch, param):
        monkeypatch.delenv("CACHE_TIME", raising=False)

        assert AppConfig(param).get_cache_seconds() == 1800

    def test_read_fresh_each_call(self, monkeypatch, param):
        config = AppConfig(param)
        monkeypatch.setenv("CACHE_TIME", "10")
        assert config.get_cache_seconds() == 10

        monkeypatch.setenv("CACHE_TIME", "20")
        assert config.get_cache_seconds() == 20

    @pytest.mark.parametrize("raw", ["abc", "-1", ""])
    def test_invalid_values_use_default(self, monkeypatch, param, raw):
        monkeypatch.setenv("CACHE_TIME", raw)

        assert AppConfig(param).get_cache_seconds() == DEFAULT_CACHE_TIME

    def test_param_failure_uses_default(self, monkeypatch):
        monkeypatch.delenv("CACHE_TIME", raising=False)
        broken = MagicMock()
        type(broken).value = PropertyMock(side_effect=RuntimeError("no params"))

        assert AppConfig(broken).get_cache_seconds() == DEFAULT_CACHE_TIME

    def test_zero_is_allowed(self, monkeypatch, param):
        monkeypatch.setenv("CACHE_TIME", "0")

        assert AppConfig(param).get_cache_seconds() == 0
