"""
Tests for Config.from_env().
Uses monkeypatch to control environment variables without polluting the real env.
"""

import pytest

from phonecrawler.infrastructure.config import Config


ALL_VARS = (
    "REDIS_URL",
    "SITES_FILE",
    "CRAWL_TIMEOUT_SECONDS",
    "CLEAR_REDIS",
    "CRAWLER_VERIFY_TLS",
    "STORE_BACKEND",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ALL_VARS:
        monkeypatch.delenv(key, raising=False)


# ─────────────────────────────────────────────────────────────────────────────
# Defaults
# ─────────────────────────────────────────────────────────────────────────────


class TestDefaults:
    def test_defaults(self):
        config = Config.from_env()
        assert config.redis_url == "redis://localhost:6379"
        assert config.sites_file == "government_websites.json"
        assert config.crawl_timeout_seconds == 30
        assert config.clear_store is False
        assert config.verify_tls is False
        assert config.store_backend == "redis"
        assert config.log_level == "INFO"

    def test_config_is_frozen(self):
        config = Config.from_env()
        with pytest.raises(Exception):
            config.redis_url = "redis://elsewhere"


# ─────────────────────────────────────────────────────────────────────────────
# Overrides
# ─────────────────────────────────────────────────────────────────────────────


class TestOverrides:
    def test_redis_url(self, monkeypatch):
        monkeypatch.setenv("REDIS_URL", "redis://cache:6380/1")
        assert Config.from_env().redis_url == "redis://cache:6380/1"

    def test_timeout(self, monkeypatch):
        monkeypatch.setenv("CRAWL_TIMEOUT_SECONDS", "10")
        assert Config.from_env().crawl_timeout_seconds == 10

    @pytest.mark.parametrize("value", ["true", "TRUE", "1", "yes"])
    def test_clear_redis_truthy(self, monkeypatch, value):
        monkeypatch.setenv("CLEAR_REDIS", value)
        assert Config.from_env().clear_store is True

    @pytest.mark.parametrize("value", ["false", "0", "", "nope"])
    def test_clear_redis_falsy(self, monkeypatch, value):
        monkeypatch.setenv("CLEAR_REDIS", value)
        assert Config.from_env().clear_store is False

    def test_verify_tls(self, monkeypatch):
        monkeypatch.setenv("CRAWLER_VERIFY_TLS", "true")
        assert Config.from_env().verify_tls is True

    def test_memory_backend(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "Memory")
        assert Config.from_env().store_backend == "memory"

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Config.from_env().log_level == "DEBUG"


# ─────────────────────────────────────────────────────────────────────────────
# Invalid values
# ─────────────────────────────────────────────────────────────────────────────


class TestInvalidValues:
    @pytest.mark.parametrize("value", ["abc", "0", "-5", "1.5"])
    def test_bad_timeout_raises(self, monkeypatch, value):
        monkeypatch.setenv("CRAWL_TIMEOUT_SECONDS", value)
        with pytest.raises(EnvironmentError, match="CRAWL_TIMEOUT_SECONDS"):
            Config.from_env()

    @pytest.mark.parametrize("value", ["verbose", "trace", "5"])
    def test_unknown_log_level_raises(self, monkeypatch, value):
        monkeypatch.setenv("LOG_LEVEL", value)
        with pytest.raises(EnvironmentError, match="LOG_LEVEL"):
            Config.from_env()

    def test_unknown_backend_raises(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "postgres")
        with pytest.raises(EnvironmentError, match="STORE_BACKEND"):
            Config.from_env()

    def test_all_problems_reported_together(self, monkeypatch):
        monkeypatch.setenv("CRAWL_TIMEOUT_SECONDS", "x")
        monkeypatch.setenv("STORE_BACKEND", "postgres")
        with pytest.raises(EnvironmentError) as exc_info:
            Config.from_env()
        assert "CRAWL_TIMEOUT_SECONDS" in str(exc_info.value)
        assert "STORE_BACKEND" in str(exc_info.value)
