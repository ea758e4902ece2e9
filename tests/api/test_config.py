"""Tests for configuration classes."""

import os
import pytest
from unittest.mock import patch

from config import (
    AppConfig,
    CORSConfig,
    DealingSpeed,
    GameConfig,
    LoggingConfig,
    RateLimitConfig,
    RedisConfig,
    SecurityConfig,
    _parse_cors_origins,
)


class TestDealingSpeed:
    """Tests for DealingSpeed."""

    def test_delays(self):
        assert DealingSpeed.SLOW.value == 3000
        assert DealingSpeed.NORMAL.value == 2000
        assert DealingSpeed.FAST.value == 1000

    @pytest.mark.parametrize("name", ["fast", "FAST", " Fast "])
    def test_from_name(self, name):
        assert DealingSpeed.from_name(name) is DealingSpeed.FAST

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown dealing speed"):
            DealingSpeed.from_name("warp")


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

        assert config.min_players == 2
        assert config.max_players == 6
        assert config.default_players == 2
        assert config.default_player_name == "Player"
        assert config.dealing_speed is DealingSpeed.NORMAL

    def test_from_env(self):
        env = {
            "SIMPLE_JACK_PLAYERS": "5",
            "SIMPLE_JACK_PLAYER_NAME": "Alice",
            "SIMPLE_JACK_DEALING_SPEED": "slow",
        }
        with patch.dict(os.environ, env):
            config = GameConfig()

        assert config.default_players == 5
        assert config.default_player_name == "Alice"
        assert config.dealing_speed is DealingSpeed.SLOW

    def test_bad_speed_in_env(self):
        with patch.dict(os.environ, {"SIMPLE_JACK_DEALING_SPEED": "ludicrous"}):
            with pytest.raises(ValueError):
                GameConfig()

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.max_players = 8


class TestLoggingConfig:
    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "INFO"

    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_default_origins(self):
        with patch.dict(os.environ, {}, clear=True):
            assert CORSConfig().allowed_origins == ["http://localhost:8000"]

    def test_parses_env_var(self):
        env_origins = "  http://example.com  ,http://localhost:3000,,"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            assert _parse_cors_origins() == ["http://example.com", "http://localhost:3000"]

    def test_defaults_allow_everything(self):
        config = CORSConfig()
        assert config.allow_credentials is True
        assert "*" in config.allow_methods
        assert "*" in config.allow_headers


class TestRateLimitConfig:
    """Tests for RateLimitConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = RateLimitConfig()

        assert config.enabled is True
        assert config.requests_per_minute == 120

    @pytest.mark.parametrize("value, expected", [("TRUE", True), ("false", False), ("0", False)])
    def test_enabled_from_env(self, value, expected):
        with patch.dict(os.environ, {"RATE_LIMIT_ENABLED": value, "RATE_LIMIT_RPM": "30"}):
            config = RateLimitConfig()

        assert config.enabled is expected
        assert config.requests_per_minute == 30


class TestSecurityConfig:
    def test_secret_key_auto_generates(self):
        with patch.dict(os.environ, {}, clear=True):
            assert len(SecurityConfig().secret_key) > 0

    def test_secret_key_from_env(self):
        with patch.dict(os.environ, {"SECRET_KEY": "my-super-secret-key"}):
            assert SecurityConfig().secret_key == "my-super-secret-key"


class TestRedisConfig:
    """Tests for RedisConfig class."""

    def test_url_without_password(self):
        with patch.dict(os.environ, {}, clear=True):
            assert RedisConfig().url == "redis://localhost:6379/0"

    def test_url_with_password(self):
        env = {"REDIS_HOST": "redis.example.com", "REDIS_DB": "1", "REDIS_PASSWORD": "mypass"}
        with patch.dict(os.environ, env, clear=True):
            assert RedisConfig().url == "redis://:mypass@redis.example.com:6379/1"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

        assert config.debug is False
        assert config.port == 8000
        assert config.session_ttl == 3600
        assert isinstance(config.game, GameConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_debug_from_env(self):
        with patch.dict(os.environ, {"DEBUG": "true"}):
            assert AppConfig().debug is True
