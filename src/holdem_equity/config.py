"""Configuration settings for the equity engine."""

import os


def _optional_int(name: str) -> int | None:
    """Read an integer environment variable, None when unset or blank."""
    raw = os.environ.get(name, "").strip()
    return int(raw) if raw else None


class Config:
    """Base configuration class."""

    # Simulation presets
    FAST_TRIALS = int(os.environ.get("HOLDEM_EQUITY_FAST_TRIALS", "1000"))
    THOROUGH_TRIALS = int(os.environ.get("HOLDEM_EQUITY_THOROUGH_TRIALS", "10000"))
    DEFAULT_TRIALS = int(os.environ.get("HOLDEM_EQUITY_DEFAULT_TRIALS", "10000"))

    # Worker processes for a simulation; 1 runs trials in-process
    WORKERS = int(os.environ.get("HOLDEM_EQUITY_WORKERS", "1"))

    # Fixed seed for reproducible simulations, None for a fresh one each run
    SEED = _optional_int("HOLDEM_EQUITY_SEED")

    # Table settings
    MAX_PLAYERS = int(os.environ.get("HOLDEM_EQUITY_MAX_PLAYERS", "9"))

    # Logging
    LOG_LEVEL = os.environ.get("HOLDEM_EQUITY_LOG_LEVEL", "WARNING").upper()


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("HOLDEM_EQUITY_LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    # Small, reproducible simulations in tests
    FAST_TRIALS = 200
    THOROUGH_TRIALS = 1000
    DEFAULT_TRIALS = 500
    WORKERS = 1
    SEED = 1234


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("HOLDEM_EQUITY_ENV", "default")

    return config.get(config_name, config["default"])
