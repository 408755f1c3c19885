"""
Execution configuration for the K12 Harmony Hub UI suite.

This module defines configuration classes for the environments the suite
runs in (local workstation, CI). Values are loaded from environment
variables with sensible defaults and are consumed by the pytest fixtures,
never by the scenarios themselves.
"""

import os
from dataclasses import dataclass
from pathlib import Path


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    return int(value) if value not in (None, "") else default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value in (None, ""):
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get("E2E_BASE_URL", "https://k12-harmony-hub.lovable.app")

    # Timeouts (milliseconds); TEST_TIMEOUT_MS is applied per E2E test by pytest-timeout
    TEST_TIMEOUT_MS: int = _env_int("E2E_TEST_TIMEOUT_MS", 30_000)
    EXPECT_TIMEOUT_MS: int = _env_int("E2E_EXPECT_TIMEOUT_MS", 5_000)
    ACTION_TIMEOUT_MS: int = _env_int("E2E_ACTION_TIMEOUT_MS", 10_000)
    NAVIGATION_TIMEOUT_MS: int = _env_int("E2E_NAVIGATION_TIMEOUT_MS", 20_000)
    OPTION_TIMEOUT_MS: int = _env_int("E2E_OPTION_TIMEOUT_MS", 3_000)

    # Fixed settle delays, used only where the UI exposes no completion signal
    SETTLE_DELAY_MS: int = _env_int("E2E_SETTLE_DELAY_MS", 500)
    DROPDOWN_SETTLE_MS: int = _env_int("E2E_DROPDOWN_SETTLE_MS", 0)

    VIEWPORT: dict = {"width": 1920, "height": 1080}

    # E2E reruns (pytest-rerunfailures) and workers for `pytest -n auto` (pytest-xdist)
    RETRIES: int = 0
    WORKERS: int | str = "auto"

    # Failure artifacts
    ARTIFACTS_DIR: Path = Path(os.environ.get("E2E_ARTIFACTS_DIR", "test-results"))
    SCREENSHOT_ON_FAILURE: bool = True
    RECORD_VIDEO: bool = _env_bool("E2E_RECORD_VIDEO", False)
    TRACE_ON_FAILURE: bool = _env_bool("E2E_TRACE_ON_FAILURE", False)

    STRICT_COUNT_PARSING: bool = _env_bool("E2E_STRICT_COUNT_PARSING", False)


class LocalConfig(Config):
    """Local workstation configuration."""

    RETRIES: int = 0
    WORKERS: int | str = "auto"


class CIConfig(Config):
    """CI configuration: fewer workers, retries and richer artifacts."""

    RETRIES: int = 2
    WORKERS: int | str = 2
    RECORD_VIDEO: bool = _env_bool("E2E_RECORD_VIDEO", True)
    TRACE_ON_FAILURE: bool = _env_bool("E2E_TRACE_ON_FAILURE", True)


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses E2E_ENV, falling back to "ci" when running
             under GitHub Actions.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV") or ("ci" if os.environ.get("GITHUB_ACTIONS") else "local")
    return config.get(env, config["default"])


@dataclass(frozen=True)
class ExecutionConfig:
    """
    Frozen snapshot of the values page workflows consume.

    Attributes:
        option_timeout_ms: Upper bound for a dropdown option list to render.
        settle_delay_ms: Fixed delay after calendar clicks and searches.
        dropdown_settle_ms: Optional fixed delay before waiting on options.
        strict_count_parsing: Raise instead of returning 0 for bad badges.
    """

    option_timeout_ms: int = 3_000
    settle_delay_ms: int = 500
    dropdown_settle_ms: int = 0
    strict_count_parsing: bool = False

    @classmethod
    def from_config(cls, config_class: type[Config]) -> "ExecutionConfig":
        return cls(
            option_timeout_ms=config_class.OPTION_TIMEOUT_MS,
            settle_delay_ms=config_class.SETTLE_DELAY_MS,
            dropdown_settle_ms=config_class.DROPDOWN_SETTLE_MS,
            strict_count_parsing=config_class.STRICT_COUNT_PARSING,
        )
