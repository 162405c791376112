"""
Desktop configuration loaded from the environment.

Values come from process environment variables, optionally seeded from a
.env file in the working directory.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from core.data_models import PlatformFamily
from .base import BaseConfiguration, ConfigurationError

DEFAULT_WINDOW_WIDTH = 400
DEFAULT_WINDOW_HEIGHT = 800


def _parse_int(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None


def _parse_platform_family(raw: Optional[str]) -> Optional[PlatformFamily]:
    if raw is None or not raw.strip():
        return None
    try:
        return PlatformFamily(raw.strip().lower())
    except ValueError:
        choices = ", ".join(family.value for family in PlatformFamily)
        raise ConfigurationError(f"DASHBOARD_PLATFORM_FAMILY must be one of {choices}, got {raw!r}") from None


@dataclass
class DesktopConfiguration(BaseConfiguration):
    """Desktop shell settings."""

    _platform_family: Optional[PlatformFamily] = None
    _fixed_columns: Optional[int] = None
    _window_width: int = DEFAULT_WINDOW_WIDTH
    _window_height: int = DEFAULT_WINDOW_HEIGHT
    _log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "DesktopConfiguration":
        """
        Build configuration from environment variables.

        Args:
            env: Mapping to read instead of os.environ; .env is only loaded
                when reading the real environment

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a variable has an invalid value
        """
        if env is None:
            load_dotenv()
            env = os.environ

        width = _parse_int(env, "DASHBOARD_WINDOW_WIDTH")
        height = _parse_int(env, "DASHBOARD_WINDOW_HEIGHT")
        config = cls(
            _platform_family=_parse_platform_family(env.get("DASHBOARD_PLATFORM_FAMILY")),
            _fixed_columns=_parse_int(env, "DASHBOARD_FIXED_COLUMNS"),
            _window_width=DEFAULT_WINDOW_WIDTH if width is None else width,
            _window_height=DEFAULT_WINDOW_HEIGHT if height is None else height,
            _log_level=(env.get("DASHBOARD_LOG_LEVEL") or "").strip().upper() or "INFO",
        )
        config.validate()
        return config

    @property
    def platform_family(self) -> Optional[PlatformFamily]:
        return self._platform_family

    @property
    def fixed_columns(self) -> Optional[int]:
        return self._fixed_columns

    @property
    def window_width(self) -> int:
        return self._window_width

    @property
    def window_height(self) -> int:
        return self._window_height

    @property
    def log_level(self) -> str:
        return self._log_level
