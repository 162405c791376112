"""
Abstract configuration interface.

Defines the settings every platform shell must provide to the layout engine
and validates them. Platform-specific subclasses decide where values come from.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from core.data_models import PlatformFamily

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""


class BaseConfiguration(ABC):
    """Settings consumed by the layout engine and the UI shell."""

    @property
    @abstractmethod
    def platform_family(self) -> Optional[PlatformFamily]:
        """Font correction family, or None to detect from the running platform."""

    @property
    @abstractmethod
    def fixed_columns(self) -> Optional[int]:
        """Fixed grid column count, or None for responsive columns."""

    @property
    @abstractmethod
    def window_width(self) -> int:
        """Initial window width in logical pixels."""

    @property
    @abstractmethod
    def window_height(self) -> int:
        """Initial window height in logical pixels."""

    @property
    @abstractmethod
    def log_level(self) -> str:
        """Root logging level name."""

    def validate(self) -> None:
        """
        Check every setting.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.fixed_columns is not None and self.fixed_columns < 1:
            raise ConfigurationError(f"Fixed column count must be at least 1, got {self.fixed_columns}")
        if self.window_width <= 0 or self.window_height <= 0:
            raise ConfigurationError(
                f"Window size must be positive, got {self.window_width}x{self.window_height}"
            )
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        logger.debug("Configuration valid: %s", self.summary())

    def summary(self) -> dict[str, str | int | None]:
        """
        Get summary of current settings for debugging.

        Returns:
            Dictionary of setting names and values
        """
        return {
            'platform_family': self.platform_family.value if self.platform_family else None,
            'fixed_columns': self.fixed_columns,
            'window_width': self.window_width,
            'window_height': self.window_height,
            'log_level': self.log_level,
        }
