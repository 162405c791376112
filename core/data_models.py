"""Core data structures for the dashboard layout engine.

Contains the fundamental data models used across different UI implementations.
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class InvalidDimensionError(ValueError):
    """Raised when a viewport dimension is negative or not finite."""


class DeviceClass(Enum):
    """Mutually exclusive screen-size categories."""

    SMALL_PHONE = "smallPhone"
    MEDIUM_PHONE = "mediumPhone"
    LARGE_PHONE = "largePhone"
    TABLET = "tablet"
    LARGE_TABLET = "largeTablet"


class Orientation(Enum):
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


class PlatformFamily(Enum):
    """Platform tag selecting the font-size correction."""

    DEFAULT = "default"
    ANDROID = "android"  # larger default glyph metrics


@dataclass(frozen=True, slots=True)
class Viewport:
    """Current visible screen size in logical pixels."""

    width: float
    height: float

    def validate(self) -> "Viewport":
        """
        Check that both dimensions are usable.

        Returns:
            The same viewport, for chaining

        Raises:
            InvalidDimensionError: If a dimension is negative or not finite
        """
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or value < 0:
                raise InvalidDimensionError(f"Invalid viewport {name}: {value!r}")
        return self


@dataclass(frozen=True, slots=True)
class LayoutSnapshot:
    """Every derived layout value for a single viewport read."""

    viewport: Viewport
    device_class: DeviceClass
    orientation: Orientation
    is_tablet: bool
    columns: int
    padding: int
    spacing: Dict[str, int] = field(default_factory=dict)
    typography: Dict[str, int] = field(default_factory=dict)


@dataclass
class StatCard:
    """A single statistic shown on the dashboard grid."""
    id: str
    title: str
    value: str
    subtitle: str = ""
    trend: Optional[str] = None  # "up" or "down"
    trend_value: Optional[str] = None
